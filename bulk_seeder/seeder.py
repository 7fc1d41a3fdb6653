import logging

from bulk_seeder.data_generator import generate_documents
from bulk_seeder.es_client import create_client, parse_address, submit_bulk
from bulk_seeder.models import BulkOutcome

logger = logging.getLogger(__name__)


async def bulk_index(host: str, index_name: str, size: int) -> BulkOutcome:
    """
    Generate ``size`` synthetic documents and submit them to ``index_name`` in one bulk request.

    The address is validated before anything else, so a malformed one fails
    with AddressError without any network activity.

    Args:
        host: Elasticsearch node URI (scheme://host:port)
        index_name: Destination index
        size: Number of documents to generate

    Returns:
        BulkOutcome with the backend's status and raw body
    """
    parse_address(host)
    documents = generate_documents(size)

    client = create_client(host)
    try:
        return await submit_bulk(client, index_name, documents)
    finally:
        await client.close()
