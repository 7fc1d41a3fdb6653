import logging
from typing import Any, Dict, List, Sequence
from urllib.parse import urlsplit

from elastic_transport.client_utils import url_to_node_config
from elasticsearch import AsyncElasticsearch, ApiError, SerializationError
from elasticsearch import TransportError as ESTransportError

from bulk_seeder.errors import AddressError, BackendError, TransportError
from bulk_seeder.models import AnyDocument, BulkOutcome

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")


def parse_address(uri: str) -> str:
    """
    Validate a backend address without touching the network.

    Args:
        uri: Node address such as ``http://localhost:9200``

    Returns:
        The address without a trailing slash
    """
    if not isinstance(uri, str) or not uri.strip():
        raise AddressError(f"Empty backend address: {uri!r}")

    try:
        parts = urlsplit(uri.strip())
        port = parts.port
    except ValueError as e:
        raise AddressError(f"Malformed backend address {uri!r}", cause=e) from e

    if parts.scheme not in ALLOWED_SCHEMES:
        raise AddressError(
            f"Backend address {uri!r} must use one of {', '.join(ALLOWED_SCHEMES)}"
        )
    if not parts.hostname:
        raise AddressError(f"Backend address {uri!r} has no host")
    if port is None:
        raise AddressError(f"Backend address {uri!r} has no port")

    address = uri.strip().rstrip("/")
    # same parser the client uses, so anything it would reject fails here
    try:
        url_to_node_config(address)
    except ValueError as e:
        raise AddressError(f"Malformed backend address {uri!r}", cause=e) from e

    return address


def create_client(uri: str) -> AsyncElasticsearch:
    """Build a client bound to a single node, with no sniffing and no retries."""
    address = parse_address(uri)
    try:
        client = AsyncElasticsearch(
            hosts=[address],
            max_retries=0,
            retry_on_timeout=False,
        )
    except (ValueError, TypeError, ImportError) as e:
        raise TransportError(f"Could not build transport for {address}", cause=e) from e

    logger.info(f"Connected to Elasticsearch at {address}")
    return client


def build_bulk_body(index_name: str, documents: Sequence[AnyDocument]) -> List[Dict[str, Any]]:
    """
    Interleave one index action with each document payload, keeping batch order.

    Args:
        index_name: Destination index named in every action
        documents: Batch to submit

    Returns:
        Alternating list of action descriptors and document sources
    """
    body = []
    for document in documents:
        body.append({"index": {"_index": index_name}})
        body.append(document.to_source())
    return body


def _as_dict(body: Any) -> Dict[str, Any]:
    if isinstance(body, dict):
        return body
    if body is None:
        return {}
    return {"error": body}


async def submit_bulk(
    client: AsyncElasticsearch, index_name: str, documents: Sequence[AnyDocument]
) -> BulkOutcome:
    """
    Send a batch as a single bulk request.

    A non-2xx answer from the backend is returned as data, not raised.

    Args:
        client: Client created with ``create_client``
        index_name: Destination index
        documents: Batch to submit

    Returns:
        BulkOutcome with the backend's status code and raw body
    """
    if not documents:
        logger.debug(f"Empty batch for index {index_name}, skipping bulk request")
        return BulkOutcome(
            index=index_name,
            body={"took": 0, "errors": False, "items": []},
            skipped=True,
        )

    body = build_bulk_body(index_name, documents)

    try:
        response = await client.bulk(operations=body, index=index_name)
        outcome = BulkOutcome(
            index=index_name,
            status_code=response.meta.status,
            body=_as_dict(response.body),
        )
    except ApiError as e:
        outcome = BulkOutcome(
            index=index_name,
            status_code=e.meta.status,
            body=_as_dict(e.body),
        )
    except SerializationError as e:
        raise BackendError(f"Unreadable bulk response for index {index_name}", cause=e) from e
    except ESTransportError as e:
        raise TransportError(f"Bulk request to index {index_name} failed", cause=e) from e

    logger.debug(
        f"response {outcome.status_code} for index {index_name}, response: {outcome.body}"
    )

    failed = outcome.failed_items()
    if outcome.status_code is not None and outcome.status_code >= 300:
        logger.warning(f"Bulk request to index {index_name} returned {outcome.status_code}")
    elif failed:
        logger.warning(
            f"{len(failed)} of {len(documents)} documents were rejected by index {index_name}"
        )

    return outcome
