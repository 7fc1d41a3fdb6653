# Bulk seeding of synthetic documents into Elasticsearch

from bulk_seeder.errors import SeederError, AddressError, TransportError, BackendError
from bulk_seeder.models import AnyDocument, BulkOutcome
from bulk_seeder.data_generator import generate_document, generate_documents
from bulk_seeder.es_client import parse_address, create_client, build_bulk_body, submit_bulk
from bulk_seeder.seeder import bulk_index

__all__ = [
    "SeederError",
    "AddressError",
    "TransportError",
    "BackendError",
    "AnyDocument",
    "BulkOutcome",
    "generate_document",
    "generate_documents",
    "parse_address",
    "create_client",
    "build_bulk_body",
    "submit_bulk",
    "bulk_index",
]
