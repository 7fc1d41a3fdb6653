import logging
from datetime import datetime, timezone
from typing import List
from uuid import uuid4

from bulk_seeder.logging_setup import TRACE
from bulk_seeder.models import AnyDocument

logger = logging.getLogger(__name__)


def now_rfc3339() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def generate_document(i: int) -> AnyDocument:
    return AnyDocument(
        name=str(uuid4()),
        max=i * 100,
        min=i,
        time=now_rfc3339(),
    )


def generate_documents(size: int) -> List[AnyDocument]:
    """
    Generate a batch of synthetic documents.

    Args:
        size: Number of documents to produce, must be >= 0

    Returns:
        Documents in position order 0..size
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an int, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")

    documents = []
    for i in range(size):
        document = generate_document(i)
        logger.log(TRACE, f"{document}")
        documents.append(document)
    return documents
