import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bulk_seeder.config import SeederSettings
from bulk_seeder.errors import SeederError
from bulk_seeder.logging_setup import setup_logging
from bulk_seeder.seeder import bulk_index


def build_parser(settings: SeederSettings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bulk-seeder",
        description="Generate synthetic documents and bulk index them into Elasticsearch",
    )
    p.add_argument("--host", default=settings.host, help="Elasticsearch node URI (eg http://localhost:9200)")
    p.add_argument("--index", default=settings.index_name, help="Destination index")
    p.add_argument("--size", type=int, default=settings.size, help="Number of documents to generate")
    p.add_argument("--log-level", default=settings.log_level, help="trace, debug, info, warning, error")
    p.add_argument("--log-file", default=settings.log_file, help="Also write logs to this file")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    settings = SeederSettings.from_env()
    args = build_parser(settings).parse_args(argv)

    setup_logging(args.log_level, Path(args.log_file) if args.log_file else None)
    logger = logging.getLogger("bulk_seeder")

    try:
        outcome = asyncio.run(bulk_index(args.host, args.index, args.size))
    except SeederError as e:
        logger.error(f"Bulk indexing failed ({e.kind}): {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid arguments: {e}")
        return 1

    if outcome.skipped:
        print(f"Nothing to index into {args.index}.")
        return 0

    if outcome.status_code >= 300:
        print(f"Bulk request to {args.index} rejected with status {outcome.status_code}.")
        return 1

    failed = len(outcome.failed_items())
    print(
        f"Indexed {args.size - failed}/{args.size} documents into {args.index} "
        f"(status {outcome.status_code})."
    )
    return 0 if outcome.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
