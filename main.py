#!/usr/bin/env python3
"""Dog Breed Finder: Single entry point.

Serves the breed search API, downloads a catalog snapshot, or runs a
single search from the command line.

Usage:
    python main.py
    python main.py --port 8000
    python main.py --download
    python main.py --catalog data/breeds.json
    python main.py --query "friendly small dogs at most 20 lbs" --limit 5
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger("breed-finder")


def main() -> None:
    """Parse arguments and dispatch to download, one-off search, or server."""
    parser = argparse.ArgumentParser(description="Dog Breed Finder")
    parser.add_argument(
        "--download",
        action="store_true",
        help="Download the breed catalog to DATA_DIR/breeds.json and exit",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Read breeds from a local JSON snapshot instead of TheDogAPI",
    )
    parser.add_argument(
        "--query", type=str, default=None, help="Run one search and print JSON"
    )
    parser.add_argument(
        "--limit", type=int, default=None, help="Number of results for --query"
    )
    parser.add_argument("--port", type=int, default=None, help="Server port")
    parser.add_argument("--host", type=str, default=None, help="Server host")
    args = parser.parse_args()

    from src.config import get_config
    from src.data.catalog import CatalogError

    config = get_config()
    if args.catalog is not None:
        config = dataclasses.replace(config, catalog_path=args.catalog)

    if args.download:
        from src.data.catalog import download_catalog

        try:
            path = download_catalog(
                config.data_dir,
                base_url=config.dog_api_url,
                api_key=config.dog_api_key,
                timeout=config.request_timeout,
            )
        except CatalogError as exc:
            logger.error("Catalog download failed: %s", exc)
            sys.exit(1)
        logger.info("Catalog saved to %s", path)
        return

    if args.query is not None:
        if not args.query.strip():
            logger.error("--query must not be empty")
            sys.exit(2)

        from src.api.app import build_services

        _, _, searcher = build_services(config)
        try:
            response = searcher.search(
                args.query.strip(), limit=args.limit or config.default_limit
            )
        except CatalogError as exc:
            logger.error("Search failed: %s", exc)
            sys.exit(1)
        print(response.model_dump_json(indent=2))
        return

    import uvicorn

    from src.api.app import create_app

    host = args.host or config.host
    port = args.port or config.port
    logger.info("Launching breed search API on %s:%d", host, port)
    uvicorn.run(create_app(config), host=host, port=port)


if __name__ == "__main__":
    main()
