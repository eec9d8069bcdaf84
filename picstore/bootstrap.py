"""
First-time provisioning: create the database, tables and indexes.

    picstore-setup            # uses PICSTORE_DATABASE_URL / PICSTORE_DB
    python -m picstore.bootstrap
"""

from __future__ import annotations

import asyncio
import logging
import sys

from picstore.core.errors import StoreConnectionError
from picstore.store import Db

logger = logging.getLogger(__name__)


async def setup_database(url: str | None = None, *, db: str | None = None) -> None:
    async with Db(url, db=db, setup=True):
        logger.info("Database setup")


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    try:
        asyncio.run(setup_database())
    except StoreConnectionError as exc:
        logger.error("Database setup failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
