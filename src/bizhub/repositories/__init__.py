"""Readers for the listings data store.

Only a one-shot full read exists: no writes, no pagination, no retries.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List

from bizhub.config import Settings
from bizhub.errors import ListingsUnavailable
from bizhub.models import Listing

from . import jsonfile

logger = logging.getLogger(__name__)


def read_snapshot(settings: Settings) -> List[Listing]:
    if settings.db_url:
        from . import postgres

        return postgres.fetch_listings(settings.db_url)
    return jsonfile.load_listings(settings.listings_file)


async def fetch_snapshot(settings: Settings | None = None) -> List[Listing]:
    """Load every listing once, off the event loop.

    Any failure in the underlying reader surfaces as :class:`ListingsUnavailable`.
    """
    settings = settings or Settings()
    source = "postgres" if settings.db_url else str(settings.listings_file)
    try:
        items = await asyncio.to_thread(read_snapshot, settings)
    except Exception as e:
        logger.exception("Listings snapshot from %s failed", source)
        raise ListingsUnavailable(str(e) or None) from e
    logger.info("Loaded %d listings from %s", len(items), source)
    return items


__all__ = ["fetch_snapshot", "read_snapshot"]
