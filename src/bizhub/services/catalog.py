from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Callable, Iterable, List, Optional, Tuple

from bizhub.errors import DEFAULT_LOAD_ERROR, ListingsUnavailable
from bizhub.filters import FilterCriteria, filter_listings, sort_listings
from bizhub.insights import (
    DEFAULT_REGION_LIMIT,
    Insights,
    InsightsSummary,
    PriceBucket,
    RegionCount,
    build_insights,
    distinct_states,
    price_distribution,
    region_distribution,
    summarize,
)
from bizhub.models import Listing, ListingCard

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[List[Listing]]]


class CatalogStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class ListingCatalog:
    """Holds one immutable snapshot and derives every view from it on demand.

    Views are recomputed on each call from the snapshot and the criteria
    passed in; no derived state is cached. A failed load is terminal: the
    catalog keeps the error message and exposes no listings.
    """

    def __init__(self, listings: Optional[Iterable[Listing]] = None, region_limit: int = DEFAULT_REGION_LIMIT) -> None:
        self.region_limit = region_limit
        self.error: Optional[str] = None
        self._listings: Tuple[Listing, ...] = ()
        self.status = CatalogStatus.LOADING
        if listings is not None:
            self._listings = tuple(listings)
            self.status = CatalogStatus.READY

    async def load(self, fetch: Fetcher) -> "ListingCatalog":
        """Read the snapshot once; later calls leave the catalog as it is."""
        if self.status != CatalogStatus.LOADING:
            logger.warning("Catalog already %s; ignoring repeated load", self.status.value)
            return self
        try:
            items = await fetch()
        except ListingsUnavailable as e:
            self._fail(e.message)
        except Exception as e:
            logger.exception("Unexpected error loading listings")
            self._fail(str(e) or DEFAULT_LOAD_ERROR)
        else:
            self._listings = tuple(items)
            self.error = None
            self.status = CatalogStatus.READY
        return self

    def _fail(self, message: str) -> None:
        self._listings = ()
        self.error = message
        self.status = CatalogStatus.FAILED

    @property
    def is_ready(self) -> bool:
        return self.status == CatalogStatus.READY

    @property
    def listings(self) -> Tuple[Listing, ...]:
        return self._listings

    def __len__(self) -> int:
        return len(self._listings)

    # Visible list

    def visible(self, criteria: Optional[FilterCriteria] = None) -> List[Listing]:
        criteria = criteria or FilterCriteria()
        return sort_listings(filter_listings(self._listings, criteria), criteria.sort_by)

    def cards(self, criteria: Optional[FilterCriteria] = None) -> List[ListingCard]:
        return [ListingCard.from_listing(l) for l in self.visible(criteria)]

    def states(self) -> List[str]:
        return distinct_states(self._listings)

    # Insights (never filtered)

    def price_distribution(self) -> List[PriceBucket]:
        return price_distribution(self._listings)

    def region_distribution(self) -> List[RegionCount]:
        return region_distribution(self._listings, self.region_limit)

    def summary(self) -> InsightsSummary:
        return summarize(self._listings)

    def insights(self) -> Insights:
        return build_insights(self._listings, self.region_limit)
