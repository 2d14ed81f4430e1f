"""Insights over the full, unfiltered snapshot.

Nothing here looks at the active filter criteria: the price histogram and
the region table describe the whole marketplace.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from bizhub.models import Listing
from bizhub.normalize import extract_price

DEFAULT_REGION_LIMIT = 10

# (label, lower inclusive, upper exclusive); None upper is unbounded
PRICE_BUCKETS: Tuple[Tuple[str, float, Optional[float]], ...] = (
    ("Under $50K", 0, 50_000),
    ("$50K - $100K", 50_000, 100_000),
    ("$100K - $250K", 100_000, 250_000),
    ("$250K - $500K", 250_000, 500_000),
    ("$500K+", 500_000, None),
)


class PriceBucket(BaseModel):
    label: str
    lower: float
    upper: Optional[float] = None
    count: int = 0
    percentage: float = 0.0

    def contains(self, price: float) -> bool:
        upper = math.inf if self.upper is None else self.upper
        return self.lower <= price < upper


class RegionCount(BaseModel):
    region: str
    count: int
    percentage: float = 0.0


class InsightsSummary(BaseModel):
    total_listings: int
    priced_listings: int
    average_price: float
    region_count: int


class Insights(BaseModel):
    price_distribution: List[PriceBucket]
    region_distribution: List[RegionCount]
    summary: InsightsSummary


def percentage_of_max(count: int, largest: int) -> float:
    """Share of the largest group; an all-empty series stays at 0."""
    return count / max(largest, 1) * 100


def price_distribution(listings: Iterable[Listing]) -> List[PriceBucket]:
    buckets = [PriceBucket(label=label, lower=lo, upper=hi) for label, lo, hi in PRICE_BUCKETS]
    for l in listings:
        price = extract_price(l.price)
        if price == 0:
            continue
        for bucket in buckets:
            if bucket.contains(price):
                bucket.count += 1
                break
    largest = max(b.count for b in buckets)
    for bucket in buckets:
        bucket.percentage = percentage_of_max(bucket.count, largest)
    return buckets


def region_counts(listings: Iterable[Listing]) -> List[Tuple[str, int]]:
    """All regions by count descending; ties stay in first-seen order."""
    counts: Counter[str] = Counter(l.state for l in listings if l.state)
    return counts.most_common()


def region_distribution(listings: Iterable[Listing], limit: int = DEFAULT_REGION_LIMIT) -> List[RegionCount]:
    top = region_counts(listings)[: max(limit, 0)]
    # Relative to the largest retained region, not the global maximum
    largest = max((n for _, n in top), default=0)
    return [RegionCount(region=r, count=n, percentage=percentage_of_max(n, largest)) for r, n in top]


def distinct_states(listings: Iterable[Listing]) -> List[str]:
    return sorted({l.state for l in listings if l.state})


def summarize(listings: Sequence[Listing]) -> InsightsSummary:
    prices = [p for p in (extract_price(l.price) for l in listings) if p != 0]
    average = sum(prices) / len(prices) if prices else 0.0
    return InsightsSummary(
        total_listings=len(listings),
        priced_listings=len(prices),
        average_price=average,
        region_count=len(distinct_states(listings)),
    )


def build_insights(listings: Sequence[Listing], region_limit: int = DEFAULT_REGION_LIMIT) -> Insights:
    return Insights(
        price_distribution=price_distribution(listings),
        region_distribution=region_distribution(listings, region_limit),
        summary=summarize(listings),
    )
