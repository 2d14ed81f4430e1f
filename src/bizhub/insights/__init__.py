from .aggregator import (
    DEFAULT_REGION_LIMIT,
    PRICE_BUCKETS,
    Insights,
    InsightsSummary,
    PriceBucket,
    RegionCount,
    build_insights,
    distinct_states,
    price_distribution,
    region_counts,
    region_distribution,
    summarize,
)

__all__ = [
    "DEFAULT_REGION_LIMIT",
    "PRICE_BUCKETS",
    "Insights",
    "InsightsSummary",
    "PriceBucket",
    "RegionCount",
    "build_insights",
    "distinct_states",
    "price_distribution",
    "region_counts",
    "region_distribution",
    "summarize",
]
