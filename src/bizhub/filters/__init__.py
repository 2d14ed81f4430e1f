from .engine import ALL_STATES, FilterCriteria, FilterEngine, FilterResult, filter_listings, parse_bound
from .sorting import SortMode, sort_listings

__all__ = [
    "ALL_STATES",
    "FilterCriteria",
    "FilterEngine",
    "FilterResult",
    "filter_listings",
    "parse_bound",
    "SortMode",
    "sort_listings",
]
