from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, field_validator

from bizhub.models import Listing
from bizhub.normalize import extract_price, parse_number

from .sorting import SortMode

ALL_STATES = "all"


def parse_bound(value: Any) -> Optional[float]:
    """Price bound from a form value; blank or non-numeric means unset."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    parsed = parse_number(value)
    if parsed is None or math.isnan(parsed):
        return None
    return parsed


class FilterCriteria(BaseModel):
    search: str = ""
    state: str = ALL_STATES
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    sort_by: SortMode = SortMode.NEWEST

    @field_validator("search", mode="before")
    @classmethod
    def _search_text(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("state", mode="before")
    @classmethod
    def _state_selector(cls, v: Any) -> Any:
        return ALL_STATES if v in (None, "") else v

    @field_validator("min_price", "max_price", mode="before")
    @classmethod
    def _bound(cls, v: Any) -> Optional[float]:
        return parse_bound(v)

    @field_validator("sort_by", mode="before")
    @classmethod
    def _sort_mode(cls, v: Any) -> SortMode:
        return SortMode.parse(v)

    @property
    def is_active(self) -> bool:
        return (
            bool(self.search)
            or self.state != ALL_STATES
            or self.min_price is not None
            or self.max_price is not None
            or self.sort_by != SortMode.NEWEST
        )

    @classmethod
    def reset(cls) -> "FilterCriteria":
        return cls()


@dataclass
class FilterResult:
    included: bool
    reasons: List[str]


class FilterEngine:
    """Apply the name, region and price rules; all must pass."""

    def __init__(self, criteria: FilterCriteria) -> None:
        self.criteria = criteria

    def apply(self, listing: Listing) -> FilterResult:
        reasons: List[str] = []

        # Name
        needle = self.criteria.search.lower()
        if needle and needle not in listing.name.lower():
            reasons.append("name_mismatch")
            return FilterResult(False, reasons)

        # Region
        if self.criteria.state != ALL_STATES and listing.state != self.criteria.state:
            reasons.append("state_mismatch")
            return FilterResult(False, reasons)

        # Price band; unknown prices (0) are never excluded
        price = extract_price(listing.price)
        if price != 0:
            low = self.criteria.min_price if self.criteria.min_price is not None else 0.0
            high = self.criteria.max_price if self.criteria.max_price is not None else math.inf
            if price < low:
                reasons.append("price_below_min")
                return FilterResult(False, reasons)
            if price > high:
                reasons.append("price_above_max")
                return FilterResult(False, reasons)

        return FilterResult(True, reasons)

    def filter(self, listings: Iterable[Listing]) -> List[Listing]:
        return [l for l in listings if self.apply(l).included]


def filter_listings(listings: Iterable[Listing], criteria: FilterCriteria) -> List[Listing]:
    return FilterEngine(criteria).filter(listings)
