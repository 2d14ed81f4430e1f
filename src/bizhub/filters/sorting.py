from __future__ import annotations

import unicodedata
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Tuple

from bizhub.models import Listing
from bizhub.normalize import extract_price, to_timestamp


class SortMode(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    NAME = "name"

    @classmethod
    def parse(cls, value: Any) -> "SortMode":
        """Unknown or missing modes fall back to newest-first."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NEWEST


def collation_key(text: str) -> str:
    """Case- and accent-insensitive key so ``Éclair`` sorts beside ``eclair``."""
    decomposed = unicodedata.normalize("NFKD", text or "")
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


# mode -> (key, descending)
_ORDERINGS: Dict[SortMode, Tuple[Callable[[Listing], Any], bool]] = {
    SortMode.NEWEST: (lambda l: to_timestamp(l.uploaded_at), True),
    SortMode.OLDEST: (lambda l: to_timestamp(l.uploaded_at), False),
    SortMode.PRICE_LOW: (lambda l: extract_price(l.price), False),
    SortMode.PRICE_HIGH: (lambda l: extract_price(l.price), True),
    SortMode.NAME: (lambda l: collation_key(l.name), False),
}


def sort_listings(listings: Iterable[Listing], mode: Any = SortMode.NEWEST) -> List[Listing]:
    """Return a new list ordered by ``mode``.

    ``sorted`` is stable in both directions, so listings with equal keys keep
    their input order (the store's newest-first order on a fresh snapshot).
    """
    key, descending = _ORDERINGS[SortMode.parse(mode)]
    return sorted(listings, key=key, reverse=descending)
