from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Union

RawPrice = Union[int, float, str, None]

CONTACT_FOR_PRICING = "Contact for pricing"

# Currency symbols, grouping commas and whitespace are decoration, not value.
_DECORATION = re.compile(r"[\s$€£¥,]")
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: Any) -> Optional[float]:
    """Parse the leading number of a decorated price string.

    ``"$1,250,000"`` -> 1250000.0, ``"120000 OBO"`` -> 120000.0,
    ``"Negotiable"`` -> None. Numbers pass through; non-finite values and
    booleans are treated as unparseable.
    """
    if isinstance(text, bool):
        return None
    if isinstance(text, (int, float)):
        try:
            value = float(text)
        except OverflowError:
            return None
        return value if math.isfinite(value) else None
    if not isinstance(text, str):
        return None
    m = _LEADING_NUMBER.match(_DECORATION.sub("", text))
    if not m:
        return None
    value = float(m.group(0))
    return value if math.isfinite(value) else None


def extract_price(raw: RawPrice) -> float:
    """Numeric price used for filtering and sorting; 0 means unknown.

    Negative amounts are treated like placeholder text: unknown.
    """
    if isinstance(raw, str) and not raw:
        return 0.0
    value = parse_number(raw)
    if value is None or value < 0:
        return 0.0
    return value


def format_currency(amount: float) -> str:
    """Whole-dollar US currency string, e.g. ``$150,000``."""
    rounded = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(int(rounded)):,}"


def format_price(raw: RawPrice) -> str:
    if not raw:
        return CONTACT_FOR_PRICING
    amount = extract_price(raw)
    if amount == 0:
        # Placeholder text such as "Negotiable" is shown as written
        return raw if isinstance(raw, str) else CONTACT_FOR_PRICING
    return format_currency(amount)
