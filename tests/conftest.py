from __future__ import annotations

from datetime import datetime, timezone
from typing import List

import pytest

from bizhub.models import Listing


@pytest.fixture
def scenario() -> List[Listing]:
    """Three listings: a priced one, a text-priced one and an unpriced one."""
    return [
        Listing(id="a", name="Sunshine Cafe", price=50000, state="Florida"),
        Listing(id="b", name="Boise Bakery", price="$120,000", state="Idaho"),
        Listing(id="c", name="Keys Charter", price=None, state="Florida"),
    ]


@pytest.fixture
def marketplace() -> List[Listing]:
    """Newest-first snapshot as the store returns it."""
    def ts(day: int) -> datetime:
        return datetime(2024, 3, day, 12, tzinfo=timezone.utc)

    return [
        Listing(id="1", name="Harbor Marina", price="$1,250,000", state="Florida", uploadedAt=ts(20)),
        Listing(id="2", name="corner laundromat", price=85000, state="Texas", uploadedAt="2024-03-18T09:00:00Z"),
        Listing(id="3", name="Alpine Ski Shop", price="Negotiable", state="Colorado", uploadedAt=ts(15)),
        Listing(id="4", name="Bayou Bistro", price=240000, state="Louisiana", uploadedAt=ts(12)),
        Listing(id="5", name="Éclair Patisserie", price="45,000", state="Texas", uploadedAt=None),
        Listing(id="6", name="Desert Car Wash", price=499999.5, state=None, uploadedAt="not a date"),
        Listing(id="7", name="", price="", state="Florida", uploadedAt=ts(1)),
    ]
