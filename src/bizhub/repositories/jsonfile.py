from __future__ import annotations

import json
from pathlib import Path
from typing import List

from bizhub.models import Listing
from bizhub.normalize import to_timestamp

from .records import parse_records


def load_listings(path: Path) -> List[Listing]:
    """Read a JSON export of the listings collection.

    The file must hold a JSON array. Listings come back newest upload first,
    the same order the database query produces.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of listings")
    items = parse_records(data)
    return sorted(items, key=lambda l: to_timestamp(l.uploaded_at), reverse=True)
