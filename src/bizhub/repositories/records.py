from __future__ import annotations

import logging
from typing import Any, Iterable, List

from pydantic import ValidationError

from bizhub.models import Listing

logger = logging.getLogger(__name__)


def parse_records(rows: Iterable[Any]) -> List[Listing]:
    """Build listings from raw store records, keeping their order.

    Records that are not objects or have no usable ``id`` are skipped with a
    warning; missing optional fields take their defaults.
    """
    items: List[Listing] = []
    skipped = 0
    for obj in rows or []:
        if not isinstance(obj, dict):
            skipped += 1
            continue
        try:
            items.append(Listing.model_validate(obj))
        except ValidationError as e:
            skipped += 1
            logger.warning("Skipping malformed listing %r: %s", obj.get("id"), e.errors()[0].get("msg", e))
    if skipped:
        logger.warning("Skipped %d malformed listing record(s)", skipped)
    return items
