from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import psycopg2
import psycopg2.extras

from bizhub.models import Listing

from .records import parse_records

# Each listing is stored as its source document plus an indexed upload time
SNAPSHOT_SQL = (
    "SELECT id, doc, uploaded_at FROM listings "
    "ORDER BY uploaded_at DESC NULLS LAST"
)


@contextmanager
def connect(url: str):
    conn = psycopg2.connect(url)
    try:
        yield conn
    finally:
        conn.close()


def row_to_record(listing_id: Any, doc: Optional[Dict[str, Any]], uploaded_at: Any) -> Dict[str, Any]:
    record = dict(doc or {})
    record["id"] = str(listing_id)
    if uploaded_at is not None:
        record["uploadedAt"] = uploaded_at
    return record


def fetch_listings(url: str) -> List[Listing]:
    """Read the whole listings table, newest upload first."""
    with connect(url) as conn:
        with conn.cursor(cursor_factory=psycopg2.extras.DictCursor) as cur:
            cur.execute(SNAPSHOT_SQL)
            rows = [row_to_record(r["id"], r["doc"], r["uploaded_at"]) for r in cur.fetchall()]
    return parse_records(rows)
