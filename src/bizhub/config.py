from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        return default


@dataclass
class Settings:
    # Postgres snapshot source; when unset the JSON export is read instead
    db_url: Optional[str] = field(default_factory=lambda: os.environ.get("BIZHUB_DB_URL") or os.environ.get("DB_URL"))
    listings_file: Path = field(
        default_factory=lambda: Path(os.environ.get("BIZHUB_LISTINGS_FILE", str(Path.cwd() / "listings.json")))
    )
    region_limit: int = field(default_factory=lambda: _env_int("BIZHUB_REGION_LIMIT", 10))
    log_level: str = field(default_factory=lambda: os.environ.get("BIZHUB_LOG_LEVEL", "INFO"))
