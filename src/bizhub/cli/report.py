from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from bizhub.config import Settings
from bizhub.filters import ALL_STATES, FilterCriteria, SortMode
from bizhub.normalize import format_currency
from bizhub.repositories import fetch_snapshot
from bizhub.services import ListingCatalog
from bizhub.utils.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Filter, sort and summarize business listings")
    parser.add_argument("--file", type=Path, help="JSON export to read instead of the configured source")
    parser.add_argument("--search", default="", help="Business name substring")
    parser.add_argument("--state", default=ALL_STATES, help="Exact state label, or 'all'")
    parser.add_argument("--min-price", default=None)
    parser.add_argument("--max-price", default=None)
    parser.add_argument("--sort", default=SortMode.NEWEST.value, choices=[m.value for m in SortMode])
    parser.add_argument("--insights", action="store_true", help="Also print the price and region distributions")
    return parser


def render_listings(catalog: ListingCatalog, criteria: FilterCriteria) -> List[str]:
    cards = catalog.cards(criteria)
    lines = [f"{len(cards)} of {len(catalog)} listings"]
    for c in cards:
        lines.append(f"  {c.name}  |  {c.price_display}  |  {c.state or '-'}  |  {c.uploaded_display or '-'}")
    return lines


def render_insights(catalog: ListingCatalog) -> List[str]:
    data = catalog.insights()
    lines = ["", "Price distribution:"]
    for b in data.price_distribution:
        lines.append(f"  {b.label:<14} {b.count:>5}  {b.percentage:5.1f}%")
    lines.append("")
    lines.append(f"Top {len(data.region_distribution)} states:")
    for r in data.region_distribution:
        lines.append(f"  {r.region:<14} {r.count:>5}  {r.percentage:5.1f}%")
    s = data.summary
    lines.append("")
    lines.append(
        f"{s.total_listings} listings, {s.priced_listings} priced, "
        f"average {format_currency(s.average_price)}, {s.region_count} states"
    )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    if args.file is not None:
        settings.listings_file = args.file
        settings.db_url = None
    configure_logging(settings.log_level)

    catalog = asyncio.run(ListingCatalog(region_limit=settings.region_limit).load(lambda: fetch_snapshot(settings)))
    if not catalog.is_ready:
        print(catalog.error, file=sys.stderr)
        return 1

    criteria = FilterCriteria(
        search=args.search,
        state=args.state,
        min_price=args.min_price,
        max_price=args.max_price,
        sort_by=args.sort,
    )
    lines = render_listings(catalog, criteria)
    if args.insights:
        lines.extend(render_insights(catalog))
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
