from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from bizhub.config import Settings
from bizhub.filters import ALL_STATES, FilterCriteria
from bizhub.repositories import fetch_snapshot
from bizhub.services import CatalogStatus, ListingCatalog
from bizhub.utils.log import configure_logging


settings = Settings()
app = FastAPI(title="BizHub Listings")
catalog = ListingCatalog(region_limit=settings.region_limit)


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging(settings.log_level)
    # One-shot read; a failure leaves the catalog in its terminal error state
    await catalog.load(lambda: fetch_snapshot(settings))


def _unavailable() -> Optional[JSONResponse]:
    if catalog.status == CatalogStatus.READY:
        return None
    message = catalog.error if catalog.status == CatalogStatus.FAILED else "Listings are still loading"
    return JSONResponse({"error": message}, status_code=503)


@app.get("/health")
def health() -> JSONResponse:
    return JSONResponse({"status": catalog.status.value, "listings": len(catalog), "error": catalog.error})


@app.get("/api/listings")
def listings(
    search: Optional[str] = Query(None, description="Case-insensitive business name substring"),
    state: Optional[str] = Query(ALL_STATES, description="Exact state label, or 'all'"),
    min_price: Optional[str] = Query(None),
    max_price: Optional[str] = Query(None),
    sort: Optional[str] = Query("newest", description="newest|oldest|price-low|price-high|name"),
) -> JSONResponse:
    unavailable = _unavailable()
    if unavailable is not None:
        return unavailable
    # Form values arrive as text; blank or non-numeric bounds are ignored
    criteria = FilterCriteria(
        search=search,
        state=state,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort,
    )
    cards = catalog.cards(criteria)
    return JSONResponse(
        {
            "total": len(catalog),
            "count": len(cards),
            "active_filters": criteria.is_active,
            "items": [c.model_dump() for c in cards],
        }
    )


@app.get("/api/states")
def states() -> JSONResponse:
    unavailable = _unavailable()
    if unavailable is not None:
        return unavailable
    return JSONResponse({"states": catalog.states()})


@app.get("/api/insights")
def insights() -> JSONResponse:
    unavailable = _unavailable()
    if unavailable is not None:
        return unavailable
    return JSONResponse(catalog.insights().model_dump())
