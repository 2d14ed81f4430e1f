from __future__ import annotations

import asyncio

from bizhub.errors import ListingsUnavailable
from bizhub.filters import FilterCriteria
from bizhub.services import CatalogStatus, ListingCatalog


def test_load_success(marketplace):
    async def fetch():
        return marketplace

    catalog = asyncio.run(ListingCatalog().load(fetch))
    assert catalog.status == CatalogStatus.READY
    assert catalog.error is None
    assert len(catalog) == len(marketplace)


def test_load_failure_is_terminal():
    async def fetch():
        raise ListingsUnavailable("permission denied")

    catalog = asyncio.run(ListingCatalog().load(fetch))
    assert catalog.status == CatalogStatus.FAILED
    assert catalog.error == "permission denied"
    assert catalog.visible() == []
    assert catalog.states() == []


def test_unexpected_error_gets_default_message():
    async def fetch():
        raise RuntimeError()

    catalog = asyncio.run(ListingCatalog().load(fetch))
    assert catalog.error == "Failed to load listings"


def test_new_catalog_is_loading():
    assert ListingCatalog().status == CatalogStatus.LOADING


def test_visible_filters_then_sorts(scenario):
    catalog = ListingCatalog(scenario)
    visible = catalog.visible(FilterCriteria(min_price=60000, sort_by="price-low"))
    assert [l.id for l in visible] == ["c", "b"]


def test_insights_ignore_active_filters(marketplace):
    catalog = ListingCatalog(marketplace)
    before = catalog.insights()
    catalog.visible(FilterCriteria(state="Texas"))
    assert catalog.insights() == before
    assert before.summary.total_listings == 7


def test_views_recompute_on_each_call(marketplace):
    catalog = ListingCatalog(marketplace)
    assert [l.id for l in catalog.visible(FilterCriteria(sort_by="oldest"))][0] == "5"
    assert [l.id for l in catalog.visible()][0] == "1"


def test_cards_apply_display_fallbacks(marketplace):
    cards = {c.id: c for c in ListingCatalog(marketplace).cards()}
    assert cards["7"].name == "Untitled Business"
    assert cards["7"].price_display == "Contact for pricing"
    assert cards["3"].price_display == "Negotiable"
    assert cards["1"].price_display == "$1,250,000"
    assert cards["1"].uploaded_display == "Mar 20, 2024"
    assert cards["6"].uploaded_display == ""
    assert cards["5"].url == "#"


def test_failed_catalog_stays_failed_on_second_load(marketplace):
    async def bad():
        raise ListingsUnavailable("offline")

    async def good():
        return marketplace

    async def run():
        catalog = ListingCatalog()
        await catalog.load(bad)
        await catalog.load(good)
        return catalog

    catalog = asyncio.run(run())
    assert catalog.status == CatalogStatus.FAILED
    assert catalog.error == "offline"
    assert len(catalog) == 0


def test_ready_catalog_ignores_second_load(scenario, marketplace):
    async def fetch():
        return marketplace

    catalog = asyncio.run(ListingCatalog(scenario).load(fetch))
    assert [l.id for l in catalog.listings] == ["a", "b", "c"]
