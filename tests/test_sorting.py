from __future__ import annotations

from bizhub.filters import FilterCriteria, SortMode, filter_listings, sort_listings
from bizhub.models import Listing


def ids(items):
    return [l.id for l in items]


def test_price_low_puts_unknown_first(scenario):
    visible = filter_listings(scenario, FilterCriteria(min_price=60000))
    assert ids(sort_listings(visible, SortMode.PRICE_LOW)) == ["c", "b"]


def test_each_mode(marketplace):
    assert ids(sort_listings(marketplace, "newest")) == ["1", "2", "3", "4", "7", "5", "6"]
    assert ids(sort_listings(marketplace, "oldest")) == ["5", "6", "7", "4", "3", "2", "1"]
    assert ids(sort_listings(marketplace, "price-low")) == ["3", "7", "5", "2", "4", "6", "1"]
    assert ids(sort_listings(marketplace, "price-high")) == ["1", "6", "4", "2", "5", "3", "7"]
    assert ids(sort_listings(marketplace, "name")) == ["7", "3", "4", "2", "6", "5", "1"]


def test_sort_returns_new_list(marketplace):
    original = list(marketplace)
    result = sort_listings(marketplace, SortMode.NAME)
    assert result is not marketplace
    assert marketplace == original


def test_sort_is_idempotent(marketplace):
    for mode in SortMode:
        once = sort_listings(marketplace, mode)
        assert sort_listings(once, mode) == once


def test_ties_keep_input_order():
    items = [
        Listing(id="x", name="Same", price=100),
        Listing(id="y", name="same", price=100),
        Listing(id="z", name="Same", price=100),
    ]
    for mode in SortMode:
        assert ids(sort_listings(items, mode)) == ["x", "y", "z"]
