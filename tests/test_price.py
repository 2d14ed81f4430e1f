from __future__ import annotations

import math

import pytest

from bizhub.normalize import extract_price, format_currency, format_price, parse_number


def test_extract_price_strips_currency_decoration():
    assert extract_price("$1,250,000") == 1250000
    assert extract_price("  $ 45,000 ") == 45000
    assert extract_price("120000 OBO") == 120000
    assert extract_price("$99.50") == 99.5


@pytest.mark.parametrize("raw", [0, "", None, "Negotiable", "$", "abc123"])
def test_extract_price_unknown_is_zero(raw):
    assert extract_price(raw) == 0


def test_extract_price_numbers_pass_through():
    assert extract_price(150000) == 150000
    assert extract_price(99.5) == 99.5
    assert extract_price(float("nan")) == 0
    assert extract_price(float("inf")) == 0


def test_parse_number_distinguishes_unset():
    assert parse_number("Negotiable") is None
    assert parse_number(None) is None
    assert parse_number(True) is None
    assert parse_number("0") == 0
    assert parse_number("1e3") == 1000


def test_format_price_display_rules():
    assert format_price(None) == "Contact for pricing"
    assert format_price("") == "Contact for pricing"
    assert format_price(0) == "Contact for pricing"
    assert format_price(150000) == "$150,000"
    assert format_price("$1,250,000") == "$1,250,000"
    assert format_price("Negotiable") == "Negotiable"


def test_format_currency_rounds_to_whole_dollars():
    assert format_currency(499999.5) == "$500,000"
    assert format_currency(1234.4) == "$1,234"
    assert format_currency(-5) == "-$5"


def test_display_and_numeric_forms_agree_on_unknown():
    for raw in ("Negotiable", "Call us", None, ""):
        assert extract_price(raw) == 0
        assert not format_price(raw).startswith("$")
    assert math.isclose(extract_price("$75,000"), 75000)


def test_integer_too_large_for_float_is_unknown():
    huge = int("9" * 400)
    assert extract_price(huge) == 0
    assert parse_number(huge) is None
    assert format_price(huge) == "Contact for pricing"
    assert extract_price("9" * 400) == 0


def test_negative_prices_are_unknown():
    assert extract_price(-5) == 0
    assert extract_price("-$5") == 0
    assert format_price(-5) == "Contact for pricing"
    assert format_price("-$5") == "-$5"
    assert parse_number("-5") == -5
