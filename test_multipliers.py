#!/usr/bin/env python3
"""
Tests for the size, area, footage and regional resolvers.
"""

import sys
sys.path.insert(0, 'src')

import pytest

from estimator.catalog import FootageBilling
from estimator.models import PriceRange
from estimator.multipliers import (
    resolve_area_factor,
    resolve_continuous_size_factor,
    resolve_region_from_address,
    resolve_region_from_postal_code,
    resolve_size_factor,
    resolve_unit_price,
    tenant_percent_to_factor,
    trade_percents_to_factors,
)


def test_size_tiers():
    assert resolve_size_factor(1) == 0.8
    assert resolve_size_factor(2) == 1.0
    assert resolve_size_factor(3) == 1.3
    # Missing tier is medium
    assert resolve_size_factor(None) == 1.0
    assert resolve_size_factor(0) == 1.0
    assert resolve_size_factor(7) == 1.0


@pytest.mark.parametrize("sqft, expected", [
    (50, 0.75),
    (99, 0.75),
    (100, 1.0),
    (200, 1.0),
    (201, 1.4),
    (400, 1.4),
    (600, 1.6),
    (800, 1.8),
    (1200, 2.2),
])
def test_continuous_size_factor(sqft, expected):
    assert resolve_continuous_size_factor(sqft) == pytest.approx(expected)


def test_area_factor():
    assert resolve_area_factor("master-bathroom") == 1.25
    assert resolve_area_factor("closet") == 0.4
    assert resolve_area_factor("whole-house") == 3.5
    assert resolve_area_factor("porch-roof") == 0.35
    assert resolve_area_factor("moon-base") == 1.0
    assert resolve_area_factor(None) == 1.0
    assert resolve_area_factor("") == 1.0


def test_unit_prices():
    assert resolve_unit_price("painting", FootageBilling.SQUARE_FEET) == PriceRange(2.5, 4.5)
    assert resolve_unit_price("fencing", FootageBilling.LINEAR_FEET) == PriceRange(25, 55)
    assert resolve_unit_price("painting", FootageBilling.LINEAR_FEET) is None
    assert resolve_unit_price("plumbing", FootageBilling.SQUARE_FEET) is None
    assert resolve_unit_price("painting", None) is None


def test_region_from_abbreviation():
    region = resolve_region_from_address("123 Main St, Austin, TX 78701")
    assert region.abbreviation == "TX"
    assert region.multiplier == 0.92
    assert region.region == "South"


def test_region_from_state_name():
    region = resolve_region_from_address("42 Pine Road, Boulder, Colorado")
    assert region.abbreviation == "CO"
    assert region.multiplier == 1.05


def test_region_is_case_insensitive():
    assert resolve_region_from_address("500 Lake Shore Dr, Chicago, il").abbreviation == "IL"


def test_abbreviation_must_be_whole_word():
    # "ca" inside "Cactus" is not California
    assert resolve_region_from_address("Cactus Lane") is None


def test_district_of_columbia():
    region = resolve_region_from_address("1600 Pennsylvania Ave NW, Washington DC 20500")
    assert region.abbreviation == "DC"
    assert region.multiplier == 1.40


def test_state_names_checked_in_table_order():
    # "virginia" is listed before "west virginia"
    assert resolve_region_from_address("Charleston, West Virginia").abbreviation == "VA"


def test_unmatched_address():
    assert resolve_region_from_address("Nowhere Street") is None
    assert resolve_region_from_address("") is None
    assert resolve_region_from_address(None) is None


@pytest.mark.parametrize("postal_code, expected", [
    ("90210", "CA"),
    ("10001", "NY"),
    ("11201", "NY"),
    ("75201", "TX"),
    ("33101", "FL"),
    ("60601", "IL"),
    ("19103", "PA"),
    ("85001", "AZ"),
    ("30301", "GA"),
    ("02134", "MA"),
    ("80202", "CO"),
    ("27601", "NC"),
    # The "9" rule comes first
    ("98101", "CA"),
])
def test_region_from_postal_code(postal_code, expected):
    assert resolve_region_from_postal_code(postal_code).abbreviation == expected


def test_postal_code_without_match():
    assert resolve_region_from_postal_code("55401") is None
    assert resolve_region_from_postal_code("9021") is None
    assert resolve_region_from_postal_code("") is None
    assert resolve_region_from_postal_code(None) is None


def test_tenant_percentages():
    assert tenant_percent_to_factor(None) == 1.0
    assert tenant_percent_to_factor(0) == 1.0
    assert tenant_percent_to_factor(110) == pytest.approx(1.1)
    assert trade_percents_to_factors({"painting": 90, "roofing": 0}) == {
        "painting": pytest.approx(0.9),
        "roofing": 0.0,
    }
    assert trade_percents_to_factors(None) == {}
