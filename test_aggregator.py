#!/usr/bin/env python3
"""
Tests for combining line items into a proposal estimate.
"""

import sys
sys.path.insert(0, 'src')

from estimator.aggregator import aggregate_line_items, apply_scope_overrides, estimate_proposal
from estimator.calculator import ServiceCalculator
from estimator.models import DayRange, LineItem, PriceRange, RegionalInfo, ServiceSelection

TEXAS = RegionalInfo("Texas", "TX", "South", 0.92)
OHIO = RegionalInfo("Ohio", "OH", "Midwest", 0.88)


def line_item(service_id, low, high, days=(1, 2), **kwargs):
    fields = dict(
        service_id=service_id,
        trade_id="painting",
        trade_name="Painting",
        job_type_id="job-" + service_id,
        job_type_name="Job " + service_id,
        job_size=2,
        scope=["Scope " + service_id],
        price_range=PriceRange(low, high),
        estimated_days=DayRange(*days),
    )
    fields.update(kwargs)
    return LineItem(**fields)


def test_two_services(sample_catalog):
    selections = [
        ServiceSelection("a", "painting", "single-room"),
        ServiceSelection("b", "painting", "trim"),
    ]
    estimate = estimate_proposal(selections, calculator=ServiceCalculator(sample_catalog))

    assert len(estimate.line_items) == 2
    assert estimate.price_range == PriceRange(1500, 3900)
    assert estimate.estimated_days == DayRange(3, 6)
    assert estimate.job_type_name == "Multi-Service Proposal (2 services)"
    assert estimate.is_multi_service


def test_single_service_uses_job_type_name(sample_catalog):
    estimate = estimate_proposal(
        [ServiceSelection("a", "painting", "trim")],
        calculator=ServiceCalculator(sample_catalog)
    )
    assert estimate.job_type_name == "Trim & Door Painting"
    assert not estimate.is_multi_service


def test_unknown_trade_is_excluded(sample_catalog):
    selections = [
        ServiceSelection("a", "painting", "single-room"),
        ServiceSelection("b", "masonry", "chimney"),
        ServiceSelection("c"),
    ]
    estimate = estimate_proposal(selections, calculator=ServiceCalculator(sample_catalog))

    assert [item.service_id for item in estimate.line_items] == ["a"]
    assert estimate.price_range == PriceRange(500, 900)
    assert estimate.job_type_name == "Single Room (Interior)"


def test_address_sets_region_on_every_item(sample_catalog):
    selections = [
        ServiceSelection("a", "painting", "single-room"),
        ServiceSelection("b", "plumbing", "repipe"),
    ]
    estimate = estimate_proposal(
        selections,
        address="Dallas, TX 75201",
        calculator=ServiceCalculator(sample_catalog)
    )
    assert estimate.regional_info.abbreviation == "TX"
    assert all(item.regional_info == estimate.regional_info for item in estimate.line_items)


def test_totals_are_sums():
    items = [
        line_item("a", 1200, 2500, days=(2, 3)),
        line_item("b", 800, 1900, days=(1, 4)),
        line_item("c", 300, 600, days=(1, 1)),
    ]
    estimate = aggregate_line_items(items)

    assert estimate.price_range == PriceRange(2300, 5000)
    assert estimate.estimated_days == DayRange(4, 8)
    assert estimate.price_range.low == sum(i.price_range.low for i in items)


def test_scope_is_concatenated_without_dedup():
    items = [
        line_item("a", 100, 200, scope=["Cleanup.", "Prime walls."]),
        line_item("b", 100, 200, scope=["Cleanup."]),
    ]
    assert aggregate_line_items(items).scope == ["Cleanup.", "Prime walls.", "Cleanup."]


def test_exclusions_and_warranties_are_deduplicated():
    items = [
        line_item("a", 100, 200, warranty="1-year labor warranty.", exclusions=["Permits", "Painting"]),
        line_item("b", 100, 200, warranty="1-year labor warranty.", exclusions=["Painting", "permits"]),
        line_item("c", 100, 200, warranty="Manufacturer warranty.", exclusions=[]),
        line_item("d", 100, 200, warranty=None),
    ]
    estimate = aggregate_line_items(items)

    assert estimate.exclusions == ["Permits", "Painting", "permits"]
    assert estimate.warranty == "1-year labor warranty. Manufacturer warranty."


def test_first_regional_info_wins():
    items = [
        line_item("a", 100, 200),
        line_item("b", 100, 200, regional_info=TEXAS),
        line_item("c", 100, 200, regional_info=OHIO),
    ]
    assert aggregate_line_items(items).regional_info == TEXAS


def test_empty_list_gives_zero_totals():
    estimate = aggregate_line_items([])

    assert estimate.line_items == []
    assert estimate.price_range == PriceRange(0, 0)
    assert estimate.estimated_days == DayRange(0, 0)
    assert estimate.scope == []
    assert estimate.exclusions == []
    assert estimate.warranty == ""
    assert estimate.regional_info is None


def test_estimate_with_no_valid_selection(sample_catalog):
    estimate = estimate_proposal([ServiceSelection("a")], calculator=ServiceCalculator(sample_catalog))
    assert estimate.price_range == PriceRange(0, 0)
    assert estimate.line_items == []


# ==================== Scope overrides ====================

def test_override_replaces_scope():
    items = [line_item("a", 100, 200), line_item("b", 100, 200)]
    result = apply_scope_overrides(items, {"a": ["Rewritten line."]})

    assert result[0].scope == ["Rewritten line."]
    assert result[1].scope == ["Scope b"]
    # Originals are untouched
    assert items[0].scope == ["Scope a"]


def test_empty_override_is_ignored():
    items = [line_item("a", 100, 200)]
    assert apply_scope_overrides(items, {"a": []})[0].scope == ["Scope a"]
    assert apply_scope_overrides(items, None) is items


def test_overrides_flow_into_aggregate(sample_catalog):
    selections = [
        ServiceSelection("a", "painting", "single-room", scope_override=["Custom A."]),
        ServiceSelection("b", "painting", "trim"),
    ]
    estimate = estimate_proposal(
        selections,
        calculator=ServiceCalculator(sample_catalog),
        scope_overrides={"b": ["Custom B."]}
    )
    assert estimate.scope == ["Custom A.", "Custom B."]
    # Overrides never change prices
    assert estimate.price_range == PriceRange(1500, 3900)


def test_to_dict_is_serializable(sample_catalog):
    estimate = estimate_proposal(
        [ServiceSelection("a", "painting", "single-room")],
        address="Austin, TX",
        calculator=ServiceCalculator(sample_catalog)
    )
    data = estimate.to_dict()

    assert data["price_range"] == {"low": 400, "high": 800}
    assert data["regional_info"]["abbreviation"] == "TX"
    assert data["line_items"][0]["service_id"] == "a"
    assert data["is_multi_service"] is False
