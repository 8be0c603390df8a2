#!/usr/bin/env python3
"""
Tests for per-service pricing and duration.
"""

import sys
sys.path.insert(0, 'src')

import pytest

from estimator.calculator import ServiceCalculator, compute_duration, fold_options
from estimator.catalog import CatalogRepository, FootageBilling, JobType, Trade, job_types, load_catalog
from estimator.models import DayRange, PriceRange, ServiceSelection, round_to_step
from estimator.multipliers import resolve_region_from_address


def painting(**kwargs):
    fields = dict(service_id="s1", trade_id="painting", job_type_id="single-room")
    fields.update(kwargs)
    return ServiceSelection(**fields)


# ==================== Pricing ====================

def test_medium_single_room(sample_catalog):
    item = ServiceCalculator(sample_catalog).calculate(painting())

    assert item.price_range == PriceRange(500, 900)
    assert item.estimated_days == DayRange(1, 2)
    assert item.trade_name == "Painting"
    assert item.job_type_name == "Single Room (Interior)"
    assert item.scope == ["Protect floors.", "Apply two coats."]
    assert item.warranty == "2-year warranty on workmanship."
    assert item.exclusions == ["Lead paint abatement", "Wallpaper removal"]
    assert item.regional_info is None


def test_large_single_room(sample_catalog):
    item = ServiceCalculator(sample_catalog).calculate(painting(job_size=3))

    # 450 * 1.3 = 585, 850 * 1.3 = 1105
    assert item.price_range == PriceRange(600, 1100)
    assert item.estimated_days == DayRange(2, 3)


def test_footage_billed_price(sample_catalog):
    item = ServiceCalculator(sample_catalog).calculate(painting(footage=400))

    # 400 sq ft at $2.50 - $4.50, base range ignored
    assert item.price_range == PriceRange(1000, 1800)
    assert item.footage == 400


def test_footage_with_extra_cost(sample_catalog):
    item = ServiceCalculator(sample_catalog).calculate(
        painting(footage=400, options={"ceilings": True})
    )
    # 1250 and 2050 round half up
    assert item.price_range == PriceRange(1300, 2100)


def test_footage_complexity_is_dampened(sample_catalog):
    item = ServiceCalculator(sample_catalog).calculate(painting(footage=400, area_key="attic"))

    # attic 1.3 -> complexity 1.09: 1090 and 1962
    assert item.price_range == PriceRange(1100, 2000)


def test_footage_ignores_mild_area_factor(sample_catalog):
    calculator = ServiceCalculator(sample_catalog)
    plain = calculator.calculate(painting(footage=400))
    living = calculator.calculate(painting(footage=400, area_key="living-room"))
    assert plain.price_range == living.price_range


def test_zero_footage_uses_base_range(sample_catalog):
    item = ServiceCalculator(sample_catalog).calculate(painting(footage=0))
    assert item.price_range == PriceRange(500, 900)


def test_footage_ignored_for_trade_without_footage_billing(sample_catalog):
    selection = ServiceSelection("s1", "plumbing", "repipe", footage=1000)
    item = ServiceCalculator(sample_catalog).calculate(selection)
    assert item.price_range == PriceRange(8000, 15000)


def test_footage_billed_trade_without_unit_price_uses_base_range():
    wallcovering = Trade(
        id="wallcovering",
        name="Wallcovering",
        materials_ratio=0.4,
        labor_ratio=0.6,
        footage_billing=FootageBilling.SQUARE_FEET,
        job_types=job_types(JobType("accent-wall", "Accent Wall", 600, 1400, days_low=1, days_high=2)),
    )
    catalog = CatalogRepository({"wallcovering": wallcovering})
    item = ServiceCalculator(catalog).calculate(
        ServiceSelection("s1", "wallcovering", "accent-wall", footage=500)
    )
    assert item.price_range == PriceRange(600, 1400)
    assert item.footage == 500


def test_unknown_trade_yields_nothing(sample_catalog):
    calculator = ServiceCalculator(sample_catalog)
    assert calculator.calculate(ServiceSelection("s1", "masonry", "chimney")) is None
    assert calculator.calculate(ServiceSelection("s1", "painting", "mural")) is None
    assert calculator.calculate(ServiceSelection("s1")) is None


# ==================== Multipliers ====================

def test_full_area_factor_without_footage(sample_catalog):
    item = ServiceCalculator(sample_catalog).calculate(painting(area_key="hallway"))

    # hallway 0.5: 225 and 425
    assert item.price_range == PriceRange(200, 400)
    assert item.estimated_days == DayRange(1, 1)


def test_regional_multiplier(sample_catalog):
    region = resolve_region_from_address("Austin, TX")
    item = ServiceCalculator(sample_catalog).calculate(painting(), region)

    # 414 and 782
    assert item.price_range == PriceRange(400, 800)
    assert item.regional_info.abbreviation == "TX"


def test_tenant_and_trade_multipliers(sample_catalog):
    calculator = ServiceCalculator(
        sample_catalog,
        price_multiplier=1.1,
        trade_multipliers={"painting": 2.0}
    )
    item = calculator.calculate(painting(job_type_id="trim"))

    # 1000 * 1.1 * 2.0 and 3000 * 1.1 * 2.0
    assert item.price_range == PriceRange(2200, 6600)

    other = calculator.calculate(ServiceSelection("s2", "plumbing", "repipe"))
    assert other.price_range == PriceRange(8800, 16500)


def test_neutral_defaults(sample_catalog):
    calculator = ServiceCalculator(sample_catalog)
    baseline = calculator.calculate(painting())

    unknown_area = calculator.calculate(painting(area_key="moon-base"))
    unmatched_region = calculator.calculate(painting(), resolve_region_from_address("Nowhere Street"))

    assert unknown_area.price_range == baseline.price_range
    assert unknown_area.estimated_days == baseline.estimated_days
    assert unmatched_region.price_range == baseline.price_range


def test_strict_area_mode():
    catalog = load_catalog()
    selection = ServiceSelection(
        "s1", "painting", "interior-painting", area_key="master-bathroom"
    )

    lenient = ServiceCalculator(catalog).calculate(selection)
    strict = ServiceCalculator(catalog, strict_areas=True).calculate(selection)

    assert lenient.price_range == PriceRange(2500, 10000)
    assert strict.price_range == PriceRange(2000, 8000)


# ==================== Options ====================

def test_options_add_cost_and_scope(sample_catalog):
    item = ServiceCalculator(sample_catalog).calculate(
        painting(options={"ceilings": True, "grade": "premium"})
    )
    # 450 + 400 = 850, 850 + 400 = 1250
    assert item.price_range == PriceRange(900, 1300)
    assert item.scope[-2:] == ["Paint ceilings.", "Use premium paint."]


def test_inactive_and_unknown_options_are_ignored(sample_catalog):
    item = ServiceCalculator(sample_catalog).calculate(
        painting(options={"ceilings": "yes", "grade": "gold", "sparkles": True})
    )
    assert item.price_range == PriceRange(500, 900)
    assert item.scope == ["Protect floors.", "Apply two coats."]


def test_fold_options_follows_job_type_order(sample_catalog):
    job_type = sample_catalog.find_trade("painting").find_job_type("single-room")
    totals = fold_options(list(job_type.options), {"grade": "premium", "ceilings": True})
    assert totals.extra_cost == 400
    assert totals.scope_additions == ["Paint ceilings.", "Use premium paint."]


# ==================== Duration ====================

def make_job(days_low, days_high):
    return JobType("job", "Job", 1000, 2000, days_low=days_low, days_high=days_high)


def test_small_job_shortens_duration():
    assert compute_duration(make_job(7, 14), 1, 1.0) == DayRange(5, 11)
    assert compute_duration(make_job(1, 1), 1, 1.0) == DayRange(1, 1)


def test_large_area_stretches_duration():
    assert compute_duration(make_job(2, 5), 2, 3.5) == DayRange(3, 7)


def test_size_then_area_adjustment():
    # Large: 3, 7 then small area: 2, 6
    assert compute_duration(make_job(2, 5), 3, 0.5) == DayRange(2, 6)


def test_missing_size_is_medium():
    assert compute_duration(make_job(2, 5), None, 1.0) == DayRange(2, 5)


# ==================== Properties ====================

def all_selections(catalog):
    for trade in catalog.list_trades():
        for job_type in trade.job_types.values():
            yield trade, job_type


def test_size_scaling_is_monotonic():
    catalog = load_catalog()
    calculator = ServiceCalculator(catalog)
    for trade, job_type in all_selections(catalog):
        prices = [
            calculator.calculate(ServiceSelection("s", trade.id, job_type.id, job_size=size)).price_range
            for size in (1, 2, 3)
        ]
        assert prices[0].low <= prices[1].low <= prices[2].low, job_type.id
        assert prices[0].high <= prices[1].high <= prices[2].high, job_type.id


def test_prices_are_multiples_of_100():
    catalog = load_catalog()
    calculator = ServiceCalculator(catalog)
    region = resolve_region_from_address("San Diego, CA")
    for trade, job_type in all_selections(catalog):
        for area_key in catalog.area_keys_for_trade(trade.id):
            item = calculator.calculate(
                ServiceSelection("s", trade.id, job_type.id, footage=350, area_key=area_key),
                region
            )
            assert item.price_range.low % 100 == 0
            assert item.price_range.high % 100 == 0
            assert item.price_range.low <= item.price_range.high
            assert 1 <= item.estimated_days.low <= item.estimated_days.high


@pytest.mark.parametrize("value, expected", [
    (450, 500),
    (449.99, 400),
    (850, 900),
    (1250, 1300),
    (0, 0),
])
def test_round_to_step_goes_half_up(value, expected):
    assert round_to_step(value) == expected
