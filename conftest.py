"""Shared fixtures: a small catalog with known prices."""

import sys
sys.path.insert(0, 'src')

import pytest

from estimator.catalog import (
    BooleanOption,
    CatalogRepository,
    Choice,
    ChoiceOption,
    FootageBilling,
    JobType,
    Trade,
    job_types,
)


@pytest.fixture
def sample_catalog():
    painting = Trade(
        id="painting",
        name="Painting",
        materials_ratio=0.25,
        labor_ratio=0.75,
        footage_billing=FootageBilling.SQUARE_FEET,
        job_types=job_types(
            JobType(
                id="single-room",
                name="Single Room (Interior)",
                base_price_low=450,
                base_price_high=850,
                days_low=1,
                days_high=2,
                warranty="2-year warranty on workmanship.",
                exclusions=("Lead paint abatement", "Wallpaper removal"),
                base_scope=("Protect floors.", "Apply two coats."),
                options=(
                    BooleanOption("ceilings", "Include ceilings", 250, "Paint ceilings."),
                    ChoiceOption("grade", "Paint grade", (
                        Choice("standard", "Standard"),
                        Choice("premium", "Premium", 150, "Use premium paint."),
                    )),
                )
            ),
            JobType(
                id="trim",
                name="Trim & Door Painting",
                base_price_low=1000,
                base_price_high=3000,
                days_low=2,
                days_high=4,
                warranty="2-year warranty on workmanship.",
                exclusions=("Wallpaper removal", "Door replacement"),
                base_scope=("Paint trim.",)
            ),
        )
    )
    plumbing = Trade(
        id="plumbing",
        name="Plumbing",
        materials_ratio=0.30,
        labor_ratio=0.70,
        job_types=job_types(
            JobType(
                id="repipe",
                name="Whole House Repipe",
                base_price_low=8000,
                base_price_high=15000,
                days_low=3,
                days_high=5,
                warranty="2-year warranty on parts and labor.",
                exclusions=("Drywall finishing",),
                base_scope=("Install PEX supply lines.",)
            ),
        )
    )
    return CatalogRepository(
        {"painting": painting, "plumbing": plumbing},
        trade_area_keys={
            "painting": ("living-room", "hallway", "whole-house", "attic", "basement"),
        },
        default_area_keys=("living-room", "backyard")
    )
