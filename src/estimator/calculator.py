"""
ScopeGen - Per-Service Calculator

Turns one service selection into a priced line item: options are folded
into an extra cost and scope additions, the base or footage price is
scaled by size, area, tenant and regional factors, rounded to the
nearest $100, and the job type's duration is stretched or compressed.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .catalog import CatalogRepository, JobType, Option, Trade, load_catalog
from .models import DayRange, LineItem, PriceRange, RegionalInfo, ServiceSelection
from .multipliers import (
    normalize_job_size,
    regional_multiplier,
    resolve_area_factor,
    resolve_size_factor,
    resolve_unit_price,
)

logger = logging.getLogger(__name__)

PRICE_ROUNDING_STEP = 100

# Footage already captures size, so only difficult areas add a dampened surcharge
FOOTAGE_COMPLEXITY_THRESHOLD = 1.2
FOOTAGE_COMPLEXITY_DAMPING = 0.3

LONG_AREA_THRESHOLD = 1.5
SHORT_AREA_THRESHOLD = 0.7


@dataclass
class OptionTotals:
    """Combined effect of a selection's active options."""
    extra_cost: float = 0.0
    scope_additions: List[str] = field(default_factory=list)


def fold_options(options: List[Option], values: Dict[str, object]) -> OptionTotals:
    """
    Fold selected option values into one extra cost and a list of scope lines.

    Options are visited in job type order. Values for options the job type
    does not define are ignored.
    """
    totals = OptionTotals()
    for option in options:
        if option.id not in values:
            continue
        effect = option.resolve(values[option.id])
        if effect is None:
            continue
        totals.extra_cost += effect.price_delta
        if effect.scope_addition:
            totals.scope_additions.append(effect.scope_addition)
    return totals


def footage_complexity_factor(area_factor: float) -> float:
    if area_factor > FOOTAGE_COMPLEXITY_THRESHOLD:
        return 1 + (area_factor - 1) * FOOTAGE_COMPLEXITY_DAMPING
    return 1.0


def compute_price(
    job_type: JobType,
    size_factor: float,
    area_factor: float,
    extra_cost: float,
    footage: Optional[float] = None,
    unit_price: Optional[PriceRange] = None
) -> PriceRange:
    """
    Price one service before overrides and rounding.

    Args:
        job_type: Job type whose base range is used outside the footage branch
        size_factor: Size tier factor
        area_factor: Home area factor
        extra_cost: Sum of active option price deltas
        footage: Measured square or linear feet, if any
        unit_price: Per-unit price range for a footage-billed trade

    Returns:
        Unrounded PriceRange
    """
    if footage and footage > 0 and unit_price is not None:
        complexity = footage_complexity_factor(area_factor)
        return PriceRange(
            footage * unit_price.low * size_factor * complexity + extra_cost,
            footage * unit_price.high * size_factor * complexity + extra_cost
        )

    return PriceRange(
        job_type.base_price_low * size_factor * area_factor + extra_cost,
        job_type.base_price_high * size_factor * area_factor + extra_cost
    )


def _shrink(days: int, factor: float) -> int:
    return max(1, math.floor(days * factor))


def _stretch(days: int, factor: float) -> int:
    return math.ceil(days * factor)


def compute_duration(job_type: JobType, job_size: Optional[int], area_factor: float) -> DayRange:
    """
    Adjust the job type's day range for size, then for area.

    The area adjustment works on the already size-adjusted days.
    """
    low = job_type.days_low or 1
    high = job_type.days_high or 3

    size = normalize_job_size(job_size)
    if size == 1:
        low, high = _shrink(low, 0.8), _shrink(high, 0.8)
    elif size == 3:
        low, high = _stretch(low, 1.3), _stretch(high, 1.3)

    if area_factor > LONG_AREA_THRESHOLD:
        low, high = _stretch(low, 1.2), _stretch(high, 1.3)
    elif area_factor < SHORT_AREA_THRESHOLD:
        low, high = _shrink(low, 0.8), _shrink(high, 0.9)

    return DayRange(low, high)


class ServiceCalculator:
    """Prices service selections against a catalog with tenant overrides."""

    def __init__(
        self,
        catalog: Optional[CatalogRepository] = None,
        price_multiplier: float = 1.0,
        trade_multipliers: Optional[Dict[str, float]] = None,
        strict_areas: bool = False
    ):
        """
        Initialize the calculator.

        Args:
            catalog: Catalog to resolve trades and job types from (built-in when None)
            price_multiplier: Tenant-wide price factor (1.0 = neutral)
            trade_multipliers: Per-trade price factors for this tenant
            strict_areas: Treat area keys outside a trade's allow-list as absent
        """
        self.catalog = catalog or load_catalog()
        self.price_multiplier = price_multiplier
        self.trade_multipliers = trade_multipliers or {}
        self.strict_areas = strict_areas

    def get_trade_multiplier(self, trade_id: str) -> float:
        return self.trade_multipliers.get(trade_id, 1.0)

    def resolve_area(self, trade: Trade, area_key: Optional[str]) -> float:
        if self.strict_areas and area_key and not self.catalog.is_area_allowed(trade.id, area_key):
            logger.debug("Area %r not offered for trade %s, using neutral factor", area_key, trade.id)
            return 1.0
        return resolve_area_factor(area_key)

    def calculate(
        self,
        selection: ServiceSelection,
        region: Optional[RegionalInfo] = None
    ) -> Optional[LineItem]:
        """
        Price a single service selection.

        Args:
            selection: The service being quoted
            region: Region resolved from the proposal address, if any

        Returns:
            LineItem, or None when the trade or job type can't be resolved
        """
        trade = self.catalog.find_trade(selection.trade_id)
        job_type = self.catalog.find_job_type(trade, selection.job_type_id)
        if trade is None or job_type is None:
            logger.debug(
                "Skipping incomplete selection %s (trade=%r, job_type=%r)",
                selection.service_id, selection.trade_id, selection.job_type_id
            )
            return None

        options = fold_options(list(job_type.options), selection.options or {})
        size_factor = resolve_size_factor(selection.job_size)
        area_factor = self.resolve_area(trade, selection.area_key)
        unit_price = resolve_unit_price(trade.id, trade.footage_billing)

        price = compute_price(
            job_type,
            size_factor=size_factor,
            area_factor=area_factor,
            extra_cost=options.extra_cost,
            footage=selection.footage,
            unit_price=unit_price
        )

        trade_multiplier = self.get_trade_multiplier(trade.id)
        region_multiplier = regional_multiplier(region)
        price = PriceRange(
            price.low * self.price_multiplier * trade_multiplier * region_multiplier,
            price.high * self.price_multiplier * trade_multiplier * region_multiplier
        ).rounded(PRICE_ROUNDING_STEP)

        return LineItem(
            service_id=selection.service_id,
            trade_id=trade.id,
            trade_name=trade.name,
            job_type_id=job_type.id,
            job_type_name=job_type.name,
            job_size=normalize_job_size(selection.job_size),
            scope=list(job_type.base_scope) + options.scope_additions,
            price_range=price,
            estimated_days=compute_duration(job_type, selection.job_size, area_factor),
            warranty=job_type.warranty,
            exclusions=list(job_type.exclusions),
            regional_info=region,
            footage=selection.footage,
            area_key=selection.area_key
        )
