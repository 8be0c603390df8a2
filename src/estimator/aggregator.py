"""
ScopeGen - Proposal Aggregation

Folds priced line items into a single proposal estimate and runs the
whole selection -> line items -> proposal pipeline.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from .calculator import PRICE_ROUNDING_STEP, ServiceCalculator
from .models import DayRange, LineItem, PriceRange, ProposalEstimate, ServiceSelection
from .multipliers import resolve_region_from_address

logger = logging.getLogger(__name__)


def proposal_label(line_items: List[LineItem]) -> str:
    if len(line_items) == 1:
        return line_items[0].job_type_name
    if not line_items:
        return ""
    return "Multi-Service Proposal (%d services)" % len(line_items)


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def apply_scope_overrides(
    line_items: List[LineItem],
    overrides: Optional[Dict[str, List[str]]]
) -> List[LineItem]:
    """
    Replace the scope of line items that have an override.

    Overrides are keyed by service id and replace the computed scope
    outright. Missing or empty entries leave the computed scope as is.
    """
    if not overrides:
        return line_items

    result = []
    for item in line_items:
        replacement = overrides.get(item.service_id)
        if replacement:
            item = replace(item, scope=list(replacement))
        result.append(item)
    return result


def aggregate_line_items(line_items: List[LineItem]) -> ProposalEstimate:
    """
    Combine line items into one proposal estimate.

    Prices and days are summed per bound; the summed prices are rounded to
    the nearest $100 again. Scope lines are concatenated in order while
    exclusions and warranties are de-duplicated.
    """
    price_low = sum(item.price_range.low for item in line_items)
    price_high = sum(item.price_range.high for item in line_items)
    days_low = sum(item.estimated_days.low for item in line_items)
    days_high = sum(item.estimated_days.high for item in line_items)

    scope = [line for item in line_items for line in item.scope]
    exclusions = _unique(e for item in line_items for e in item.exclusions)
    warranties = _unique(item.warranty for item in line_items if item.warranty)

    regional_info = next(
        (item.regional_info for item in line_items if item.regional_info is not None),
        None
    )

    return ProposalEstimate(
        line_items=list(line_items),
        job_type_name=proposal_label(line_items),
        scope=scope,
        price_range=PriceRange(price_low, price_high).rounded(PRICE_ROUNDING_STEP),
        estimated_days=DayRange(days_low, days_high),
        warranty=" ".join(warranties),
        exclusions=exclusions,
        regional_info=regional_info
    )


def estimate_proposal(
    selections: List[ServiceSelection],
    address: Optional[str] = None,
    calculator: Optional[ServiceCalculator] = None,
    scope_overrides: Optional[Dict[str, List[str]]] = None
) -> ProposalEstimate:
    """
    Estimate a full proposal.

    Args:
        selections: Services in the order the contractor entered them
        address: Job site address, used for the regional multiplier
        calculator: Calculator carrying tenant overrides (neutral when None)
        scope_overrides: Replacement scope lines keyed by service id

    Returns:
        ProposalEstimate (all zeros when no selection can be priced)
    """
    calculator = calculator or ServiceCalculator()
    region = resolve_region_from_address(address)
    if address and region is None:
        logger.debug("No region matched for address, using neutral multiplier")

    overrides = {
        s.service_id: s.scope_override for s in selections if s.scope_override
    }
    overrides.update(scope_overrides or {})

    line_items = []
    for selection in selections:
        if not selection.is_complete:
            logger.debug("Skipping selection %s without trade or job type", selection.service_id)
            continue
        item = calculator.calculate(selection, region)
        if item is not None:
            line_items.append(item)

    line_items = apply_scope_overrides(line_items, overrides)
    return aggregate_line_items(line_items)
