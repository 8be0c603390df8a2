"""
ScopeGen - Quick Estimate

Standalone ballpark calculator: one trade, one job type, a size preset or
measured square footage, and an optional ZIP code. Returns the price
range with a materials / labor split.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .models import DayRange, PriceRange, RegionalInfo, round_half_up
from .multipliers import (
    regional_multiplier,
    resolve_continuous_size_factor,
    resolve_region_from_postal_code,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuickJobType:
    """Job type with a national-average price and day range."""
    id: str
    name: str
    low: float
    high: float
    days: Tuple[int, int]


@dataclass(frozen=True)
class QuickTrade:
    """Trade with its materials / labor cost split."""
    id: str
    name: str
    materials_ratio: float
    labor_ratio: float
    job_types: Tuple[QuickJobType, ...]

    def find_job_type(self, job_type_id: str) -> Optional[QuickJobType]:
        for job_type in self.job_types:
            if job_type.id == job_type_id:
                return job_type
        return None


@dataclass
class QuickEstimate:
    """Result of a quick estimate."""
    trade_name: str
    job_type_name: str
    price_range: PriceRange
    materials_range: PriceRange
    labor_range: PriceRange
    estimated_days: DayRange
    size_factor: float
    regional_multiplier: float
    region: Optional[RegionalInfo] = None


SIZE_PRESETS = {
    "small": 0.75,
    "medium": 1.0,
    "large": 1.4,
}

CUSTOM_SIZE = "custom"


def _jobs(*rows) -> Tuple[QuickJobType, ...]:
    return tuple(QuickJobType(id, name, low, high, days) for id, name, low, high, days in rows)


class QuickEstimateCatalog:
    """National-average pricing used by the quick estimate."""

    TRADES: Dict[str, QuickTrade] = {t.id: t for t in [
        QuickTrade("bathroom", "Bathroom Remodel", 0.45, 0.55, _jobs(
            ("tub-to-shower", "Tub-to-Shower Conversion", 8500, 12000, (5, 8)),
            ("full-gut", "Full Bathroom Remodel", 18000, 28000, (10, 21)),
            ("half-bath", "Half Bath / Powder Room", 6500, 9500, (4, 7)),
            ("vanity-refresh", "Vanity & Faucet Replacement", 1800, 3500, (1, 2)),
            ("ada-accessible", "ADA Accessibility Upgrade", 12000, 22000, (7, 14)),
            ("tile-only", "Tile Replacement", 3500, 7000, (3, 5)),
        )),
        QuickTrade("kitchen", "Kitchen Remodel", 0.50, 0.50, _jobs(
            ("full-kitchen", "Full Kitchen Remodel", 45000, 85000, (30, 60)),
            ("cabinet-refresh", "Cabinet & Countertop Refresh", 8500, 15000, (7, 14)),
            ("appliance-upgrade", "Appliance Package Install", 2500, 5000, (1, 2)),
            ("backsplash", "Backsplash Installation", 1500, 4000, (2, 4)),
            ("cabinet-refacing", "Cabinet Refacing", 5000, 12000, (5, 10)),
            ("island-addition", "Kitchen Island Addition", 8000, 20000, (5, 10)),
        )),
        QuickTrade("roofing", "Roofing", 0.40, 0.60, _jobs(
            ("full-roof", "Full Roof Replacement", 12000, 25000, (3, 7)),
            ("roof-repair", "Roof Repair", 500, 2500, (1, 2)),
            ("gutter-install", "Gutter Install/Replace", 1200, 3000, (1, 2)),
            ("metal-roof", "Metal Roof Installation", 18000, 45000, (5, 10)),
            ("flat-roof", "Flat Roof / TPO / EPDM", 8000, 18000, (3, 5)),
            ("skylight", "Skylight Installation", 1500, 4000, (1, 2)),
        )),
        QuickTrade("painting", "Painting", 0.25, 0.75, _jobs(
            ("single-room", "Single Room (Interior)", 450, 850, (1, 2)),
            ("whole-house", "Whole House Interior", 3500, 8000, (5, 10)),
            ("exterior", "Exterior House Painting", 4000, 12000, (5, 10)),
            ("cabinet-painting", "Cabinet Painting", 2500, 6000, (5, 10)),
            ("deck-staining", "Deck Staining", 800, 2500, (2, 3)),
            ("trim-only", "Trim & Door Painting", 1000, 3000, (2, 4)),
        )),
        QuickTrade("electrical", "Electrical", 0.35, 0.65, _jobs(
            ("panel-upgrade", "Panel Upgrade", 2500, 4500, (1, 2)),
            ("ev-charger", "EV Charger Installation", 800, 2000, (1, 1)),
            ("rewiring", "Whole House Rewiring", 8000, 15000, (5, 10)),
            ("outlet-install", "Outlet Installation", 150, 400, (1, 1)),
            ("lighting-upgrade", "Recessed Lighting Package", 1200, 3500, (1, 2)),
            ("ceiling-fan", "Ceiling Fan Installation", 200, 500, (1, 1)),
        )),
        QuickTrade("plumbing", "Plumbing", 0.30, 0.70, _jobs(
            ("water-heater", "Water Heater Replacement", 1800, 3500, (1, 1)),
            ("repipe", "Whole House Repipe", 8000, 15000, (3, 5)),
            ("drain-cleaning", "Drain Cleaning", 150, 500, (1, 1)),
            ("sewer-line", "Sewer Line Repair/Replace", 3000, 8000, (2, 4)),
            ("fixture-install", "Fixture Installation", 200, 600, (1, 1)),
            ("tankless", "Tankless Water Heater", 3000, 5500, (1, 2)),
        )),
        QuickTrade("hvac", "HVAC", 0.55, 0.45, _jobs(
            ("ac-install", "AC Unit Installation", 4500, 12000, (1, 3)),
            ("furnace", "Furnace Replacement", 3500, 8000, (1, 2)),
            ("maintenance", "Maintenance / Tune-Up", 99, 299, (1, 1)),
            ("ductwork", "Ductwork Replacement", 3000, 8000, (2, 4)),
            ("mini-split", "Mini-Split Installation", 3000, 7000, (1, 2)),
            ("heat-pump", "Heat Pump Installation", 5000, 12000, (1, 3)),
        )),
        QuickTrade("landscaping", "Landscaping", 0.45, 0.55, _jobs(
            ("lawn-install", "Lawn Installation", 2000, 6000, (2, 5)),
            ("patio", "Patio / Walkway", 4000, 15000, (3, 7)),
            ("tree-work", "Tree Removal / Trimming", 400, 3500, (1, 2)),
            ("irrigation", "Irrigation System", 2500, 6000, (2, 4)),
            ("retaining-wall", "Retaining Wall", 3000, 10000, (3, 7)),
            ("outdoor-lighting", "Outdoor Lighting", 1500, 5000, (1, 3)),
        )),
        QuickTrade("flooring", "Flooring", 0.50, 0.50, _jobs(
            ("hardwood", "Hardwood Installation", 4000, 12000, (3, 7)),
            ("lvp", "LVP / Vinyl Plank", 2500, 6000, (2, 4)),
            ("tile-floor", "Tile Flooring", 3500, 10000, (3, 7)),
            ("carpet", "Carpet Installation", 1500, 5000, (1, 3)),
            ("refinish", "Hardwood Refinishing", 2000, 5000, (3, 5)),
            ("subfloor", "Subfloor Repair", 1000, 4000, (2, 4)),
        )),
        QuickTrade("siding", "Siding", 0.45, 0.55, _jobs(
            ("vinyl-siding", "Vinyl Siding Installation", 8000, 18000, (5, 10)),
            ("fiber-cement", "Fiber Cement Siding", 15000, 35000, (7, 14)),
            ("siding-repair", "Siding Repair", 500, 2500, (1, 2)),
            ("wood-siding", "Wood Siding", 12000, 28000, (7, 14)),
            ("stone-veneer", "Stone Veneer", 8000, 20000, (5, 10)),
        )),
        QuickTrade("drywall", "Drywall", 0.30, 0.70, _jobs(
            ("full-room", "Full Room Drywall", 1500, 4000, (3, 5)),
            ("patch-repair", "Patch & Repair", 200, 800, (1, 1)),
            ("basement-finish", "Basement Finishing", 5000, 15000, (7, 14)),
            ("ceiling-repair", "Ceiling Repair", 300, 1200, (1, 2)),
            ("texture", "Texture Application", 500, 2000, (1, 3)),
        )),
        QuickTrade("windows", "Window Installation", 0.60, 0.40, _jobs(
            ("single-window", "Single Window Replacement", 400, 1200, (1, 1)),
            ("whole-house", "Whole House Windows", 8000, 25000, (3, 7)),
            ("bay-window", "Bay Window Installation", 2000, 5000, (1, 2)),
            ("sliding-door", "Sliding Door Install", 1500, 4000, (1, 2)),
            ("storm-windows", "Storm Windows", 200, 600, (1, 1)),
        )),
        QuickTrade("deck", "Deck Building", 0.45, 0.55, _jobs(
            ("wood-deck", "Wood Deck Construction", 8000, 20000, (5, 10)),
            ("composite", "Composite Deck", 15000, 35000, (5, 12)),
            ("deck-repair", "Deck Repair", 500, 3000, (1, 3)),
            ("railing", "Railing Installation", 1000, 5000, (1, 3)),
            ("pergola", "Pergola / Cover", 3000, 10000, (3, 7)),
        )),
        QuickTrade("fence", "Fence Installation", 0.50, 0.50, _jobs(
            ("wood-fence", "Wood Privacy Fence", 2500, 8000, (2, 5)),
            ("chain-link", "Chain Link Fence", 1500, 4000, (1, 3)),
            ("vinyl-fence", "Vinyl Fence", 3500, 10000, (2, 5)),
            ("iron-fence", "Iron / Aluminum Fence", 4000, 12000, (2, 5)),
            ("fence-repair", "Fence Repair", 200, 1000, (1, 1)),
        )),
        QuickTrade("concrete", "Concrete", 0.40, 0.60, _jobs(
            ("driveway", "Driveway Replacement", 5000, 15000, (3, 7)),
            ("sidewalk", "Sidewalk / Path", 1500, 5000, (2, 4)),
            ("patio-slab", "Patio Slab", 2500, 8000, (2, 5)),
            ("foundation-repair", "Foundation Repair", 5000, 20000, (3, 10)),
            ("stamped", "Stamped Concrete", 4000, 12000, (3, 7)),
        )),
        QuickTrade("tile", "Tile Installation", 0.45, 0.55, _jobs(
            ("floor-tile", "Floor Tile Installation", 2500, 8000, (3, 7)),
            ("shower-tile", "Shower Tile", 3000, 8000, (4, 8)),
            ("backsplash-tile", "Backsplash Tile", 1000, 3500, (1, 3)),
            ("fireplace-tile", "Fireplace Tile Surround", 800, 3000, (1, 3)),
            ("outdoor-tile", "Outdoor / Patio Tile", 3000, 10000, (3, 7)),
        )),
        QuickTrade("cabinets", "Cabinet Installation", 0.60, 0.40, _jobs(
            ("kitchen-cabinets", "Kitchen Cabinets (Stock)", 5000, 12000, (3, 5)),
            ("custom-cabinets", "Custom Cabinets", 15000, 40000, (7, 14)),
            ("bathroom-vanity", "Bathroom Vanity Install", 800, 2500, (1, 2)),
            ("garage-cabinets", "Garage Cabinets", 2000, 6000, (1, 3)),
            ("cabinet-hardware", "Cabinet Hardware Update", 200, 800, (1, 1)),
        )),
    ]}

    @classmethod
    def get_trade(cls, trade_id: str) -> Optional[QuickTrade]:
        return cls.TRADES.get(trade_id)

    @classmethod
    def list_trades(cls) -> List[QuickTrade]:
        return list(cls.TRADES.values())


def resolve_quick_size_factor(size: str, custom_sqft: Optional[float] = None) -> Optional[float]:
    """Size factor for a preset, or for custom square footage. None if unusable.

    Custom footage is truncated to whole square feet before the breakpoints
    are checked.
    """
    if size == CUSTOM_SIZE:
        if custom_sqft is None or custom_sqft < 0:
            return None
        return resolve_continuous_size_factor(int(custom_sqft))
    return SIZE_PRESETS.get(size)


def quick_estimate(
    trade_id: str,
    job_type_id: str,
    size: str = "medium",
    custom_sqft: Optional[float] = None,
    postal_code: Optional[str] = None
) -> Optional[QuickEstimate]:
    """
    Produce a ballpark estimate for one job.

    Args:
        trade_id: Quick estimate trade id (e.g. "painting")
        job_type_id: Job type within the trade (e.g. "single-room")
        size: "small", "medium", "large" or "custom"
        custom_sqft: Measured square footage when size is "custom"
        postal_code: ZIP code used for the regional multiplier

    Returns:
        QuickEstimate, or None when the inputs don't identify a job and size
    """
    trade = QuickEstimateCatalog.get_trade(trade_id)
    job_type = trade.find_job_type(job_type_id) if trade else None
    size_factor = resolve_quick_size_factor(size, custom_sqft)
    if job_type is None or size_factor is None:
        logger.debug("Quick estimate not possible for %s/%s size=%s", trade_id, job_type_id, size)
        return None

    region = resolve_region_from_postal_code(postal_code)
    region_multiplier = regional_multiplier(region)
    final_multiplier = size_factor * region_multiplier

    low = round_half_up(job_type.low * final_multiplier)
    high = round_half_up(job_type.high * final_multiplier)

    return QuickEstimate(
        trade_name=trade.name,
        job_type_name=job_type.name,
        price_range=PriceRange(low, high),
        materials_range=PriceRange(
            round_half_up(low * trade.materials_ratio),
            round_half_up(high * trade.materials_ratio)
        ),
        labor_range=PriceRange(
            round_half_up(low * trade.labor_ratio),
            round_half_up(high * trade.labor_ratio)
        ),
        estimated_days=DayRange(*job_type.days),
        size_factor=size_factor,
        regional_multiplier=region_multiplier,
        region=region
    )
