"""
ScopeGen - Multiplier Resolvers

Pure lookups that turn a selection's size, home area, footage and
location into the numeric factors the calculator applies.
Every resolver falls back to a neutral result for unknown input.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from .catalog import FootageBilling
from .models import PriceRange, RegionalInfo

logger = logging.getLogger(__name__)


# ==================== JOB SIZE ====================

DEFAULT_JOB_SIZE = 2

SIZE_TIER_FACTORS = {
    1: 0.8,   # small
    2: 1.0,   # medium
    3: 1.3,   # large
}


def normalize_job_size(job_size: Optional[int]) -> int:
    """Treat a missing or zero tier as medium."""
    return job_size or DEFAULT_JOB_SIZE


def resolve_size_factor(job_size: Optional[int]) -> float:
    return SIZE_TIER_FACTORS.get(normalize_job_size(job_size), 1.0)


def resolve_continuous_size_factor(area_sqft: float) -> float:
    """
    Size factor for a measured area, used by the standalone quick estimate.

    Below 100 sq ft is small, up to 200 medium, up to 400 large; beyond that
    the factor keeps growing by 0.4 per additional 400 sq ft.
    """
    if area_sqft < 100:
        return 0.75
    if area_sqft <= 200:
        return 1.0
    if area_sqft <= 400:
        return 1.4
    return 1.4 + ((area_sqft - 400) / 400) * 0.4


# ==================== HOME AREA ====================

AREA_MULTIPLIERS = {
    # Bathrooms
    "master-bathroom": 1.25,
    "bathroom": 1.0,
    "guest-bathroom": 0.95,
    "half-bath": 0.7,
    # Kitchens
    "kitchen": 1.0,
    "kitchenette": 0.6,
    "outdoor-kitchen": 1.4,
    # Interior rooms
    "living-room": 1.0,
    "dining-room": 0.85,
    "bedroom": 0.9,
    "master-bedroom": 1.15,
    "hallway": 0.5,
    "home-office": 0.8,
    "closet": 0.4,
    "mudroom": 0.5,
    "laundry-room": 0.7,
    "basement": 1.5,
    "attic": 1.3,
    "whole-house": 3.5,
    # Exterior
    "front-yard": 1.0,
    "backyard": 1.1,
    "side-yard": 0.6,
    "patio": 0.8,
    "deck": 1.0,
    "driveway": 1.2,
    "walkway": 0.5,
    "garage": 0.9,
    "carport": 0.7,
    "exterior-full": 2.8,
    # Roofing
    "main-roof": 1.0,
    "garage-roof": 0.4,
    "porch-roof": 0.35,
    "addition-roof": 0.5,
    "full-roof": 1.0,
}


def resolve_area_factor(area_key: Optional[str]) -> float:
    if not area_key:
        return 1.0
    if area_key not in AREA_MULTIPLIERS:
        logger.debug("Unknown area key %r, using 1.0", area_key)
        return 1.0
    return AREA_MULTIPLIERS[area_key]


# ==================== FOOTAGE PRICING ====================

FOOTAGE_UNIT_PRICES: Dict[str, Dict[FootageBilling, PriceRange]] = {
    "painting": {FootageBilling.SQUARE_FEET: PriceRange(2.5, 4.5)},
    "flooring": {FootageBilling.SQUARE_FEET: PriceRange(6, 14)},
    "drywall": {FootageBilling.SQUARE_FEET: PriceRange(2, 4)},
    "roofing": {FootageBilling.SQUARE_FEET: PriceRange(4, 9)},
    "concrete": {FootageBilling.SQUARE_FEET: PriceRange(8, 16)},
    "fencing": {FootageBilling.LINEAR_FEET: PriceRange(25, 55)},
    "decks-patios": {FootageBilling.SQUARE_FEET: PriceRange(25, 65)},
    "landscape": {FootageBilling.SQUARE_FEET: PriceRange(3, 12)},
}


def resolve_unit_price(trade_id: str, billing: Optional[FootageBilling]) -> Optional[PriceRange]:
    """Per-unit price range for a footage-billed trade, or None."""
    if billing is None:
        return None
    return FOOTAGE_UNIT_PRICES.get(trade_id, {}).get(billing)


# ==================== REGIONAL ====================

REGIONS: List[RegionalInfo] = [
    RegionalInfo("Alabama", "AL", "Southeast", 0.85),
    RegionalInfo("Alaska", "AK", "Pacific", 1.25),
    RegionalInfo("Arizona", "AZ", "Southwest", 0.95),
    RegionalInfo("Arkansas", "AR", "South", 0.82),
    RegionalInfo("California", "CA", "Pacific", 1.35),
    RegionalInfo("Colorado", "CO", "Mountain", 1.05),
    RegionalInfo("Connecticut", "CT", "Northeast", 1.20),
    RegionalInfo("Delaware", "DE", "Mid-Atlantic", 1.02),
    RegionalInfo("Florida", "FL", "Southeast", 1.00),
    RegionalInfo("Georgia", "GA", "Southeast", 0.92),
    RegionalInfo("Hawaii", "HI", "Pacific", 1.45),
    RegionalInfo("Idaho", "ID", "Mountain", 0.90),
    RegionalInfo("Illinois", "IL", "Midwest", 1.00),
    RegionalInfo("Indiana", "IN", "Midwest", 0.88),
    RegionalInfo("Iowa", "IA", "Midwest", 0.85),
    RegionalInfo("Kansas", "KS", "Midwest", 0.85),
    RegionalInfo("Kentucky", "KY", "South", 0.85),
    RegionalInfo("Louisiana", "LA", "South", 0.88),
    RegionalInfo("Maine", "ME", "Northeast", 1.00),
    RegionalInfo("Maryland", "MD", "Mid-Atlantic", 1.15),
    RegionalInfo("Massachusetts", "MA", "Northeast", 1.30),
    RegionalInfo("Michigan", "MI", "Midwest", 0.90),
    RegionalInfo("Minnesota", "MN", "Midwest", 0.98),
    RegionalInfo("Mississippi", "MS", "South", 0.80),
    RegionalInfo("Missouri", "MO", "Midwest", 0.87),
    RegionalInfo("Montana", "MT", "Mountain", 0.92),
    RegionalInfo("Nebraska", "NE", "Midwest", 0.88),
    RegionalInfo("Nevada", "NV", "Mountain", 1.02),
    RegionalInfo("New Hampshire", "NH", "Northeast", 1.08),
    RegionalInfo("New Jersey", "NJ", "Mid-Atlantic", 1.22),
    RegionalInfo("New Mexico", "NM", "Southwest", 0.88),
    RegionalInfo("New York", "NY", "Northeast", 1.30),
    RegionalInfo("North Carolina", "NC", "Southeast", 0.92),
    RegionalInfo("North Dakota", "ND", "Midwest", 0.90),
    RegionalInfo("Ohio", "OH", "Midwest", 0.88),
    RegionalInfo("Oklahoma", "OK", "South", 0.85),
    RegionalInfo("Oregon", "OR", "Pacific", 1.08),
    RegionalInfo("Pennsylvania", "PA", "Mid-Atlantic", 0.98),
    RegionalInfo("Rhode Island", "RI", "Northeast", 1.10),
    RegionalInfo("South Carolina", "SC", "Southeast", 0.88),
    RegionalInfo("South Dakota", "SD", "Midwest", 0.85),
    RegionalInfo("Tennessee", "TN", "South", 0.88),
    RegionalInfo("Texas", "TX", "South", 0.92),
    RegionalInfo("Utah", "UT", "Mountain", 0.95),
    RegionalInfo("Vermont", "VT", "Northeast", 1.05),
    RegionalInfo("Virginia", "VA", "Mid-Atlantic", 1.02),
    RegionalInfo("Washington", "WA", "Pacific", 1.12),
    RegionalInfo("West Virginia", "WV", "South", 0.82),
    RegionalInfo("Wisconsin", "WI", "Midwest", 0.92),
    RegionalInfo("Wyoming", "WY", "Mountain", 0.92),
    RegionalInfo("District of Columbia", "DC", "Mid-Atlantic", 1.40),
]

REGIONS_BY_ABBREVIATION = {region.abbreviation: region for region in REGIONS}

# Checked in order as plain substrings; "virginia" precedes "west virginia"
STATE_NAMES: List[Tuple[str, str]] = [
    (region.state.lower(), region.abbreviation) for region in REGIONS
] + [("d.c.", "DC")]

_ABBREVIATION_PATTERNS = [
    (re.compile(r"\b%s\b" % region.abbreviation.lower()), region) for region in REGIONS
]

# First matching prefix wins, so "98"/"99" codes resolve to CA via "9"
POSTAL_PREFIX_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("9",), "CA"),
    (("100", "112"), "NY"),
    (("77", "75"), "TX"),
    (("33", "32"), "FL"),
    (("60",), "IL"),
    (("19", "18"), "PA"),
    (("85", "86"), "AZ"),
    (("30", "31"), "GA"),
    (("98", "99"), "WA"),
    (("02", "01"), "MA"),
    (("80", "81"), "CO"),
    (("27", "28"), "NC"),
]

MIN_POSTAL_CODE_LENGTH = 5


def find_region(abbreviation: str) -> Optional[RegionalInfo]:
    return REGIONS_BY_ABBREVIATION.get(abbreviation.upper())


def resolve_region_from_address(address: Optional[str]) -> Optional[RegionalInfo]:
    """
    Detect the state an address is in.

    Two-letter abbreviations are tried first as whole words, then full
    state names as substrings. Returns None when nothing matches.
    """
    if not address:
        return None

    normalized = address.lower().strip()

    for pattern, region in _ABBREVIATION_PATTERNS:
        if pattern.search(normalized):
            return region

    for state_name, abbreviation in STATE_NAMES:
        if state_name in normalized:
            return REGIONS_BY_ABBREVIATION[abbreviation]

    return None


def resolve_region_from_postal_code(postal_code: Optional[str]) -> Optional[RegionalInfo]:
    """Map a postal code onto a state by leading digits."""
    if not postal_code or len(postal_code) < MIN_POSTAL_CODE_LENGTH:
        return None

    for prefixes, abbreviation in POSTAL_PREFIX_RULES:
        if postal_code.startswith(prefixes):
            return REGIONS_BY_ABBREVIATION[abbreviation]

    return None


def regional_multiplier(region: Optional[RegionalInfo]) -> float:
    return region.multiplier if region else 1.0


# ==================== TENANT OVERRIDES ====================

def tenant_percent_to_factor(percent: Optional[float]) -> float:
    """Convert a tenant-wide percentage (100 = neutral) into a multiplier.

    A missing or zero percentage counts as 100.
    """
    return (percent or 100) / 100.0


def trade_percents_to_factors(percents: Optional[Dict[str, float]]) -> Dict[str, float]:
    """Convert per-trade percentages into multipliers; only missing trades are neutral."""
    return {
        trade_id: (100 if percent is None else percent) / 100.0
        for trade_id, percent in (percents or {}).items()
    }
