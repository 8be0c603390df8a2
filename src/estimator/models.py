"""
ScopeGen - Estimate Models

Value types passed between the calculator, aggregator and API layer.
"""

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def round_to_step(value: float, step: int = 100) -> int:
    """Round to the nearest multiple of step, halves going up."""
    return round_half_up(value / step) * step


@dataclass(frozen=True)
class PriceRange:
    """Low/high dollar amounts."""
    low: float
    high: float

    def rounded(self, step: int = 100) -> "PriceRange":
        return PriceRange(round_to_step(self.low, step), round_to_step(self.high, step))


@dataclass(frozen=True)
class DayRange:
    """Low/high estimated working days."""
    low: int
    high: int


@dataclass(frozen=True)
class RegionalInfo:
    """A U.S. state (or D.C.) and its cost-of-labor multiplier."""
    state: str
    abbreviation: str
    region: str
    multiplier: float


@dataclass
class ServiceSelection:
    """One service the contractor is quoting."""
    service_id: str
    trade_id: Optional[str] = None
    job_type_id: Optional[str] = None
    job_size: Optional[int] = 2
    footage: Optional[float] = None
    area_key: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)
    scope_override: Optional[List[str]] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.trade_id and self.job_type_id)


@dataclass
class LineItem:
    """Priced result of a single service selection."""
    service_id: str
    trade_id: str
    trade_name: str
    job_type_id: str
    job_type_name: str
    job_size: int
    scope: List[str]
    price_range: PriceRange
    estimated_days: DayRange
    warranty: Optional[str] = None
    exclusions: List[str] = field(default_factory=list)
    regional_info: Optional[RegionalInfo] = None
    footage: Optional[float] = None
    area_key: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ProposalEstimate:
    """Aggregated estimate for a whole proposal."""
    line_items: List[LineItem]
    job_type_name: str
    scope: List[str]
    price_range: PriceRange
    estimated_days: DayRange
    warranty: str = ""
    exclusions: List[str] = field(default_factory=list)
    regional_info: Optional[RegionalInfo] = None

    @property
    def is_multi_service(self) -> bool:
        return len(self.line_items) > 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "line_items": [item.to_dict() for item in self.line_items],
            "job_type_name": self.job_type_name,
            "scope": list(self.scope),
            "price_range": asdict(self.price_range),
            "estimated_days": asdict(self.estimated_days),
            "warranty": self.warranty,
            "exclusions": list(self.exclusions),
            "regional_info": asdict(self.regional_info) if self.regional_info else None,
            "is_multi_service": self.is_multi_service,
        }
