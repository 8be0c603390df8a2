"""
ScopeGen - Catalog Repository

Read-only access to the trade / job type / option catalog that every
estimate starts from. Lookups never raise: a missing trade or job type
comes back as None and callers treat it as an incomplete selection.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class OptionKind(Enum):
    """Kinds of job type options."""
    BOOLEAN = "boolean"
    CHOICE = "select"


class FootageBilling(Enum):
    """How a footage-billed trade measures its work."""
    SQUARE_FEET = "sqft"
    LINEAR_FEET = "linear"


@dataclass(frozen=True)
class OptionEffect:
    """Price and scope contribution of one active option."""
    price_delta: float = 0.0
    scope_addition: Optional[str] = None


@dataclass(frozen=True)
class Choice:
    """One selectable value of a choice option."""
    value: str
    label: str
    price_delta: float = 0.0
    scope_addition: Optional[str] = None


@dataclass(frozen=True)
class BooleanOption:
    """An add-on that is either switched on or off."""
    id: str
    label: str
    price_delta: float = 0.0
    scope_addition: Optional[str] = None
    kind: OptionKind = field(default=OptionKind.BOOLEAN, init=False)

    def resolve(self, value) -> Optional[OptionEffect]:
        # Only an explicit True enables the add-on
        if value is not True:
            return None
        return OptionEffect(self.price_delta, self.scope_addition)


@dataclass(frozen=True)
class ChoiceOption:
    """A multiple-choice selector; at most one choice is active."""
    id: str
    label: str
    choices: Tuple[Choice, ...] = ()
    kind: OptionKind = field(default=OptionKind.CHOICE, init=False)

    def find_choice(self, value: str) -> Optional[Choice]:
        for choice in self.choices:
            if choice.value == value:
                return choice
        return None

    def resolve(self, value) -> Optional[OptionEffect]:
        if not isinstance(value, str) or not value:
            return None
        choice = self.find_choice(value)
        if choice is None:
            return None
        return OptionEffect(choice.price_delta, choice.scope_addition)


Option = Union[BooleanOption, ChoiceOption]


@dataclass(frozen=True)
class JobType:
    """A specific kind of project within a trade."""
    id: str
    name: str
    base_price_low: float
    base_price_high: float
    days_low: int = 1
    days_high: int = 3
    warranty: Optional[str] = None
    exclusions: Tuple[str, ...] = ()
    base_scope: Tuple[str, ...] = ()
    options: Tuple[Option, ...] = ()


@dataclass(frozen=True)
class Trade:
    """A contracting discipline and the job types it offers."""
    id: str
    name: str
    materials_ratio: float
    labor_ratio: float
    job_types: Dict[str, JobType] = field(default_factory=dict)
    footage_billing: Optional[FootageBilling] = None

    def find_job_type(self, job_type_id: str) -> Optional[JobType]:
        return self.job_types.get(job_type_id)


def job_types(*items: JobType) -> Dict[str, JobType]:
    """Index job types by id, keeping catalog order."""
    return {item.id: item for item in items}


class CatalogRepository:
    """
    Immutable catalog of trades, loaded once and read many times.

    The trade -> allowed area keys relation lives here as well so that
    callers can validate an area key against the trade it is used with.
    """

    def __init__(
        self,
        trades: Dict[str, Trade],
        trade_area_keys: Optional[Dict[str, Tuple[str, ...]]] = None,
        default_area_keys: Tuple[str, ...] = ()
    ):
        self._trades = dict(trades)
        self._trade_area_keys = dict(trade_area_keys or {})
        self._default_area_keys = tuple(default_area_keys)

    def find_trade(self, trade_id: Optional[str]) -> Optional[Trade]:
        """Get a trade by id, or None when it is not in the catalog."""
        if not trade_id:
            return None
        return self._trades.get(trade_id)

    def find_job_type(self, trade: Optional[Trade], job_type_id: Optional[str]) -> Optional[JobType]:
        """Get a job type of a trade, or None when either is missing."""
        if trade is None or not job_type_id:
            return None
        return trade.find_job_type(job_type_id)

    def list_trades(self) -> List[Trade]:
        return list(self._trades.values())

    def list_job_types(self, trade_id: str) -> List[JobType]:
        trade = self.find_trade(trade_id)
        if trade is None:
            return []
        return list(trade.job_types.values())

    def area_keys_for_trade(self, trade_id: Optional[str]) -> Tuple[str, ...]:
        """
        Area keys a trade offers, in display order.

        Trades without an explicit list (and unknown trades) get the
        default interior + exterior list.
        """
        return self._trade_area_keys.get(trade_id or "", self._default_area_keys)

    def is_area_allowed(self, trade_id: Optional[str], area_key: Optional[str]) -> bool:
        if not area_key:
            return False
        return area_key in self.area_keys_for_trade(trade_id)

    def footage_billing(self, trade_id: Optional[str]) -> Optional[FootageBilling]:
        trade = self.find_trade(trade_id)
        return trade.footage_billing if trade else None


_DEFAULT_CATALOG: Optional[CatalogRepository] = None


def load_catalog() -> CatalogRepository:
    """Get the built-in catalog (built on first use, then cached)."""
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        from .catalog_data import DEFAULT_AREA_KEYS, TRADE_AREA_KEYS, TRADES

        _DEFAULT_CATALOG = CatalogRepository(
            TRADES,
            trade_area_keys=TRADE_AREA_KEYS,
            default_area_keys=DEFAULT_AREA_KEYS
        )
        logger.debug("Loaded catalog with %d trades", len(TRADES))
    return _DEFAULT_CATALOG
