"""
ScopeGen - Draft Records

Flattens an estimate into the row saved when a contractor saves a draft.
The primary fields describe only the first priced service; multi-service
drafts also carry one row per service.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .models import LineItem, ProposalEstimate, ServiceSelection

DRAFT_CLIENT_PLACEHOLDER = "Draft Proposal"
DRAFT_ADDRESS_PLACEHOLDER = "Address pending"


@dataclass
class DraftLineItem:
    """Per-service row of a multi-service draft."""
    id: str
    trade_id: str
    trade_name: str
    job_type_id: str
    job_type_name: str
    job_size: int
    scope: List[str]
    price_low: float
    price_high: float
    estimated_days_low: int
    estimated_days_high: int
    warranty: Optional[str] = None
    exclusions: List[str] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)
    footage: Optional[float] = None
    area_key: Optional[str] = None


@dataclass
class DraftRecord:
    """Flattened proposal row."""
    client_name: str
    address: str
    trade_id: str
    job_type_id: str
    job_type_name: str
    job_size: int
    scope: List[str]
    options: Dict[str, bool]
    price_low: float
    price_high: float
    estimated_days_low: int
    estimated_days_high: int
    is_multi_service: bool
    is_draft_without_client_info: bool
    line_items: Optional[List[DraftLineItem]] = None
    status: str = "draft"
    is_unlocked: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def boolean_options(options: Optional[Dict[str, Any]]) -> Dict[str, bool]:
    """Keep only the on/off options of an option map."""
    return {key: value for key, value in (options or {}).items() if isinstance(value, bool)}


def _draft_line_item(item: LineItem, selection: Optional[ServiceSelection]) -> DraftLineItem:
    return DraftLineItem(
        id=item.service_id,
        trade_id=item.trade_id,
        trade_name=item.trade_name,
        job_type_id=item.job_type_id,
        job_type_name=item.job_type_name,
        job_size=item.job_size,
        scope=list(item.scope),
        price_low=item.price_range.low,
        price_high=item.price_range.high,
        estimated_days_low=item.estimated_days.low,
        estimated_days_high=item.estimated_days.high,
        warranty=item.warranty,
        exclusions=list(item.exclusions),
        options=dict(selection.options) if selection else {},
        footage=item.footage or None,
        area_key=item.area_key
    )


def build_draft_record(
    client_name: Optional[str],
    address: Optional[str],
    selections: List[ServiceSelection],
    estimate: ProposalEstimate
) -> Optional[DraftRecord]:
    """
    Build the draft row for an estimate.

    Args:
        client_name: Client name as typed (may be blank)
        address: Job site address as typed (may be blank)
        selections: The selections the estimate was computed from
        estimate: Result of estimate_proposal for those selections

    Returns:
        DraftRecord, or None when no service could be priced
    """
    if not estimate.line_items:
        return None

    client_name = (client_name or "").strip() or DRAFT_CLIENT_PLACEHOLDER
    address = (address or "").strip() or DRAFT_ADDRESS_PLACEHOLDER

    by_id = {selection.service_id: selection for selection in selections}
    first = estimate.line_items[0]
    first_selection = by_id.get(first.service_id)
    is_multi_service = estimate.is_multi_service

    rows = [_draft_line_item(item, by_id.get(item.service_id)) for item in estimate.line_items]

    if is_multi_service:
        job_type_name = "Multi-Service (%d services)" % len(rows)
    else:
        job_type_name = first.job_type_name

    return DraftRecord(
        client_name=client_name,
        address=address,
        trade_id=first.trade_id,
        job_type_id=first.job_type_id,
        job_type_name=job_type_name,
        job_size=first.job_size,
        scope=[line for row in rows for line in row.scope],
        options=boolean_options(first_selection.options if first_selection else None),
        # Plain sums of the per-service prices, no second rounding
        price_low=sum(row.price_low for row in rows),
        price_high=sum(row.price_high for row in rows),
        estimated_days_low=sum(row.estimated_days_low for row in rows),
        estimated_days_high=sum(row.estimated_days_high for row in rows),
        is_multi_service=is_multi_service,
        is_draft_without_client_info=(
            client_name == DRAFT_CLIENT_PLACEHOLDER or address == DRAFT_ADDRESS_PLACEHOLDER
        ),
        line_items=rows if is_multi_service else None
    )
