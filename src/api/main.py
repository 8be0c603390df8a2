"""
ScopeGen - FastAPI Backend API

This API exposes the estimation engine: catalog browsing, regional
lookups, per-proposal estimates, the quick estimate calculator and
draft saving.
"""

import os
import sys
import logging
from typing import Optional, List, Dict, Any
from datetime import datetime

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, confloat

# Load environment variables before the stores read them
load_dotenv()

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from estimator import (
    ServiceCalculator,
    ServiceSelection,
    build_draft_record,
    estimate_proposal,
    load_catalog,
    quick_estimate,
    resolve_region_from_address,
    resolve_region_from_postal_code,
    tenant_percent_to_factor,
    trade_percents_to_factors,
)
from estimator.catalog import ChoiceOption, Trade
from estimator.multipliers import AREA_MULTIPLIERS, resolve_unit_price
from estimator.quick_estimate import QuickEstimateCatalog
from api.draft_store import draft_store
from api.supabase_store import supabase_store

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

# Area keys outside a trade's allow-list count as absent when enabled
STRICT_AREAS = os.getenv("ESTIMATOR_STRICT_AREAS", "").lower() in ("1", "true", "yes")

# Initialize FastAPI app
app = FastAPI(
    title="ScopeGen API",
    description="Price and duration estimates for contractor proposals",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services
catalog = load_catalog()


# ============================================================================
# Pydantic Models
# ============================================================================

class HealthResponse(BaseModel):
    status: str
    timestamp: str
    version: str


class ChoiceResponse(BaseModel):
    value: str
    label: str
    price_delta: float = 0
    scope_addition: Optional[str] = None


class OptionResponse(BaseModel):
    id: str
    label: str
    kind: str
    price_delta: Optional[float] = None
    scope_addition: Optional[str] = None
    choices: List[ChoiceResponse] = []


class JobTypeResponse(BaseModel):
    id: str
    name: str
    base_price_low: float
    base_price_high: float
    days_low: int
    days_high: int
    warranty: Optional[str] = None
    exclusions: List[str] = []
    base_scope: List[str] = []
    options: List[OptionResponse] = []


class TradeSummary(BaseModel):
    id: str
    name: str
    materials_ratio: float
    labor_ratio: float
    footage_billing: Optional[str] = None
    job_type_count: int


class TradeDetail(TradeSummary):
    job_types: List[JobTypeResponse]


class AreaResponse(BaseModel):
    key: str
    multiplier: float


class TradeAreasResponse(BaseModel):
    trade_id: str
    areas: List[AreaResponse]
    footage_billing: Optional[str] = None
    unit_price_low: Optional[float] = None
    unit_price_high: Optional[float] = None


class RegionModel(BaseModel):
    state: str
    abbreviation: str
    region: str
    multiplier: float


class RegionResolveResponse(BaseModel):
    multiplier: float
    region: Optional[RegionModel] = None


class PriceRangeModel(BaseModel):
    low: float
    high: float


class DayRangeModel(BaseModel):
    low: int
    high: int


class ServiceSelectionInput(BaseModel):
    service_id: str
    trade_id: Optional[str] = None
    job_type_id: Optional[str] = None
    job_size: Optional[int] = 2
    footage: Optional[float] = Field(None, ge=0)
    area_key: Optional[str] = None
    # Raw values: only an exact true enables a boolean option
    options: Dict[str, Any] = {}
    scope_override: Optional[List[str]] = None

    def to_selection(self) -> ServiceSelection:
        return ServiceSelection(
            service_id=self.service_id,
            trade_id=self.trade_id,
            job_type_id=self.job_type_id,
            job_size=self.job_size,
            footage=self.footage,
            area_key=self.area_key,
            options=dict(self.options),
            scope_override=self.scope_override
        )


class EstimateRequest(BaseModel):
    services: List[ServiceSelectionInput]
    address: Optional[str] = None
    # Tenant pricing as percentages, 100 = neutral
    price_multiplier: Optional[float] = Field(None, ge=0)
    trade_multipliers: Dict[str, confloat(ge=0)] = {}
    scope_overrides: Dict[str, List[str]] = {}


class LineItemResponse(BaseModel):
    service_id: str
    trade_id: str
    trade_name: str
    job_type_id: str
    job_type_name: str
    job_size: int
    scope: List[str]
    price_range: PriceRangeModel
    estimated_days: DayRangeModel
    warranty: Optional[str] = None
    exclusions: List[str] = []
    regional_info: Optional[RegionModel] = None
    footage: Optional[float] = None
    area_key: Optional[str] = None


class EstimateResponse(BaseModel):
    line_items: List[LineItemResponse]
    job_type_name: str
    scope: List[str]
    price_range: PriceRangeModel
    estimated_days: DayRangeModel
    warranty: str
    exclusions: List[str]
    regional_info: Optional[RegionModel] = None
    is_multi_service: bool


class QuickEstimateRequest(BaseModel):
    trade_id: str
    job_type_id: str
    size: str = "medium"
    custom_sqft: Optional[float] = None
    postal_code: Optional[str] = None


class QuickEstimateResponse(BaseModel):
    trade_name: str
    job_type_name: str
    price_range: PriceRangeModel
    materials_range: PriceRangeModel
    labor_range: PriceRangeModel
    estimated_days: DayRangeModel
    size_factor: float
    regional_multiplier: float
    region: Optional[RegionModel] = None


class DraftRequest(EstimateRequest):
    client_name: Optional[str] = None


# ============================================================================
# Helpers
# ============================================================================

def _trade_summary(trade: Trade) -> Dict[str, Any]:
    return {
        "id": trade.id,
        "name": trade.name,
        "materials_ratio": trade.materials_ratio,
        "labor_ratio": trade.labor_ratio,
        "footage_billing": trade.footage_billing.value if trade.footage_billing else None,
        "job_type_count": len(trade.job_types),
    }


def _option_response(option) -> OptionResponse:
    if isinstance(option, ChoiceOption):
        return OptionResponse(
            id=option.id,
            label=option.label,
            kind=option.kind.value,
            choices=[
                ChoiceResponse(
                    value=c.value,
                    label=c.label,
                    price_delta=c.price_delta,
                    scope_addition=c.scope_addition
                )
                for c in option.choices
            ]
        )
    return OptionResponse(
        id=option.id,
        label=option.label,
        kind=option.kind.value,
        price_delta=option.price_delta,
        scope_addition=option.scope_addition
    )


def _get_trade_or_404(trade_id: str) -> Trade:
    trade = catalog.find_trade(trade_id)
    if trade is None:
        raise HTTPException(status_code=404, detail=f"Unknown trade: {trade_id}")
    return trade


def _run_estimate(request: EstimateRequest):
    selections = [service.to_selection() for service in request.services]
    calculator = ServiceCalculator(
        catalog,
        price_multiplier=tenant_percent_to_factor(request.price_multiplier),
        trade_multipliers=trade_percents_to_factors(request.trade_multipliers),
        strict_areas=STRICT_AREAS
    )
    estimate = estimate_proposal(
        selections,
        address=request.address,
        calculator=calculator,
        scope_overrides=request.scope_overrides
    )
    return selections, estimate


# ============================================================================
# API Endpoints
# ============================================================================

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        version=API_VERSION
    )


@app.get("/api/v1/trades", response_model=List[TradeSummary])
async def list_trades():
    """List every trade in catalog order."""
    return [TradeSummary(**_trade_summary(trade)) for trade in catalog.list_trades()]


@app.get("/api/v1/trades/{trade_id}", response_model=TradeDetail)
async def get_trade(trade_id: str):
    """
    Get one trade with its job types and options.

    Returns: 404 if the trade isn't in the catalog
    """
    trade = _get_trade_or_404(trade_id)
    job_types = [
        JobTypeResponse(
            id=jt.id,
            name=jt.name,
            base_price_low=jt.base_price_low,
            base_price_high=jt.base_price_high,
            days_low=jt.days_low,
            days_high=jt.days_high,
            warranty=jt.warranty,
            exclusions=list(jt.exclusions),
            base_scope=list(jt.base_scope),
            options=[_option_response(option) for option in jt.options]
        )
        for jt in catalog.list_job_types(trade.id)
    ]
    return TradeDetail(job_types=job_types, **_trade_summary(trade))


@app.get("/api/v1/trades/{trade_id}/areas", response_model=TradeAreasResponse)
async def get_trade_areas(trade_id: str):
    """Home areas a trade can be applied to, with their multipliers."""
    trade = _get_trade_or_404(trade_id)
    unit_price = resolve_unit_price(trade.id, trade.footage_billing)
    return TradeAreasResponse(
        trade_id=trade.id,
        areas=[
            AreaResponse(key=key, multiplier=AREA_MULTIPLIERS.get(key, 1.0))
            for key in catalog.area_keys_for_trade(trade.id)
        ],
        footage_billing=trade.footage_billing.value if trade.footage_billing else None,
        unit_price_low=unit_price.low if unit_price else None,
        unit_price_high=unit_price.high if unit_price else None
    )


@app.get("/api/v1/regions/resolve", response_model=RegionResolveResponse)
async def resolve_region(
    address: Optional[str] = Query(None),
    postal_code: Optional[str] = Query(None)
):
    """
    Resolve the regional multiplier for an address or ZIP code.

    The address wins when both are given. Unmatched input resolves to 1.0.
    """
    if address:
        region = resolve_region_from_address(address)
    else:
        region = resolve_region_from_postal_code(postal_code)

    if region is None:
        return RegionResolveResponse(multiplier=1.0)
    return RegionResolveResponse(
        multiplier=region.multiplier,
        region=RegionModel(
            state=region.state,
            abbreviation=region.abbreviation,
            region=region.region,
            multiplier=region.multiplier
        )
    )


@app.post("/api/v1/estimate", response_model=EstimateResponse)
async def estimate(request: EstimateRequest):
    """
    Estimate a single- or multi-service proposal.

    Selections without a known trade or job type are skipped.
    """
    try:
        _, result = _run_estimate(request)
        return EstimateResponse(**result.to_dict())
    except Exception as e:
        logger.exception("Estimate failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/v1/quick-estimate/trades")
async def list_quick_estimate_trades():
    """Trades and job types offered by the quick estimate."""
    return [
        {
            "id": trade.id,
            "name": trade.name,
            "job_types": [{"id": jt.id, "name": jt.name} for jt in trade.job_types],
        }
        for trade in QuickEstimateCatalog.list_trades()
    ]


@app.post("/api/v1/quick-estimate", response_model=QuickEstimateResponse)
async def create_quick_estimate(request: QuickEstimateRequest):
    """
    Ballpark estimate for one job from a size preset or square footage.

    Returns: 400 if the trade, job type or size can't be resolved
    """
    result = quick_estimate(
        request.trade_id,
        request.job_type_id,
        size=request.size,
        custom_sqft=request.custom_sqft,
        postal_code=request.postal_code
    )
    if result is None:
        raise HTTPException(
            status_code=400,
            detail="Unknown trade, job type or size for quick estimate"
        )

    region = result.region
    return QuickEstimateResponse(
        trade_name=result.trade_name,
        job_type_name=result.job_type_name,
        price_range=PriceRangeModel(low=result.price_range.low, high=result.price_range.high),
        materials_range=PriceRangeModel(low=result.materials_range.low, high=result.materials_range.high),
        labor_range=PriceRangeModel(low=result.labor_range.low, high=result.labor_range.high),
        estimated_days=DayRangeModel(low=result.estimated_days.low, high=result.estimated_days.high),
        size_factor=result.size_factor,
        regional_multiplier=result.regional_multiplier,
        region=RegionModel(
            state=region.state,
            abbreviation=region.abbreviation,
            region=region.region,
            multiplier=region.multiplier
        ) if region else None
    )


@app.post("/api/v1/drafts")
async def save_draft(request: DraftRequest):
    """
    Estimate and save a proposal draft.

    Uses Supabase when configured, otherwise the local file store.
    Returns: 400 if no service could be priced
    """
    selections, result = _run_estimate(request)
    record = build_draft_record(request.client_name, request.address, selections, result)
    if record is None:
        raise HTTPException(status_code=400, detail="At least one complete service is required")

    try:
        # Try Supabase first
        saved = supabase_store.save_draft(record.to_dict())
        if saved is None:
            saved = draft_store.save_draft(record.to_dict())
        return saved
    except Exception as e:
        logger.exception("Saving draft failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/v1/drafts/{draft_id}")
async def get_draft(draft_id: str):
    """Get a saved draft by ID."""
    draft = supabase_store.get_draft(draft_id) or draft_store.get_draft(draft_id)
    if draft is None:
        raise HTTPException(status_code=404, detail="Draft not found")
    return draft


# ============================================================================
# Run server
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
