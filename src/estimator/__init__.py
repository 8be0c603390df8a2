from .catalog import CatalogRepository, Trade, JobType, BooleanOption, ChoiceOption, Choice, OptionKind, FootageBilling, load_catalog
from .models import PriceRange, DayRange, RegionalInfo, ServiceSelection, LineItem, ProposalEstimate
from .multipliers import resolve_size_factor, resolve_continuous_size_factor, resolve_area_factor, resolve_unit_price, resolve_region_from_address, resolve_region_from_postal_code, tenant_percent_to_factor, trade_percents_to_factors
from .calculator import ServiceCalculator, fold_options, compute_price, compute_duration
from .aggregator import aggregate_line_items, apply_scope_overrides, estimate_proposal
from .quick_estimate import QuickEstimateCatalog, QuickEstimate, quick_estimate
from .drafts import DraftRecord, build_draft_record
