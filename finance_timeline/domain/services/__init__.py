"""Domain services package."""

from .aggregation import aggregate_transactions
from .asset_balances import (
    add_snapshot,
    apply_snapshots,
    latest_snapshot,
    project_current_balance,
    remove_snapshot,
    resolve_asset_balance,
    resolve_asset_totals,
)
from .budget import (
    compute_budget_summary,
    compute_budget_variance,
    project_scenario,
)
from .categories import build_default_categories
from .frequency import annual_equivalent, monthly_equivalent, normalize_frequency
from .normalization import (
    normalize_asset_type,
    normalize_granularity,
    normalize_signed_amount,
    normalize_source,
)
from .periods import (
    advance_period,
    align_period_start,
    format_period_key,
    iter_period_keys,
    parse_period_key,
    period_end,
    period_key_for,
    period_keys,
    sort_period_keys,
)
from .timeline import merge_timeline, summarize_monthly_cashflow
from .validation import (
    validate_budget_line,
    validate_frequency,
    validate_granularity,
    validate_kind,
    validate_month,
)

__all__ = [
    "aggregate_transactions",
    "add_snapshot",
    "apply_snapshots",
    "latest_snapshot",
    "project_current_balance",
    "remove_snapshot",
    "resolve_asset_balance",
    "resolve_asset_totals",
    "compute_budget_summary",
    "compute_budget_variance",
    "project_scenario",
    "build_default_categories",
    "annual_equivalent",
    "monthly_equivalent",
    "normalize_frequency",
    "normalize_granularity",
    "normalize_signed_amount",
    "normalize_source",
    "normalize_asset_type",
    "advance_period",
    "align_period_start",
    "format_period_key",
    "iter_period_keys",
    "parse_period_key",
    "period_end",
    "period_key_for",
    "period_keys",
    "sort_period_keys",
    "merge_timeline",
    "summarize_monthly_cashflow",
    "validate_budget_line",
    "validate_frequency",
    "validate_granularity",
    "validate_kind",
    "validate_month",
]
