"""Asset balance resolution across periods.

A period's asset total sums each asset's best-known balance at the end of
the period, using three tiers:

1. the latest snapshot dated on or before the period end;
2. otherwise the asset's current balance, when the asset already existed;
3. otherwise no contribution.

A period total is None only when no asset contributed.
"""

from collections.abc import Iterable
from dataclasses import replace
from datetime import date
from decimal import Decimal
from logging import Logger

from finance_timeline.domain.models import Asset, AssetBalanceSnapshot
from finance_timeline.domain.policies import can_remove_snapshot
from finance_timeline.domain.services.periods import period_end
from finance_timeline.domain.services.validation import validate_granularity
from finance_timeline.utils.date_utils import coerce_date
from finance_timeline.utils.decimal_utils import coerce_decimal


def latest_snapshot(
    snapshots: Iterable[AssetBalanceSnapshot],
    boundary: date | None = None,
) -> AssetBalanceSnapshot | None:
    """Return the snapshot with the maximum date.

    Args:
        snapshots: Snapshots in recording order.
        boundary: Optional inclusive upper bound on snapshot dates.

    Returns:
        AssetBalanceSnapshot | None: Latest qualifying snapshot. Among
        snapshots sharing a date, the first recorded wins.
    """
    if boundary is not None:
        boundary = coerce_date(boundary)
    best: AssetBalanceSnapshot | None = None
    best_date: date | None = None
    for snapshot in snapshots:
        recorded_on = coerce_date(snapshot.date)
        if boundary is not None and recorded_on > boundary:
            continue
        if best_date is None or recorded_on > best_date:
            best, best_date = snapshot, recorded_on
    return best


def resolve_asset_balance(asset: Asset, boundary: date) -> Decimal | None:
    """Return the balance of one asset as of ``boundary``.

    Args:
        asset: Asset with its snapshot history.
        boundary: Inclusive as-of date.

    Returns:
        Decimal | None: Snapshot amount, current balance fallback, or None
        when the asset was created after ``boundary``.
    """
    boundary = coerce_date(boundary)
    snapshot = latest_snapshot(asset.snapshots, boundary)
    if snapshot is not None:
        return coerce_decimal(snapshot.amount)
    if coerce_date(asset.created_on) <= boundary:
        return coerce_decimal(asset.current_balance)
    return None


def resolve_asset_totals(
    assets: Iterable[Asset],
    periods: Iterable[str],
    granularity: str,
    *,
    logger: Logger | None = None,
) -> dict[str, Decimal | None]:
    """Sum asset balances at the end of each period.

    Args:
        assets: Assets owned by the user.
        periods: Ordered period keys.
        granularity: Granularity the keys were generated with.
        logger: Optional logger for debug output.

    Returns:
        dict[str, Decimal | None]: Asset total per period, None when no
        asset had a balance for that period.
    """
    validate_granularity(granularity)
    assets = list(assets)
    totals: dict[str, Decimal | None] = {}
    for period in periods:
        boundary = period_end(period, granularity)
        total = Decimal("0")
        contributed = False
        for asset in assets:
            balance = resolve_asset_balance(asset, boundary)
            if balance is None:
                continue
            total += balance
            contributed = True
        totals[period] = total if contributed else None
        if logger is not None:
            logger.debug(
                f"Asset total for {period} (as of {boundary}): {totals[period]}"
            )
    return totals


def project_current_balance(
    snapshots: Iterable[AssetBalanceSnapshot],
) -> tuple[Decimal, date] | None:
    """Return the balance and date of the latest snapshot.

    Returns:
        tuple[Decimal, date] | None: Projection, or None without snapshots.
    """
    snapshot = latest_snapshot(snapshots)
    if snapshot is None:
        return None
    return coerce_decimal(snapshot.amount), coerce_date(snapshot.date)


def apply_snapshots(
    asset: Asset,
    snapshots: Iterable[AssetBalanceSnapshot],
) -> Asset:
    """Return a copy of ``asset`` with new snapshots and derived fields."""
    snapshots = tuple(snapshots)
    projection = project_current_balance(snapshots)
    if projection is None:
        return replace(asset, snapshots=snapshots)
    current_balance, last_updated = projection
    return replace(
        asset,
        snapshots=snapshots,
        current_balance=current_balance,
        last_updated=last_updated,
    )


def add_snapshot(asset: Asset, snapshot: AssetBalanceSnapshot) -> Asset:
    """Return ``asset`` with ``snapshot`` appended to its history."""
    return apply_snapshots(asset, (*asset.snapshots, snapshot))


def remove_snapshot(asset: Asset, snapshot_id: str) -> Asset:
    """Return ``asset`` without the snapshot identified by ``snapshot_id``.

    Raises:
        LookupError: If no snapshot has this identifier.
        ValueError: If the snapshot is the last one of the asset.
    """
    remaining = tuple(
        snapshot
        for snapshot in asset.snapshots
        if snapshot.snapshot_id != snapshot_id
    )
    if len(remaining) == len(asset.snapshots):
        raise LookupError(f"Balance record not found: {snapshot_id}")
    if not can_remove_snapshot(asset):
        raise ValueError("Cannot delete the last balance record")
    return apply_snapshots(asset, remaining)


__all__ = [
    "latest_snapshot",
    "resolve_asset_balance",
    "resolve_asset_totals",
    "project_current_balance",
    "apply_snapshots",
    "add_snapshot",
    "remove_snapshot",
]
