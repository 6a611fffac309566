"""Policies governing asset snapshot histories."""

from finance_timeline.domain.models import Asset


def can_remove_snapshot(asset: Asset) -> bool:
    """Return True when the asset keeps at least one snapshot after removal.

    Args:
        asset: Asset whose history would shrink by one snapshot.

    Returns:
        bool: False when the asset has one snapshot or none.
    """
    return len(asset.snapshots) > 1


__all__ = ["can_remove_snapshot"]
