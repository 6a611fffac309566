"""Domain policies package."""

from .snapshots import can_remove_snapshot

__all__ = ["can_remove_snapshot"]
