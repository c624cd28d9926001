"""Mini README: Grain inventory tracking with reorder thresholds."""

from .tracker import (
    EMPTY_INVENTORY_MESSAGE,
    GrainItem,
    InventoryRow,
    InventoryTracker,
    StockStatus,
)

__all__ = [
    "EMPTY_INVENTORY_MESSAGE",
    "GrainItem",
    "InventoryRow",
    "InventoryTracker",
    "StockStatus",
]
