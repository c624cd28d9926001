"""Mini README: Persistence for Agrodesk.

Every feature package owns one list stored under a fixed key in a shared
``LocalStore``. The store mirrors browser local storage semantics: string
values, whole-value overwrites, and no schema versioning.
"""

from .local_store import (
    CROP_EVENTS_KEY,
    FINANCIAL_MOVEMENTS_KEY,
    GRAIN_ITEMS_KEY,
    LocalStore,
)

__all__ = [
    "CROP_EVENTS_KEY",
    "FINANCIAL_MOVEMENTS_KEY",
    "GRAIN_ITEMS_KEY",
    "LocalStore",
]
