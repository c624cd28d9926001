"""Mini README: Core package initializer for Agrodesk.

Agrodesk is a small farm record-keeping page: a financial ledger, a grain
inventory, a crop-planning calendar and a weather lookup share one tabbed
dashboard and one local key-value store. This module only exposes the
logging factory so feature packages stay free of import cycles.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
