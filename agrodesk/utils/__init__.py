"""Mini README: Utility helpers shared across Agrodesk feature packages.

Exports the ``OperationResult`` outcome type and the text helpers used when
validating form fields and rendering table cells.
"""

from .results import OperationResult
from .text import capitalize_first, clean_field

__all__ = ["OperationResult", "capitalize_first", "clean_field"]
