"""Mini README: Financial ledger for the farm record-keeping page.

Exposes the append-only ledger that records inflows ("entrada") and
outflows ("saida") and renders them as filterable table rows.
"""

from .ledger import ALL_MOVEMENTS, FinancialLedger, FinancialMovement, MovementKind

__all__ = ["ALL_MOVEMENTS", "FinancialLedger", "FinancialMovement", "MovementKind"]
