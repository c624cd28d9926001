"""Mini README: Outcome type returned by every mutating operation.

Structure:
    * OperationResult - accepted/rejected flag, optional reason and payload.

Form submissions that fail presence checks used to be silent no-ops. The
result object keeps that behaviour for the page (nothing is shown) while
letting callers and tests see exactly why a mutation was refused.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of a state mutation."""

    accepted: bool
    reason: Optional[str] = None
    value: Any = None

    @classmethod
    def accept(cls, value: Any = None) -> "OperationResult":
        return cls(accepted=True, value=value)

    @classmethod
    def reject(cls, reason: str) -> "OperationResult":
        return cls(accepted=False, reason=reason)

    def __bool__(self) -> bool:
        return self.accepted
