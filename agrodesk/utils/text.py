"""Mini README: Small text helpers shared by the table renderers."""

from __future__ import annotations

from typing import Optional


def capitalize_first(value: str) -> str:
    """Upper-case the first character only, leaving the rest untouched.

    ``str.capitalize`` lower-cases the remainder, which would turn a
    description such as ``"chuva FORTE"`` into ``"Chuva forte"``.
    """

    return value[:1].upper() + value[1:]


def clean_field(value: Optional[object]) -> str:
    """Return a trimmed string for a submitted form field (``None`` -> "")."""

    if value is None:
        return ""
    return str(value).strip()
