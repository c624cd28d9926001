"""Mini README: Tab shell toggling the active dashboard panel.

Structure:
    * Tab - identifier plus button label.
    * DEFAULT_TABS - the four panels of the farm page.
    * TabShell - keeps exactly one tab (and its panel) marked active.

The web layer builds a fresh shell per request from the ``tab`` query
parameter, so a reload without it returns to the first tab.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Tab:
    tab_id: str
    label: str


DEFAULT_TABS: Tuple[Tab, ...] = (
    Tab("financial", "Financeiro"),
    Tab("grains", "Grãos"),
    Tab("calendar", "Calendário"),
    Tab("weather", "Clima"),
)


class TabShell:
    """Exactly one active tab at a time."""

    def __init__(self, tabs: Iterable[Tab] = DEFAULT_TABS, active: Optional[str] = None) -> None:
        self._tabs: List[Tab] = list(tabs)
        if not self._tabs:
            raise ValueError("A tab shell needs at least one tab")
        self._active: Dict[str, bool] = {tab.tab_id: False for tab in self._tabs}
        self.activate(active or self._tabs[0].tab_id)

    def __contains__(self, tab_id: object) -> bool:
        return tab_id in self._active

    def __iter__(self) -> Iterator[Tab]:
        return iter(self._tabs)

    @property
    def active(self) -> str:
        return next(tab_id for tab_id, is_active in self._active.items() if is_active)

    def is_active(self, tab_id: str) -> bool:
        return self._active[tab_id]

    def activate(self, tab_id: str) -> None:
        """Clear every active marker, then mark ``tab_id`` and its panel."""

        if tab_id not in self._active:
            raise KeyError(f"Unknown tab '{tab_id}'")
        for key in self._active:
            self._active[key] = False
        self._active[tab_id] = True

    def panels(self) -> List[Tuple[Tab, bool]]:
        return [(tab, self._active[tab.tab_id]) for tab in self._tabs]
