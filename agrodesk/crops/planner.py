"""Mini README: Crop-planning calendar state and event list.

Structure:
    * CropEvent - dataclass for a planned activity on an ISO date.
    * EventListEntry - rendered line of the event list.
    * CropCalendar - displayed month, add-event form state and event CRUD.

The calendar starts on the current month. Clicking an in-month day opens
the add-event form pre-filled with that date; navigating months leaves the
form untouched. Events have no delete path.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, List, Optional

from ..logging_utils import get_logger
from ..storage import CROP_EVENTS_KEY, LocalStore
from ..utils import OperationResult, capitalize_first, clean_field
from .grid import CalendarCell, build_month_grid, month_label, shift_month

LOGGER = get_logger(__name__)

EMPTY_EVENTS_MESSAGE = "Nenhum evento cadastrado."


@dataclass(slots=True)
class CropEvent:
    """Planned crop activity (planting, harvest, treatment...)."""

    date: str
    title: str
    type: str

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "CropEvent":
        return cls(
            date=str(payload["date"]),
            title=str(payload["title"]),
            type=str(payload["type"]),
        )

    def as_dict(self) -> Dict[str, str]:
        return {"date": self.date, "title": self.title, "type": self.type}


@dataclass(frozen=True, slots=True)
class EventListEntry:
    """Line shown in the event list; ``css_class`` is the raw event type."""

    text: str
    css_class: str


class CropCalendar:
    """Own the displayed month, the add-event form and the stored events."""

    def __init__(
        self,
        store: LocalStore,
        *,
        today_provider: Callable[[], date] = date.today,
    ) -> None:
        self._store = store
        self._today_provider = today_provider
        today = today_provider()
        self.year = today.year
        self.month = today.month
        self.selected_date: Optional[str] = None
        self._events: List[CropEvent] = store.load_list(CROP_EVENTS_KEY, CropEvent.from_dict)
        LOGGER.debug("Crop calendar loaded with %s events", len(self._events))

    def __len__(self) -> int:
        return len(self._events)

    @property
    def form_open(self) -> bool:
        return self.selected_date is not None

    def _save(self) -> None:
        self._store.save_list(CROP_EVENTS_KEY, (event.as_dict() for event in self._events))

    def prev_month(self) -> None:
        self.year, self.month = shift_month(self.year, self.month, -1)

    def next_month(self) -> None:
        self.year, self.month = shift_month(self.year, self.month, 1)

    def month_label(self) -> str:
        return month_label(self.year, self.month)

    def render_month_grid(self) -> List[List[CalendarCell]]:
        """Grid for the displayed month with today and event markers."""

        return build_month_grid(
            self.year,
            self.month,
            self._today_provider(),
            (event.date for event in self._events),
        )

    def select_date(self, iso_date: Optional[str]) -> OperationResult:
        """Open the add-event form for a clickable (in-month) day."""

        value = clean_field(iso_date)
        clickable = {
            cell.iso_date
            for row in self.render_month_grid()
            for cell in row
            if cell.clickable
        }
        if value not in clickable:
            return OperationResult.reject(f"{value or 'empty date'} is not in the displayed month")
        self.selected_date = value
        return OperationResult.accept(value)

    def close_event_form(self) -> None:
        self.selected_date = None

    def add_event(
        self,
        event_date: Optional[str],
        title: Optional[str],
        event_type: Optional[str],
    ) -> OperationResult:
        """Append an event when date, title and type are all present."""

        fields = {
            "date": clean_field(event_date),
            "title": clean_field(title),
            "type": clean_field(event_type),
        }
        missing = [name for name, content in fields.items() if not content]
        if missing:
            LOGGER.debug("Rejected crop event with missing fields: %s", ", ".join(missing))
            return OperationResult.reject(f"Missing fields: {', '.join(missing)}")

        event = CropEvent.from_dict(fields)
        self._events.append(event)
        self._save()
        self.close_event_form()
        LOGGER.info("Scheduled %s '%s' on %s", event.type, event.title, event.date)
        return OperationResult.accept(event)

    def render_event_list(self) -> List[EventListEntry]:
        """Events sorted by ISO date text; empty list means show the empty message."""

        ordered = sorted(self._events, key=lambda event: event.date)
        return [
            EventListEntry(
                text=f"{event.date} - {event.title} ({capitalize_first(event.type)})",
                css_class=event.type,
            )
            for event in ordered
        ]

    @property
    def empty_message(self) -> Optional[str]:
        return EMPTY_EVENTS_MESSAGE if not self._events else None
