"""Mini README: Crop-planning calendar.

``grid`` holds the pure month-grid builder; ``planner`` wraps it with the
displayed-month state, the add-event form and persisted events.
"""

from .grid import CalendarCell, build_month_grid, month_label, shift_month
from .planner import EMPTY_EVENTS_MESSAGE, CropCalendar, CropEvent, EventListEntry

__all__ = [
    "CalendarCell",
    "CropCalendar",
    "CropEvent",
    "EMPTY_EVENTS_MESSAGE",
    "EventListEntry",
    "build_month_grid",
    "month_label",
    "shift_month",
]
