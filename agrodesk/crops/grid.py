"""Mini README: Month grid builder for the crop-planning calendar.

Structure:
    * CalendarCell - one grid cell (day number plus flags).
    * build_month_grid - fixed 6 x 7 grid for a year/month, Sunday first.
    * shift_month - add or subtract months with year carry.
    * month_label - Portuguese "maio de 2024" style heading.

The grid always has 42 cells. Row 0 begins with the trailing days of the
previous month; once the month's days run out the next month's days follow,
numbered 1, 2, 3... without restarting at row boundaries.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Tuple

GRID_ROWS = 6
GRID_COLUMNS = 7

MONTH_NAMES_PT = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)


@dataclass(frozen=True, slots=True)
class CalendarCell:
    """Grid cell; only in-month cells carry an ISO date and can be clicked."""

    day: int
    in_month: bool
    iso_date: Optional[str] = None
    is_today: bool = False
    has_event: bool = False

    @property
    def clickable(self) -> bool:
        return self.in_month

    @property
    def css_classes(self) -> str:
        classes = []
        if not self.in_month:
            classes.append("inactive")
        if self.is_today:
            classes.append("today")
        if self.has_event:
            classes.append("has-event")
        return " ".join(classes)


def first_weekday_sunday_based(year: int, month: int) -> int:
    """Column of the 1st of the month with Sunday as column 0."""

    return (date(year, month, 1).weekday() + 1) % 7


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Return ``(year, month)`` moved by ``delta`` months."""

    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_label(year: int, month: int) -> str:
    return f"{MONTH_NAMES_PT[month - 1]} de {year}"


def build_month_grid(
    year: int,
    month: int,
    today: date,
    event_dates: Iterable[str] = (),
) -> List[List[CalendarCell]]:
    """Build the 6 x 7 grid of cells for ``year``/``month``."""

    start_column = first_weekday_sunday_based(year, month)
    days_in_month = calendar.monthrange(year, month)[1]
    previous_year, previous_month = shift_month(year, month, -1)
    previous_last_day = calendar.monthrange(previous_year, previous_month)[1]
    today_iso = today.isoformat()
    events = set(event_dates)

    rows: List[List[CalendarCell]] = []
    day_count = 1
    for row in range(GRID_ROWS):
        cells: List[CalendarCell] = []
        for column in range(GRID_COLUMNS):
            if row == 0 and column < start_column:
                cells.append(
                    CalendarCell(
                        day=previous_last_day - start_column + column + 1,
                        in_month=False,
                    )
                )
            elif day_count > days_in_month:
                # Counter keeps running so next-month days never restart per row.
                cells.append(CalendarCell(day=day_count - days_in_month, in_month=False))
                day_count += 1
            else:
                iso_date = date(year, month, day_count).isoformat()
                cells.append(
                    CalendarCell(
                        day=day_count,
                        in_month=True,
                        iso_date=iso_date,
                        is_today=iso_date == today_iso,
                        has_event=iso_date in events,
                    )
                )
                day_count += 1
        rows.append(cells)
    return rows
