"""Mini README: FastAPI-powered farm record-keeping page.

Structure:
    * create_application - application factory wiring state objects, the
      dashboard template, form routes and JSON read routes.

All four feature modules share one ``LocalStore``. Form submissions follow
post/redirect/get so a browser refresh never re-submits; rejected forms
simply redirect back without a message. The weather form renders the page
directly because its result is not persisted.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Callable, Optional
from urllib.parse import urlencode

from fastapi import FastAPI, Form, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import AgrodeskSettings, get_settings
from ..crops import CropCalendar
from ..finance import ALL_MOVEMENTS, FinancialLedger
from ..inventory import InventoryTracker
from ..logging_utils import apply_environment_level, get_logger
from ..storage import LocalStore
from ..weather import WeatherClient, WeatherPanel
from .tabs import DEFAULT_TABS, TabShell

LOGGER = get_logger(__name__)

TAB_IDS = frozenset(tab.tab_id for tab in DEFAULT_TABS)

MOVEMENT_FILTERS = (
    (ALL_MOVEMENTS, "Todos"),
    ("entrada", "Entradas"),
    ("saida", "Saídas"),
)
EVENT_TYPES = (
    ("plantio", "Plantio"),
    ("colheita", "Colheita"),
    ("tratamento", "Tratamento"),
    ("outro", "Outro"),
)
MOVEMENT_CATEGORIES = (
    ("graos", "Grãos"),
    ("insumos", "Insumos"),
    ("maquinario", "Maquinário"),
    ("mao-de-obra", "Mão de obra"),
    ("outros", "Outros"),
)


def create_application(
    settings: Optional[AgrodeskSettings] = None,
    *,
    weather_client: Optional[WeatherClient] = None,
    today_provider: Callable[[], date] = date.today,
) -> FastAPI:
    """Create the FastAPI application with routes and state objects."""

    settings = settings or get_settings()
    apply_environment_level(settings.environment)
    app = FastAPI(title="Agrodesk", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    store = LocalStore(settings.storage_path)
    ledger = FinancialLedger(store)
    inventory = InventoryTracker(store)
    crop_calendar = CropCalendar(store, today_provider=today_provider)
    weather_panel = WeatherPanel(weather_client or WeatherClient.from_settings(settings))
    LOGGER.info("Agrodesk state loaded from %s", store.path)

    def render_dashboard(request: Request, shell: TabShell, movement_filter: str) -> HTMLResponse:
        try:
            movement_rows = ledger.render_rows(movement_filter)
        except ValueError:
            LOGGER.debug("Unknown movement filter %r; showing all", movement_filter)
            movement_filter = ALL_MOVEMENTS
            movement_rows = ledger.render_rows(movement_filter)
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "shell": shell,
                "movement_rows": movement_rows,
                "movement_filter": movement_filter,
                "movement_filters": MOVEMENT_FILTERS,
                "movement_categories": MOVEMENT_CATEGORIES,
                "inventory_rows": inventory.render_rows(),
                "inventory_empty": inventory.empty_message,
                "calendar": crop_calendar,
                "calendar_grid": crop_calendar.render_month_grid(),
                "event_entries": crop_calendar.render_event_list(),
                "event_types": EVENT_TYPES,
                "weather": weather_panel,
            },
        )

    def back_to(tab: str, **params: str) -> RedirectResponse:
        query = urlencode({"tab": tab, **params})
        return RedirectResponse(f"/?{query}", status_code=303)

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(
        request: Request,
        tab: Optional[str] = None,
        movement_filter: str = Query(ALL_MOVEMENTS, alias="filter"),
    ) -> HTMLResponse:
        """Render the tabbed page, activating ``tab`` when it is known."""

        shell = TabShell(active=tab if tab in TAB_IDS else None)
        return render_dashboard(request, shell, movement_filter)

    @app.post("/financial")
    async def add_movement(
        kind: Optional[str] = Form(None),
        movement_date: Optional[str] = Form(None),
        description: Optional[str] = Form(None),
        category: Optional[str] = Form(None),
        value: Optional[str] = Form(None),
        current_filter: str = Form(ALL_MOVEMENTS),
    ) -> RedirectResponse:
        """Append a financial movement."""

        ledger.add_movement(kind, movement_date, description, category, value)
        return back_to("financial", filter=current_filter)

    @app.post("/grains")
    async def upsert_grain(
        name: Optional[str] = Form(None),
        quantity: Optional[str] = Form(None),
        threshold: Optional[str] = Form(None),
    ) -> RedirectResponse:
        """Insert or update an inventory item."""

        inventory.upsert(name, quantity, threshold)
        return back_to("grains")

    @app.post("/grains/{position}/delete")
    async def remove_grain(position: int) -> RedirectResponse:
        """Remove the inventory item at ``position``."""

        inventory.remove(position)
        return back_to("grains")

    @app.post("/calendar/prev")
    async def previous_month() -> RedirectResponse:
        crop_calendar.prev_month()
        return back_to("calendar")

    @app.post("/calendar/next")
    async def next_month() -> RedirectResponse:
        crop_calendar.next_month()
        return back_to("calendar")

    @app.post("/calendar/select")
    async def select_day(event_date: Optional[str] = Form(None)) -> RedirectResponse:
        """Open the add-event form for a clicked day."""

        crop_calendar.select_date(event_date)
        return back_to("calendar")

    @app.post("/calendar/cancel")
    async def cancel_event() -> RedirectResponse:
        crop_calendar.close_event_form()
        return back_to("calendar")

    @app.post("/calendar/events")
    async def add_event(
        event_date: Optional[str] = Form(None),
        title: Optional[str] = Form(None),
        event_type: Optional[str] = Form(None),
    ) -> RedirectResponse:
        """Schedule a crop event and close the form."""

        crop_calendar.add_event(event_date, title, event_type)
        return back_to("calendar")

    @app.post("/weather", response_class=HTMLResponse)
    def lookup_weather(request: Request, city: Optional[str] = Form(None)) -> HTMLResponse:
        """Run a weather lookup; sync so the blocking request uses the threadpool."""

        weather_panel.lookup(city)
        return render_dashboard(request, TabShell(active="weather"), ALL_MOVEMENTS)

    @app.get("/api/financial")
    async def financial_rows(movement_filter: str = Query(ALL_MOVEMENTS, alias="filter")) -> JSONResponse:
        """Return rendered ledger rows for the given filter."""

        try:
            rows = ledger.render_rows(movement_filter)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"filter": movement_filter, "rows": rows})

    @app.get("/api/grains")
    async def grain_rows() -> JSONResponse:
        """Return inventory rows with their status."""

        return JSONResponse(
            {
                "rows": [row.as_dict() for row in inventory.render_rows()],
                "empty_message": inventory.empty_message,
            }
        )

    @app.get("/api/calendar")
    async def calendar_state() -> JSONResponse:
        """Return the displayed month grid and the sorted event list."""

        grid = [
            [
                {
                    "day": cell.day,
                    "in_month": cell.in_month,
                    "date": cell.iso_date,
                    "today": cell.is_today,
                    "has_event": cell.has_event,
                }
                for cell in row
            ]
            for row in crop_calendar.render_month_grid()
        ]
        return JSONResponse(
            {
                "month": crop_calendar.month_label(),
                "selected_date": crop_calendar.selected_date,
                "grid": grid,
                "events": [entry.text for entry in crop_calendar.render_event_list()],
                "empty_message": crop_calendar.empty_message,
            }
        )

    @app.get("/api/weather")
    async def weather_state() -> JSONResponse:
        """Return what the weather tab currently shows."""

        return JSONResponse(
            {
                "city": weather_panel.city,
                "result": weather_panel.result.as_dict() if weather_panel.result else None,
                "alert": weather_panel.alert,
                "error": weather_panel.error,
            }
        )

    return app
