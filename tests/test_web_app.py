"""Mini README: End-to-end tests for the FastAPI farm page.

Each test builds an application on a temporary data directory and drives
it through ``TestClient``: form posts redirect back to the right tab, the
JSON routes expose what the page renders, and the weather form renders
its result, alert or error in place.
"""

from __future__ import annotations

import logging
from datetime import date

import pytest
from fastapi.testclient import TestClient

from agrodesk.configuration import AgrodeskSettings
from agrodesk.interface import create_application
from agrodesk.storage import LocalStore
from agrodesk.weather import CITY_NOT_FOUND_MESSAGE, WeatherLookupError, WeatherSnapshot


class _FakeWeatherClient:
    def __init__(self) -> None:
        self.cities = []

    def fetch(self, city: str) -> WeatherSnapshot:
        self.cities.append(city)
        if city == "Atlantis":
            raise WeatherLookupError(CITY_NOT_FOUND_MESSAGE)
        return WeatherSnapshot(
            city=city,
            country="BR",
            description="Neve",
            temperature=-1.26,
            humidity=90,
            wind_speed=4.0,
            main_category="Snow",
        )


@pytest.fixture()
def settings(tmp_path) -> AgrodeskSettings:
    return AgrodeskSettings(data_directory=tmp_path)


@pytest.fixture()
def client(settings) -> TestClient:
    app = create_application(
        settings,
        weather_client=_FakeWeatherClient(),
        today_provider=lambda: date(2024, 5, 15),
    )
    return TestClient(app)


def test_dashboard_renders_every_panel(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    for section in ('id="financial"', 'id="grains"', 'id="calendar"', 'id="weather"'):
        assert section in response.text
    assert "Nenhum insumo cadastrado." in response.text
    assert "maio de 2024" in response.text


def test_financial_form_adds_row_and_persists(client, settings) -> None:
    response = client.post(
        "/financial",
        data={
            "kind": "entrada",
            "movement_date": "2024-05-01",
            "description": "Sale of corn",
            "category": "grains",
            "value": "1500",
        },
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert response.headers["location"].startswith("/?tab=financial")

    rows = client.get("/api/financial").json()["rows"]
    assert rows == [["Entrada", "2024-05-01", "Sale of corn", "Grains", "1500"]]
    assert LocalStore(settings.storage_path).get_item("financialMovements") is not None

    client.post("/financial", data={"kind": "saida", "description": "Diesel"})
    assert len(client.get("/api/financial").json()["rows"]) == 1
    assert client.get("/api/financial", params={"filter": "saida"}).json()["rows"] == []
    assert client.get("/api/financial", params={"filter": "bogus"}).status_code == 400


def test_grain_upsert_and_remove(client) -> None:
    client.post("/grains", data={"name": "Wheat", "quantity": "50", "threshold": "100"})
    assert client.get("/api/grains").json()["rows"][0]["status"] == "ALERTA"

    client.post("/grains", data={"name": "wheat", "quantity": "150", "threshold": "100"})
    rows = client.get("/api/grains").json()["rows"]
    assert len(rows) == 1
    assert rows[0]["quantity"] == 150 and rows[0]["status"] == "OK"

    client.post("/grains/7/delete")
    assert len(client.get("/api/grains").json()["rows"]) == 1
    client.post("/grains/0/delete")
    assert client.get("/api/grains").json()["rows"] == []


def test_calendar_flow(client) -> None:
    state = client.get("/api/calendar").json()
    assert state["month"] == "maio de 2024"
    assert sum(len(row) for row in state["grid"]) == 42

    client.post("/calendar/select", data={"event_date": "2024-05-20"})
    assert client.get("/api/calendar").json()["selected_date"] == "2024-05-20"

    client.post("/calendar/next")
    client.post(
        "/calendar/events",
        data={"event_date": "2024-05-20", "title": "Plantio", "event_type": "plantio"},
    )
    state = client.get("/api/calendar").json()
    assert state["month"] == "junho de 2024"
    assert state["selected_date"] is None
    assert state["events"] == ["2024-05-20 - Plantio (Plantio)"]

    client.post("/calendar/prev")
    cells = [cell for row in client.get("/api/calendar").json()["grid"] for cell in row]
    assert [cell["date"] for cell in cells if cell["has_event"]] == ["2024-05-20"]
    assert [cell["date"] for cell in cells if cell["today"]] == ["2024-05-15"]


def test_weather_lookup_renders_alert_and_error(client) -> None:
    response = client.post("/weather", data={"city": "Curitiba"})
    assert response.status_code == 200
    assert "Curitiba, BR" in response.text
    assert "-1.3" in response.text
    assert "Alerta climático" in response.text

    response = client.post("/weather", data={"city": "Atlantis"})
    assert CITY_NOT_FOUND_MESSAGE in response.text
    assert 'id="weather-result"' not in response.text
    assert 'id="weather-alert"' not in response.text


def test_tab_selection_is_not_kept_across_reloads(client) -> None:
    """A plain reload shows the first tab again, whatever was opened before."""

    assert 'id="calendar" class="tab-content active"' in client.get("/?tab=calendar").text

    reloaded = client.get("/").text
    assert 'id="financial" class="tab-content active"' in reloaded
    assert 'id="calendar" class="tab-content active"' not in reloaded

    client.post("/weather", data={"city": "Curitiba"})
    assert 'id="financial" class="tab-content active"' in client.get("/?tab=unknown").text


def test_weather_state_route(client) -> None:
    assert client.get("/api/weather").json()["result"] is None

    client.post("/weather", data={"city": "Curitiba"})
    state = client.get("/api/weather").json()
    assert state["result"]["location"] == "Curitiba, BR"
    assert state["result"]["temperature"] == "-1.3"
    assert state["result"]["adverse"] is True
    assert state["alert"] is not None and state["error"] is None


@pytest.mark.parametrize("environment, level", [("development", logging.DEBUG), ("production", logging.INFO)])
def test_application_applies_environment_log_level(tmp_path, environment, level) -> None:
    """The factory sets the level itself so reload workers honour it too."""

    create_application(
        AgrodeskSettings(data_directory=tmp_path, environment=environment),
        weather_client=_FakeWeatherClient(),
    )
    assert logging.getLogger().level == level
