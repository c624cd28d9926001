"""Mini README: Tests for the weather client and panel.

A stub session stands in for ``requests.Session`` so no network access is
needed. The tests cover request parameters, display formatting, the
adverse-weather banner and the uniform "city not found" failure.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
import requests

from agrodesk.weather import (
    ADVERSE_WEATHER_MESSAGE,
    CITY_NOT_FOUND_MESSAGE,
    CONNECTION_FAILED_MESSAGE,
    WeatherClient,
    WeatherLookupError,
    WeatherPanel,
    is_adverse,
)


def _payload(main: str = "Clouds", description: str = "nublado") -> Dict[str, Any]:
    return {
        "name": "Londrina",
        "sys": {"country": "BR"},
        "weather": [{"description": description, "main": main}],
        "main": {"temp": 23.456, "humidity": 81},
        "wind": {"speed": 3.04},
    }


class _StubResponse:
    def __init__(self, status_code: int, body: Any) -> None:
        self.status_code = status_code
        self._body = body

    def json(self) -> Any:
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class _StubSession:
    def __init__(self, response: Optional[_StubResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params: Dict[str, str], timeout: float) -> _StubResponse:
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _panel(session: _StubSession) -> WeatherPanel:
    return WeatherPanel(WeatherClient("secret", endpoint="https://weather.test", timeout=2.5, session=session))


def test_fetch_sends_expected_parameters() -> None:
    session = _StubSession(_StubResponse(200, _payload()))
    client = WeatherClient("secret", endpoint="https://weather.test", timeout=2.5, session=session)

    snapshot = client.fetch("Londrina")

    assert session.calls == [
        {
            "url": "https://weather.test",
            "params": {"q": "Londrina", "appid": "secret", "units": "metric", "lang": "pt_br"},
            "timeout": 2.5,
        }
    ]
    assert snapshot.location == "Londrina, BR"
    assert snapshot.description == "Nublado"
    assert snapshot.temperature_text == "23.5"
    assert snapshot.humidity == 81
    assert snapshot.wind_text == "3.0"
    assert not snapshot.adverse


def test_snow_shows_alert_banner() -> None:
    panel = _panel(_StubSession(_StubResponse(200, _payload(main="Snow", description="neve fraca"))))

    result = panel.lookup("  Londrina ")

    assert result.accepted
    assert panel.result is not None
    assert panel.alert == ADVERSE_WEATHER_MESSAGE
    assert panel.error is None


@pytest.mark.parametrize("status", [401, 404, 500])
def test_error_status_reports_city_not_found(status) -> None:
    """Every non-success status maps to the same message and hides the result."""

    session = _StubSession(_StubResponse(200, _payload(main="Thunderstorm")))
    panel = _panel(session)
    panel.lookup("Londrina")
    assert panel.alert is not None

    session.response = _StubResponse(status, {"cod": str(status), "message": "city not found"})
    result = panel.lookup("Atlantis")

    assert not result.accepted
    assert panel.error == CITY_NOT_FOUND_MESSAGE
    assert panel.result is None
    assert panel.alert is None


def test_network_failure_hides_request_url(caplog) -> None:
    """Transport errors carry the full URL; neither the page nor the log may show the key."""

    error = requests.ConnectionError(
        "HTTPConnectionPool(host='127.0.0.1', port=1): Max retries exceeded with url: "
        "/weather?q=Londrina&appid=secret&units=metric&lang=pt_br"
    )
    panel = _panel(_StubSession(error=error))

    with caplog.at_level("DEBUG"):
        panel.lookup("Londrina")

    assert panel.error == CONNECTION_FAILED_MESSAGE
    assert panel.result is None
    assert "secret" not in caplog.text


@pytest.mark.parametrize("status", [301, 302, 304])
def test_redirect_status_is_not_success(status) -> None:
    panel = _panel(_StubSession(_StubResponse(status, _payload())))

    panel.lookup("Londrina")

    assert panel.error == CITY_NOT_FOUND_MESSAGE
    assert panel.result is None


def test_without_session_uses_requests_get(monkeypatch) -> None:
    """The default client issues a plain ``requests.get`` call."""

    session = _StubSession(_StubResponse(200, _payload()))
    monkeypatch.setattr(requests, "get", session.get)

    snapshot = WeatherClient("secret", endpoint="https://weather.test").fetch("Londrina")

    assert snapshot.location == "Londrina, BR"
    assert session.calls[0]["params"]["q"] == "Londrina"


def test_malformed_payload_is_reported() -> None:
    client = WeatherClient("secret", session=_StubSession(_StubResponse(200, {"name": "X"})))

    with pytest.raises(WeatherLookupError):
        client.fetch("X")


def test_blank_city_is_a_no_op() -> None:
    session = _StubSession(_StubResponse(200, _payload()))
    panel = _panel(session)
    panel.lookup("Londrina")

    result = panel.lookup("   ")

    assert not result.accepted
    assert panel.result is not None
    assert len(session.calls) == 1


@pytest.mark.parametrize(
    "category, expected",
    [
        ("Snow", True),
        ("Thunderstorm", True),
        ("Extreme", True),
        ("Tornado", True),
        ("Rain", False),
        ("Clear", False),
    ],
)
def test_is_adverse(category, expected) -> None:
    assert is_adverse(category) is expected
