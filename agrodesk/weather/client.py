"""Mini README: Weather lookup against the OpenWeatherMap current-weather API.

Structure:
    * ALERT_TRIGGERS / ADVERSE_WEATHER_MESSAGE - adverse-condition rule.
    * WeatherLookupError - any failure surfaced to the page as plain text.
    * WeatherSnapshot - display-ready values derived from one response.
    * WeatherClient - issues exactly one GET per lookup, no retry or cache.

Every non-success status is reported as "city not found", whatever the
provider actually answered. Requests use metric units and Portuguese
descriptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import requests

from ..configuration import AgrodeskSettings
from ..logging_utils import get_logger
from ..utils import capitalize_first

LOGGER = get_logger(__name__)

ALERT_TRIGGERS = ("storm", "thunderstorm", "extreme", "tornado", "hurricane", "snow")
ADVERSE_WEATHER_MESSAGE = "Alerta climático: condições meteorológicas adversas detectadas!"
CITY_NOT_FOUND_MESSAGE = "Cidade não encontrada"
INVALID_RESPONSE_MESSAGE = "Resposta inválida do serviço de clima"
CONNECTION_FAILED_MESSAGE = "Falha de conexão com o serviço de clima"


class WeatherLookupError(RuntimeError):
    """Raised when a lookup cannot produce a snapshot."""


def is_adverse(main_category: str, triggers: Iterable[str] = ALERT_TRIGGERS) -> bool:
    """True when the case-folded category contains any trigger substring."""

    category = main_category.lower()
    return any(trigger in category for trigger in triggers)


@dataclass(frozen=True, slots=True)
class WeatherSnapshot:
    """Current conditions for one city; never persisted."""

    city: str
    country: str
    description: str
    temperature: float
    humidity: int
    wind_speed: float
    main_category: str

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "WeatherSnapshot":
        """Build a snapshot from the provider's JSON body."""

        try:
            condition = payload["weather"][0]
            return cls(
                city=str(payload["name"]),
                country=str(payload["sys"]["country"]),
                description=capitalize_first(str(condition["description"])),
                temperature=float(payload["main"]["temp"]),
                humidity=int(round(float(payload["main"]["humidity"]))),
                wind_speed=float(payload["wind"]["speed"]),
                main_category=str(condition["main"]),
            )
        except (KeyError, IndexError, TypeError, ValueError) as error:
            raise WeatherLookupError(INVALID_RESPONSE_MESSAGE) from error

    @property
    def location(self) -> str:
        return f"{self.city}, {self.country}"

    @property
    def temperature_text(self) -> str:
        return f"{self.temperature:.1f}"

    @property
    def wind_text(self) -> str:
        return f"{self.wind_speed:.1f}"

    @property
    def adverse(self) -> bool:
        return is_adverse(self.main_category)

    def as_dict(self) -> Dict[str, object]:
        return {
            "location": self.location,
            "description": self.description,
            "temperature": self.temperature_text,
            "humidity": self.humidity,
            "wind_speed": self.wind_text,
            "adverse": self.adverse,
        }


class WeatherClient:
    """Thin ``requests`` wrapper for the current-weather endpoint."""

    def __init__(
        self,
        api_key: Optional[str],
        *,
        endpoint: str = "https://api.openweathermap.org/data/2.5/weather",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not api_key:
            LOGGER.warning("No OpenWeatherMap key configured; lookups will be rejected upstream")
        self._api_key = api_key or ""
        self._endpoint = endpoint
        self._timeout = timeout
        self._session = session

    @classmethod
    def from_settings(cls, settings: AgrodeskSettings) -> "WeatherClient":
        return cls(
            settings.openweather_api_key,
            endpoint=settings.weather_endpoint,
            timeout=settings.weather_timeout_seconds,
        )

    def fetch(self, city: str) -> WeatherSnapshot:
        """Request current conditions for ``city``."""

        params = {"q": city, "appid": self._api_key, "units": "metric", "lang": "pt_br"}
        LOGGER.info("Requesting weather for %s", city)
        try:
            response = (self._session or requests).get(
                self._endpoint, params=params, timeout=self._timeout
            )
        except requests.RequestException as error:
            # The exception text embeds the request URL, api key included.
            LOGGER.warning("Weather request for %s failed: %s", city, error.__class__.__name__)
            raise WeatherLookupError(CONNECTION_FAILED_MESSAGE) from error

        if not 200 <= response.status_code < 300:
            LOGGER.info("Weather provider answered %s for %s", response.status_code, city)
            raise WeatherLookupError(CITY_NOT_FOUND_MESSAGE)

        try:
            payload = response.json()
        except ValueError as error:
            raise WeatherLookupError(INVALID_RESPONSE_MESSAGE) from error
        if not isinstance(payload, dict):
            raise WeatherLookupError(INVALID_RESPONSE_MESSAGE)
        return WeatherSnapshot.from_payload(payload)
