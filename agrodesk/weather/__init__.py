"""Mini README: Weather lookup for the farm page.

``client`` talks to OpenWeatherMap and derives display values; ``panel``
keeps the result, alert and error regions shown on the weather tab.
"""

from .client import (
    ADVERSE_WEATHER_MESSAGE,
    ALERT_TRIGGERS,
    CITY_NOT_FOUND_MESSAGE,
    CONNECTION_FAILED_MESSAGE,
    WeatherClient,
    WeatherLookupError,
    WeatherSnapshot,
    is_adverse,
)
from .panel import WeatherPanel

__all__ = [
    "ADVERSE_WEATHER_MESSAGE",
    "ALERT_TRIGGERS",
    "CITY_NOT_FOUND_MESSAGE",
    "CONNECTION_FAILED_MESSAGE",
    "WeatherClient",
    "WeatherLookupError",
    "WeatherPanel",
    "WeatherSnapshot",
    "is_adverse",
]
