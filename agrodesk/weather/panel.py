"""Mini README: Weather panel view state.

Structure:
    * WeatherPanel - result, alert and error regions driven by lookups.

A lookup with a blank city does nothing. Any other lookup first clears all
three regions and then fills either the result (plus the alert banner when
conditions are adverse) or the error text. Nothing else is reported.
"""

from __future__ import annotations

from typing import Optional

from ..logging_utils import get_logger
from ..utils import OperationResult, clean_field
from .client import ADVERSE_WEATHER_MESSAGE, WeatherClient, WeatherLookupError, WeatherSnapshot

LOGGER = get_logger(__name__)


class WeatherPanel:
    """Hold what the weather tab currently shows."""

    def __init__(self, client: WeatherClient) -> None:
        self._client = client
        self.city: str = ""
        self.result: Optional[WeatherSnapshot] = None
        self.alert: Optional[str] = None
        self.error: Optional[str] = None

    def clear(self) -> None:
        self.result = None
        self.alert = None
        self.error = None

    def lookup(self, city: Optional[str]) -> OperationResult:
        name = clean_field(city)
        if not name:
            return OperationResult.reject("City name is empty")

        self.city = name
        self.clear()
        try:
            snapshot = self._client.fetch(name)
        except WeatherLookupError as error:
            self.error = str(error)
            return OperationResult.reject(self.error)

        self.result = snapshot
        if snapshot.adverse:
            self.alert = ADVERSE_WEATHER_MESSAGE
            LOGGER.info("Adverse weather (%s) reported for %s", snapshot.main_category, snapshot.location)
        return OperationResult.accept(snapshot)
