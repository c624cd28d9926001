"""Mini README: Centralised configuration for Agrodesk.

Structure:
    * AgrodeskSettings - Pydantic settings model read from ``AGRODESK_*``
      environment variables or a ``.env`` file.
    * get_settings - cached accessor used by the web layer and launcher.

The weather API key lives here rather than in code so the page can be run
without editing sources. Leaving it unset still works: the provider rejects
the request and the lookup reports the usual "city not found" message.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class AgrodeskSettings(BaseSettings):
    """Runtime configuration for the Agrodesk dashboard."""

    environment: str = Field(
        "development",
        description="Environment label controlling reload and logging verbosity.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the local key-value store file.",
    )
    storage_filename: str = Field(
        "local_storage.json",
        description="File name of the JSON key-value store inside the data directory.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the dashboard to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the dashboard listens on.",
        ge=1,
        le=65535,
    )
    openweather_api_key: Optional[str] = Field(
        None,
        description="OpenWeatherMap access key sent as the ``appid`` parameter.",
    )
    weather_endpoint: str = Field(
        "https://api.openweathermap.org/data/2.5/weather",
        description="Current-weather endpoint queried by city name.",
    )
    weather_timeout_seconds: float = Field(
        10.0,
        description="Timeout applied to the single outbound weather request.",
        gt=0,
    )

    class Config:
        env_prefix = "AGRODESK_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories so ``~/farm`` style values work."""

        return Path(value).expanduser().resolve()

    @property
    def storage_path(self) -> Path:
        """Full path of the JSON key-value store."""

        return self.data_directory / self.storage_filename


@lru_cache()
def get_settings() -> AgrodeskSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return AgrodeskSettings()
