# huntmate/config.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, TypeVar

from dotenv import load_dotenv

from .errors import ConfigError

T = TypeVar("T")

NOMINATIM = "https://nominatim.openstreetmap.org/search"
OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
# demo-friendly free endpoint
OPENTOPODATA_URL = "https://api.opentopodata.org/v1/test-dataset"


def _read(env: Mapping[str, str], name: str, default: T, cast: Callable[[str], T]) -> T:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ConfigError(name, raw) from None


@dataclass(frozen=True)
class Settings:
    region: str = "North Carolina"
    default_address: str = "High Point, NC"
    default_lat: float = 35.9557
    default_lon: float = -80.0053
    refresh_seconds: float = 60 * 60
    timeout: float = 10.0
    retries: int = 1
    backoff_factor: float = 0.5
    backoff_jitter: float = 0.5
    user_agent: str = "HuntMate/0.1"
    geocode_url: str = NOMINATIM
    weather_url: str = OPEN_METEO_URL
    elevation_url: str = OPENTOPODATA_URL

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        dotenv_path: Optional[Path] = None,
    ) -> "Settings":
        """
        Build settings from HUNTMATE_* environment variables.
        When `env` is not given, an optional .env file is loaded into os.environ first.
        """
        if env is None:
            load_dotenv(dotenv_path=dotenv_path)
            env = os.environ
        d = cls()
        settings = cls(
            region=_read(env, "HUNTMATE_REGION", d.region, str),
            default_address=_read(env, "HUNTMATE_DEFAULT_ADDRESS", d.default_address, str),
            default_lat=_read(env, "HUNTMATE_DEFAULT_LAT", d.default_lat, float),
            default_lon=_read(env, "HUNTMATE_DEFAULT_LON", d.default_lon, float),
            refresh_seconds=_read(env, "HUNTMATE_REFRESH_SECONDS", d.refresh_seconds, float),
            timeout=_read(env, "HUNTMATE_HTTP_TIMEOUT", d.timeout, float),
            retries=_read(env, "HUNTMATE_HTTP_RETRIES", d.retries, int),
            backoff_factor=_read(env, "HUNTMATE_HTTP_BACKOFF", d.backoff_factor, float),
            backoff_jitter=_read(env, "HUNTMATE_HTTP_JITTER", d.backoff_jitter, float),
            user_agent=_read(env, "HUNTMATE_USER_AGENT", d.user_agent, str),
            geocode_url=_read(env, "HUNTMATE_GEOCODE_URL", d.geocode_url, str),
            weather_url=_read(env, "HUNTMATE_WEATHER_URL", d.weather_url, str),
            elevation_url=_read(env, "HUNTMATE_ELEVATION_URL", d.elevation_url, str),
        )
        if settings.refresh_seconds <= 0:
            raise ConfigError("HUNTMATE_REFRESH_SECONDS", str(settings.refresh_seconds))
        if settings.retries < 0:
            raise ConfigError("HUNTMATE_HTTP_RETRIES", str(settings.retries))
        return settings
