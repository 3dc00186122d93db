# huntmate/weather_data.py
import logging
import math
from typing import Any, Dict, Optional

import requests

from .config import Settings
from .errors import MalformedResponseError, UpstreamError
from .models import Coordinate, WeatherSnapshot

log = logging.getLogger(__name__)

# Only current_weather feeds the heuristics; hourly is requested for later use.
HOURLY_FIELDS = "pressure_msl,temperature_2m,windspeed_10m,winddirection_10m"


def _safe_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    # json accepts NaN and Infinity
    return f if math.isfinite(f) else None


def _safe_int(value: Any) -> Optional[int]:
    f = _safe_float(value)
    return None if f is None else int(f)


class EnvironmentDataClient:
    """Current weather (Open-Meteo) and point elevation (OpenTopoData). Thread-safe, no state."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or Settings()
        self.session = session or requests.Session()

    def _get_json(self, source: str, url: str, params: Dict[str, Any]) -> Any:
        log.debug("%s request %s %s", source, url, params)
        try:
            r = self.session.get(url, params=params, timeout=self.settings.timeout)
            if not r.ok:
                log.error("%s returned HTTP %s: %s", source, r.status_code, r.text[:500])
            r.raise_for_status()
        except requests.RequestException as exc:
            raise UpstreamError(source, exc) from exc
        try:
            return r.json()
        except ValueError as exc:
            raise MalformedResponseError(source, exc) from exc

    def fetch_weather(self, c: Coordinate) -> WeatherSnapshot:
        params = {
            "latitude": c.lat,
            "longitude": c.lon,
            "current_weather": "true",
            "hourly": HOURLY_FIELDS,
        }
        data = self._get_json("weather", self.settings.weather_url, params)
        if not isinstance(data, dict):
            raise MalformedResponseError("weather", TypeError(f"expected object, got {type(data).__name__}"))
        current = data.get("current_weather")
        if not isinstance(current, dict):
            current = {}
        return WeatherSnapshot(
            temperature_c=_safe_float(current.get("temperature")),
            wind_speed_kmh=_safe_float(current.get("windspeed")),
            wind_direction_deg=_safe_float(current.get("winddirection")),
            weather_code=_safe_int(current.get("weathercode")),
        )

    def fetch_elevation(self, c: Coordinate) -> Optional[float]:
        """
        Elevation in meters, or None when the dataset has nothing for this point.
        An empty answer is not an error.
        """
        data = self._get_json("elevation", self.settings.elevation_url, {"locations": f"{c.lat},{c.lon}"})
        if not isinstance(data, dict):
            raise MalformedResponseError("elevation", TypeError(f"expected object, got {type(data).__name__}"))
        results = data.get("results")
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            return None
        return _safe_float(results[0].get("elevation"))
