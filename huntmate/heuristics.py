# huntmate/heuristics.py
"""
Fixed rule table turning conditions at a point into stand suggestions.

Pure and deterministic: same coordinate, weather and elevation always give
the same pins (in the same order) and the same text.
"""
import math
from typing import List, Optional

from .models import Coordinate, Guidance, Pin, WeatherSnapshot

CLEAR_CODE = 1
DEFAULT_WIND_FROM = 180.0
HIGHLAND_ABOVE = 350

# ~1 km at mid latitudes
D_LAT = 0.01
D_LON = 0.01
WIND_PIN_RADIUS = 0.012

CLEAR_TEXT = "Clear/calm: hunt transition zones, creek edges, and leeward ridges."
OVERCAST_TEXT = "Overcast/light rain: better daytime movement; focus on food edges and saddles."
HEAVY_TEXT = "Heavy precip: deer hold tight; hunt thickets and sheltered hollows."
HIGHLAND_TEXT = "Higher elevation: prioritize south-facing slopes and mast sources."
LOWLAND_TEXT = "Lowlands: focus on creek crossings and brushy edges."
WIND_PIN_NOTE = "Wind-safe access pin"


def bucket_for(code: int) -> str:
    if code < 2:
        return "clear"
    if code <= 45:
        return "overcast"
    return "heavy"


def _bucket_pins(c: Coordinate, bucket: str) -> List[Pin]:
    lat, lon = c.lat, c.lon
    if bucket == "clear":
        return [
            Pin(lat + D_LAT, lon - D_LON, "Creek edge stand (transition)"),
            Pin(lat - D_LAT, lon + D_LON, "Leeward ridge oak flat"),
        ]
    if bucket == "overcast":
        return [
            Pin(lat + D_LAT * 1.5, lon, "Ridge saddle stand"),
            Pin(lat - D_LAT * 1.2, lon - D_LON * 0.8, "Field/oak edge"),
        ]
    return [Pin(lat + D_LAT * 0.7, lon + D_LON * 1.2, "Pine thicket")]


def wind_pin(c: Coordinate, wind_from_deg: float, radius: float = WIND_PIN_RADIUS) -> Pin:
    """Access pin on the bearing opposite the wind's origin."""
    rad = math.radians(wind_from_deg + 180)
    return Pin(c.lat + radius * math.cos(rad), c.lon + radius * math.sin(rad), WIND_PIN_NOTE)


def compute(c: Coordinate, weather: Optional[WeatherSnapshot], elevation: Optional[float]) -> Guidance:
    weather = weather or WeatherSnapshot()
    code = weather.weather_code if weather.weather_code is not None else CLEAR_CODE
    wind_from = weather.wind_direction_deg if weather.wind_direction_deg is not None else DEFAULT_WIND_FROM

    bucket = bucket_for(code)
    text = {"clear": CLEAR_TEXT, "overcast": OVERCAST_TEXT, "heavy": HEAVY_TEXT}[bucket]
    pins = _bucket_pins(c, bucket)

    if elevation is not None:
        text += " " + (HIGHLAND_TEXT if elevation > HIGHLAND_ABOVE else LOWLAND_TEXT)

    # last pin is the "stand here" access point
    pins.append(wind_pin(c, wind_from))
    return Guidance(pins=tuple(pins), text=text)
