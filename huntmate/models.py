# huntmate/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lon: float

    def __post_init__(self):
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude out of range: {self.lat}")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitude out of range: {self.lon}")


@dataclass(frozen=True)
class WeatherSnapshot:
    """
    Current conditions at a point. Any field may be None when the upstream
    omits it; wind direction is where the wind blows *from*, in degrees.
    """
    temperature_c: Optional[float] = None
    wind_speed_kmh: Optional[float] = None
    wind_direction_deg: Optional[float] = None
    weather_code: Optional[int] = None


@dataclass(frozen=True)
class Pin:
    lat: float
    lon: float
    note: str


@dataclass(frozen=True)
class Guidance:
    pins: Tuple[Pin, ...]
    text: str


@dataclass(frozen=True)
class AnalysisResult:
    coords: Coordinate
    pins: Tuple[Pin, ...]
    guidance_text: str
    weather: WeatherSnapshot
    elevation: Optional[float]

    def to_dict(self) -> dict:
        return {
            "coords": {"lat": self.coords.lat, "lon": self.coords.lon},
            "pins": [{"lat": p.lat, "lon": p.lon, "note": p.note} for p in self.pins],
            "guidance_text": self.guidance_text,
            "weather": {
                "temperature_c": self.weather.temperature_c,
                "wind_speed_kmh": self.weather.wind_speed_kmh,
                "wind_direction_deg": self.weather.wind_direction_deg,
                "weather_code": self.weather.weather_code,
            },
            "elevation": self.elevation,
        }


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"


class RunOutcome(Enum):
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class Snapshot:
    """What the orchestrator last published. Replaced whole, never mutated."""
    result: Optional[AnalysisResult] = None
    guidance_text: str = ""
    outcome: Optional[RunOutcome] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class MapView:
    center: Coordinate
    pins: Tuple[Pin, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class StatusReadout:
    guidance_text: str
    elevation: Optional[float]
    wind_speed: Optional[float]
    temperature: Optional[float]
    weather_code: Optional[int]
