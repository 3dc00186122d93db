# huntmate/pipeline.py
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Callable, Optional, Union

import requests

from .config import Settings
from .geocode import GeocodeResolver
from .heuristics import compute
from .http import build_session
from .models import (
    AnalysisResult,
    Coordinate,
    MapView,
    RunOutcome,
    RunState,
    Snapshot,
    StatusReadout,
)
from .weather_data import EnvironmentDataClient

log = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Could not analyze this location. Try a nearby landmark or town name."


class HuntAnalyzer:
    """
    Runs geocode -> (weather || elevation) -> heuristics -> publish, and keeps
    re-running it on a timer once started.

    The last successful result and the current guidance text are published
    together as one immutable Snapshot. A failed run swaps in the fallback
    text but keeps the previous pins and coordinates. Only one run is in
    flight at a time; triggers that arrive while busy are skipped.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        resolver: Optional[GeocodeResolver] = None,
        client: Optional[EnvironmentDataClient] = None,
        session: Optional[requests.Session] = None,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self.settings = settings or Settings()
        self._owns_session = session is None
        self.session = session or build_session(self.settings)
        self.resolver = resolver or GeocodeResolver(self.settings, self.session)
        self.client = client or EnvironmentDataClient(self.settings, self.session)

        self.address = self.settings.default_address
        self._initial = Coordinate(self.settings.default_lat, self.settings.default_lon)
        self._snapshot = Snapshot()

        self._run_lock = threading.Lock()
        self._timer_lock = threading.Lock()
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._scheduled = False
        self._generation = 0

    # -- published state ------------------------------------------------
    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def result(self) -> Optional[AnalysisResult]:
        return self._snapshot.result

    @property
    def coords(self) -> Coordinate:
        result = self._snapshot.result
        return result.coords if result is not None else self._initial

    @property
    def state(self) -> RunState:
        return RunState.RUNNING if self._run_lock.locked() else RunState.IDLE

    def map_view(self) -> MapView:
        snap = self._snapshot
        if snap.result is None:
            return MapView(center=self._initial)
        return MapView(center=snap.result.coords, pins=snap.result.pins)

    def status(self) -> StatusReadout:
        snap = self._snapshot
        result = snap.result
        weather = result.weather if result is not None else None
        return StatusReadout(
            guidance_text=snap.guidance_text,
            elevation=result.elevation if result is not None else None,
            wind_speed=weather.wind_speed_kmh if weather is not None else None,
            temperature=weather.temperature_c if weather is not None else None,
            weather_code=weather.weather_code if weather is not None else None,
        )

    # -- runs -------------------------------------------------------------
    def analyze(self, target: Union[str, Coordinate, None] = None) -> Optional[AnalysisResult]:
        """Inbound command from the UI: a place name, a coordinate, or None for the current address."""
        if isinstance(target, str):
            return self._guarded_run(None, address=target)
        return self._guarded_run(target)

    def run_analysis(self, at: Optional[Coordinate] = None) -> Optional[AnalysisResult]:
        """
        One full run. Geocodes the current address when `at` is None.
        Returns the new result, or None if the run failed or was skipped.
        """
        return self._guarded_run(at)

    def _guarded_run(self, at: Optional[Coordinate], address: Optional[str] = None) -> Optional[AnalysisResult]:
        if not self._run_lock.acquire(blocking=False):
            if address is not None:
                log.warning("Analysis already running; ignoring request for %r", address)
            else:
                log.warning("Analysis already running; skipping trigger")
            return None
        try:
            # the address only changes when a run for it actually happens
            if address is not None:
                self.address = address
            return self._run(at)
        finally:
            self._run_lock.release()

    def _run(self, at: Optional[Coordinate]) -> Optional[AnalysisResult]:
        log.info("Analyzing %s", at if at is not None else repr(self.address))
        try:
            c = at if at is not None else self.resolver.resolve(self.address)
            with ThreadPoolExecutor(max_workers=2, thread_name_prefix="huntmate-fetch") as pool:
                weather_f = pool.submit(self.client.fetch_weather, c)
                elevation_f = pool.submit(self.client.fetch_elevation, c)
                weather = weather_f.result()
                elevation = elevation_f.result()
            guidance = compute(c, weather, elevation)
        except Exception as exc:
            log.error("Analysis failed", exc_info=exc)
            prev = self._snapshot
            self._snapshot = Snapshot(
                result=prev.result,
                guidance_text=FALLBACK_MESSAGE,
                outcome=RunOutcome.FAILED,
                error=str(exc),
            )
            return None

        result = AnalysisResult(
            coords=c,
            pins=guidance.pins,
            guidance_text=guidance.text,
            weather=weather,
            elevation=elevation,
        )
        self._snapshot = Snapshot(result=result, guidance_text=guidance.text, outcome=RunOutcome.SUCCESS)
        log.info("Published %d pins for %.4f,%.4f", len(result.pins), c.lat, c.lon)
        return result

    # -- schedule ---------------------------------------------------------
    def start(self) -> None:
        """Run now at the current coordinates, then every refresh interval."""
        with self._timer_lock:
            if self._scheduled:
                return
            self._scheduled = True
            self._generation += 1
            gen = self._generation
        self._tick(gen)

    def stop(self) -> None:
        """Cancel the pending refresh. Safe to call repeatedly or before start()."""
        with self._timer_lock:
            self._scheduled = False
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _tick(self, gen: int) -> None:
        try:
            self.run_analysis(self.coords)
        finally:
            self._arm(gen)

    def _arm(self, gen: int) -> None:
        with self._timer_lock:
            # a tick from before the last stop()/start() must not re-arm
            if not self._scheduled or gen != self._generation:
                return
            timer = self._timer_factory(self.settings.refresh_seconds, partial(self._tick, gen))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def close(self) -> None:
        self.stop()
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "HuntAnalyzer":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
