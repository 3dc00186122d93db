# huntmate/geocode.py
import logging
from typing import Optional

import requests

from .config import Settings
from .errors import MalformedResponseError, NoMatchError, UpstreamError
from .models import Coordinate

log = logging.getLogger(__name__)


class GeocodeResolver:
    """
    Resolve free-text place names to coordinates using OSM Nominatim.
    The configured region is appended to every query so local names
    ("Jamestown", "Salem") land in the right state.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or Settings()
        self.session = session or requests.Session()

    def resolve(self, query: str) -> Coordinate:
        if not query or not query.strip():
            raise ValueError("Place query must not be empty.")
        params = {"q": f"{query.strip()}, {self.settings.region}", "format": "json", "limit": 1}
        headers = {"User-Agent": self.settings.user_agent, "Accept-Language": "en"}
        log.debug("Geocoding %r", params["q"])
        try:
            r = self.session.get(
                self.settings.geocode_url, params=params, headers=headers, timeout=self.settings.timeout
            )
            r.raise_for_status()
        except requests.RequestException as exc:
            raise UpstreamError("geocode", exc) from exc
        try:
            results = r.json()
        except ValueError as exc:
            raise MalformedResponseError("geocode", exc) from exc

        if not isinstance(results, list) or not results:
            raise NoMatchError(query)
        first = results[0]
        try:
            return Coordinate(lat=float(first["lat"]), lon=float(first["lon"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise NoMatchError(query, f"malformed result ({exc})") from exc

