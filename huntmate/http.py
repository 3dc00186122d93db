# huntmate/http.py
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import Settings

RETRY_STATUSES = (429, 500, 502, 503, 504)


def build_session(settings: Settings) -> requests.Session:
    """
    Session shared by all outbound calls. Retries (with jittered backoff) live
    here so the geocoder and data client stay single-shot.
    """
    retry = Retry(
        total=settings.retries,
        backoff_factor=settings.backoff_factor,
        backoff_jitter=settings.backoff_jitter,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=frozenset(["GET"]),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session = requests.Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers["User-Agent"] = settings.user_agent
    return session
