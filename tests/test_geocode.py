import pytest
import requests

from huntmate.errors import MalformedResponseError, NoMatchError, UpstreamError
from huntmate.geocode import GeocodeResolver
from huntmate.models import Coordinate

from .conftest import GEOCODE_URL


def test_resolve_appends_region_and_takes_first(requests_mock, settings):
    requests_mock.get(GEOCODE_URL, json=[{"lat": "35.41", "lon": "-80.02"}, {"lat": "1", "lon": "2"}])
    c = GeocodeResolver(settings).resolve("Uwharrie National Forest")

    assert c == Coordinate(35.41, -80.02)
    qs = requests_mock.last_request.qs
    assert qs["q"] == ["uwharrie national forest, north carolina"]
    assert qs["limit"] == ["1"]
    assert qs["format"] == ["json"]
    assert requests_mock.last_request.headers["Accept-Language"] == "en"


def test_each_call_hits_the_network(requests_mock, settings):
    requests_mock.get(GEOCODE_URL, json=[{"lat": "35.0", "lon": "-80.0"}])
    resolver = GeocodeResolver(settings)
    resolver.resolve("Asheboro")
    resolver.resolve("Asheboro")
    assert requests_mock.call_count == 2


def test_no_results(requests_mock, settings):
    requests_mock.get(GEOCODE_URL, json=[])
    with pytest.raises(NoMatchError) as ctx:
        GeocodeResolver(settings).resolve("Nowhere")
    assert ctx.value.query == "Nowhere"


@pytest.mark.parametrize(
    "payload",
    [
        [{"lon": "-80.0"}],
        [{"lat": "abc", "lon": "-80.0"}],
        [{"lat": "95.0", "lon": "-80.0"}],
        ["not a dict"],
        {"lat": "35.0", "lon": "-80.0"},
    ],
)
def test_malformed_result(requests_mock, settings, payload):
    requests_mock.get(GEOCODE_URL, json=payload)
    with pytest.raises(NoMatchError):
        GeocodeResolver(settings).resolve("Somewhere")


def test_http_error_is_upstream(requests_mock, settings):
    requests_mock.get(GEOCODE_URL, status_code=503)
    with pytest.raises(UpstreamError) as ctx:
        GeocodeResolver(settings).resolve("Somewhere")
    assert ctx.value.source == "geocode"


def test_connection_error_is_upstream(requests_mock, settings):
    requests_mock.get(GEOCODE_URL, exc=requests.ConnectionError("down"))
    with pytest.raises(UpstreamError):
        GeocodeResolver(settings).resolve("Somewhere")


def test_non_json_body(requests_mock, settings):
    requests_mock.get(GEOCODE_URL, text="<html>oops</html>")
    with pytest.raises(MalformedResponseError):
        GeocodeResolver(settings).resolve("Somewhere")


def test_blank_query_rejected(settings):
    with pytest.raises(ValueError):
        GeocodeResolver(settings).resolve("   ")
