# app.py
import logging
from pathlib import Path

import streamlit as st

from huntmate.config import Settings
from huntmate.pipeline import HuntAnalyzer

# --- Config
ENV_PATH = Path(__file__).resolve().parent / "config" / "huntmate.env"
SETTINGS = Settings.from_env(dotenv_path=ENV_PATH)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@st.cache_resource
def get_analyzer() -> HuntAnalyzer:
    # one analyzer per server process; start() also arms the hourly refresh
    analyzer = HuntAnalyzer(SETTINGS)
    analyzer.start()
    return analyzer


def _fmt(value, unit: str = "") -> str:
    return "—" if value is None else f"{value}{unit}"


# --- Streamlit UI
st.set_page_config(page_title="HuntMate", layout="centered")
analyzer = get_analyzer()

st.title("🦌 HuntMate: Whitetail Stand Analyzer")

query = st.text_input(
    "Address or place",
    value=analyzer.address,
    placeholder=f"Type an address or place in {SETTINGS.region} (e.g., Uwharrie National Forest)",
)

if st.button("Analyze") and query:
    with st.spinner("Analyzing…"):
        analyzer.analyze(query)

status = analyzer.status()
if status.guidance_text:
    st.markdown(f"**Suggested Focus:** {status.guidance_text}")
    st.caption(
        f"Elevation: {_fmt(status.elevation, ' m')} · Temp: {_fmt(status.temperature, '°C')} · "
        f"Wind: {_fmt(status.wind_speed, ' km/h')} · Code: {_fmt(status.weather_code)}"
    )

view = analyzer.map_view()
points = [(view.center.lat, view.center.lon)] + [(p.lat, p.lon) for p in view.pins]
st.map({"lat": [p[0] for p in points], "lon": [p[1] for p in points]}, zoom=12)
if view.pins:
    st.dataframe([{"note": p.note, "lat": round(p.lat, 5), "lon": round(p.lon, 5)} for p in view.pins])

st.caption(
    "Map data © OpenStreetMap contributors · Weather © Open-Meteo · Elevation © OpenTopoData"
)

if analyzer.result is not None:
    with st.expander("Raw analysis"):
        st.json(analyzer.result.to_dict())
