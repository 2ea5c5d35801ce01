# client/streamlit_app.py
import os
import streamlit as st

import api as API
import panels
from components import show_cms_block, show_events, show_gallery, show_placeholder
from map_state import IssMapState, trend_frame
from spacedash.views import format_metric, shift_window

ISS_REFRESH_SECONDS = int(os.getenv("ISS_REFRESH_SECONDS", "15"))
TREND_LIMIT = 240
GALLERY_WINDOW = 6   # figures visible at once
GALLERY_STEP = 3     # how far prev/next move the track
INSTRUMENTS = ["", "NIRCam", "MIRI", "NIRISS", "NIRSpec", "FGS"]

st.set_page_config(page_title="Space Dashboard", layout="wide")
st.title("🛰️ Space Dashboard")

with st.sidebar:
    st.header("Settings")
    st.text_input("API Base URL (from env)", value=API.API, disabled=True)
    st.text_input("Feeds Base URL (from env)", value=API.FEEDS, disabled=True)
    if st.button("Health check"):
        try:
            st.success(API.healthz())
        except Exception as e:
            st.error(f"Health check failed: {e}")

# ------------------------
# Session state
# ------------------------
if "iss_map" not in st.session_state:
    last = panels.load_last_iss()
    st.session_state.iss_last = last.data or {}
    st.session_state.iss_map = IssMapState.from_last(st.session_state.iss_last)
if "jwst_start" not in st.session_state:
    st.session_state.jwst_start = 0

# ------------------------
# Top cards
# ------------------------
m1, m2, _ = st.columns([1, 1, 2])
m1.metric("ISS velocity (km/h)", format_metric(st.session_state.iss_last.get("velocity")))
m2.metric("ISS altitude (km)", format_metric(st.session_state.iss_last.get("altitude")))

# ------------------------
# Astro events
# ------------------------
@st.fragment
def astro_panel():
    st.subheader("Astronomical events")
    with st.form("astro_form"):
        c1, c2, c3 = st.columns(3)
        lat = c1.number_input("lat", -90.0, 90.0, 55.7558, step=0.0001, format="%.4f")
        lon = c2.number_input("lon", -180.0, 180.0, 37.6176, step=0.0001, format="%.4f")
        days = c3.number_input("days", 1, 366, 365)
        submitted = st.form_submit_button("Show")
    # autoload once, then only on submit
    if submitted or "astro_result" not in st.session_state:
        with st.spinner("Loading…"):
            st.session_state.astro_result = panels.load_events(lat, lon, days)
    res = st.session_state.astro_result
    if not res.ok:
        show_placeholder(res.message, error=True)
    else:
        show_events(res.data, res.message)

# ------------------------
# ISS map + charts (periodic refresh)
# ------------------------
@st.fragment(run_every=ISS_REFRESH_SECONDS)
def iss_panel():
    st.subheader("ISS — position and motion")
    iss_map: IssMapState = st.session_state.iss_map
    res = panels.load_trend(TREND_LIMIT)
    if res.ok and res.data:
        iss_map.apply_points(res.data)
    st.map(iss_map.to_frame(), latitude="lat", longitude="lon",
           size="size", color="color", zoom=iss_map.zoom, height=300)
    if not res.ok or not res.data:
        show_placeholder(res.message, error=not res.ok)
        return
    df = trend_frame(res.data)
    c1, c2 = st.columns(2)
    with c1:
        st.caption("Velocity")
        st.line_chart(df["velocity"], height=160)
    with c2:
        st.caption("Altitude")
        st.line_chart(df["altitude"], height=160)

# ------------------------
# JWST gallery
# ------------------------
@st.fragment
def jwst_panel():
    st.subheader("JWST — latest images")
    c1, c2, c3, c4, c5 = st.columns([2, 2, 2, 1, 1])
    with c1:
        source = st.selectbox("Source", ["jpg", "suffix", "program"],
                              format_func={"jpg": "All JPG", "suffix": "By suffix", "program": "By program"}.get,
                              key="jwst_source")
    with c2:
        # only the input matching the source kind is shown
        suffix = st.text_input("Suffix", placeholder="_cal / _thumb", key="jwst_suffix") if source == "suffix" else ""
        program = st.text_input("Program", placeholder="2734", key="jwst_program") if source == "program" else ""
    with c3:
        instrument = st.selectbox("Instrument", INSTRUMENTS, format_func=lambda v: v or "Any instrument",
                                  key="jwst_instrument")
    with c4:
        per_page = st.selectbox("Per page", [12, 24, 36, 48], index=1, key="jwst_per_page")
    with c5:
        st.write("")
        show = st.button("Show", key="btn_jwst_show")

    if show or "jwst_result" not in st.session_state:
        with st.spinner("Loading…"):
            st.session_state.jwst_result = panels.load_gallery(
                source=source, suffix=suffix, program=program, instrument=instrument, perPage=per_page,
            )
        st.session_state.jwst_start = 0

    res = st.session_state.jwst_result
    if not res.ok or not res.data.items:
        show_placeholder(res.message, error=not res.ok)
        return

    items = res.data.items
    prev_col, _, next_col = st.columns([1, 8, 1])
    if prev_col.button("‹", key="btn_jwst_prev"):
        st.session_state.jwst_start = shift_window(st.session_state.jwst_start, -GALLERY_STEP, len(items), GALLERY_WINDOW)
    if next_col.button("›", key="btn_jwst_next"):
        st.session_state.jwst_start = shift_window(st.session_state.jwst_start, GALLERY_STEP, len(items), GALLERY_WINDOW)
    show_gallery(items, res.data, st.session_state.jwst_start, GALLERY_WINDOW)

# ------------------------
# Layout
# ------------------------
astro_panel()

left, right = st.columns([7, 5])
with left:
    jwst_panel()
with right:
    iss_panel()

# ------------------------
# CMS blocks
# ------------------------
for slug, title in [
    ("welcome_message", "Welcome"),
    ("dashboard_experiment", "Experiment status"),
    ("footer_info", "Data sources"),
]:
    block = panels.load_cms_block(slug)
    show_cms_block(title, block.data, block.message)
