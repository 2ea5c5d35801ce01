# client/pages/1_Telemetry.py
import streamlit as st
import api as API
import panels
from components import show_json, show_placeholder, show_table

st.title("📈 Telemetry")

tab1, tab2 = st.tabs(["Legacy telemetry", "ISS fetch history"])

with tab1:
    st.subheader("Legacy telemetry")
    limit = st.number_input("limit", 1, 200, 20, key="tel_limit")
    if st.button("Fetch telemetry", key="btn_fetch_telemetry"):
        res = panels.load_list(API.telemetry, limit=int(limit))
        if res.data:
            show_table(res.data)
        else:
            show_placeholder(res.message, error=not res.ok)

with tab2:
    st.subheader("ISS fetch history")
    limit_h = st.number_input("limit", 1, 100, 10, key="hist_limit")
    if st.button("Fetch history", key="btn_fetch_history"):
        res = panels.load_list(API.iss_history, limit=int(limit_h))
        if res.data:
            # payload is nested JSON; flatten the interesting bits for the table
            rows = [
                {
                    "id": it.get("id"),
                    "fetched_at": it.get("fetched_at"),
                    "latitude": (it.get("payload") or {}).get("latitude"),
                    "longitude": (it.get("payload") or {}).get("longitude"),
                    "velocity": (it.get("payload") or {}).get("velocity"),
                    "altitude": (it.get("payload") or {}).get("altitude"),
                }
                for it in res.data
            ]
            show_table(rows)
            with st.expander("Raw items"):
                show_json(res.data)
        else:
            show_placeholder(res.message, error=not res.ok)
