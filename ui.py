from __future__ import annotations
import logging
from typing import Optional
import streamlit as st
from streamlit_folium import st_folium

from constants import BOOKING_URL_COLS, EXPECTED_COLS, UPLOAD_TYPES
from data_io import IngestionError, sample_path
from session import ShipmentMapSession

logger = logging.getLogger(__name__)

SESSION_KEY = "shipment_map_session"

def header(app_title: str) -> None:
    st.set_page_config(page_title=app_title, layout="wide")
    st.title(app_title)

def get_session() -> ShipmentMapSession:
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = ShipmentMapSession()
    return st.session_state[SESSION_KEY]

def _dispatch(session: ShipmentMapSession, files) -> None:
    try:
        session.drop(files)
    except IngestionError as e:
        # already logged with traceback; the previous dataset stays on screen
        logger.info("Keeping previous dataset: %s", e)

def drop_panel(session: ShipmentMapSession) -> None:
    uploaded = st.file_uploader(
        "Drop a shipment CSV or Excel file",
        type=UPLOAD_TYPES,
        key="shipment_file",
    )
    # the uploader keeps returning the same file on every rerun
    if uploaded is not None and uploaded.file_id != st.session_state.get("_last_file_id"):
        st.session_state["_last_file_id"] = uploaded.file_id
        with st.spinner(f"Reading {uploaded.name}..."):
            _dispatch(session, [uploaded])

    if st.button("Load sample shipments", width="stretch"):
        _dispatch(session, [sample_path()])

    if session.source_name:
        st.caption(
            f"{session.source_name}: {len(session.dataset)} origins, "
            f"{session.dataset.shipment_count()} shipments"
        )
    else:
        st.info("Drag a file onto the box above to plot its origins.")

def _clicked_origin(session: ShipmentMapSession, result) -> Optional[str]:
    if not isinstance(result, dict):
        return None
    tooltip = result.get("last_object_clicked_tooltip")
    if tooltip and str(tooltip).strip() in session.dataset:
        return str(tooltip).strip()
    clicked = result.get("last_object_clicked") or {}
    if "lat" in clicked and "lng" in clicked:
        return session.map.marker_at(float(clicked["lat"]), float(clicked["lng"]))
    return None

def map_panel(session: ShipmentMapSession, height: int) -> None:
    result = st_folium(
        session.map.to_folium(),
        height=height,
        use_container_width=True,
        # a new widget per dataset so a stale click never selects in the next file
        key=f"origin_map_{session.generation}",
        returned_objects=["last_object_clicked", "last_object_clicked_tooltip"],
    )
    origin_key = _clicked_origin(session, result)
    if origin_key and origin_key != session.selected:
        session.click(origin_key)
        st.rerun()

def sidebar_panel(session: ShipmentMapSession) -> None:
    st.sidebar.header("Destinations")
    session.sidebar.show(st.sidebar)

def footer_description() -> None:
    with st.expander("ℹ️ Note: About this app and expected data format", expanded=False):
        st.markdown(
            f"""
            Drop a **CSV** or **Excel** file of freight shipments. Rows are grouped by
            origin city; click an origin marker to draw its lanes and list destinations.
            Rows with missing or non-numeric coordinates are skipped.

            **Expected columns:**  
            `{', '.join(EXPECTED_COLS)}`  

            **Optional:** `{' / '.join(BOOKING_URL_COLS)}` for the booking link.
            """
        )
