# app.py
from __future__ import annotations
import logging
import streamlit as st

from app_secrets import get_setting
from constants import APP_TITLE, MAP_HEIGHT
from ui import header, get_session, drop_panel, map_panel, sidebar_panel, footer_description

logging.basicConfig(
    level=get_setting("LOG_LEVEL", "INFO", str.upper),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def main() -> None:
    header(APP_TITLE)
    session = get_session()

    left, right = st.columns([1, 3])
    with left:
        drop_panel(session)
    with right:
        map_panel(session, get_setting("MAP_HEIGHT", MAP_HEIGHT, int))

    sidebar_panel(session)

    st.divider()
    footer_description()


if __name__ == "__main__":
    main()
