from __future__ import annotations
import os
from typing import Callable, TypeVar
import streamlit as st

T = TypeVar("T")

def get_secret(key: str) -> str | None:
    v = os.environ.get(key)
    if v:
        return v
    try:
        return st.secrets.get(key)  # type: ignore[attr-defined]
    except Exception:
        # no secrets.toml outside a configured Streamlit project
        return None

def get_setting(key: str, default: T, cast: Callable[[str], T] = str) -> T:
    raw = get_secret(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        return cast(str(raw).strip())
    except (TypeError, ValueError):
        return default
