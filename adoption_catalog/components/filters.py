"""Filter menu component."""

from __future__ import annotations

from typing import Dict, List, Tuple

import streamlit as st

from adoption_catalog.config import (
    ALL_OPTION,
    AREA_OPTIONS,
    BODY_TYPE_OPTIONS,
    COLOR_OPTIONS,
    SEX_OPTIONS,
    TYPE_OPTIONS,
    VARIETY_OPTIONS,
)
from adoption_catalog.services.filter_service import AnimalFilters

FILTER_FIELDS: List[Tuple[str, str]] = [
    ("area", "地區"),
    ("type", "種類"),
    ("sex", "性別"),
    ("bodytype", "體型"),
    ("variety", "品種"),
    ("color", "毛色"),
]


def filter_widget_key(field: str) -> str:
    return f"filter_{field}"


def reset_filters() -> None:
    """Return every filter widget to the 'all' option."""
    for field, _ in FILTER_FIELDS:
        st.session_state[filter_widget_key(field)] = ALL_OPTION


def render_filters(varieties: List[str]) -> AnimalFilters:
    """Render sidebar filter selectors and return the active selections."""
    options: Dict[str, List[str]] = {
        "area": AREA_OPTIONS,
        "type": TYPE_OPTIONS,
        "sex": SEX_OPTIONS,
        "bodytype": BODY_TYPE_OPTIONS,
        "variety": varieties or VARIETY_OPTIONS,
        "color": COLOR_OPTIONS,
    }

    st.sidebar.markdown("## 篩選條件")
    selections: Dict[str, str] = {}
    for field, label in FILTER_FIELDS:
        key = filter_widget_key(field)
        if st.session_state.get(key) not in options[field]:
            st.session_state[key] = ALL_OPTION
        selections[field] = st.sidebar.selectbox(label, options=options[field], key=key)

    st.sidebar.button("重置", on_click=reset_filters, width="stretch")
    return AnimalFilters.from_selections(selections)
