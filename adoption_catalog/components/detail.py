"""Animal detail view component."""

from __future__ import annotations

from typing import Callable, List, Tuple
from urllib.parse import quote

import streamlit as st

from adoption_catalog.config import DETAIL_LABELS, MAP_SEARCH_URL
from adoption_catalog.utils.helpers import normalize_text


def detail_rows(animal: dict) -> List[Tuple[str, str]]:
    """Return labelled (field, value) pairs in feed order, image excluded."""
    return [
        (DETAIL_LABELS.get(key, key), normalize_text(value))
        for key, value in animal.items()
        if key != "album_file"
    ]


def map_url(animal: dict) -> str:
    return MAP_SEARCH_URL.format(query=quote(normalize_text(animal.get("animal_place"))))


def render_detail(
    animal: dict,
    collected: bool,
    on_toggle: Callable[[dict], None],
    on_back: Callable[[], None],
) -> None:
    """Render the full record of one animal with map link and favorite toggle."""
    st.button("← 返回", on_click=on_back)

    image = normalize_text(animal.get("album_file"))
    if image:
        st.image(image, caption=DETAIL_LABELS["album_file"])

    for label, value in detail_rows(animal):
        label_col, value_col = st.columns([1, 3])
        label_col.markdown(f"**{label}**")
        value_col.write(value)

    st.link_button("Google Map 導航", map_url(animal), width="stretch")
    st.button(
        "取消收藏" if collected else "加入收藏",
        key=f"detail_fav_{normalize_text(animal.get('animal_id'))}",
        on_click=on_toggle,
        args=(animal,),
        type="primary" if collected else "secondary",
        width="stretch",
    )
