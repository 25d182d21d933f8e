"""Animal card grid component."""

from __future__ import annotations

from typing import Callable, Set

import pandas as pd
import streamlit as st

from adoption_catalog.config import DEFAULT_IMAGE
from adoption_catalog.utils.helpers import normalize_text

SEX_LABELS = {"M": "公", "F": "母", "N": "未知"}
GRID_COLUMNS = 3


def card_title(animal: dict) -> str:
    """Compose a short card heading from kind, variety and sex."""
    parts = [
        normalize_text(animal.get("animal_kind")),
        normalize_text(animal.get("animal_Variety")),
        SEX_LABELS.get(normalize_text(animal.get("animal_sex")), ""),
    ]
    return " · ".join(part for part in parts if part) or "毛孩"


def render_animal_grid(
    page_df: pd.DataFrame,
    favorite_ids: Set[str],
    on_open: Callable[[str], None],
    on_toggle: Callable[[dict], None],
    key_prefix: str,
) -> None:
    """Render one page of animal cards with detail and favorite buttons."""
    records = page_df.to_dict(orient="records")
    for row_start in range(0, len(records), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS)
        for column, animal in zip(columns, records[row_start : row_start + GRID_COLUMNS]):
            animal_id = normalize_text(animal.get("animal_id"))
            collected = animal_id in favorite_ids
            with column:
                with st.container(border=True):
                    st.image(normalize_text(animal.get("album_file")) or DEFAULT_IMAGE, width="stretch")
                    st.markdown(f"**{card_title(animal)}**")
                    st.caption(normalize_text(animal.get("animal_place")) or normalize_text(animal.get("shelter_name")))
                    detail_col, favorite_col = st.columns(2)
                    detail_col.button(
                        "詳細資料",
                        key=f"{key_prefix}_open_{animal_id}",
                        on_click=on_open,
                        args=(animal_id,),
                        width="stretch",
                    )
                    favorite_col.button(
                        "♥ 已收藏" if collected else "♡ 收藏",
                        key=f"{key_prefix}_fav_{animal_id}",
                        on_click=on_toggle,
                        args=(animal,),
                        type="primary" if collected else "secondary",
                        width="stretch",
                    )
