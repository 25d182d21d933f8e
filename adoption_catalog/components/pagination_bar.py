"""Pagination bar component."""

from __future__ import annotations

import streamlit as st

from adoption_catalog.utils.pagination import Page, PaginationWindow


def render_pagination_bar(window: PaginationWindow, key_prefix: str) -> None:
    """Render prev/next plus the page-button window; hidden for a single page."""
    if window.total_pages <= 1:
        return

    columns = st.columns(len(window.items) + 2)
    columns[0].button(
        "上一頁",
        key=f"{key_prefix}_prev",
        on_click=window.handle_prev,
        disabled=not window.has_prev,
    )
    for column, item in zip(columns[1:-1], window.items):
        if isinstance(item, Page):
            column.button(
                str(item.number),
                key=f"{key_prefix}_page_{item.number}",
                on_click=window.select,
                args=(item,),
                type="primary" if item.is_current else "secondary",
            )
        else:
            column.markdown("…")
    columns[-1].button(
        "下一頁",
        key=f"{key_prefix}_next",
        on_click=window.handle_next,
        disabled=not window.has_next,
    )
