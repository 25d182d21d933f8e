"""Top navigation bar component."""

from __future__ import annotations

from datetime import datetime
from html import escape

import streamlit as st


def render_navbar(user_name: str, favorite_count: int) -> None:
    """Render catalog header with the user and their favorite count."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M")
    user_label = escape(user_name) if user_name else "Guest"
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">Animal Adoption Catalog</div>
            <div class="navbar-meta">User: {user_label} | Favorites: {favorite_count} | {timestamp}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
