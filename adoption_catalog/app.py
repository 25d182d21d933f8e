"""Streamlit app entrypoint for the Animal Adoption Catalog."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st

from adoption_catalog.components.cards import render_animal_grid
from adoption_catalog.components.detail import render_detail
from adoption_catalog.components.filters import render_filters, reset_filters
from adoption_catalog.components.navbar import render_navbar
from adoption_catalog.components.pagination_bar import render_pagination_bar
from adoption_catalog.config import (
    ASSETS_DIR,
    CATALOG_API_URL,
    CATALOG_CACHE_FILE,
    CATALOG_TIMEOUT_SECONDS,
    DEFAULT_PAGE_SIZE,
    DISK_CACHE_TTL_SECONDS,
    FAVORITES_FILE,
    LOG_LEVEL,
    PROXY_CACHE_TTL_SECONDS,
)
from adoption_catalog.services import favorites_service, filter_service
from adoption_catalog.services.catalog_client import CatalogClient, CatalogFetchError, DiskCache, ProxyCache
from adoption_catalog.utils.helpers import configure_logging, get_current_username, normalize_text
from adoption_catalog.utils.pagination import clamp_page_number, compute_total_pages, page_slice, paginate

logger = logging.getLogger(__name__)

VIEW_CATALOG = "毛孩列表"
VIEW_FAVORITES = "我的收藏"


st.set_page_config(page_title="Animal Adoption Catalog", layout="wide")


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


def init_session_state() -> None:
    """Initialize required session-state variables."""
    st.session_state.setdefault("user_name", get_current_username())
    st.session_state.setdefault("current_page", 1)
    st.session_state.setdefault("selected_animal_id", None)
    st.session_state.setdefault("notifications", [])
    st.session_state.setdefault("last_filter_signature", tuple())
    st.session_state.setdefault("favorites_refreshed", False)


@st.cache_resource(show_spinner=False)
def get_catalog_client() -> CatalogClient:
    """Build one client per server process so the proxy cache is shared."""
    return CatalogClient(
        CATALOG_API_URL,
        timeout=CATALOG_TIMEOUT_SECONDS,
        cache=ProxyCache(PROXY_CACHE_TTL_SECONDS),
        disk_cache=DiskCache(CATALOG_CACHE_FILE, DISK_CACHE_TTL_SECONDS),
    )


def queue_notification(level: str, message: str) -> None:
    """Queue a UI notification for display on the next render pass."""
    st.session_state["notifications"].append((level, message))


def show_notifications() -> None:
    """Render queued toasts then clear the queue."""
    notifications: List[Tuple[str, str]] = st.session_state.get("notifications", [])
    icons = {"success": "✅", "warning": "⚠️", "error": "❌"}
    for level, message in notifications:
        st.toast(message, icon=icons.get(level, "ℹ️"))
    st.session_state["notifications"] = []


def set_page(page: int) -> None:
    st.session_state["current_page"] = page


def open_detail(animal_id: str) -> None:
    st.session_state["selected_animal_id"] = animal_id


def close_detail() -> None:
    st.session_state["selected_animal_id"] = None


def change_view() -> None:
    """Leave any open detail and refresh the feed on the next favorites visit."""
    close_detail()
    st.session_state["favorites_refreshed"] = False


def toggle_favorite(animal: dict) -> None:
    """Flip an animal's favorite state, reporting the outcome as a toast."""
    user_name = st.session_state["user_name"]
    if not user_name:
        queue_notification("warning", "請先登入才能收藏毛孩！")
        return
    try:
        collected = favorites_service.toggle_favorite(FAVORITES_FILE, user_name, animal)
    except (TimeoutError, ValueError) as exc:
        logger.warning("Favorite toggle failed for %s: %s", animal.get("animal_id"), exc)
        queue_notification("error", f"收藏失敗 ({exc})")
        return
    queue_notification("success", "已加入收藏！" if collected else "已取消收藏")


def clear_filters() -> None:
    reset_filters()
    set_page(1)


def find_animal(animals_df: pd.DataFrame, animal_id: Optional[str]) -> Optional[dict]:
    """Look up one animal record by id in the loaded feed."""
    if not animal_id or animals_df.empty:
        return None
    matches = animals_df[animals_df["animal_id"].astype(str) == str(animal_id)]
    if matches.empty:
        return None
    return matches.iloc[0].to_dict()


def render_catalog(animals_df: pd.DataFrame, favorite_ids: set[str]) -> None:
    """Render the filtered, paginated catalog grid."""
    filters = render_filters(filter_service.variety_options(animals_df))
    signature = filter_service.filters_signature(filters)
    if signature != st.session_state["last_filter_signature"]:
        st.session_state["last_filter_signature"] = signature
        set_page(1)

    filtered_df = filter_service.filter_animals(animals_df, filters)
    st.caption(f"共 {len(filtered_df)}/{len(animals_df)} 筆")

    if filtered_df.empty:
        st.markdown("### 找不到符合條件的毛孩")
        st.caption("請嘗試放寬篩選條件或重設篩選。")
        st.button("清除篩選", on_click=clear_filters)
        return

    total_pages = compute_total_pages(len(filtered_df), DEFAULT_PAGE_SIZE)
    current_page = clamp_page_number(st.session_state["current_page"], total_pages)
    st.session_state["current_page"] = current_page

    start, end = page_slice(current_page, DEFAULT_PAGE_SIZE)
    render_animal_grid(
        filtered_df.iloc[start:end],
        favorite_ids,
        on_open=open_detail,
        on_toggle=toggle_favorite,
        key_prefix="catalog",
    )

    window = paginate(
        current_page,
        DEFAULT_PAGE_SIZE,
        len(filtered_df),
        with_ellipsis=True,
        on_change=set_page,
    )
    render_pagination_bar(window, key_prefix="catalog_pages")


def render_favorites(animals_df: pd.DataFrame, favorite_ids: set[str]) -> None:
    """Render the user's favorites that are still listed in the feed."""
    st.markdown("### 我的收藏")
    user_name = st.session_state["user_name"]
    if not user_name:
        st.info("請先登入")
        return

    listed_ids = set(animals_df["animal_id"].astype(str)) if not animals_df.empty else set()
    saved = [
        animal
        for animal in favorites_service.list_favorites(FAVORITES_FILE, user_name)
        if normalize_text(animal.get("animal_id")) in listed_ids
    ]
    if not saved:
        st.info("尚未收藏任何毛孩")
        return

    render_animal_grid(
        filter_service.records_to_frame(saved),
        favorite_ids,
        on_open=open_detail,
        on_toggle=toggle_favorite,
        key_prefix="favorites",
    )


def sync_favorites(animals: List[dict]) -> None:
    """Prune favorites that are no longer listed in the feed."""
    if not animals:
        return
    try:
        removed = favorites_service.sync_favorites(FAVORITES_FILE, st.session_state["user_name"], animals)
    except TimeoutError as exc:
        logger.warning("Favorites sync skipped: %s", exc)
        return
    if removed:
        queue_notification("warning", f"已移除 {removed} 筆已下架的收藏")


def main() -> None:
    """Render and run the Animal Adoption Catalog."""
    configure_logging(LOG_LEVEL)
    load_css()
    init_session_state()

    refresh_favorites = st.session_state.get("view") == VIEW_FAVORITES and not st.session_state["favorites_refreshed"]
    try:
        with st.spinner("資料載入中..."):
            animals = get_catalog_client().fetch_animals(force_refresh=refresh_favorites)
    except CatalogFetchError as exc:
        st.error(f"資料載入失敗: {exc}")
        st.stop()
    except Exception as exc:  # pragma: no cover - streamlit runtime guard
        logger.exception("Application initialization failed")
        st.error(f"Application initialization failed: {exc}")
        st.stop()

    animals_df = filter_service.records_to_frame(animals)
    if refresh_favorites:
        st.session_state["favorites_refreshed"] = True
        sync_favorites(animals)

    user_name = st.session_state["user_name"]
    favorite_ids = favorites_service.favorite_ids(FAVORITES_FILE, user_name)
    render_navbar(user_name, len(favorite_ids))

    view = st.sidebar.radio("頁面", [VIEW_CATALOG, VIEW_FAVORITES], key="view", on_change=change_view)

    animal = find_animal(animals_df, st.session_state["selected_animal_id"])
    if st.session_state["selected_animal_id"] and animal is None:
        st.warning("找不到毛孩資料")
        st.button("← 返回", on_click=close_detail)
    elif animal is not None:
        render_detail(
            animal,
            normalize_text(animal.get("animal_id")) in favorite_ids,
            on_toggle=toggle_favorite,
            on_back=close_detail,
        )
    elif view == VIEW_FAVORITES:
        render_favorites(animals_df, favorite_ids)
    else:
        render_catalog(animals_df, favorite_ids)

    show_notifications()


if __name__ == "__main__":
    main()
