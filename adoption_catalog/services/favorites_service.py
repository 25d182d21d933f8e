"""Per-user favorite ("collect") persistence backed by a CSV file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Mapping
from uuid import uuid4

import pandas as pd

from adoption_catalog.config import FAVORITE_COLUMNS
from adoption_catalog.utils.helpers import (
    atomic_write_dataframe,
    file_lock,
    iso_now,
    normalize_text,
    read_csv_or_empty,
)

logger = logging.getLogger(__name__)


def ensure_favorites_file(favorites_file: Path) -> None:
    """Create the favorites file with the expected schema if missing."""
    if favorites_file.exists():
        return
    atomic_write_dataframe(pd.DataFrame(columns=FAVORITE_COLUMNS), favorites_file)


def _user_rows(favorites_df: pd.DataFrame, user_name: str) -> pd.Series:
    return favorites_df["user_name"] == user_name


def list_favorites(favorites_file: Path, user_name: str) -> List[dict]:
    """Return the saved animal records for a user, oldest first."""
    if not user_name:
        return []
    favorites_df = read_csv_or_empty(favorites_file, FAVORITE_COLUMNS)
    user_df = favorites_df[_user_rows(favorites_df, user_name)].sort_values("created_at", kind="mergesort")

    favorites: List[dict] = []
    for _, row in user_df.iterrows():
        try:
            animal = json.loads(row["payload"]) if row["payload"] else {}
        except ValueError:
            logger.warning("Skipping favorite %s with unreadable payload", row["favorite_id"])
            continue
        if not isinstance(animal, dict):
            logger.warning("Skipping favorite %s whose payload is not a record", row["favorite_id"])
            continue
        animal.setdefault("animal_id", row["animal_id"])
        favorites.append(animal)
    return favorites


def favorite_ids(favorites_file: Path, user_name: str) -> set[str]:
    """Return the animal ids a user has saved."""
    if not user_name:
        return set()
    favorites_df = read_csv_or_empty(favorites_file, FAVORITE_COLUMNS)
    return set(favorites_df.loc[_user_rows(favorites_df, user_name), "animal_id"].astype(str).tolist())


def is_favorite(favorites_file: Path, user_name: str, animal_id: object) -> bool:
    """Return whether the animal is in the user's favorites."""
    return normalize_text(animal_id) in favorite_ids(favorites_file, user_name)


def add_favorite(favorites_file: Path, user_name: str, animal: Mapping[str, object]) -> bool:
    """Save an animal for the user; returns False when it was already saved."""
    animal_id = normalize_text(animal.get("animal_id"))
    if not animal_id:
        raise ValueError("Animal record has no animal_id.")

    ensure_favorites_file(favorites_file)
    with file_lock(favorites_file):
        favorites_df = read_csv_or_empty(favorites_file, FAVORITE_COLUMNS)
        existing = _user_rows(favorites_df, user_name) & (favorites_df["animal_id"] == animal_id)
        if existing.any():
            return False

        new_row = {
            "favorite_id": str(uuid4()),
            "user_name": user_name,
            "animal_id": animal_id,
            "payload": json.dumps(dict(animal), ensure_ascii=False, default=str),
            "created_at": iso_now(),
        }
        updated_df = pd.concat([favorites_df, pd.DataFrame([new_row])], ignore_index=True)
        atomic_write_dataframe(updated_df[FAVORITE_COLUMNS], favorites_file)
    return True


def remove_favorite(favorites_file: Path, user_name: str, animal_id: object) -> int:
    """Remove every saved row of the animal for the user and return the count."""
    if not favorites_file.exists():
        return 0
    target_id = normalize_text(animal_id)

    with file_lock(favorites_file):
        favorites_df = read_csv_or_empty(favorites_file, FAVORITE_COLUMNS)
        remove_mask = _user_rows(favorites_df, user_name) & (favorites_df["animal_id"] == target_id)
        removed = int(remove_mask.sum())
        if removed:
            atomic_write_dataframe(favorites_df[~remove_mask][FAVORITE_COLUMNS], favorites_file)
    return removed


def toggle_favorite(favorites_file: Path, user_name: str, animal: Mapping[str, object]) -> bool:
    """Flip the favorite state of an animal and return the new state."""
    if not user_name:
        raise ValueError("Log in to save favorites.")

    animal_id = animal.get("animal_id")
    if is_favorite(favorites_file, user_name, animal_id):
        remove_favorite(favorites_file, user_name, animal_id)
        return False
    add_favorite(favorites_file, user_name, animal)
    return True


def sync_favorites(favorites_file: Path, user_name: str, animals: Iterable[Mapping[str, object]]) -> int:
    """Drop the user's favorites that are no longer listed in the feed."""
    current_ids = {normalize_text(animal.get("animal_id")) for animal in animals}
    if not user_name or not current_ids or not favorites_file.exists():
        return 0

    with file_lock(favorites_file):
        favorites_df = read_csv_or_empty(favorites_file, FAVORITE_COLUMNS)
        stale_mask = _user_rows(favorites_df, user_name) & ~favorites_df["animal_id"].isin(current_ids)
        removed = int(stale_mask.sum())
        if removed:
            for animal_id in favorites_df.loc[stale_mask, "animal_id"].tolist():
                logger.info("Removing outdated favorite %s for %s", animal_id, user_name)
            atomic_write_dataframe(favorites_df[~stale_mask][FAVORITE_COLUMNS], favorites_file)
    return removed
