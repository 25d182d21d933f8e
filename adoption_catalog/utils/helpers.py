"""Helper utilities for IO, text normalization, logging, and user context."""

from __future__ import annotations

import getpass
import logging
import os
import re
import tempfile
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import pandas as pd

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_WHITESPACE_PATTERN = re.compile(r"\s+")


def configure_logging(level: str = "INFO") -> None:
    """Apply the process-wide log format once."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def get_current_username() -> str:
    """Return the current system username with a safe fallback."""
    try:
        return os.getlogin()
    except OSError:
        return getpass.getuser() or "unknown"


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def compact_lower(value: object) -> str:
    """Drop all whitespace and lowercase, for substring matching."""
    return _WHITESPACE_PATTERN.sub("", normalize_text(value)).lower()


def iso_now() -> str:
    """Return current UTC timestamp in ISO-8601 format."""
    return datetime.now(timezone.utc).replace(microsecond=0, tzinfo=None).isoformat() + "Z"


@contextmanager
def file_lock(file_path: Path, timeout_seconds: float = 10.0) -> Generator[None, None, None]:
    """Acquire an exclusive lock using lockfile creation."""
    lock_path = file_path.with_suffix(file_path.suffix + ".lock")
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    start_time = time.time()

    while True:
        try:
            fd = os.open(str(lock_path), os.O_CREAT | os.O_EXCL | os.O_RDWR)
            break
        except FileExistsError:
            if time.time() - start_time > timeout_seconds:
                raise TimeoutError(f"Could not acquire lock for {file_path}")
            time.sleep(0.05)

    try:
        os.write(fd, str(os.getpid()).encode("utf-8"))
        yield
    finally:
        os.close(fd)
        try:
            os.remove(lock_path)
        except FileNotFoundError:
            pass


def atomic_write_dataframe(dataframe: pd.DataFrame, target_path: Path) -> None:
    """Write a dataframe atomically to CSV by replacing a temporary file."""
    target_path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        newline="",
        delete=False,
        dir=target_path.parent,
        suffix=".tmp",
    ) as tmp_file:
        temp_name = tmp_file.name
    dataframe.to_csv(temp_name, index=False)

    os.replace(temp_name, target_path)


def atomic_write_text(text: str, target_path: Path) -> None:
    """Write text atomically by replacing a temporary file."""
    target_path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        delete=False,
        dir=target_path.parent,
        suffix=".tmp",
    ) as tmp_file:
        tmp_file.write(text)
        temp_name = tmp_file.name

    os.replace(temp_name, target_path)


def read_csv_or_empty(file_path: Path, columns: list[str]) -> pd.DataFrame:
    """Read a CSV if it exists; otherwise return an empty dataframe with columns."""
    if not file_path.exists():
        return pd.DataFrame(columns=columns)

    dataframe = pd.read_csv(file_path, dtype=str, keep_default_na=False).fillna("")
    for column in columns:
        if column not in dataframe.columns:
            dataframe[column] = ""
    return dataframe[columns]
