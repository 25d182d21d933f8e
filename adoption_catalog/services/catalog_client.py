"""Animal feed retrieval with an in-process TTL cache and an on-disk cache."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import httpx

from adoption_catalog.utils.helpers import atomic_write_text

logger = logging.getLogger(__name__)

Animal = Dict[str, Any]
Clock = Callable[[], float]


class CatalogFetchError(Exception):
    """Raised when the animal feed cannot be loaded and nothing is cached."""


class ProxyCache:
    """Single-entry cache of the last successful feed payload."""

    def __init__(self, ttl_seconds: float, clock: Clock = time.time):
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._data: Optional[List[Animal]] = None
        self._stored_at = 0.0

    def get(self) -> Optional[List[Animal]]:
        """Return cached data while it is younger than the TTL."""
        if self._data is not None and self._clock() - self._stored_at < self._ttl_seconds:
            return self._data
        return None

    def get_stale(self) -> Optional[List[Animal]]:
        """Return cached data regardless of age."""
        return self._data

    def put(self, data: List[Animal]) -> None:
        self._data = data
        self._stored_at = self._clock()


class DiskCache:
    """JSON file holding the feed payload and its expiry timestamp."""

    def __init__(self, path: Path, ttl_seconds: float, clock: Clock = time.time):
        self._path = path
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    def _read(self) -> Optional[dict]:
        if not self._path.exists():
            return None
        try:
            with self._path.open("r", encoding="utf-8") as cache_file:
                document = json.load(cache_file)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable catalog cache %s: %s", self._path, exc)
            return None
        if not isinstance(document, dict) or not isinstance(document.get("data"), list):
            return None
        try:
            document["expire"] = float(document.get("expire", 0))
        except (TypeError, ValueError):
            logger.warning("Ignoring catalog cache %s with invalid expiry", self._path)
            return None
        return document

    def get(self) -> Optional[List[Animal]]:
        document = self._read()
        if document is None:
            return None
        if self._clock() >= document["expire"]:
            return None
        return document["data"]

    def get_stale(self) -> Optional[List[Animal]]:
        document = self._read()
        return None if document is None else document["data"]

    def put(self, data: List[Animal]) -> None:
        document = {"expire": self._clock() + self._ttl_seconds, "data": data}
        atomic_write_text(json.dumps(document, ensure_ascii=False), self._path)


def keep_with_images(records: List[Animal]) -> List[Animal]:
    """Drop feed records that carry no album image."""
    return [record for record in records if record.get("album_file")]


class CatalogClient:
    """Loads adoptable animals from the open-data feed."""

    def __init__(
        self,
        api_url: str,
        timeout: float = 10.0,
        cache: Optional[ProxyCache] = None,
        disk_cache: Optional[DiskCache] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self._api_url = api_url
        self._timeout = timeout
        self._cache = cache if cache is not None else ProxyCache(ttl_seconds=0)
        self._disk_cache = disk_cache
        self._http_client = http_client

    def _request(self) -> List[Animal]:
        try:
            if self._http_client is not None:
                response = self._http_client.get(self._api_url, timeout=self._timeout)
            else:
                with httpx.Client(follow_redirects=True) as client:
                    response = client.get(self._api_url, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise CatalogFetchError(f"HTTP error: {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise CatalogFetchError(f"Failed to fetch animal data: {exc}") from exc
        except ValueError as exc:
            raise CatalogFetchError("Animal feed returned invalid JSON") from exc

        if not isinstance(payload, list):
            raise CatalogFetchError("Animal feed returned an unexpected payload")
        return keep_with_images(payload)

    def fetch_animals(self, force_refresh: bool = False) -> List[Animal]:
        """Return the current feed, serving caches when they are fresh."""
        cached = self._cache.get()
        if cached is not None and not force_refresh:
            logger.debug("Serving %d animals from proxy cache", len(cached))
            return cached

        if self._disk_cache is not None and not force_refresh:
            on_disk = self._disk_cache.get()
            if on_disk is not None:
                logger.debug("Serving %d animals from disk cache", len(on_disk))
                self._cache.put(on_disk)
                return on_disk

        try:
            animals = self._request()
        except CatalogFetchError:
            logger.exception("Fetching animal feed failed")
            stale = self._cache.get_stale()
            if stale is None and self._disk_cache is not None:
                stale = self._disk_cache.get_stale()
            if stale is not None:
                logger.warning("Falling back to %d stale cached animals", len(stale))
                return stale
            raise

        logger.info("Fetched %d animals with images from feed", len(animals))
        self._cache.put(animals)
        if self._disk_cache is not None:
            self._disk_cache.put(animals)
        return animals
