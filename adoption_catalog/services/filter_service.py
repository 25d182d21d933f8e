"""Filtering utilities for catalog animal records."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Iterable, List, Mapping, Optional

import pandas as pd

from adoption_catalog.config import ALL_OPTION, COLOR_KEYWORDS, SEX_CODES
from adoption_catalog.utils.helpers import compact_lower, normalize_text

CAT = "貓"
DOG = "狗"
OTHER = "其他"
VARIETY_SEPARATORS = re.compile(r"[/,、]")


@dataclass(frozen=True)
class AnimalFilters:
    """Active catalog filter selections; empty values match everything."""

    area: str = ""
    type: str = ""
    sex: str = ""
    color: str = ""
    bodytype: str = ""
    variety: str = ""

    @classmethod
    def from_selections(cls, selections: Mapping[str, Optional[str]]) -> "AnimalFilters":
        """Build filters from widget values, treating the 'all' option as empty."""
        values = {}
        for name in cls.__dataclass_fields__:
            value = normalize_text(selections.get(name))
            values[name] = "" if value == ALL_OPTION else value
        return cls(**values)

    def is_empty(self) -> bool:
        return not any(asdict(self).values())


def _matches_type(kind: str, selected: str) -> bool:
    if selected == CAT:
        return CAT in kind
    if selected == DOG:
        return DOG in kind
    if selected == OTHER:
        return CAT not in kind and DOG not in kind
    return False


def _matches_color(colour: object, selected: str) -> bool:
    animal_colour = compact_lower(colour)
    keywords = COLOR_KEYWORDS.get(selected, [selected])
    return any(compact_lower(keyword) in animal_colour for keyword in keywords)


def animal_matches(animal: Mapping[str, object], filters: AnimalFilters) -> bool:
    """Return whether one animal record satisfies every active filter."""
    if filters.area and filters.area not in normalize_text(animal.get("animal_place")):
        return False

    if filters.type and not _matches_type(normalize_text(animal.get("animal_kind")), filters.type):
        return False

    if filters.sex and normalize_text(animal.get("animal_sex")) != SEX_CODES.get(filters.sex):
        return False

    if compact_lower(filters.color) and not _matches_color(animal.get("animal_colour"), filters.color):
        return False

    if filters.bodytype and compact_lower(filters.bodytype) not in compact_lower(animal.get("animal_bodytype")):
        return False

    if filters.variety and compact_lower(filters.variety) not in compact_lower(animal.get("animal_Variety")):
        return False

    return True


def filter_animals(dataframe: pd.DataFrame, filters: AnimalFilters) -> pd.DataFrame:
    """Apply AND logic across all filter fields, preserving row order."""
    if dataframe.empty or filters.is_empty():
        return dataframe
    mask = dataframe.apply(lambda row: animal_matches(row.to_dict(), filters), axis=1)
    return dataframe[mask.astype(bool)]


def variety_options(dataframe: pd.DataFrame) -> List[str]:
    """Build the sorted variety choices found in the feed, led by the 'all' option."""
    if dataframe.empty or "animal_Variety" not in dataframe.columns:
        return []
    varieties = set()
    for value in dataframe["animal_Variety"].tolist():
        for token in VARIETY_SEPARATORS.split(normalize_text(value)):
            token = token.strip()
            if token:
                varieties.add(token)
    return [ALL_OPTION, *sorted(varieties)]


def filters_signature(filters: AnimalFilters) -> tuple:
    """Build a hashable signature used to detect filter changes."""
    return tuple(sorted(asdict(filters).items()))


def records_to_frame(records: Iterable[Mapping[str, object]]) -> pd.DataFrame:
    """Convert feed records into a string-typed dataframe."""
    dataframe = pd.DataFrame(list(records))
    if dataframe.empty:
        return dataframe
    return dataframe.fillna("").astype(str)
