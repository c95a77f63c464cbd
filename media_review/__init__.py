"""
Media Review - series/season grouping and missing episode detection
"""

from .models import (
    MediaType,
    RecordSource,
    ItemKind,
    CatalogMatch,
    GroupableItem,
    MissingEpisodePlaceholder,
    SeasonGroup,
    SeriesGroup,
)
from .naming import SeriesNameResolver, extract_series_name, extract_series_name_from_display_name
from .gaps import GapDetector
from .grouping import SeriesGrouper, group_files, group_previews

__version__ = "1.0.0"
__all__ = [
    "MediaType",
    "RecordSource",
    "ItemKind",
    "CatalogMatch",
    "GroupableItem",
    "MissingEpisodePlaceholder",
    "SeasonGroup",
    "SeriesGroup",
    "SeriesNameResolver",
    "extract_series_name",
    "extract_series_name_from_display_name",
    "GapDetector",
    "SeriesGrouper",
    "group_files",
    "group_previews",
]
