"""
Data models for media review grouping
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union
from enum import Enum

UNKNOWN_SEASON = -1
UNKNOWN_EPISODE = 0

class MediaType(Enum):
    MOVIE = "movie"
    TV_SHOW = "tv_show"
    UNKNOWN = "unknown"

class RecordSource(Enum):
    SCAN = "scan"
    PREVIEW = "preview"

class ItemKind(Enum):
    MEDIA = "media"
    MISSING = "missing"

@dataclass
class CatalogMatch:
    """Confirmed catalog match attached to a scanned file"""
    title: Optional[str] = None
    name: Optional[str] = None
    release_date: Optional[str] = None
    tmdb_id: Optional[int] = None

@dataclass
class GroupableItem:
    """One scanned file or rename preview entry"""
    raw_name: str
    media_type: MediaType = MediaType.UNKNOWN
    source: RecordSource = RecordSource.SCAN
    catalog_match: Optional[CatalogMatch] = None
    series_name_hint: Optional[str] = None
    parsed_title: Optional[str] = None
    parsed_year: Optional[int] = None
    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    season_total_episodes: Optional[int] = None
    item_id: Optional[str] = None
    path: Optional[str] = None
    kind: ItemKind = ItemKind.MEDIA

    @property
    def season_key(self) -> int:
        return self.season_number if self.season_number is not None else UNKNOWN_SEASON

    @property
    def episode_key(self) -> int:
        return self.episode_number or UNKNOWN_EPISODE

@dataclass
class MissingEpisodePlaceholder:
    """Synthetic entry standing in for episodes absent from disk"""
    season_number: int
    start_episode: int
    end_episode: int
    count: int
    series_name: str
    episode_range_label: str
    theoretical_name: str
    synthetic_id: str
    kind: ItemKind = ItemKind.MISSING

SeasonEntry = Union[GroupableItem, MissingEpisodePlaceholder]

@dataclass
class SeasonGroup:
    """Items of one season, with gaps filled by placeholders"""
    season_number: int
    display_name: str
    items: List[SeasonEntry] = field(default_factory=list)
    total_episodes: int = 0
    matched_count: int = 0
    missing_count: int = 0
    is_complete: bool = False

    @property
    def placeholders(self) -> List[MissingEpisodePlaceholder]:
        return [entry for entry in self.items if entry.kind == ItemKind.MISSING]

@dataclass
class SeriesGroup:
    """All items sharing one resolved series or movie identity"""
    series_name: str
    is_tv_show: bool
    items: List[GroupableItem] = field(default_factory=list)
    seasons: Optional[List[SeasonGroup]] = None
    warnings: List[str] = field(default_factory=list)
