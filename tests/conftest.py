"""
Pytest configuration and fixtures for media review tests.
"""

import os
import sys
from typing import Any, Dict, Optional

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from media_review.grouping import SeriesGrouper  # noqa: E402
from media_review.models import GroupableItem, MediaType, RecordSource  # noqa: E402
from media_review.utils import default_config  # noqa: E402


@pytest.fixture
def config() -> Dict[str, Any]:
    return default_config()


@pytest.fixture
def grouper(config: Dict[str, Any]) -> SeriesGrouper:
    return SeriesGrouper(config)


def scan_record(file_name: str, media_type: str = "TV_SHOW", title: Optional[str] = None,
                year: Optional[int] = None, season: Optional[int] = None,
                episode: Optional[int] = None, matched: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Build a directory scan record the way the scan service returns it."""
    record: Dict[str, Any] = {
        "id": f"id-{file_name}",
        "fileName": file_name,
        "filePath": f"/media/{file_name}",
        "mediaType": media_type,
        "parsedTitle": title,
        "parsedYear": year,
        "parsedSeason": season,
        "parsedEpisode": episode,
    }
    if matched is not None:
        record["matchedInfo"] = matched
    return record


def preview_record(new_name: str, series: Optional[str] = "Show", media_type: str = "TV",
                   season: Optional[int] = 1, episode: Optional[int] = None,
                   total: Optional[int] = None, group_key: Optional[str] = None) -> Dict[str, Any]:
    """Build a rename preview record with its metadata block."""
    metadata: Dict[str, Any] = {"mediaType": media_type}
    if series is not None:
        metadata["seriesName"] = series
    if season is not None:
        metadata["seasonNumber"] = season
    if episode is not None:
        metadata["episodeNumber"] = episode
    if total is not None:
        metadata["seasonTotalEpisodes"] = total
    if group_key is not None:
        metadata["groupKey"] = group_key
    return {
        "oldPath": f"/downloads/{new_name}",
        "newPath": f"/library/{new_name}",
        "pureOldFileName": new_name,
        "pureNewFileName": new_name,
        "metadata": metadata,
    }


def episode(raw_name: str, season: Optional[int] = 1, number: Optional[int] = None,
            total: Optional[int] = None, series: str = "Show") -> GroupableItem:
    """Build a preview-style TV item directly."""
    return GroupableItem(
        raw_name=raw_name,
        media_type=MediaType.TV_SHOW,
        source=RecordSource.PREVIEW,
        series_name_hint=series,
        season_number=season,
        episode_number=number,
        season_total_episodes=total,
    )
