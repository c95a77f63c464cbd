"""
Serialization and terminal summary of grouped series
"""

import dataclasses
from enum import Enum
from typing import Any, Dict, List

from .models import ItemKind, SeriesGroup

def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value

def groups_to_dict(groups: List[SeriesGroup]) -> List[Dict[str, Any]]:
    """Convert groups into JSON-ready dicts"""
    return [_plain(group) for group in groups]

def format_summary(groups: List[SeriesGroup]) -> List[str]:
    """Render grouped series as indented text lines"""
    lines = []
    season_total = 0
    missing_total = 0
    
    for group in groups:
        kind = 'TV' if group.is_tv_show else 'Movie'
        lines.append(f"{group.series_name} [{kind}] ({len(group.items)} items)")
        for warning in group.warnings:
            lines.append(f"  ! {warning}")
        
        for season in group.seasons or []:
            season_total += 1
            missing_total += season.missing_count
            if season.total_episodes:
                stats = f"{season.matched_count}/{season.total_episodes}, missing {season.missing_count}"
            else:
                stats = f"{season.matched_count} matched"
            lines.append(f"  {season.display_name}: {stats}")
            
            for entry in season.items:
                if entry.kind == ItemKind.MISSING:
                    lines.append(f"    - missing: {entry.episode_range_label} ({entry.theoretical_name})")
    
    lines.append(f"Series: {len(groups)}, Seasons: {season_total}, Missing episodes: {missing_total}")
    return lines
