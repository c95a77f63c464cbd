"""
Series and season grouping for the rename review screen
"""

import logging
from collections import OrderedDict
from typing import Any, Dict, Iterable, List, Optional, Set

from .gaps import GapDetector
from .loader import item_from_preview_record, item_from_scan_record
from .models import GroupableItem, MediaType, SeasonGroup, SeriesGroup, UNKNOWN_SEASON
from .naming import SeriesNameResolver
from .utils import collation_key, default_config

logger = logging.getLogger(__name__)

class SeriesGrouper:
    """Builds the series -> season -> episode structure from flat items"""
    
    def __init__(self, config: dict):
        self.config = config
        self.resolver = SeriesNameResolver(config)
        self.gap_detector = GapDetector(config)
        display = config['display']
        self.specials_label = display['specials']
        self.unknown_season_label = display['unknown_season']
        self.season_label = display['season']
    
    def group_files(self, records: Iterable[Dict[str, Any]]) -> List[SeriesGroup]:
        """Group raw directory scan records"""
        return self.group([item_from_scan_record(record) for record in self._usable(records)])

    def group_previews(self, records: Iterable[Dict[str, Any]]) -> List[SeriesGroup]:
        """Group raw rename preview records"""
        return self.group([item_from_preview_record(record) for record in self._usable(records)])

    @staticmethod
    def _usable(records) -> List[Any]:
        usable = []
        for record in records or []:
            if isinstance(record, (dict, GroupableItem)):
                usable.append(record)
            else:
                logger.warning(f"Skipping record that is not an object: {record!r}")
        return usable
    
    def group(self, items: Iterable[GroupableItem]) -> List[SeriesGroup]:
        """Partition items into sorted series groups, splitting TV groups by season"""
        accumulator: "OrderedDict[str, SeriesGroup]" = OrderedDict()
        
        for item in items or []:
            series_name = self.resolver.resolve(item)
            is_tv_show = item.media_type == MediaType.TV_SHOW
            
            group = accumulator.get(series_name)
            if group is None:
                group = SeriesGroup(series_name=series_name, is_tv_show=is_tv_show)
                accumulator[series_name] = group
            elif group.is_tv_show != is_tv_show and not group.warnings:
                message = (f"Series '{series_name}' mixes TV and non-TV items; "
                           f"keeping {'TV' if group.is_tv_show else 'non-TV'}")
                logger.warning(message)
                group.warnings.append(message)
            
            group.items.append(item)
        
        groups = sorted(accumulator.values(), key=lambda g: collation_key(g.series_name))
        
        for group in groups:
            group.items.sort(key=self._item_sort_key)
            if group.is_tv_show:
                group.seasons = self.build_seasons(group.items, group.series_name)
        
        logger.debug(f"Grouped {sum(len(g.items) for g in groups)} items into {len(groups)} series")
        return groups
    
    def build_seasons(self, items: List[GroupableItem], series_name: str) -> List[SeasonGroup]:
        """Split a sorted TV group into seasons with match statistics"""
        buckets: "OrderedDict[int, List[GroupableItem]]" = OrderedDict()
        matched_episodes: Dict[int, Set[int]] = {}
        totals: Dict[int, int] = {}
        
        for item in items:
            season_number = item.season_key
            if season_number not in buckets:
                buckets[season_number] = []
                matched_episodes[season_number] = set()
            buckets[season_number].append(item)
            
            if item.episode_key > 0:
                matched_episodes[season_number].add(item.episode_key)
            
            if not totals.get(season_number) and item.season_total_episodes:
                totals[season_number] = item.season_total_episodes
        
        seasons = []
        for season_number in sorted(buckets, key=self._season_sort_key):
            matched_count = len(matched_episodes[season_number])
            total_episodes = totals.get(season_number) or 0
            missing_count = max(total_episodes - matched_count, 0) if total_episodes > 0 else 0
            
            seasons.append(SeasonGroup(
                season_number=season_number,
                display_name=self.season_display_name(season_number),
                items=self.gap_detector.fill_gaps(
                    buckets[season_number], season_number, series_name, total_episodes),
                total_episodes=total_episodes,
                matched_count=matched_count,
                missing_count=missing_count,
                is_complete=total_episodes > 0 and missing_count == 0
            ))
        
        return seasons
    
    def season_display_name(self, season_number: int) -> str:
        if season_number == 0:
            return self.specials_label
        if season_number == UNKNOWN_SEASON:
            return self.unknown_season_label
        return self.season_label.format(season=season_number)
    
    @staticmethod
    def _season_sort_key(season_number: int):
        # Unknown season goes last, specials (0) before season 1
        return (season_number == UNKNOWN_SEASON, season_number)
    
    @staticmethod
    def _item_sort_key(item: GroupableItem):
        return (item.season_number or 0, item.episode_key, collation_key(item.raw_name))

def group_files(records: Iterable[Dict[str, Any]], config: Optional[dict] = None) -> List[SeriesGroup]:
    """Group directory scan records by series"""
    return SeriesGrouper(config or default_config()).group_files(records)

def group_previews(records: Iterable[Dict[str, Any]], config: Optional[dict] = None) -> List[SeriesGroup]:
    """Group rename preview records by series"""
    return SeriesGrouper(config or default_config()).group_previews(records)
