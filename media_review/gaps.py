"""
Missing episode detection within a season
"""

import logging
from typing import List, Sequence

from .models import GroupableItem, MissingEpisodePlaceholder, SeasonEntry

logger = logging.getLogger(__name__)

class GapDetector:
    """Interleaves placeholders wherever a season's episode numbering has holes"""
    
    def __init__(self, config: dict):
        display = config['display']
        self.single_label = display['missing_single']
        self.range_label = display['missing_range']
    
    def fill_gaps(self, items: Sequence[GroupableItem], season_number: int,
                  series_name: str, total_episodes: int = 0) -> List[SeasonEntry]:
        """Return items with placeholders for every missing episode range.

        Items must already be sorted by episode number. Items without an
        episode number are passed through and do not move the expected
        episode forward.
        """
        result: List[SeasonEntry] = []
        expected = 1
        last_episode = 0
        
        for item in items:
            episode = item.episode_key
            if episode <= 0:
                result.append(item)
                continue
            
            if episode > expected:
                result.append(self.create_placeholder(series_name, season_number, expected, episode - 1))
            
            result.append(item)
            expected = episode + 1
            last_episode = episode
        
        if total_episodes > 0:
            if not items:
                result.append(self.create_placeholder(series_name, season_number, 1, total_episodes))
            elif 0 < last_episode < total_episodes:
                result.append(self.create_placeholder(series_name, season_number, last_episode + 1, total_episodes))
        
        added = len(result) - len(items)
        if added:
            logger.debug(f"{series_name} season {season_number}: inserted {added} missing episode placeholder(s)")
        return result
    
    def create_placeholder(self, series_name: str, season_number: int,
                           start_episode: int, end_episode: int) -> MissingEpisodePlaceholder:
        """Build the placeholder covering start_episode..end_episode inclusive"""
        count = end_episode - start_episode + 1
        
        if count == 1:
            label = self.single_label.format(start=start_episode, end=end_episode, count=count)
        else:
            label = self.range_label.format(start=start_episode, end=end_episode, count=count)
        
        return MissingEpisodePlaceholder(
            season_number=season_number,
            start_episode=start_episode,
            end_episode=end_episode,
            count=count,
            series_name=series_name,
            episode_range_label=label,
            theoretical_name=f"{series_name} - S{season_number:02d}E{start_episode:02d}",
            synthetic_id=f"missing-{season_number}-{start_episode}-{end_episode}"
        )
