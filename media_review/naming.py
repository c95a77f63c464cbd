"""
Series name resolution and filename heuristics
"""

import os
import re
import logging
from typing import Iterable, List, Optional, Tuple

from .models import GroupableItem, MediaType, RecordSource
from .utils import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

UNKNOWN_SERIES = DEFAULT_CONFIG['display']['unknown_series']

# Episode/season markers, most specific first. Each one ends the title.
MARKERS: List[Tuple[str, str]] = [
    (r's\d{1,2}e\d{1,2}', "S01E01 season/episode code"),
    (r'第\s*[\d一二三四五六七八九十百零]+\s*[集季话話]', "localized episode/season numeral"),
    (r'(?<!\d)\d{1,2}x\d{1,2}(?!\d)', "1x01 season/episode code"),
    (r'(?<![a-z])ep?\d+', "EP01 / E01 episode marker"),
]

EPISODE_MARKER_PATTERNS: List[Tuple[re.Pattern, str]] = [
    (re.compile(marker + r'.*$', re.IGNORECASE), description)
    for marker, description in MARKERS
]

# Generated names put a separator such as " - " in front of the marker
DISPLAY_NAME_MARKER_PATTERNS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r'(?:\s*[-–_.]\s*|\s*)' + marker + r'.*$', re.IGNORECASE), description)
    for marker, description in MARKERS
]

_SEPARATORS = ' \t\r\n-–_.,;:·|'
_OPENERS = '([{【（'

def _trim(text: str) -> str:
    return text.strip(_SEPARATORS).rstrip(_OPENERS + _SEPARATORS).strip()

def _clean(value: Optional[str]) -> str:
    return value.strip() if isinstance(value, str) else ''

def strip_extension(name: str, extensions: Iterable[str]) -> str:
    """Remove a trailing media extension, leaving dotted titles alone"""
    root, ext = os.path.splitext(name)
    if ext and ext.lower() in {e.lower() for e in extensions}:
        return root
    return name

def _strip_first_marker(name: str, patterns: List[Tuple[re.Pattern, str]]) -> str:
    for pattern, description in patterns:
        match = pattern.search(name)
        if match:
            logger.debug(f"Stripped {description} from '{name}'")
            return name[:match.start()]
    return name

def extract_series_name(file_name: str, extensions: Iterable[str] = None,
                        fallback: str = UNKNOWN_SERIES) -> str:
    """Guess a series title from a raw file name"""
    if extensions is None:
        extensions = DEFAULT_CONFIG['video']['extensions']
    name = strip_extension(file_name or '', extensions)
    return _trim(_strip_first_marker(name, EPISODE_MARKER_PATTERNS)) or fallback

def extract_series_name_from_display_name(display_name: str, extensions: Iterable[str] = None,
                                          fallback: str = UNKNOWN_SERIES) -> str:
    """Guess a series title from a generated name like 'Show - S01E02.mkv'"""
    if extensions is None:
        extensions = DEFAULT_CONFIG['video']['extensions']
    name = strip_extension(display_name or '', extensions)
    return _trim(_strip_first_marker(name, DISPLAY_NAME_MARKER_PATTERNS)) or fallback

class SeriesNameResolver:
    """Derives the grouping key of a single item"""
    
    def __init__(self, config: dict):
        self.extensions = config['video']['extensions']
        self.unknown_series = config['display']['unknown_series']
        self.unknown_year = config['display']['unknown_year']
    
    def resolve(self, item: GroupableItem) -> str:
        """Return the series name, never empty"""
        if item.source == RecordSource.PREVIEW:
            name = _clean(item.series_name_hint) or extract_series_name_from_display_name(
                item.raw_name, self.extensions, fallback='')
        else:
            name = (self._from_catalog(item)
                    or self._from_parsed(item)
                    or extract_series_name(item.raw_name, self.extensions, fallback=''))
        
        return name or self.unknown_series
    
    def _from_catalog(self, item: GroupableItem) -> str:
        match = item.catalog_match
        if match is None:
            return ''
        
        if item.media_type == MediaType.TV_SHOW:
            return _clean(match.name) or _clean(item.series_name_hint) or _clean(item.parsed_title)
        
        if item.media_type == MediaType.MOVIE:
            title = _clean(match.title) or _clean(item.series_name_hint) or _clean(item.parsed_title)
            if title:
                year = self._release_year(match.release_date) or item.parsed_year or self.unknown_year
                return f"{title} ({year})"
        
        return ''
    
    def _from_parsed(self, item: GroupableItem) -> str:
        title = _clean(item.parsed_title)
        if not title:
            return ''
        
        if item.media_type == MediaType.TV_SHOW:
            return title
        if item.media_type == MediaType.MOVIE:
            return f"{title} ({item.parsed_year or self.unknown_year})"
        
        return ''
    
    def _release_year(self, release_date: Optional[str]) -> Optional[str]:
        """Extract a 4-digit year from a catalog release date"""
        if not release_date:
            return None
        match = re.match(r'\s*(\d{4})', str(release_date))
        return match.group(1) if match else None
