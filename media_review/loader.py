"""
Record loading and conversion from scan / rename preview payloads
"""

import os
import json
import logging
import requests
from typing import Any, Dict, List, Optional

from .models import CatalogMatch, GroupableItem, MediaType, RecordSource

logger = logging.getLogger(__name__)

MEDIA_TYPE_NAMES = {
    'MOVIE': MediaType.MOVIE,
    'TV': MediaType.TV_SHOW,
    'TV_SHOW': MediaType.TV_SHOW,
}

class RecordLoadError(ValueError):
    """Raised when records cannot be read or fetched"""

def _to_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric {field_name}: {value!r}")
        return None

def _to_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None

def parse_media_type(value: Any) -> MediaType:
    """Map backend media type strings onto MediaType"""
    if isinstance(value, MediaType):
        return value
    if not isinstance(value, str):
        return MediaType.UNKNOWN
    return MEDIA_TYPE_NAMES.get(value.strip().upper(), MediaType.UNKNOWN)

def detect_source(record: Dict[str, Any]) -> RecordSource:
    """Tell rename preview records apart from scan records"""
    if not isinstance(record, dict):
        return RecordSource.SCAN
    if isinstance(record.get('metadata'), dict) or 'pureNewFileName' in record:
        return RecordSource.PREVIEW
    return RecordSource.SCAN

def item_from_scan_record(record: Dict[str, Any]) -> GroupableItem:
    """Convert one directory scan record into a GroupableItem"""
    if isinstance(record, GroupableItem):
        return record
    
    file_path = _to_str(record.get('filePath'))
    raw_name = _to_str(record.get('fileName'))
    if not raw_name and file_path:
        raw_name = os.path.basename(file_path)
    
    catalog_match = None
    series_name_hint = None
    matched = record.get('matchedInfo')
    if isinstance(matched, dict) and matched:
        catalog_match = CatalogMatch(
            title=_to_str(matched.get('title')),
            name=_to_str(matched.get('name')),
            release_date=_to_str(matched.get('releaseDate') or matched.get('firstAirDate')),
            tmdb_id=_to_int(matched.get('id'), 'matchedInfo.id')
        )
        series_name_hint = catalog_match.name or catalog_match.title
    
    return GroupableItem(
        raw_name=raw_name or '',
        media_type=parse_media_type(record.get('mediaType')),
        source=RecordSource.SCAN,
        catalog_match=catalog_match,
        series_name_hint=series_name_hint,
        parsed_title=_to_str(record.get('parsedTitle')),
        parsed_year=_to_int(record.get('parsedYear'), 'parsedYear'),
        season_number=_to_int(record.get('parsedSeason'), 'parsedSeason'),
        episode_number=_to_int(record.get('parsedEpisode'), 'parsedEpisode'),
        item_id=_to_str(record.get('id')) or file_path,
        path=file_path
    )

def item_from_preview_record(record: Dict[str, Any]) -> GroupableItem:
    """Convert one rename preview record into a GroupableItem"""
    if isinstance(record, GroupableItem):
        return record
    
    metadata = record.get('metadata')
    if not isinstance(metadata, dict):
        metadata = {}
    media_type = parse_media_type(metadata.get('mediaType'))
    
    # Movie previews carry the bare title in seriesName; groupKey adds the year
    series_name_hint = _to_str(metadata.get('seriesName'))
    if media_type == MediaType.MOVIE and _to_str(metadata.get('groupKey')):
        series_name_hint = _to_str(metadata.get('groupKey'))
    
    raw_name = _to_str(record.get('pureNewFileName')) or _to_str(record.get('newFileName')) or ''
    
    return GroupableItem(
        raw_name=raw_name,
        media_type=media_type,
        source=RecordSource.PREVIEW,
        series_name_hint=series_name_hint,
        season_number=_to_int(metadata.get('seasonNumber'), 'seasonNumber'),
        episode_number=_to_int(metadata.get('episodeNumber'), 'episodeNumber'),
        season_total_episodes=_to_int(metadata.get('seasonTotalEpisodes'), 'seasonTotalEpisodes'),
        item_id=_to_str(record.get('oldPath')),
        path=_to_str(record.get('newPath'))
    )

class RecordLoader:
    """Reads scan or preview records from a JSON file or the rename service"""
    
    def __init__(self, config: dict):
        self.config = config
        self.base_url = config['api']['base_url'].rstrip('/')
        self.timeout = config['api']['timeout']
    
    def load_file(self, path: str) -> List[Dict[str, Any]]:
        """Load records from a JSON file"""
        logger.info(f"Loading records from {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RecordLoadError(f"Cannot read records from {path}: {e}") from e
        
        records = self.unwrap(payload)
        logger.info(f"Loaded {len(records)} records")
        return records
    
    def fetch_scan(self, directory: str) -> List[Dict[str, Any]]:
        """Fetch directory scan records from the rename service"""
        url = f"{self.base_url}/files/scan"
        logger.info(f"Fetching scan results for {directory} from {url}")
        try:
            response = requests.get(url, params={"directory": directory}, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            raise RecordLoadError(f"Scan request failed: {e}") from e
        
        records = self.unwrap(payload)
        logger.info(f"Fetched {len(records)} records")
        return records
    
    def unwrap(self, payload: Any) -> List[Dict[str, Any]]:
        """Extract the record list from a bare list or a {code, message, data} envelope"""
        if isinstance(payload, list):
            return self._check_records(payload)

        if not isinstance(payload, dict):
            raise RecordLoadError(f"Unexpected payload type: {type(payload).__name__}")

        code = payload.get('code')
        if code is not None and code != 200:
            raise RecordLoadError(f"Service returned {code}: {payload.get('message') or 'no message'}")

        data = payload.get('data', payload)
        if isinstance(data, dict):
            for key in ('files', 'previews', 'items'):
                if isinstance(data.get(key), list):
                    return self._check_records(data[key])
        if isinstance(data, list):
            return self._check_records(data)

        raise RecordLoadError("Payload does not contain a list of records")

    def _check_records(self, records: List[Any]) -> List[Dict[str, Any]]:
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise RecordLoadError(f"Record {index} is not an object: {type(record).__name__}")
        return records
