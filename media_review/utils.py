"""
Utility functions for media review grouping
"""

import copy
import yaml
import logging
import os
import unicodedata
from typing import Dict, Any, Tuple

DEFAULT_CONFIG: Dict[str, Any] = {
    'api': {
        'base_url': 'http://localhost:8080/api',
        'timeout': 30,
    },
    'video': {
        'extensions': ['.mkv', '.mp4', '.avi', '.mov', '.wmv', '.flv', '.webm',
                       '.m4v', '.mpg', '.mpeg', '.m2ts', '.ts', '.rmvb', '.iso'],
    },
    'display': {
        'unknown_series': 'Unknown Series',
        'unknown_year': 'unknown',
        'specials': 'Specials',
        'unknown_season': 'Other / Unknown Season',
        'season': 'Season {season}',
        'missing_single': 'Episode {start}',
        'missing_range': 'Episodes {start}-{end} ({count} episodes)',
    },
    'logging': {
        'file': None,
    },
}

def default_config() -> Dict[str, Any]:
    """Return a fresh copy of the built-in configuration"""
    return copy.deepcopy(DEFAULT_CONFIG)

def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base

def load_config(config_path: str = "config/settings.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file on top of the defaults"""
    config = default_config()
    try:
        if os.path.exists(config_path):
            with open(config_path, 'r', encoding='utf-8') as f:
                _merge(config, yaml.safe_load(f) or {})
        else:
            logging.debug(f"Config file not found, using defaults: {config_path}")
        
        # Override with environment variables
        if 'MEDIA_REVIEW_API_URL' in os.environ:
            config['api']['base_url'] = os.environ['MEDIA_REVIEW_API_URL']
        
        if 'MEDIA_REVIEW_API_TIMEOUT' in os.environ:
            config['api']['timeout'] = int(os.environ['MEDIA_REVIEW_API_TIMEOUT'])
        
        if 'MEDIA_REVIEW_LOG_FILE' in os.environ:
            config['logging']['file'] = os.environ['MEDIA_REVIEW_LOG_FILE']
        
        return config
    
    except Exception as e:
        logging.error(f"Failed to load config: {e}")
        raise

def setup_logging(verbose: bool = False, log_file: str = None) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    
    # Create formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    )
    simple_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s'
    )
    
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_file else level)
    
    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)
    
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

def collation_key(text: str) -> Tuple[str, str]:
    """Locale-independent sort key: accent-folded, case-folded, then lowercase first"""
    decomposed = unicodedata.normalize('NFKD', text)
    folded = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (folded.casefold(), text.swapcase())
