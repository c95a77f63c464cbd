#!/usr/bin/env python3
"""
Media Review
Group scanned media files and rename previews by series and season,
showing which episodes are missing before a bulk rename.
"""

import click
import json
import logging
from dotenv import load_dotenv

from media_review import __version__
from media_review.utils import load_config, setup_logging
from media_review.loader import RecordLoader, RecordLoadError, detect_source
from media_review.grouping import SeriesGrouper
from media_review.models import RecordSource
from media_review.report import format_summary, groups_to_dict

# Load environment variables
load_dotenv()

@click.command()
@click.argument('path', required=False, type=click.Path(exists=True, dir_okay=False))
@click.option('--directory', '-d', help='Fetch scan results for this directory from the rename service')
@click.option('--previews', is_flag=True, help='Treat the records as rename previews')
@click.option('--json', 'as_json', is_flag=True, help='Print the grouped structure as JSON')
@click.option('--config', 'config_path', default='config/settings.yaml', show_default=True, help='Configuration file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.version_option(version=__version__)
def main(path, directory, previews, as_json, config_path, verbose):
    """Group media records from PATH (JSON) or a scanned DIRECTORY"""
    if bool(path) == bool(directory):
        raise click.UsageError("Provide either PATH or --directory")
    
    config = load_config(config_path)
    setup_logging(verbose, config['logging'].get('file'))
    logger = logging.getLogger(__name__)
    
    loader = RecordLoader(config)
    try:
        records = loader.load_file(path) if path else loader.fetch_scan(directory)
    except RecordLoadError as e:
        logger.debug(f"Loading records failed: {e}")
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    
    grouper = SeriesGrouper(config)
    if previews or (records and detect_source(records[0]) == RecordSource.PREVIEW):
        groups = grouper.group_previews(records)
    else:
        groups = grouper.group_files(records)
    
    if as_json:
        click.echo(json.dumps(groups_to_dict(groups), ensure_ascii=False, indent=2))
        return
    
    if not groups:
        click.echo("No media records found!")
        return
    
    for line in format_summary(groups):
        click.echo(line)

if __name__ == '__main__':
    main()
