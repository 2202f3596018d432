"""
Ingestion of the per-serie CSV exports.
"""
from eurobot_api.ingest.parsing import (
    Accepted,
    Skipped,
    parse_match_row,
    parse_position,
    parse_ranking_row,
    parse_timecode,
)
from eurobot_api.ingest.pipeline import (
    IngestionReport,
    build_series,
    extract_teams,
    run_ingestion,
)
from eurobot_api.ingest.reader import discover_files, discover_series, load_live_stream_urls, read_rows

__all__ = [
    "Accepted",
    "Skipped",
    "IngestionReport",
    "build_series",
    "discover_files",
    "discover_series",
    "extract_teams",
    "load_live_stream_urls",
    "parse_match_row",
    "parse_position",
    "parse_ranking_row",
    "parse_timecode",
    "read_rows",
    "run_ingestion",
]
