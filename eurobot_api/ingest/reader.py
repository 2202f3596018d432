"""
Discovery and reading of the per-serie CSV exports.

Exports come from several competition years and are not consistent: most are
semicolon-delimited, some were re-saved with commas and carry the position and
team name in a single "1er;Team" cell. Rows are returned as plain tuples of
stripped strings; mapping columns to fields is left to the row parsers.
"""
import io
import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

RANKING_FILE_PATTERN = re.compile(r"^classement_serie_(\d+)\.csv$", re.IGNORECASE)
MATCH_FILE_PATTERN = re.compile(r"^matchs_serie_(\d+)\.csv$", re.IGNORECASE)

FILE_PATTERNS = (("rankings", RANKING_FILE_PATTERN), ("matches", MATCH_FILE_PATTERN))

# "1er;TeamX" (or ";Équipe" in the header) left in one cell by comma re-saves
POSITION_AND_NAME_CELL = re.compile(r"^\s*(\d+\s*[^\W\d]*\.?)?\s*;\s*(.*)$")

Row = Tuple[str, ...]


def discover_files(data_dir: Path) -> Dict[int, Dict[str, Path]]:
    """
    Map each serie number to the export files found for it.

    ``{1: {"rankings": Path(...), "matches": Path(...)}}``. File names are
    matched case-insensitively and zero-padded numbers are accepted. When two
    files claim the same serie and kind, the first in name order wins.
    """
    files: Dict[int, Dict[str, Path]] = {}
    for path in sorted(Path(data_dir).iterdir()):
        if not path.is_file():
            continue
        for kind, pattern in FILE_PATTERNS:
            found = pattern.match(path.name)
            if not found:
                continue
            serie_files = files.setdefault(int(found.group(1)), {})
            if kind in serie_files:
                logger.warning(
                    "Ignoring %s, serie %s already uses %s", path.name, found.group(1), serie_files[kind].name
                )
            else:
                serie_files[kind] = path
    return dict(sorted(files.items()))


def discover_series(data_dir: Path) -> List[int]:
    """Return the serie numbers found in the file names of ``data_dir``, sorted."""
    return list(discover_files(data_dir))


def load_live_stream_urls(config_path: Optional[Path]) -> Dict[int, str]:
    """
    Load the serie number -> livestream URL mapping.

    The file looks like ``{"liveStreamUrls": {"1": "https://..."}}``. A missing
    file means no livestreams; an unreadable one is logged and ignored.
    """
    if config_path is None or not Path(config_path).exists():
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        urls = payload.get("liveStreamUrls") or {}
        return {int(number): str(url) for number, url in urls.items() if url}
    except (OSError, ValueError, AttributeError) as e:
        logger.warning("Ignoring series config %s: %s", config_path, e)
        return {}


def _decode(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def _detect_separator(line: str) -> str:
    unquoted = re.sub(r'"[^"]*"', "", line)
    return "," if unquoted.count(",") > unquoted.count(";") else ";"


def _split_position_cell(cells: Row) -> Row:
    if not cells:
        return cells
    found = POSITION_AND_NAME_CELL.match(cells[0])
    if not found:
        return cells
    return ((found.group(1) or "").strip(), found.group(2).strip()) + tuple(cells[1:])


def _read_lines(lines: List[str], sep: str) -> List[Row]:
    width = max(line.count(sep) for line in lines) + 1
    frame = pd.read_csv(
        io.StringIO("\n".join(lines)),
        sep=sep,
        header=None,
        names=list(range(width)),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=False,
    ).fillna("")
    return [tuple(cell.strip() for cell in row) for row in frame.itertuples(index=False, name=None)]


def read_rows(path: Path) -> Tuple[Row, List[Row]]:
    """
    Read a CSV export as positional rows.

    Returns ``(header, rows)``. The separator is detected line by line, so a
    comma re-saved row inside a semicolon export is still split correctly.
    Blank rows are dropped; short rows are padded with empty strings up to the
    widest row of the file.
    """
    text = _decode(Path(path).read_bytes())
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        return (), []

    by_separator: Dict[str, List[int]] = {}
    for number, line in enumerate(lines):
        by_separator.setdefault(_detect_separator(line), []).append(number)

    records: List[Row] = [()] * len(lines)
    for sep, numbers in by_separator.items():
        parsed = _read_lines([lines[n] for n in numbers], sep)
        if sep == ",":
            parsed = [_split_position_cell(row) for row in parsed]
        for number, row in zip(numbers, parsed):
            records[number] = row

    width = max(len(row) for row in records)
    records = [row + ("",) * (width - len(row)) for row in records]
    header, rows = records[0], records[1:]
    rows = [row for row in rows if any(row)]
    return header, rows
