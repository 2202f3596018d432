"""
CSV -> database ingestion.

Reads every ``classement_serie_<N>.csv`` / ``matchs_serie_<N>.csv`` pair of a
data directory, derives the teams and the serie metadata, then replaces the
content of the four tables. Each table is cleared and refilled in its own
commit; a failure part-way leaves earlier tables already replaced.
"""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd
from sqlalchemy import delete
from sqlmodel import Session

from eurobot_api.ingest.parsing import (
    UNKNOWN_ORIGIN,
    Accepted,
    RankingLayout,
    Skipped,
    parse_match_row,
    parse_ranking_row,
)
from eurobot_api.ingest.reader import (
    discover_files,
    load_live_stream_urls,
    read_rows,
)
from eurobot_api.models import Match, Ranking, Serie, SerieStatus, Team

logger = logging.getLogger(__name__)

SERIE_SPACING_DAYS = 10


@dataclass
class IngestionReport:
    teams: int = 0
    matches: int = 0
    rankings: int = 0
    series: int = 0
    skipped: List[Skipped] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "teams": self.teams,
            "matches": self.matches,
            "rankings": self.rankings,
            "series": self.series,
            "skipped": [
                {"kind": s.kind, "serie": s.serie, "row": s.row_number, "reason": s.reason}
                for s in self.skipped
            ],
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }


def parse_rankings_file(path: Path, serie: int) -> Tuple[List[Ranking], List[Skipped]]:
    header, rows = read_rows(path)
    layout = RankingLayout.from_header(header)

    rankings, skipped = [], []
    for index, row in enumerate(rows, start=1):
        outcome = parse_ranking_row(row, serie, index, layout)
        if isinstance(outcome, Accepted):
            rankings.append(outcome.record)
        else:
            skipped.append(outcome)
    return rankings, skipped


def parse_matches_file(path: Path, serie: int) -> Tuple[List[Match], List[Skipped]]:
    # Header is ignored, match files are read purely by position
    _, rows = read_rows(path)

    matches, skipped = [], []
    for index, row in enumerate(rows, start=1):
        outcome = parse_match_row(row, serie, index)
        if isinstance(outcome, Accepted):
            matches.append(outcome.record)
        else:
            skipped.append(outcome)
    return matches, skipped


def extract_teams(rankings: Iterable[Ranking]) -> Tuple[List[Team], List[str]]:
    """
    Merge ranking rows into one team per name.

    The first stand seen is kept. A known origin replaces an empty or
    'Unknown' one. A different stand for the same name is reported as a
    warning and otherwise ignored.
    """
    teams: Dict[str, Team] = {}
    warnings: List[str] = []

    for ranking in rankings:
        name, stand, origin = ranking.team_name, ranking.team_stand, ranking.team_origin
        if not name or not stand:
            continue

        existing = teams.get(name)
        if existing is None:
            teams[name] = Team(name=name, stand=stand, origin=origin or UNKNOWN_ORIGIN)
            continue

        if existing.stand != stand:
            message = (
                f"Team '{name}' has stand '{existing.stand}' and '{stand}' "
                f"(serie {ranking.serie}), keeping '{existing.stand}'"
            )
            logger.warning(message)
            warnings.append(message)

        if existing.origin in ("", UNKNOWN_ORIGIN) and origin not in ("", UNKNOWN_ORIGIN):
            existing.origin = origin

    return list(teams.values()), warnings


def build_series(
    serie_numbers: List[int],
    rankings: List[Ranking],
    matches: List[Match],
    live_stream_urls: Optional[Dict[int, str]] = None,
    today: Optional[date] = None,
) -> List[Serie]:
    """
    Synthesize serie metadata for the discovered series.

    Series are placed 10 days apart, the last one starting 10 days before
    ``today``; each lasts one day and is marked completed.
    """
    live_stream_urls = live_stream_urls or {}
    today = today or datetime.now(timezone.utc).date()
    numbers = sorted(serie_numbers)

    series = []
    for i, number in enumerate(numbers):
        start_day = today - timedelta(days=SERIE_SPACING_DAYS * (len(numbers) - i))
        start = datetime.combine(start_day, time.min, tzinfo=timezone.utc)
        series.append(
            Serie(
                serie_number=number,
                name=f"Série {number}",
                description=f"Série {number} de la compétition Eurobot",
                start_date=start,
                end_date=start + timedelta(days=1),
                status=SerieStatus.completed,
                total_teams=sum(1 for r in rankings if r.serie == number),
                total_matches=sum(1 for m in matches if m.serie == number),
                live_stream_url=live_stream_urls.get(number, ""),
            )
        )
    return series


def replace_all(session: Session, model, records: List) -> int:
    """Delete every row of ``model`` then insert ``records``."""
    session.exec(delete(model))
    session.add_all(records)
    session.commit()
    return len(records)


def run_ingestion(
    session: Session,
    data_dir: Path,
    config_path: Optional[Path] = None,
    today: Optional[date] = None,
) -> IngestionReport:
    """
    Ingest all CSV exports of ``data_dir`` into the database behind ``session``.

    Unreadable files are recorded in ``report.errors`` and the remaining
    series are still ingested.
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")

    report = IngestionReport()
    files = discover_files(data_dir)
    serie_numbers = list(files)
    live_stream_urls = load_live_stream_urls(config_path)
    logger.info("Found series %s in %s", serie_numbers, data_dir)

    rankings: List[Ranking] = []
    matches: List[Match] = []

    for serie in serie_numbers:
        for kind, path, parse, bucket in (
            ("rankings", files[serie].get("rankings"), parse_rankings_file, rankings),
            ("matches", files[serie].get("matches"), parse_matches_file, matches),
        ):
            if path is None:
                logger.info("No %s file for serie %s", kind, serie)
                continue
            try:
                records, skipped = parse(path, serie)
            except (OSError, ValueError, pd.errors.ParserError) as e:
                message = f"Error reading {kind} file for serie {serie}: {e}"
                logger.error(message)
                report.errors.append(message)
                continue

            for s in skipped:
                logger.debug("Skipped %s row %s of serie %s: %s", s.kind, s.row_number, s.serie, s.reason)
            bucket.extend(records)
            report.skipped.extend(skipped)
            logger.info(
                "Serie %s: parsed %d %s (%d skipped)", serie, len(records), kind, len(skipped)
            )

    teams, warnings = extract_teams(rankings)
    report.warnings.extend(warnings)
    series = build_series(serie_numbers, rankings, matches, live_stream_urls, today)

    report.teams = replace_all(session, Team, teams)
    report.matches = replace_all(session, Match, matches)
    report.rankings = replace_all(session, Ranking, rankings)
    report.series = replace_all(session, Serie, series)

    logger.info(
        "Ingestion complete: %d teams, %d matches, %d rankings, %d series",
        report.teams, report.matches, report.rankings, report.series,
    )
    return report
