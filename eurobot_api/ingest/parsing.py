"""
Row parsers: positional CSV rows -> Match / Ranking records.

Header text is unreliable across exports (empty labels, labels made of a
single space, labels glued to their neighbour), so rows are mapped to fields
through explicit column-index tables. Every row yields either
``Accepted(record)`` or ``Skipped(...)`` with the reason it was dropped.
"""
import re
import unicodedata
from dataclasses import dataclass, replace
from typing import Generic, Optional, Sequence, TypeVar, Union

from eurobot_api.models import Match, Ranking

UNKNOWN_ORIGIN = "Unknown"

T = TypeVar("T")


@dataclass(frozen=True)
class Accepted(Generic[T]):
    record: T


@dataclass(frozen=True)
class Skipped:
    kind: str  # "match" or "ranking"
    serie: int
    row_number: int  # 1-based, header excluded
    reason: str


RowOutcome = Union[Accepted, Skipped]


# --- Column layouts ---

@dataclass(frozen=True)
class RankingLayout:
    position: int = 0
    name: int = 1
    stand: int = 2
    origin: int = 3
    points: int = 4
    matches_played: int = 5
    victories: int = 6
    draws: int = 7
    defeats: int = 8

    @classmethod
    def from_header(cls, header: Sequence[str]) -> "RankingLayout":
        """
        Build a layout from a header row.

        Recognised labels override the default index of their field; the
        position column is never labelled and keeps its default.
        """
        found = {}
        for index, label in enumerate(header):
            key = RANKING_LABELS.get(normalize_label(label))
            if key and key not in found:
                found[key] = index
        return replace(cls(), **found)


@dataclass(frozen=True)
class MatchLayout:
    number: int = 0
    team1_stand: int = 1
    team1_name: int = 2
    team1_score: int = 3
    team2_score: int = 4
    team2_name: int = 5
    team2_stand: int = 6
    timecode: int = 7


RANKING_LABELS = {
    "equipe": "name",
    "stand": "stand",
    "origine": "origin",
    "cumul": "points",
    "joues": "matches_played",
    "vict": "victories",
    "egal": "draws",
    "def": "defeats",
}

MATCH_LAYOUT = MatchLayout()


def normalize_label(label: str) -> str:
    """'Égal.' -> 'egal', ' Joués ' -> 'joues'."""
    decomposed = unicodedata.normalize("NFKD", label or "")
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    return ascii_only.strip().rstrip(".").strip().lower()


# --- Token parsing ---

# 1er, 1ère, 1re, 2nd, 2nde, 2e, 2ème, 2eme, optionally followed by "ex aequo" etc.
ORDINAL_PATTERN = re.compile(r"^\s*(\d+)\s*(?:er|ère|ere|re|nde|nd|ème|eme|e)\b", re.IGNORECASE)
BARE_NUMBER_PATTERN = re.compile(r"^\s*(\d+)\s*\.?\s*$")
LEADING_NUMBER_PATTERN = re.compile(r"^\s*(\d+)")


def parse_position(token: str, index: int) -> int:
    """
    Position from an ordinal token such as '1er' or '2ème'.

    Falls back to a bare number ('12' or '12.'), then to ``index`` (1-based
    row index). Tokens such as '12abc' are neither and get the index.
    """
    token = token or ""
    for pattern in (ORDINAL_PATTERN, BARE_NUMBER_PATTERN):
        found = pattern.match(token)
        if found:
            return int(found.group(1))
    return index


def parse_count(token: str) -> Optional[int]:
    """Leading non-negative integer of a cell, or None."""
    found = LEADING_NUMBER_PATTERN.match(token or "")
    return int(found.group(1)) if found else None


def parse_timecode(token: str) -> Optional[int]:
    """Seconds from '754', '12:34' or '1:02:03'; None when empty or malformed."""
    token = (token or "").strip()
    if not token:
        return None
    parts = token.split(":")
    if len(parts) > 3 or not all(p.strip().isdigit() for p in parts):
        return None
    seconds = 0
    for part in parts:
        seconds = seconds * 60 + int(part)
    return seconds


def _cell(row: Sequence[str], index: int) -> str:
    return row[index].strip() if index < len(row) else ""


# --- Row parsers ---

def parse_ranking_row(
    row: Sequence[str],
    serie: int,
    index: int,
    layout: RankingLayout = RankingLayout(),
) -> RowOutcome:
    name = _cell(row, layout.name)
    stand = _cell(row, layout.stand)
    if not name:
        return Skipped("ranking", serie, index, "missing team name")
    if not stand:
        return Skipped("ranking", serie, index, f"missing stand for team '{name}'")

    ranking = Ranking(
        serie=serie,
        position=parse_position(_cell(row, layout.position), index),
        team_name=name,
        team_stand=stand,
        team_origin=_cell(row, layout.origin) or UNKNOWN_ORIGIN,
        points=parse_count(_cell(row, layout.points)) or 0,
        matches_played=parse_count(_cell(row, layout.matches_played)) or 0,
        victories=parse_count(_cell(row, layout.victories)) or 0,
        draws=parse_count(_cell(row, layout.draws)) or 0,
        defeats=parse_count(_cell(row, layout.defeats)) or 0,
    )
    return Accepted(ranking)


def parse_match_row(
    row: Sequence[str],
    serie: int,
    index: int = 0,
    layout: MatchLayout = MATCH_LAYOUT,
) -> RowOutcome:
    number = parse_count(_cell(row, layout.number))
    if not number:
        return Skipped("match", serie, index, f"invalid match number '{_cell(row, layout.number)}'")

    team1_name = _cell(row, layout.team1_name)
    team2_name = _cell(row, layout.team2_name)
    if not team1_name or not team2_name:
        return Skipped("match", serie, index, f"match {number}: missing team name")

    team1_score = parse_count(_cell(row, layout.team1_score))
    team2_score = parse_count(_cell(row, layout.team2_score))
    if team1_score is None or team2_score is None:
        return Skipped("match", serie, index, f"match {number}: non-numeric score")

    match = Match(
        match_number=number,
        serie=serie,
        team1_name=team1_name,
        team1_stand=_cell(row, layout.team1_stand),
        team1_score=team1_score,
        team2_name=team2_name,
        team2_stand=_cell(row, layout.team2_stand),
        team2_score=team2_score,
        timecode=parse_timecode(_cell(row, layout.timecode)),
    )
    return Accepted(match)
