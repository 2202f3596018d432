from __future__ import annotations

import pytest

from eurobot_api.ingest.parsing import (
    Accepted,
    RankingLayout,
    Skipped,
    normalize_label,
    parse_match_row,
    parse_position,
    parse_ranking_row,
    parse_timecode,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("1er", 1),
        ("1ère", 1),
        ("2nd", 2),
        ("2ème", 2),
        ("3ème", 3),
        ("3e", 3),
        ("99ème", 99),
        ("12", 12),
        ("12.", 12),
        ("2ème ex aequo", 2),
        ("1 er", 1),
    ],
)
def test_parse_position_reads_ordinals_and_numbers(token, expected):
    assert parse_position(token, index=7) == expected


@pytest.mark.parametrize("token", ["", "-", "ex aequo", "er", "12abc", "3x"])
def test_parse_position_falls_back_to_row_index(token):
    assert parse_position(token, index=4) == 4


@pytest.mark.parametrize(
    "token, expected",
    [("754", 754), ("12:34", 754), ("1:02:03", 3723), ("", None), ("soon", None), ("1:2:3:4", None)],
)
def test_parse_timecode(token, expected):
    assert parse_timecode(token) == expected


def test_normalize_label_strips_accents_and_dots():
    assert normalize_label(" Égal. ") == "egal"
    assert normalize_label("Joués") == "joues"
    assert normalize_label("Déf.") == "def"


def test_ranking_row_scenario():
    row = ("1er", "TeamX", "StandA", "CountryB", "10", "5", "3", "1", "1")

    outcome = parse_ranking_row(row, serie=1, index=1)

    assert isinstance(outcome, Accepted)
    ranking = outcome.record
    assert ranking.position == 1
    assert (ranking.team_name, ranking.team_stand, ranking.team_origin) == ("TeamX", "StandA", "CountryB")
    assert ranking.points == 10
    assert ranking.matches_played == 5
    assert ranking.victories == 3
    assert ranking.draws == 1
    assert ranking.defeats == 1


def test_ranking_row_defaults_origin_and_counts():
    outcome = parse_ranking_row(("", "Solo", "Z9", "", "", "abc"), serie=3, index=6)

    ranking = outcome.record
    assert ranking.position == 6
    assert ranking.team_origin == "Unknown"
    assert ranking.points == 0
    assert ranking.matches_played == 0
    assert ranking.defeats == 0


def test_ranking_row_without_name_or_stand_is_skipped():
    no_name = parse_ranking_row(("1er", "", "A1", "France"), serie=2, index=1)
    no_stand = parse_ranking_row(("2ème", "Beta", "", "France"), serie=2, index=2)

    assert no_name == Skipped("ranking", 2, 1, "missing team name")
    assert isinstance(no_stand, Skipped)
    assert no_stand.reason == "missing stand for team 'Beta'"


def test_ranking_layout_follows_header_labels():
    header = ("", "Stand", "Équipe", "Origine", "Cumul", "Joués", "Vict.", "Égal.", "Déf.")
    layout = RankingLayout.from_header(header)

    assert layout.stand == 1
    assert layout.name == 2
    assert layout.position == 0

    outcome = parse_ranking_row(("2ème", "B2", "Beta", "Suisse", "8"), serie=1, index=2, layout=layout)
    assert outcome.record.team_name == "Beta"
    assert outcome.record.team_stand == "B2"


def test_ranking_layout_keeps_defaults_for_unlabelled_header():
    assert RankingLayout.from_header(("", " ", "", "")) == RankingLayout()


def test_match_row_scenario():
    outcome = parse_match_row(("5", "A1", "Alpha", "10", "7", "Beta", "B2"), serie=1)

    assert isinstance(outcome, Accepted)
    match = outcome.record
    assert match.match_number == 5
    assert (match.team1_stand, match.team1_name, match.team1_score) == ("A1", "Alpha", 10)
    assert (match.team2_name, match.team2_stand, match.team2_score) == ("Beta", "B2", 7)
    assert match.timecode is None


def test_match_row_reads_optional_timecode():
    outcome = parse_match_row(("8", "A1", "Alpha", "1", "2", "Beta", "B2", "0:10:00"), serie=1)
    assert outcome.record.timecode == 600


@pytest.mark.parametrize(
    "row, reason",
    [
        (("", "A1", "Alpha", "1", "2", "Beta", "B2"), "invalid match number ''"),
        (("0", "A1", "Alpha", "1", "2", "Beta", "B2"), "invalid match number '0'"),
        (("4", "A1", "", "1", "2", "Beta", "B2"), "match 4: missing team name"),
        (("4", "A1", "Alpha", "1", "2", "", "B2"), "match 4: missing team name"),
        (("4", "A1", "Alpha", "", "2", "Beta", "B2"), "match 4: non-numeric score"),
        (("4", "A1", "Alpha", "1", "-2", "Beta", "B2"), "match 4: non-numeric score"),
        (("4", "A1", "Alpha"), "match 4: missing team name"),
    ],
)
def test_incomplete_match_rows_are_skipped_with_reason(row, reason):
    outcome = parse_match_row(row, serie=2, index=9)

    assert isinstance(outcome, Skipped)
    assert outcome.kind == "match"
    assert outcome.serie == 2
    assert outcome.row_number == 9
    assert outcome.reason == reason
