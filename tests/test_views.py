from __future__ import annotations

from eurobot_api import views

TEAMS = [
    {"name": "RCVA", "stand": "A12", "origin": "France"},
    {"name": "Robotech Legends", "stand": "B04", "origin": "Suisse"},
    {"name": "Les Karibous", "stand": "A03", "origin": "France"},
    {"name": "Team Microb", "stand": "B11", "origin": "Belgique"},
]


def _match(number, serie, team1, score1, team2, score2, timecode=None):
    return {
        "matchNumber": number,
        "serie": serie,
        "team1": {"name": team1, "stand": team1[:2].upper(), "score": score1},
        "team2": {"name": team2, "stand": team2[:2].upper(), "score": score2},
        "timecode": timecode,
    }


MATCHES = [
    _match(1, 1, "Alpha", 10, "Beta", 7, timecode=750),
    _match(2, 1, "Gamma", 5, "Alpha", 5),
    _match(3, 1, "Beta", 12, "Gamma", 4),
    _match(14, 2, "Alpha", 3, "Beta", 9),
]


def test_team_origins_are_unique_and_sorted():
    assert views.team_origins(TEAMS) == ["Belgique", "France", "Suisse"]


def test_filter_teams_by_search_and_origin():
    assert [t["name"] for t in views.filter_teams(TEAMS, "LEGEND")] == ["Robotech Legends"]
    assert [t["name"] for t in views.filter_teams(TEAMS, "rob")] == ["Robotech Legends", "Team Microb"]
    assert [t["name"] for t in views.filter_teams(TEAMS, "a1")] == ["RCVA"]
    assert [t["name"] for t in views.filter_teams(TEAMS, "b", origin="Belgique")] == ["Team Microb"]
    assert [t["name"] for t in views.filter_teams(TEAMS, origin="France")] == ["RCVA", "Les Karibous"]


def test_most_common_origin():
    assert views.most_common_origin(TEAMS) == "France"
    assert views.most_common_origin([]) is None


def test_search_matches_by_number_name_or_stand():
    assert [m["matchNumber"] for m in views.search_matches(MATCHES, "1")] == [1, 14]
    assert [m["matchNumber"] for m in views.search_matches(MATCHES, "gam")] == [2, 3]
    assert [m["matchNumber"] for m in views.search_matches(MATCHES, "BE")] == [1, 3, 14]
    assert views.search_matches(MATCHES, "") == MATCHES


def test_highest_total_match():
    assert views.highest_total_match(MATCHES)["matchNumber"] == 1
    assert views.highest_total_match([]) is None


def test_highest_individual_score():
    score, team, match = views.highest_individual_score(MATCHES)

    assert (score, team, match["matchNumber"]) == (12, "Beta", 3)
    assert [m["matchNumber"] for m in views.highest_score_matches(MATCHES)] == [3]
    assert views.highest_score_matches([]) == []


def test_average_score():
    # (17 + 10 + 16 + 12) / 8 = 6.875
    assert views.average_score(MATCHES) == 7
    assert views.average_score([]) == 0


def test_team_record_and_points_by_serie():
    alpha = [m for m in MATCHES if "Alpha" in (m["team1"]["name"], m["team2"]["name"])]

    record = views.team_record(alpha, "Alpha")

    assert record == {
        "played": 3,
        "wins": 1,
        "draws": 1,
        "losses": 1,
        "points_for": 18,
        "points_against": 21,
    }
    assert views.points_by_serie(alpha, "Alpha") == [
        {"serie": 1, "matches": 2, "points": 15},
        {"serie": 2, "matches": 1, "points": 3},
    ]


def test_video_url_appends_timecode():
    serie = {"liveStreamUrl": "https://www.youtube.com/watch?v=abc"}

    assert views.video_url(MATCHES[0], serie) == "https://www.youtube.com/watch?v=abc&start=750"
    assert views.video_url(MATCHES[0], {"liveStreamUrl": "https://live.example/s1"}) == (
        "https://live.example/s1?start=750"
    )
    assert views.video_url(MATCHES[1], serie) is None
    assert views.video_url(MATCHES[0], {"liveStreamUrl": ""}) is None


def test_ranking_summary_and_series_totals():
    rankings = [{"points": 52}, {"points": 44}, {"points": 39}]

    assert views.ranking_summary(rankings) == {"max_points": 52, "average_points": 45}
    assert views.ranking_summary([]) == {"max_points": 0, "average_points": 0}
    assert views.series_totals([{"totalTeams": 5, "totalMatches": 5}, {"totalTeams": 5, "totalMatches": 4}]) == {
        "series": 2,
        "teams": 10,
        "matches": 9,
    }
