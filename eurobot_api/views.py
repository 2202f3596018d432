"""
Client-side view logic of the dashboard.

Everything here works on the JSON lists returned by the API (camelCase keys).
Result sets are small, so search, filtering and highlights are computed in
memory instead of through extra API calls.
"""
from collections import Counter
from typing import Optional


def _contains(value, search: str) -> bool:
    return search.lower() in str(value).lower()


def _half_up(value: float) -> int:
    return int(value + 0.5)


# --- Teams ---

def team_origins(teams: list[dict]) -> list[str]:
    """Distinct origins, sorted, for the origin selector."""
    return sorted({t["origin"] for t in teams})


def filter_teams(teams: list[dict], search: str = "", origin: str = "") -> list[dict]:
    """Teams whose name or stand contains ``search`` and, if set, from ``origin``."""
    return [
        t for t in teams
        if (_contains(t["name"], search) or _contains(t["stand"], search))
        and (not origin or t["origin"] == origin)
    ]


def most_common_origin(teams: list[dict]) -> Optional[str]:
    """Origin with the most teams; ties go to the alphabetically first."""
    if not teams:
        return None
    counts = Counter(t["origin"] for t in teams)
    return min(counts, key=lambda origin: (-counts[origin], origin))


# --- Matches ---

def total_score(match: dict) -> int:
    return match["team1"]["score"] + match["team2"]["score"]


def search_matches(matches: list[dict], search: str) -> list[dict]:
    """Matches whose number, team names or stands contain ``search``."""
    if not search:
        return list(matches)
    return [
        m for m in matches
        if _contains(m["matchNumber"], search)
        or any(_contains(m[side][key], search) for side in ("team1", "team2") for key in ("name", "stand"))
    ]


def highest_total_match(matches: list[dict]) -> Optional[dict]:
    """The match with the highest combined score (first one on ties)."""
    if not matches:
        return None
    return max(matches, key=total_score)


def highest_individual_score(matches: list[dict]) -> Optional[tuple[int, str, dict]]:
    """``(score, team_name, match)`` of the best single-team score."""
    if not matches:
        return None
    best = max(max(m["team1"]["score"], m["team2"]["score"]) for m in matches)
    for m in matches:
        for side in ("team1", "team2"):
            if m[side]["score"] == best:
                return best, m[side]["name"], m
    return None


def highest_score_matches(matches: list[dict]) -> list[dict]:
    """Every match in which one side reached the best single-team score."""
    found = highest_individual_score(matches)
    if found is None:
        return []
    best = found[0]
    return [m for m in matches if best in (m["team1"]["score"], m["team2"]["score"])]


def average_score(matches: list[dict]) -> int:
    """Mean score per team per match, rounded."""
    if not matches:
        return 0
    return _half_up(sum(total_score(m) for m in matches) / (len(matches) * 2))


def video_url(match: dict, serie: dict) -> Optional[str]:
    """Livestream URL of the serie positioned at the match timecode."""
    timecode = match.get("timecode")
    url = serie.get("liveStreamUrl")
    if not timecode or not url:
        return None
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}start={timecode}"


# --- Team detail ---

def _sides(match: dict, team_name: str) -> tuple[dict, dict]:
    if match["team1"]["name"] == team_name:
        return match["team1"], match["team2"]
    return match["team2"], match["team1"]


def match_result(match: dict, team_name: str) -> str:
    own, opponent = _sides(match, team_name)
    if own["score"] > opponent["score"]:
        return "win"
    if own["score"] < opponent["score"]:
        return "loss"
    return "draw"


def team_record(matches: list[dict], team_name: str) -> dict:
    results = Counter(match_result(m, team_name) for m in matches)
    return {
        "played": len(matches),
        "wins": results["win"],
        "draws": results["draw"],
        "losses": results["loss"],
        "points_for": sum(_sides(m, team_name)[0]["score"] for m in matches),
        "points_against": sum(_sides(m, team_name)[1]["score"] for m in matches),
    }


def points_by_serie(matches: list[dict], team_name: str) -> list[dict]:
    per_serie: dict[int, list[dict]] = {}
    for m in matches:
        per_serie.setdefault(m["serie"], []).append(m)
    return [
        {
            "serie": serie,
            "matches": len(serie_matches),
            "points": sum(_sides(m, team_name)[0]["score"] for m in serie_matches),
        }
        for serie, serie_matches in sorted(per_serie.items())
    ]


# --- Rankings / series ---

def ranking_summary(rankings: list[dict]) -> dict:
    if not rankings:
        return {"max_points": 0, "average_points": 0}
    points = [r["points"] for r in rankings]
    return {
        "max_points": max(points),
        "average_points": _half_up(sum(points) / len(points)),
    }


def series_totals(series: list[dict]) -> dict:
    return {
        "series": len(series),
        "teams": sum(s["totalTeams"] for s in series),
        "matches": sum(s["totalMatches"] for s in series),
    }
