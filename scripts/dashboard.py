"""
Print the dashboard views in the terminal, fetched from a running API.
"""
import argparse
from pathlib import Path

import requests

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in __import__("sys").path:
    __import__("sys").path.insert(0, str(PROJECT_ROOT))

from eurobot_api import views
from eurobot_api.client import DEFAULT_BASE_URL, EurobotClient


def print_overview(client: EurobotClient) -> None:
    stats = client.get_stats()
    print(f"Teams: {stats['totalTeams']}  Matches: {stats['totalMatches']}  "
          f"Rankings: {stats['totalRankings']}  Series: {stats['totalSeries']}")
    for row in stats["matchesBySerie"]:
        print(f"  Série {row['serie']}: {row['count']} matches")

    print(f"\nTop teams - Série {stats['lastKnownSerie']}")
    for r in stats["topTeams"]:
        print(f"  {r['position']:>3}. {r['team']['name']:<30} {r['points']:>5} pts")


def print_teams(client: EurobotClient, search: str, origin: str) -> None:
    teams = client.get_teams()
    shown = views.filter_teams(teams, search, origin)
    for t in shown:
        print(f"  {t['stand']:<6} {t['name']:<30} {t['origin']}")
    print(f"{len(shown)} / {len(teams)} teams, most common origin: {views.most_common_origin(teams)}")


def print_matches(client: EurobotClient, serie: int, search: str) -> None:
    matches = client.get_matches(serie)
    for m in views.search_matches(matches, search):
        print(f"  #{m['matchNumber']:<4} {m['team1']['name']:>25} {m['team1']['score']:>4} - "
              f"{m['team2']['score']:<4} {m['team2']['name']}")

    best = views.highest_total_match(matches)
    if best:
        print(f"Highest total: {views.total_score(best)} pts (match #{best['matchNumber']})")
    top = views.highest_individual_score(matches)
    if top:
        print(f"Highest score: {top[0]} by {top[1]} (match #{top[2]['matchNumber']})")
    print(f"Average score: {views.average_score(matches)}")


def print_team(client: EurobotClient, team_name: str) -> None:
    matches = client.get_team_matches(team_name)
    record = views.team_record(matches, team_name)
    print(f"{team_name}: {record['wins']}W {record['draws']}D {record['losses']}L, "
          f"{record['points_for']} for / {record['points_against']} against")
    for row in views.points_by_serie(matches, team_name):
        print(f"  Série {row['serie']}: {row['points']} pts in {row['matches']} matches")


def main():
    parser = argparse.ArgumentParser(description="Eurobot dashboard in the terminal.")
    parser.add_argument("--api", default=DEFAULT_BASE_URL)
    parser.add_argument("view", choices=["overview", "teams", "matches", "team"], nargs="?", default="overview")
    parser.add_argument("--search", default="")
    parser.add_argument("--origin", default="")
    parser.add_argument("--serie", type=int)
    parser.add_argument("--team", default="")
    args = parser.parse_args()

    client = EurobotClient(args.api)
    try:
        if args.view == "overview":
            print_overview(client)
        elif args.view == "teams":
            print_teams(client, args.search, args.origin)
        elif args.view == "matches":
            print_matches(client, args.serie, args.search)
        else:
            print_team(client, args.team)
    except requests.RequestException as e:
        print(f"Failed to load data from {args.api}: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
