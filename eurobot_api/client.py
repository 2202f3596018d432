"""
HTTP client for the dashboard API.
"""
from typing import Optional
from urllib.parse import quote

import requests

DEFAULT_BASE_URL = "http://localhost:5000/api"


class EurobotClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        response.raise_for_status()
        return response.json()

    # Teams
    def get_teams(self) -> list[dict]:
        return self._request("GET", "/teams")

    def get_team(self, team_id: int) -> dict:
        return self._request("GET", f"/teams/{team_id}")

    def get_team_matches(self, team_name: str) -> list[dict]:
        return self._request("GET", f"/teams/{quote(team_name, safe='')}/matches")

    # Matches
    def get_matches(self, serie: Optional[int] = None) -> list[dict]:
        params = {"serie": serie} if serie is not None else {}
        return self._request("GET", "/matches", params=params)

    def get_match(self, match_id: int) -> dict:
        return self._request("GET", f"/matches/{match_id}")

    # Rankings
    def get_rankings(self, serie: Optional[int] = None) -> list[dict]:
        params = {"serie": serie} if serie is not None else {}
        return self._request("GET", "/rankings", params=params)

    def get_rankings_by_serie(self, serie: int) -> list[dict]:
        return self._request("GET", f"/rankings/serie/{serie}")

    # Series
    def get_series(self) -> list[dict]:
        return self._request("GET", "/series")

    def get_serie(self, serie_id: int) -> dict:
        return self._request("GET", f"/series/{serie_id}")

    def get_serie_by_number(self, number: int) -> dict:
        return self._request("GET", f"/series/number/{number}")

    def create_serie(self, serie: dict) -> dict:
        return self._request("POST", "/series", json=serie)

    def update_serie(self, serie_id: int, serie: dict) -> dict:
        return self._request("PUT", f"/series/{serie_id}", json=serie)

    def delete_serie(self, serie_id: int) -> dict:
        return self._request("DELETE", f"/series/{serie_id}")

    def get_serie_stats(self, serie_id: int) -> dict:
        return self._request("GET", f"/series/{serie_id}/stats")

    # Dashboard / admin
    def get_stats(self) -> dict:
        return self._request("GET", "/stats")

    def reseed(self) -> dict:
        return self._request("POST", "/reseed")

    def health(self) -> dict:
        return self._request("GET", "/health")
