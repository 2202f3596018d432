"""
SQLModel models for Eurobot competition data.
"""
from eurobot_api.models.team import Team
from eurobot_api.models.match import Match
from eurobot_api.models.ranking import Ranking
from eurobot_api.models.serie import Serie, SerieStatus

__all__ = [
    "Team",
    "Match",
    "Ranking",
    "Serie",
    "SerieStatus",
]
