"""
Request/response models for the HTTP API.

Table rows use snake_case columns; the API speaks camelCase and nests the
team snapshots of matches and rankings.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from eurobot_api.models import Match, Ranking, SerieStatus


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Teams ---

class TeamRead(ApiModel):
    id: int
    name: str
    stand: str
    origin: str
    created_at: datetime
    updated_at: datetime


# --- Matches ---

class MatchSide(ApiModel):
    name: str
    stand: str
    score: int


class MatchRead(ApiModel):
    id: int
    match_number: int
    serie: int
    team1: MatchSide
    team2: MatchSide
    timecode: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, match: Match) -> "MatchRead":
        return cls(
            id=match.id,
            match_number=match.match_number,
            serie=match.serie,
            team1=MatchSide(name=match.team1_name, stand=match.team1_stand, score=match.team1_score),
            team2=MatchSide(name=match.team2_name, stand=match.team2_stand, score=match.team2_score),
            timecode=match.timecode,
            created_at=match.created_at,
            updated_at=match.updated_at,
        )


# --- Rankings ---

class RankingTeam(ApiModel):
    name: str
    stand: str
    origin: str


class RankingRead(ApiModel):
    id: int
    serie: int
    position: int
    team: RankingTeam
    points: int
    matches_played: int
    victories: int
    draws: int
    defeats: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, ranking: Ranking) -> "RankingRead":
        return cls(
            id=ranking.id,
            serie=ranking.serie,
            position=ranking.position,
            team=RankingTeam(
                name=ranking.team_name,
                stand=ranking.team_stand,
                origin=ranking.team_origin,
            ),
            points=ranking.points,
            matches_played=ranking.matches_played,
            victories=ranking.victories,
            draws=ranking.draws,
            defeats=ranking.defeats,
            created_at=ranking.created_at,
            updated_at=ranking.updated_at,
        )


# --- Series ---

class SerieRead(ApiModel):
    id: int
    serie_number: int
    name: str
    description: str
    start_date: datetime
    end_date: datetime
    status: SerieStatus
    total_teams: int
    total_matches: int
    location: str
    rules: str
    live_stream_url: str
    created_at: datetime
    updated_at: datetime


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Dates sent without an offset ("2026-06-01", "2026-06-01T09:00") are UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SerieCreate(ApiModel):
    serie_number: int = Field(ge=1)
    name: str = Field(min_length=1)
    description: str = ""
    start_date: datetime
    end_date: datetime
    status: SerieStatus = SerieStatus.upcoming
    total_teams: int = Field(default=0, ge=0)
    total_matches: int = Field(default=0, ge=0)
    location: str = ""
    rules: str = ""
    live_stream_url: str = ""

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class SerieUpdate(ApiModel):
    serie_number: Optional[int] = Field(default=None, ge=1)
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[SerieStatus] = None
    total_teams: Optional[int] = Field(default=None, ge=0)
    total_matches: Optional[int] = Field(default=None, ge=0)
    location: Optional[str] = None
    rules: Optional[str] = None
    live_stream_url: Optional[str] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class SerieStats(ApiModel):
    serie: SerieRead
    total_matches: int
    total_teams: int
    total_score: int
    average_score: float


# --- Dashboard ---

class MatchesBySerie(ApiModel):
    serie: int
    count: int


class StatsResponse(ApiModel):
    total_teams: int
    total_matches: int
    total_rankings: int
    total_series: int
    matches_by_serie: list[MatchesBySerie]
    top_teams: list[RankingRead]
    last_known_serie: int


class MessageResponse(ApiModel):
    message: str
