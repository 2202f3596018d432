"""
Series - metadata of each competition serie.

totalTeams / totalMatches are computed at ingestion time and are not kept
in sync with later writes.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class SerieStatus(str, Enum):
    upcoming = "upcoming"
    ongoing = "ongoing"
    completed = "completed"


class Serie(SQLModel, table=True):
    __tablename__ = "series"

    id: Optional[int] = Field(default=None, primary_key=True)
    serie_number: int = Field(index=True, unique=True)
    name: str
    description: str = ""
    start_date: datetime
    end_date: datetime
    status: SerieStatus = Field(default=SerieStatus.upcoming)
    total_teams: int = 0
    total_matches: int = 0
    location: str = ""
    rules: str = ""
    live_stream_url: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
