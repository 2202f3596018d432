"""
Rankings - the standings table of a serie, one row per team.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Index
from sqlmodel import Field, SQLModel


class Ranking(SQLModel, table=True):
    __tablename__ = "rankings"
    __table_args__ = (
        Index("ix_rankings_serie_position", "serie", "position"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    serie: int = Field(index=True)
    position: int

    # Team snapshot
    team_name: str = Field(index=True)
    team_stand: str
    team_origin: str

    points: int = 0
    matches_played: int = 0
    victories: int = 0
    draws: int = 0
    defeats: int = 0

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
