"""
Matches - one row per played match of a serie.

Both sides are stored as snapshots of the team (name, stand) taken at
ingestion time, not as references to the teams table.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Index
from sqlmodel import Field, SQLModel


class Match(SQLModel, table=True):
    __tablename__ = "matches"
    __table_args__ = (
        Index("ix_matches_serie_match_number", "serie", "match_number"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    match_number: int
    serie: int = Field(index=True)

    team1_name: str = Field(index=True)
    team1_stand: str = ""
    team1_score: int

    team2_name: str = Field(index=True)
    team2_stand: str = ""
    team2_score: int

    # Seconds into the serie livestream
    timecode: Optional[int] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total_score(self) -> int:
        return self.team1_score + self.team2_score
