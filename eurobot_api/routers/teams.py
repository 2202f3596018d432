"""
Teams router - read-only access to the ingested teams.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import or_
from sqlmodel import Session, select

from eurobot_api.database import get_session
from eurobot_api.models import Match, Team
from eurobot_api.schemas import MatchRead, TeamRead

router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.get("", response_model=list[TeamRead])
def list_teams(session: Session = Depends(get_session)):
    """All teams, sorted by name."""
    teams = session.exec(select(Team).order_by(Team.name)).all()
    return [TeamRead.model_validate(t) for t in teams]


@router.get("/{team_id}", response_model=TeamRead)
def get_team(team_id: int, session: Session = Depends(get_session)):
    team = session.get(Team, team_id)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return TeamRead.model_validate(team)


@router.get("/{team_name}/matches", response_model=list[MatchRead])
def get_team_matches(team_name: str, session: Session = Depends(get_session)):
    """
    Matches where the team played on either side.

    Matched on the name snapshot stored in each match; an unknown name
    simply yields an empty list.
    """
    statement = (
        select(Match)
        .where(or_(Match.team1_name == team_name, Match.team2_name == team_name))
        .order_by(Match.serie, Match.match_number, Match.id)
    )
    return [MatchRead.from_record(m) for m in session.exec(statement).all()]
