"""
Matches router.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select

from eurobot_api.database import get_session
from eurobot_api.models import Match
from eurobot_api.schemas import MatchRead

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.get("", response_model=list[MatchRead])
def list_matches(
    serie: Optional[int] = Query(default=None, description="Only matches of this serie"),
    session: Session = Depends(get_session),
):
    statement = select(Match)
    if serie is not None:
        statement = statement.where(Match.serie == serie)
    statement = statement.order_by(Match.serie, Match.match_number, Match.id)
    return [MatchRead.from_record(m) for m in session.exec(statement).all()]


@router.get("/{match_id}", response_model=MatchRead)
def get_match(match_id: int, session: Session = Depends(get_session)):
    match = session.get(Match, match_id)
    if not match:
        raise HTTPException(status_code=404, detail="Match not found")
    return MatchRead.from_record(match)
