"""
Rankings router - standings tables per serie.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session, select

from eurobot_api.database import get_session
from eurobot_api.models import Ranking
from eurobot_api.schemas import RankingRead

router = APIRouter(prefix="/api/rankings", tags=["rankings"])


@router.get("", response_model=list[RankingRead])
def list_rankings(
    serie: Optional[int] = Query(default=None, description="Only rankings of this serie"),
    session: Session = Depends(get_session),
):
    """Rankings sorted by serie then position."""
    statement = select(Ranking)
    if serie is not None:
        statement = statement.where(Ranking.serie == serie)
    statement = statement.order_by(Ranking.serie, Ranking.position, Ranking.id)
    return [RankingRead.from_record(r) for r in session.exec(statement).all()]


@router.get("/serie/{serie}", response_model=list[RankingRead])
def get_serie_rankings(serie: int, session: Session = Depends(get_session)):
    statement = (
        select(Ranking)
        .where(Ranking.serie == serie)
        .order_by(Ranking.position, Ranking.id)
    )
    return [RankingRead.from_record(r) for r in session.exec(statement).all()]
