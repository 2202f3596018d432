"""
Series router - CRUD over serie metadata plus per-serie statistics.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, func, select

from eurobot_api.database import get_session
from eurobot_api.models import Match, Ranking, Serie
from eurobot_api.schemas import (
    MessageResponse,
    SerieCreate,
    SerieRead,
    SerieStats,
    SerieUpdate,
)

router = APIRouter(prefix="/api/series", tags=["series"])


def _get_or_404(session: Session, serie_id: int) -> Serie:
    serie = session.get(Serie, serie_id)
    if not serie:
        raise HTTPException(status_code=404, detail="Serie not found")
    return serie


@router.get("", response_model=list[SerieRead])
def list_series(session: Session = Depends(get_session)):
    series = session.exec(select(Serie).order_by(Serie.serie_number)).all()
    return [SerieRead.model_validate(s) for s in series]


# Declared before /{serie_id} so "number" is not taken for an id
@router.get("/number/{serie_number}", response_model=SerieRead)
def get_serie_by_number(serie_number: int, session: Session = Depends(get_session)):
    serie = session.exec(
        select(Serie).where(Serie.serie_number == serie_number)
    ).first()
    if not serie:
        raise HTTPException(status_code=404, detail="Serie not found")
    return SerieRead.model_validate(serie)


@router.get("/{serie_id}", response_model=SerieRead)
def get_serie(serie_id: int, session: Session = Depends(get_session)):
    return SerieRead.model_validate(_get_or_404(session, serie_id))


@router.post("", response_model=SerieRead, status_code=201)
def create_serie(request: SerieCreate, session: Session = Depends(get_session)):
    """
    Create a serie.

    A duplicate serieNumber is rejected by the unique index of the table.
    """
    serie = Serie(**request.model_dump())
    session.add(serie)
    session.commit()
    session.refresh(serie)
    return SerieRead.model_validate(serie)


@router.put("/{serie_id}", response_model=SerieRead)
def update_serie(
    serie_id: int,
    request: SerieUpdate,
    session: Session = Depends(get_session),
):
    """Update the fields present in the request body."""
    serie = _get_or_404(session, serie_id)

    updates = request.model_dump(exclude_unset=True, exclude_none=True)
    for key, value in updates.items():
        setattr(serie, key, value)
    serie.updated_at = datetime.now(timezone.utc)

    session.add(serie)
    session.commit()
    session.refresh(serie)
    return SerieRead.model_validate(serie)


@router.delete("/{serie_id}", response_model=MessageResponse)
def delete_serie(serie_id: int, session: Session = Depends(get_session)):
    serie = _get_or_404(session, serie_id)
    session.delete(serie)
    session.commit()
    return MessageResponse(message="Serie deleted successfully")


@router.get("/{serie_id}/stats", response_model=SerieStats)
def get_serie_stats(serie_id: int, session: Session = Depends(get_session)):
    """
    Live totals for one serie.

    Unlike the stored totalTeams/totalMatches, these are counted from the
    current matches and rankings tables.
    """
    serie = _get_or_404(session, serie_id)
    number = serie.serie_number

    total_matches = session.exec(
        select(func.count(Match.id)).where(Match.serie == number)
    ).one()
    total_teams = session.exec(
        select(func.count(Ranking.id)).where(Ranking.serie == number)
    ).one()

    combined = Match.team1_score + Match.team2_score
    total_score, average_score = session.exec(
        select(func.sum(combined), func.avg(combined)).where(Match.serie == number)
    ).one()

    return SerieStats(
        serie=SerieRead.model_validate(serie),
        total_matches=total_matches,
        total_teams=total_teams,
        total_score=total_score or 0,
        average_score=float(average_score or 0),
    )
