"""
Dashboard statistics router.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session, func, select

from eurobot_api.database import get_session
from eurobot_api.models import Match, Ranking, Serie, Team
from eurobot_api.schemas import MatchesBySerie, RankingRead, StatsResponse

router = APIRouter(prefix="/api", tags=["stats"])

TOP_TEAMS_LIMIT = 5


@router.get("/stats", response_model=StatsResponse)
def get_stats(session: Session = Depends(get_session)):
    """
    Global totals, matches per serie, and the top 5 of the most recent serie
    that has a ranking table (serie 1 when there is none).
    """
    total_teams = session.exec(select(func.count(Team.id))).one()
    total_matches = session.exec(select(func.count(Match.id))).one()
    total_rankings = session.exec(select(func.count(Ranking.id))).one()
    total_series = session.exec(select(func.count(Serie.id))).one()

    per_serie = session.exec(
        select(Match.serie, func.count(Match.id))
        .group_by(Match.serie)
        .order_by(Match.serie)
    ).all()

    last_known_serie = session.exec(select(func.max(Ranking.serie))).one() or 1

    top_teams = session.exec(
        select(Ranking)
        .where(Ranking.serie == last_known_serie)
        .order_by(Ranking.position, Ranking.id)
        .limit(TOP_TEAMS_LIMIT)
    ).all()

    return StatsResponse(
        total_teams=total_teams,
        total_matches=total_matches,
        total_rankings=total_rankings,
        total_series=total_series,
        matches_by_serie=[MatchesBySerie(serie=s, count=c) for s, c in per_serie],
        top_teams=[RankingRead.from_record(r) for r in top_teams],
        last_known_serie=last_known_serie,
    )
