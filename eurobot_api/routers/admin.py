"""
Admin router - re-runs the CSV ingestion on demand.
"""
import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from eurobot_api.config import DATA_DIR, SERIES_CONFIG
from eurobot_api.database import get_session
from eurobot_api.ingest import run_ingestion

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["admin"])


def get_data_paths() -> tuple[Path, Path]:
    """Directory of the CSV exports and the series config file."""
    return DATA_DIR, SERIES_CONFIG


@router.post("/reseed")
def reseed(
    paths: tuple[Path, Path] = Depends(get_data_paths),
    session: Session = Depends(get_session),
):
    """
    Replace all competition data with a fresh ingestion of the CSV exports.

    Runs synchronously; readers hitting the API meanwhile may see partially
    filled tables.
    """
    data_dir, config_path = paths
    logger.info("Reseed requested from %s", data_dir)
    try:
        report = run_ingestion(session, data_dir, config_path)
    except FileNotFoundError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "message": "Database reseeded successfully",
        "results": report.as_dict(),
    }
