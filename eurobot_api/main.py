import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from eurobot_api.config import AUTO_SEED, CORS_ORIGINS, DATA_DIR, PORT, SERIES_CONFIG
from eurobot_api.database import create_db_and_tables, engine, is_empty
from eurobot_api.ingest import run_ingestion
from eurobot_api.logging_config import setup_logging
from eurobot_api.routers import admin, matches, rankings, series, stats, teams

logger = logging.getLogger(__name__)


def seed_if_empty() -> None:
    """Run the ingestion once when the database holds no team yet."""
    with Session(engine) as session:
        if not is_empty(session):
            return
        logger.info("Database is empty, running seed...")
        try:
            run_ingestion(session, DATA_DIR, SERIES_CONFIG)
        except FileNotFoundError as e:
            logger.error("Initial seed skipped: %s", e)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    create_db_and_tables()
    if AUTO_SEED:
        seed_if_empty()
    yield


app = FastAPI(title="Eurobot Dashboard API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Validation and database failures all surface as 500 with the raw message
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(status_code=500, content={"detail": message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# Include routers
app.include_router(teams.router)
app.include_router(matches.router)
app.include_router(rankings.router)
app.include_router(series.router)
app.include_router(stats.router)
app.include_router(admin.router)


@app.get("/api/health")
def health():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=PORT)
