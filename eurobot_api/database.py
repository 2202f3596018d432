"""
Database engine and session management.
"""
from sqlmodel import Session, SQLModel, create_engine, select

from eurobot_api.config import DATABASE_URL

# Use check_same_thread only for SQLite
connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)


def create_db_and_tables(bind=None):
    """Create all tables defined in SQLModel metadata."""
    # Import models so every table is registered on the metadata
    import eurobot_api.models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """Yield a database session."""
    with Session(engine) as session:
        yield session


def is_empty(session: Session) -> bool:
    """True when no team has been ingested yet."""
    from eurobot_api.models import Team

    return session.exec(select(Team.id).limit(1)).first() is None
