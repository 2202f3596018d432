"""
Application configuration - loads settings from environment variables.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PGHOST = os.getenv("PGHOST")
PGUSER = os.getenv("PGUSER")
PGPORT = os.getenv("PGPORT", "5432")
PGDATABASE = os.getenv("PGDATABASE")
PGPASSWORD = os.getenv("PGPASSWORD")

if os.getenv("DATABASE_URL"):
    DATABASE_URL = os.environ["DATABASE_URL"]
elif all([PGHOST, PGUSER, PGDATABASE, PGPASSWORD]):
    DATABASE_URL = (
        f"postgresql://{PGUSER}:{PGPASSWORD}@{PGHOST}:{PGPORT}/{PGDATABASE}?sslmode=require"
    )
else:
    DATABASE_URL = "sqlite:///./data/eurobot.db"

PORT = int(os.getenv("PORT", "5000"))

DATA_DIR = Path(os.getenv("DATA_DIR", "./data"))
SERIES_CONFIG = Path(os.getenv("SERIES_CONFIG", str(DATA_DIR / "series_config.json")))

# Seed on startup when the teams table is empty
AUTO_SEED = os.getenv("AUTO_SEED", "true").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
