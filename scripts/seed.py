"""
Seed the database from the CSV exports in data/.
"""
import argparse
from pathlib import Path

from sqlmodel import Session

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in __import__("sys").path:
    __import__("sys").path.insert(0, str(PROJECT_ROOT))

from eurobot_api.config import DATA_DIR, SERIES_CONFIG
from eurobot_api.database import create_db_and_tables, engine
from eurobot_api.ingest import run_ingestion
from eurobot_api.logging_config import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Load Eurobot CSV exports into the database.")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR)
    parser.add_argument("--config", type=Path, default=SERIES_CONFIG)
    args = parser.parse_args()

    setup_logging()

    print("Creating database tables...")
    create_db_and_tables()

    print(f"Seeding from {args.data_dir}...")
    with Session(engine) as session:
        report = run_ingestion(session, args.data_dir, args.config)

    print(
        f"Done! {report.teams} teams, {report.matches} matches, "
        f"{report.rankings} rankings, {report.series} series seeded."
    )
    if report.skipped:
        print(f"{len(report.skipped)} rows skipped.")
    for error in report.errors:
        print(f"Error: {error}")


if __name__ == "__main__":
    main()
