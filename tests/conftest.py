from __future__ import annotations

import json
import sys
from datetime import date
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from eurobot_api.database import create_db_and_tables, get_session
from eurobot_api.ingest import run_ingestion
from eurobot_api.main import app
from eurobot_api.routers.admin import get_data_paths

TODAY = date(2026, 10, 19)

RANKINGS_1 = """\
;Équipe;Stand;Origine;Cumul;Joués;Vict.;Égal.;Déf.
1er;Alpha;A1;France;10;2;1;1;0
2ème;Beta;B2;;7;2;1;0;1
3ème;Gamma;C3;Suisse;3;2;0;1;1
"""

MATCHES_1 = """\
#;;Équipe 1;Score; ;Équipe 2;
1;A1;Alpha;10;7;Beta;B2
2;C3;Gamma;5;5;Alpha;A1
3;B2;Beta;x;4;Gamma;C3
;;;;;;
"""

RANKINGS_2 = """\
;Équipe;Stand;Origine;Cumul;Joués;Vict.;Égal.;Déf.
1er;Beta;B2;Belgique;12;2;2;0;0
2ème;Alpha;A9;France;8;2;1;0;1
;Gamma;C3;Suisse;1;2;0;0;2
"""

MATCHES_2 = """\
#;;Équipe 1;Score; ;Équipe 2; ;Timecode
1;B2;Beta;9;3;Alpha;A9;1:05
2;C3;Gamma;2;6;Beta;B2;
3;A9;Alpha;4;4;Gamma;C3;
"""


def write_csv(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "data"
    directory.mkdir()
    write_csv(directory / "classement_serie_1.csv", RANKINGS_1)
    write_csv(directory / "matchs_serie_1.csv", MATCHES_1)
    write_csv(directory / "classement_serie_2.csv", RANKINGS_2)
    write_csv(directory / "matchs_serie_2.csv", MATCHES_2)
    return directory


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "series_config.json"
    path.write_text(
        json.dumps({"liveStreamUrls": {"2": "https://stream.example/serie-2?t=live"}}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def seeded(session, data_dir, config_path):
    return run_ingestion(session, data_dir, config_path, today=TODAY)


@pytest.fixture
def client(engine, data_dir, config_path):
    def override_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_data_paths] = lambda: (data_dir, config_path)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def api(client, seeded):
    """Test client over a database already holding the sample data."""
    return client
