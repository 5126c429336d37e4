import logging

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from jobboard.database import build_engine, build_session_factory, check_connection, get_db, init_db
from jobboard.logging_config import setup_logging


def test_init_db_creates_tables():
    engine = build_engine("sqlite://")
    init_db(engine)
    check_connection(engine)
    assert {"users", "jobs", "job_applications"} <= set(inspect(engine).get_table_names())
    engine.dispose()


def test_get_db_uses_app_session_factory():
    engine = build_engine("sqlite://")
    test_app = FastAPI()
    test_app.state.session_factory = build_session_factory(engine)
    seen = []

    @test_app.get("/probe")
    def probe(db=Depends(get_db)):
        seen.append(db)
        return {"bound": db.get_bind() is engine}

    assert TestClient(test_app).get("/probe").json() == {"bound": True}
    assert len(seen) == 1
    engine.dispose()


def test_check_connection_raises_for_unreachable_store(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'missing' / 'db.sqlite'}")
    with pytest.raises(Exception):
        check_connection(engine)
    engine.dispose()


def test_setup_logging_sets_level():
    setup_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.WARNING
    setup_logging("INFO")
