"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple examples.
"""

import logging
from typing import Iterator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import get_settings
from src.core.log_config import ROOT_LOGGER_NAME
from src.single_responsibility.sql_cache import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session() -> Iterator[Session]:
    """Connection to a test database. Tables are removed at teardown to keep the cache tests independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Settings are cached per process: start every test from the defaults, unaffected by the caller's environment."""
    for name in [
        "SOLID_LOG_LEVEL",
        "SOLID_PATIENT_ID",
        "SOLID_PLAYER_ID",
        "SOLID_GAME_STATE_CACHE",
        "SOLID_CACHE_DATABASE_URL",
    ]:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def project_logger() -> Iterator[logging.Logger]:
    """Leave the project logger the way the test found it (a handler added during a test would hold on to the captured stderr)."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    logger.handlers.clear()
    try:
        yield logger
    finally:
        logger.handlers[:] = handlers
        logger.setLevel(level)
