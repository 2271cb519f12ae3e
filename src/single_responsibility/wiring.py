"""Build a GameSettingsCoordinator from the settings (choice of cache backend)."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import sessionmaker

from src.core.config import MEMORY_CACHE, SQL_CACHE, Settings
from src.core.exceptions import ConfigurationError
from src.single_responsibility.compliant import (
    GameSettingsCoordinator,
    GameStateCache,
    InMemoryGameStateCache,
    RemoteGameFeatureFlagFetcher,
    RemoteGameStateFetcher,
)
from src.single_responsibility.sql_cache import Base, SQLGameStateCache

logger = logging.getLogger(__name__)


@contextmanager
def open_sql_cache(database_url: str) -> Iterator[SQLGameStateCache]:
    """Create the engine, make sure the table exists, and hand out a cache on a fresh session.

    The session is closed and the engine disposed when the block exits.
    """
    engine_options: dict[str, Any] = {}
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        # Every connection to an in-memory SQLite database would otherwise get its own empty database
        engine_options = {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    engine = create_engine(database_url, **engine_options)
    Base.metadata.create_all(bind=engine)
    session_factory = sessionmaker(autoflush=False, bind=engine)
    db = session_factory()
    try:
        yield SQLGameStateCache(db)
    finally:
        db.close()
        engine.dispose()


@contextmanager
def open_game_state_cache(settings: Settings) -> Iterator[GameStateCache]:
    if settings.game_state_cache == MEMORY_CACHE:
        yield InMemoryGameStateCache()
    elif settings.game_state_cache == SQL_CACHE:
        with open_sql_cache(settings.cache_database_url) as cache:
            yield cache
    else:
        raise ConfigurationError(
            f"Unknown game state cache {settings.game_state_cache!r}. Pick one from {MEMORY_CACHE},{SQL_CACHE}"
        )


@contextmanager
def open_game_settings_coordinator(
    settings: Settings,
) -> Iterator[GameSettingsCoordinator]:
    logger.debug("Using %r game state cache", settings.game_state_cache)
    with open_game_state_cache(settings) as cache:
        yield GameSettingsCoordinator(
            feature_flag_fetcher=RemoteGameFeatureFlagFetcher(),
            game_state_fetcher=RemoteGameStateFetcher(),
            game_state_cache=cache,
        )
