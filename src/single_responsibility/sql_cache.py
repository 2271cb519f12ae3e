"""Implementation of GameStateCache using SQLAlchemy"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from src.core.models import GameState

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class DBGameState(Base):
    __tablename__ = "game_states"
    player_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    level: Mapped[int]
    score: Mapped[int]


class SQLGameStateCache:
    """Game states stored in a database table, one row per player."""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def cache_game_state(self, game_state: GameState) -> bool:
        """Insert or replace the player's row. A failing write is rolled back and reported as False."""
        try:
            self.db.merge(
                DBGameState(
                    player_id=game_state.player_id,
                    level=game_state.level,
                    score=game_state.score,
                )
            )
            self.db.commit()
            return True
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(
                "Failed to cache game state for player ID: %s", game_state.player_id
            )
            return False

    def get_game_state(self, player_id: int) -> GameState | None:
        state_db = self.db.get(DBGameState, player_id)
        if state_db:
            return self._to_model(state_db)
        return None

    def _to_model(self, state_db: DBGameState) -> GameState:
        """Convert SQLAlchemy model to the shared value record."""
        return GameState(
            player_id=state_db.player_id,
            level=state_db.level,
            score=state_db.score,
        )
