"""
Single Responsibility Principle: VIOLATION

GameSettingsManager does three unrelated jobs in one class:
* downloading game feature flags
* downloading game state
* caching game state

Any change to flag retrieval, to the game state structure, or to the caching strategy means editing this
class, and none of the three jobs can be tested or swapped without dragging the other two along.
Kept monolithic on purpose.
"""

import logging

from src.core.models import FeatureFlags, GameState

logger = logging.getLogger(__name__)


class GameSettingsManager:
    def __init__(self) -> None:
        self._cache: dict[int, GameState] = {}

    def download_game_feature_flags(self) -> FeatureFlags:
        return {
            "isMultiplayerEnabled": True,
            "isLeaderboardEnabled": False,
        }

    def download_game_state(self, player_id: int) -> GameState:
        return GameState(player_id, level=5, score=1000)

    def cache_game_state(self, game_state: GameState) -> bool:
        try:
            self._cache[game_state.player_id] = game_state
            return True
        except Exception:
            logger.exception(
                "Failed to cache game state for player ID: %s", game_state.player_id
            )
            return False

    def get_game_state(self, player_id: int) -> GameState | None:
        return self._cache.get(player_id)


def main(player_id: int = 1) -> None:
    manager = GameSettingsManager()
    print(f"Feature flags: {manager.download_game_feature_flags()}")

    game_state = manager.download_game_state(player_id)
    print(f"Downloaded: {game_state}")
    print(f"Cached: {manager.cache_game_state(game_state)}")
    print(f"From cache: {manager.get_game_state(game_state.player_id)}")


if __name__ == "__main__":
    main()
