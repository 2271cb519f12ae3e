"""
Single Responsibility Principle: COMPLIANT

Each collaborator has exactly one reason to change:
* GameFeatureFlagFetcher -> fetches game feature flags only
* GameStateFetcher -> fetches game state only
* GameStateCache -> stores and retrieves game state only

GameSettingsCoordinator only composes the three and passes calls through. Switching the cache from memory to
a database (see sql_cache.py) touches neither the fetchers nor the coordinator.
"""

import logging
from typing import Protocol

from src.core.models import FeatureFlags, GameState

logger = logging.getLogger(__name__)


# --- CAPABILITIES ---
class GameFeatureFlagFetcher(Protocol):
    """Responsible only for fetching game feature flags (remote, local, stub...)."""

    def download_game_feature_flags(self) -> FeatureFlags:
        """Fresh mapping of flag name -> enabled on every call."""
        ...


class GameStateFetcher(Protocol):
    """Responsible only for fetching game state. Not concerned with caching."""

    def download_game_state(self, player_id: int) -> GameState:
        """Game state of the given player."""
        ...


class GameStateCache(Protocol):
    """Responsible only for caching game state, keyed on player_id."""

    def cache_game_state(self, game_state: GameState) -> bool:
        """Store (or replace) the player's state. Returns False instead of raising when storing fails."""
        ...

    def get_game_state(self, player_id: int) -> GameState | None:
        """Latest cached state of the player, if any."""
        ...


# --- IMPLEMENTATIONS ---
class RemoteGameFeatureFlagFetcher:
    def download_game_feature_flags(self) -> FeatureFlags:
        # Stand-in for a remote call
        return {
            "isMultiplayerEnabled": True,
            "isLeaderboardEnabled": False,
        }


class RemoteGameStateFetcher:
    def download_game_state(self, player_id: int) -> GameState:
        # Stand-in for a remote call: always synthesized, never fails
        return GameState(player_id, level=5, score=1000)


class InMemoryGameStateCache:
    """Game states kept in a dict for the lifetime of the instance."""

    def __init__(self) -> None:
        self._cache: dict[int, GameState] = {}

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


# --- COORDINATION ---
class GameSettingsCoordinator:
    """Orchestration of the game settings collaborators. Owns no logic of its own."""

    def __init__(
        self,
        feature_flag_fetcher: GameFeatureFlagFetcher,
        game_state_fetcher: GameStateFetcher,
        game_state_cache: GameStateCache,
    ) -> None:
        self.feature_flag_fetcher = feature_flag_fetcher
        self.game_state_fetcher = game_state_fetcher
        self.game_state_cache = game_state_cache

    def fetch_game_state(self, player_id: int) -> GameState:
        return self.game_state_fetcher.download_game_state(player_id)

    def cache_game_state(self, game_state: GameState) -> bool:
        return self.game_state_cache.cache_game_state(game_state)

    def get_cached_game_state(self, player_id: int) -> GameState | None:
        return self.game_state_cache.get_game_state(player_id)

    def get_game_feature_flags(self) -> FeatureFlags:
        return self.feature_flag_fetcher.download_game_feature_flags()


def main(coordinator: GameSettingsCoordinator | None = None, player_id: int = 1) -> None:
    if coordinator is None:
        coordinator = GameSettingsCoordinator(
            RemoteGameFeatureFlagFetcher(),
            RemoteGameStateFetcher(),
            InMemoryGameStateCache(),
        )
    print(f"Feature flags: {coordinator.get_game_feature_flags()}")

    game_state = coordinator.fetch_game_state(player_id)
    print(f"Downloaded: {game_state}")
    print(f"Cached: {coordinator.cache_game_state(game_state)}")
    print(f"From cache: {coordinator.get_cached_game_state(game_state.player_id)}")


if __name__ == "__main__":
    main()
