"""
Value records shared by the examples.

Pure data, no behavior. Every principle pair that needs a game state or a message imports it from here,
so the violation and compliant variants of one pair always exchange the exact same shape.
"""

from dataclasses import dataclass

from src.core.shared_types import MessageType

# Type aliases to make the fetcher contracts easier to read
FlagName = str
FeatureFlags = dict[FlagName, bool]


@dataclass(frozen=True)
class GameState:
    """A player's progress. Identity is the player_id; the caches key on it."""

    player_id: int
    level: int
    score: int


@dataclass(frozen=True)
class Message:
    """Something to render. Meaning of content depends on type (raw text, image reference, video reference)."""

    type: MessageType
    content: str
