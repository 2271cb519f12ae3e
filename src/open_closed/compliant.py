"""
Open/Closed Principle: COMPLIANT

Every message type gets its own renderer behind one small contract, and RenderingEngine dispatches by looking
the type up in a registry. Supporting a new type means writing a new renderer and registering it: existing
renderers and the engine itself stay untouched.
"""

import logging
from typing import Protocol

from src.core.models import Message
from src.core.shared_types import MessageType

logger = logging.getLogger(__name__)


class MessageRenderer(Protocol):
    def render(self, message: Message) -> None: ...


class TextMessageRenderer:
    def render(self, message: Message) -> None:
        print(f"Text: {message.content}")


class ImageMessageRenderer:
    def render(self, message: Message) -> None:
        print(f"Image: [preview for {message.content}]")


class VideoMessageRenderer:
    def render(self, message: Message) -> None:
        print(f"Video: [thumbnail for {message.content}]")


class RenderingEngine:
    """Pluggable rendering dispatcher: message kind (string) -> renderer."""

    def __init__(self) -> None:
        self._renderers: dict[str, MessageRenderer] = {}

    def register(self, kind: str, renderer: MessageRenderer) -> None:
        """Add a renderer for the kind. Registering a kind again replaces the previous renderer."""
        self._renderers[kind] = renderer

    def render(self, kind: str, message: Message) -> None:
        """Render with the renderer registered for kind. Unknown kinds get a notice instead of an error."""
        renderer = self._renderers.get(kind)
        if renderer is None:
            logger.debug("No renderer registered for %r", kind)
            print(f"Unknown type: {kind}")
            return
        renderer.render(message)

    def registered_kinds(self) -> list[str]:
        return list(self._renderers.keys())


def default_rendering_engine() -> RenderingEngine:
    """Engine with a renderer for every built-in MessageType, registered under the type's value."""
    engine = RenderingEngine()
    engine.register(MessageType.TEXT.value, TextMessageRenderer())
    engine.register(MessageType.IMAGE.value, ImageMessageRenderer())
    engine.register(MessageType.VIDEO.value, VideoMessageRenderer())
    return engine


def main() -> None:
    engine = default_rendering_engine()
    for message in [
        Message(MessageType.TEXT, "Hello there!"),
        Message(MessageType.IMAGE, "cat.png"),
        Message(MessageType.VIDEO, "holiday.mp4"),
    ]:
        engine.render(message.type.value, message)

    # Nobody registered a renderer for audio (yet): fallback, no crash
    engine.render("audio", Message(MessageType.TEXT, "voice-note.ogg"))


if __name__ == "__main__":
    main()
