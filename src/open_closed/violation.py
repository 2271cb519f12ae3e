"""
Open/Closed Principle: VIOLATION

MediaRenderer branches over every message type itself. Supporting a new type (audio, location...) means
opening this class and adding another case, and every edit risks breaking the formats that already work.
"""

from src.core.models import Message
from src.core.shared_types import MessageType


class MediaRenderer:
    def render(self, message: Message) -> None:
        match message.type:
            case MessageType.TEXT:
                self._render_text(message)
            case MessageType.IMAGE:
                self._render_image(message)
            case MessageType.VIDEO:
                self._render_video(message)

    def _render_text(self, message: Message) -> None:
        print(f"Text: {message.content}")

    def _render_image(self, message: Message) -> None:
        print(f"Image: [preview for {message.content}]")

    def _render_video(self, message: Message) -> None:
        print(f"Video: [thumbnail for {message.content}]")


def main() -> None:
    renderer = MediaRenderer()
    renderer.render(Message(MessageType.TEXT, "Hello there!"))
    renderer.render(Message(MessageType.IMAGE, "cat.png"))
    renderer.render(Message(MessageType.VIDEO, "holiday.mp4"))


if __name__ == "__main__":
    main()
