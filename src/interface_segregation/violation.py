"""
Interface Segregation Principle: VIOLATION

RtcEngine bundles video streaming, screen sharing and active speaker detection into one contract, and the
abstract base class forces every provider to implement all of it. 100ms supports only video, so it ends up
with stub methods that print a notice and silently drop the callback. Client code cannot tell from the type
which features actually work.
"""

from abc import ABC, abstractmethod
from typing import Callable

ActiveSpeakerCallback = Callable[[str], None]


class RtcEngine(ABC):
    @abstractmethod
    def start_video_stream(self) -> None: ...

    @abstractmethod
    def stop_video_stream(self) -> None: ...

    @abstractmethod
    def enable_screen_share(self) -> None: ...

    @abstractmethod
    def on_active_speaker(self, callback: ActiveSpeakerCallback) -> None: ...


class AgoraRtcEngine(RtcEngine):
    """Agora supports all features."""

    def start_video_stream(self) -> None:
        print("Agora: Starting video stream")

    def stop_video_stream(self) -> None:
        print("Agora: Stopping video stream")

    def enable_screen_share(self) -> None:
        print("Agora: Screen share enabled")

    def on_active_speaker(self, callback: ActiveSpeakerCallback) -> None:
        callback("agora-user-123")


class HundredMsRtcEngine(RtcEngine):
    """100ms supports video only, but has to implement everything anyway."""

    def start_video_stream(self) -> None:
        print("100ms: Starting video stream")

    def stop_video_stream(self) -> None:
        print("100ms: Stopping video stream")

    def enable_screen_share(self) -> None:
        # unsupported, but required by RtcEngine
        print("100ms: Screen share not supported")

    def on_active_speaker(self, callback: ActiveSpeakerCallback) -> None:
        # no speaker events available: the callback is never called
        print("100ms: Active speaker not supported")


def main() -> None:
    engines: list[RtcEngine] = [AgoraRtcEngine(), HundredMsRtcEngine()]

    # Client assumes every engine supports everything
    for engine in engines:
        engine.start_video_stream()
        engine.enable_screen_share()
        engine.on_active_speaker(lambda uid: print(f"Active speaker UID: {uid}"))


if __name__ == "__main__":
    main()
