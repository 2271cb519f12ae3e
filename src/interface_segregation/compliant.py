"""
Interface Segregation Principle: COMPLIANT

Each capability is its own small contract. A provider implements only the ones it supports, and client code
holds references typed per capability, so it never calls something that is not there.
"""

from typing import Callable, Protocol

ActiveSpeakerCallback = Callable[[str], None]


class VideoStreamEngine(Protocol):
    def start_video_stream(self) -> None: ...
    def stop_video_stream(self) -> None: ...


class ScreenShare(Protocol):
    def enable_screen_share(self) -> None: ...


class ActiveSpeaker(Protocol):
    def on_active_speaker(self, callback: ActiveSpeakerCallback) -> None:
        """Callback receives the speaker's UID (synchronously, right away)."""
        ...


class AgoraRtcEngine:
    """Agora supports all three capabilities."""

    def start_video_stream(self) -> None:
        print("Agora: Starting video stream")

    def stop_video_stream(self) -> None:
        print("Agora: Stopping video stream")

    def enable_screen_share(self) -> None:
        print("Agora: Screen share enabled")

    def on_active_speaker(self, callback: ActiveSpeakerCallback) -> None:
        callback("agora-user-123")


class HundredMsRtcEngine:
    """100ms supports only video, and is not forced to pretend otherwise."""

    def start_video_stream(self) -> None:
        print("100ms: Starting video stream")

    def stop_video_stream(self) -> None:
        print("100ms: Stopping video stream")


# --- CLIENT CODE ---
def run_video_engines(engines: list[VideoStreamEngine]) -> None:
    for engine in engines:
        engine.start_video_stream()
        engine.stop_video_stream()


def run_screen_share(engines: list[ScreenShare]) -> None:
    for engine in engines:
        engine.enable_screen_share()


def run_active_speaker(
    engines: list[ActiveSpeaker], callback: ActiveSpeakerCallback
) -> None:
    for engine in engines:
        engine.on_active_speaker(callback)


def main() -> None:
    agora = AgoraRtcEngine()
    hundred_ms = HundredMsRtcEngine()

    run_video_engines([agora, hundred_ms])
    run_screen_share([agora])
    run_active_speaker([agora], lambda uid: print(f"Active speaker UID: {uid}"))


if __name__ == "__main__":
    main()
