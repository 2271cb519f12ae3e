"""
Liskov Substitution Principle: COMPLIANT

Play and rewind are separate capabilities. RecordedVideo offers both, LiveStream only play.
Clients ask for exactly the capability they use, so a type checker refuses rewind_media(LiveStream())
and nothing has to raise at runtime.
"""

from typing import Protocol


class Playable(Protocol):
    def play(self) -> None: ...


class Rewindable(Protocol):
    def rewind(self) -> None: ...


class RecordedVideo:
    def play(self) -> None:
        print("Playing recorded video")

    def rewind(self) -> None:
        print("Rewinding recorded video")


class LiveStream:
    def play(self) -> None:
        print("Playing live stream")


# --- CLIENT CODE ---
def play_media(media: Playable) -> None:
    media.play()


def rewind_media(media: Rewindable) -> None:
    media.rewind()


def main() -> None:
    recorded = RecordedVideo()
    live = LiveStream()

    play_media(recorded)
    play_media(live)

    rewind_media(recorded)
    # rewind_media(live)  -> rejected by the type checker: LiveStream is not Rewindable


if __name__ == "__main__":
    main()
