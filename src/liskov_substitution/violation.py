"""
Liskov Substitution Principle: VIOLATION

LiveStream inherits from VideoPlayer but cannot honor rewind(), so it raises instead.
Any client written against VideoPlayer (play_and_rewind, replay) crashes when handed a LiveStream:
the subclass cannot be substituted for its base.
"""

from src.core.exceptions import UnsupportedOperationError


class VideoPlayer:
    def play(self) -> None:
        print("Playing video")

    def rewind(self) -> None:
        print("Rewinding video")


class RecordedVideo(VideoPlayer):
    def rewind(self) -> None:
        print("Rewinding recorded video")


class LiveStream(VideoPlayer):
    def rewind(self) -> None:
        raise UnsupportedOperationError("Live stream cannot be rewound")


# --- CLIENT CODE ---
def play_and_rewind(video: VideoPlayer) -> None:
    """Assumes every VideoPlayer can rewind. Unsafe: a LiveStream raises here."""
    video.play()
    video.rewind()


def replay(video: VideoPlayer) -> None:
    video.rewind()


def main() -> None:
    play_and_rewind(RecordedVideo())
    # NOTE: the error is not handled on purpose, it is what this example demonstrates
    play_and_rewind(LiveStream())


if __name__ == "__main__":
    main()
