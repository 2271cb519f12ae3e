"""Unit tests for src/liskov_substitution/violation.py"""

import pytest

from src.core.exceptions import UnsupportedOperationError
from src.liskov_substitution.violation import (
    LiveStream,
    RecordedVideo,
    VideoPlayer,
    main,
    play_and_rewind,
    replay,
)


def test_recorded_video_rewinds(capsys: pytest.CaptureFixture[str]) -> None:
    RecordedVideo().rewind()
    assert capsys.readouterr().out.strip() == "Rewinding recorded video"


def test_live_stream_cannot_rewind() -> None:
    with pytest.raises(UnsupportedOperationError, match="Live stream cannot be rewound"):
        LiveStream().rewind()


def test_unsupported_operation_is_not_implemented() -> None:
    """Callers that only know the builtin exception still recognize it."""
    with pytest.raises(NotImplementedError):
        LiveStream().rewind()


def test_live_stream_still_plays(capsys: pytest.CaptureFixture[str]) -> None:
    LiveStream().play()
    assert capsys.readouterr().out.strip() == "Playing video"


@pytest.mark.parametrize("video", [VideoPlayer(), RecordedVideo()])
def test_client_code_works_for_rewindable_players(video: VideoPlayer) -> None:
    play_and_rewind(video)
    replay(video)


@pytest.mark.parametrize("client", [play_and_rewind, replay])
def test_client_code_breaks_on_substitution(client) -> None:
    """Same base type, same client code, but the subclass blows up."""
    with pytest.raises(UnsupportedOperationError):
        client(LiveStream())


def test_main_crashes_after_recorded_video(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(UnsupportedOperationError):
        main()
    assert capsys.readouterr().out.splitlines() == [
        "Playing video",
        "Rewinding recorded video",
        "Playing video",
    ]
