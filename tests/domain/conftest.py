"""Domain layer test fixtures - Pure business objects with no dependencies.

Fast creation, no external dependencies, function-scoped for isolation.
"""

import pytest

from tracklist.domain.entities.track import Track
from tracklist.domain.entities.tracklist import TrackList


@pytest.fixture
def track():
    """Basic track for domain business logic tests."""
    return Track(title="Test Track", duration=200, artist="Test Artist")


@pytest.fixture
def tracks():
    """Tracks with durations 7, 1, 6, 7, 5, 8, 7 in that order."""
    return [
        Track(title=f"Track {i}", duration=duration)
        for i, duration in enumerate([7, 1, 6, 7, 5, 8, 7])
    ]


@pytest.fixture
def tracklist(tracks):
    """Full tracklist built from the standard tracks."""
    return TrackList.from_tracks(tracks)


@pytest.fixture
def abc_tracklist():
    """Three-track list (A, B, C) with room for two more."""
    return TrackList.from_tracks(
        [
            Track(title="A", duration=180),
            Track(title="B", duration=240),
            Track(title="C", duration=120),
        ],
        capacity=5,
    )


@pytest.fixture
def empty_tracklist():
    """Empty tracklist for edge case testing."""
    return TrackList(capacity=3)
