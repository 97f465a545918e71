"""Fixed-capacity, ordered track lists."""

from tracklist.domain import Track, TrackList

__all__ = [
    "Track",
    "TrackList",
]
