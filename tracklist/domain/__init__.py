"""Domain layer: tracks and bounded track lists."""

from .entities import Track, TrackList

__all__ = [
    "Track",
    "TrackList",
]
