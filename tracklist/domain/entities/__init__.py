"""Core domain entities representing music concepts."""

from .track import Track
from .tracklist import TrackList

__all__ = [
    "Track",
    "TrackList",
]
