"""Bounded track list entity.

A TrackList holds at most `capacity` tracks in a storage list allocated once at
construction. Live tracks occupy positions [0, size) with no gaps; every other
slot is None. Operations that cannot be applied report failure through their
return value (False, None) or do nothing, and always leave the list unchanged.
"""

from collections.abc import Iterable, Iterator

from attrs import define, field, validators

from tracklist.config import get_logger, settings

from .track import Track

logger = get_logger(__name__)


@define
class TrackList:
    """Fixed-capacity, ordered collection of tracks.

    Unlike a plain list, a TrackList never grows past its capacity: appends and
    inserts on a full list are rejected rather than resizing the storage.
    """

    _capacity: int = field(
        validator=[validators.instance_of(int), validators.ge(0)],
    )
    _tracks: list[Track | None] = field(init=False, factory=list, repr=False)
    _size: int = field(init=False, default=0)

    def __attrs_post_init__(self) -> None:
        self._tracks = [None] * self._capacity

    @classmethod
    def create(cls, capacity: int | None = None) -> "TrackList":
        """Create an empty track list, using the configured default capacity if none given."""
        if capacity is None:
            capacity = settings.tracklist.default_capacity
        return cls(capacity)

    @classmethod
    def from_tracks(
        cls,
        tracks: Iterable[Track],
        capacity: int | None = None,
    ) -> "TrackList":
        """Create a track list pre-filled with the given tracks.

        Args:
            tracks: Tracks to add, in order
            capacity: Maximum size; defaults to the number of tracks

        Raises:
            ValueError: If the tracks do not fit in the requested capacity
        """
        tracks = list(tracks)
        if capacity is None:
            capacity = len(tracks)
        if len(tracks) > capacity:
            raise ValueError(
                f"Cannot fit {len(tracks)} tracks in a track list of capacity {capacity}",
            )

        tracklist = cls(capacity)
        for track in tracks:
            tracklist.append(track)
        return tracklist

    # === Accessors ===

    @property
    def capacity(self) -> int:
        """Maximum number of tracks this list can ever hold."""
        return self._capacity

    @property
    def size(self) -> int:
        """Current number of tracks in this list."""
        return self._size

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def is_full(self) -> bool:
        return self._size == self._capacity

    @property
    def tracks(self) -> tuple[Track, ...]:
        """Live tracks in list order."""
        return tuple(self)

    def get(self, index: int) -> Track | None:
        """Return the track at index, or None if index is outside [0, size)."""
        if 0 <= index < self._size:
            return self._tracks[index]
        return None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Track]:
        for i in range(self._size):
            yield self._tracks[i]

    def __str__(self) -> str:
        return self.describe()

    # === Mutation ===

    def append(self, track: Track) -> bool:
        """Append a track to the end of this list.

        Returns:
            False (and leaves the list unchanged) if the list is full, else True
        """
        if self.is_full:
            logger.debug("Append rejected, track list is full", capacity=self._capacity)
            return False

        self._tracks[self._size] = track
        self._size += 1
        return True

    def insert_at(self, index: int, track: Track) -> bool:
        """Insert a track at the given index, shifting later tracks right.

        For example, inserting t4 at index 1 of (t5, t3, t1) gives
        (t5, t4, t3, t1). Inserting at index == size is an append.

        Returns:
            False (and leaves the list unchanged) if the index is outside
            [0, size] or the list is full, else True
        """
        if index < 0 or index > self._size or self.is_full:
            logger.debug(
                "Insert rejected",
                index=index,
                size=self._size,
                capacity=self._capacity,
            )
            return False

        for j in range(self._size, index, -1):
            self._tracks[j] = self._tracks[j - 1]
        self._tracks[index] = track
        self._size += 1
        return True

    def remove_at(self, index: int) -> None:
        """Remove the track at the given index, shifting later tracks left.

        Does nothing if the list is empty or the index is outside [0, size).
        """
        if index < 0 or index >= self._size:
            logger.debug("Remove ignored, index out of range", index=index, size=self._size)
            return

        for j in range(index, self._size - 1):
            self._tracks[j] = self._tracks[j + 1]
        self._size -= 1
        self._tracks[self._size] = None

    def remove_last(self) -> None:
        """Remove the last track. Does nothing if the list is empty."""
        if self._size > 0:
            self._size -= 1
            self._tracks[self._size] = None

    def remove_first(self) -> None:
        """Remove the first track. Does nothing if the list is empty."""
        self.remove_at(0)

    def index_of(self, title: str) -> int | None:
        """Return the index of the first track with the given title (any case), or None."""
        for i in range(self._size):
            if self._tracks[i].matches_title(title):
                return i
        return None

    def remove_by_title(self, title: str) -> None:
        """Remove the first track with the given title. Does nothing if none matches."""
        index = self.index_of(title)
        if index is None:
            logger.debug("Remove ignored, title not found", title=title)
            return
        self.remove_at(index)

    def append_all(self, other: "TrackList") -> bool:
        """Append every track of another list, in order, to the end of this one.

        All or nothing: if the combined size exceeds this list's capacity,
        neither list is changed.

        Returns:
            True if the tracks were appended, else False
        """
        if self._size + other.size > self._capacity:
            logger.debug(
                "Concatenation rejected, combined size exceeds capacity",
                size=self._size,
                other_size=other.size,
                capacity=self._capacity,
            )
            return False

        # Snapshot first so a list can be appended to itself
        for track in other.tracks:
            self.append(track)
        return True

    # === Aggregation, search and sorting ===

    def total_duration(self) -> int:
        """Total duration in seconds of all tracks in this list."""
        return sum(track.duration for track in self)

    def min_index_from(self, start: int) -> int | None:
        """Return the index of the shortest track at or after start.

        For durations 7, 1, 6, 7, 5, 8, 7, searching from index 2 gives 4.
        Equal durations resolve to the last occurrence.

        Returns:
            The index, or None if start is outside [0, size)
        """
        if start < 0 or start >= self._size:
            return None

        min_index = start
        min_duration = self._tracks[start].duration
        for i in range(start + 1, self._size):
            if self._tracks[i].duration <= min_duration:
                min_index = i
                min_duration = self._tracks[i].duration
        return min_index

    def title_of_shortest(self) -> str | None:
        """Title of the shortest track, or None if the list is empty."""
        index = self.min_index_from(0)
        if index is None:
            return None
        return self._tracks[index].title

    def sort_by_duration(self) -> None:
        """Sort this list in place by increasing duration (selection sort).

        The sort is not stable: tracks with equal durations may change
        relative order.
        """
        for i in range(self._size):
            min_index = self.min_index_from(i)
            self._tracks[i], self._tracks[min_index] = (
                self._tracks[min_index],
                self._tracks[i],
            )

    def describe(self) -> str:
        """Text listing of this list, one track per line."""
        return "\n".join(str(track) for track in self)
