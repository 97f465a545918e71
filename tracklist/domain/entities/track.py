"""Track-related domain entities.

Pure track representations with zero external dependencies beyond attrs.
"""

import attrs
from attrs import define, field, validators


@define(frozen=True, slots=True)
class Track:
    """Immutable track entity representing a musical recording.

    Track lists only read a track's title (compared case-insensitively) and its
    duration in whole seconds.
    """

    title: str = field(validator=validators.instance_of(str))
    duration: int = field(
        validator=[validators.instance_of(int), validators.ge(0)],
    )
    artist: str | None = field(
        default=None,
        validator=validators.optional(validators.instance_of(str)),
    )

    def matches_title(self, title: str) -> bool:
        """Check whether this track has the given title, ignoring case."""
        return self.title.casefold() == title.casefold()

    def with_duration(self, seconds: int) -> "Track":
        """Create a new track with a different duration."""
        return attrs.evolve(self, duration=seconds)

    @property
    def formatted_duration(self) -> str:
        """Duration as minutes and zero-padded seconds, e.g. 3:07."""
        minutes, seconds = divmod(self.duration, 60)
        return f"{minutes}:{seconds:02d}"

    def __str__(self) -> str:
        if self.artist:
            return f"{self.artist}, {self.title}, {self.duration}"
        return f"{self.title}, {self.duration}"
