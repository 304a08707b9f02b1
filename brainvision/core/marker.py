# brainvision/core/marker.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .exceptions import InvalidMarker

TIMESTAMP_LENGTH = 20


@dataclass(frozen=True, slots=True)
class Marker:
    """
    A single event from a .vmrk file.

    - type: event class ("Stimulus", "Response", "New Segment", ...)
    - value: event description ("S  1", "R 12", ...)
    - sample: 1-based position in data points
    - duration: length in data points
    - timestamp: raw 20-digit YYYYMMDDhhmmssµµµµµµ string, if present
    """
    type: str
    value: str
    sample: int
    duration: int = 1
    timestamp: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.type, str):
            raise InvalidMarker("Marker.type must be a string.")
        if not isinstance(self.value, str):
            raise InvalidMarker("Marker.value must be a string.")
        if isinstance(self.sample, bool) or not isinstance(self.sample, int):
            raise InvalidMarker("Marker.sample must be an integer.")
        if self.sample < 1:
            raise InvalidMarker(f"Marker.sample must be >= 1, got {self.sample}.")
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise InvalidMarker("Marker.duration must be an integer.")
        if self.duration < 0:
            raise InvalidMarker(f"Marker.duration must be >= 0, got {self.duration}.")
        if self.timestamp is not None and not is_timestamp(self.timestamp):
            raise InvalidMarker(
                f"Marker.timestamp must be {TIMESTAMP_LENGTH} digits, got {self.timestamp!r}."
            )


def is_timestamp(text: str) -> bool:
    return len(text) == TIMESTAMP_LENGTH and text.isascii() and text.isdigit()


@dataclass(frozen=True, slots=True)
class MarkerData:
    """Markers read from one .vmrk file, in file order."""
    filename: str
    markers: tuple[Marker, ...] = field(default_factory=tuple, repr=False)

    def __post_init__(self) -> None:
        markers = tuple(self.markers)
        for m in markers:
            if not isinstance(m, Marker):
                raise InvalidMarker("MarkerData.markers must contain Marker instances.")
        object.__setattr__(self, "markers", markers)

    @property
    def count(self) -> int:
        return len(self.markers)

    def __len__(self) -> int:
        return len(self.markers)

    def __iter__(self) -> Iterator[Marker]:
        return iter(self.markers)

    def __getitem__(self, index: int) -> Marker:
        return self.markers[index]

