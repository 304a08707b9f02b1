# brainvision/core/dataset.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from .exceptions import ChannelNotFound, InvalidDataset, InvalidSelection
from .header import Header
from .marker import Marker


@dataclass(frozen=True, slots=True)
class Dataset:
    """
    A complete BrainVision recording: header, scaled samples and markers.

    Design goals:
    - samples are float64, rows = samples, columns = channels
    - safe + predictable: immutable, validated on construction
    - narrowing (select_channels / slice_samples) returns a new Dataset
    """
    source_path: str
    header: Header | None = None
    samples: np.ndarray | None = field(default=None, repr=False)
    markers: tuple[Marker, ...] = field(default_factory=tuple, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.source_path, str):
            raise InvalidDataset("Dataset.source_path must be a string.")
        if self.header is not None and not isinstance(self.header, Header):
            raise InvalidDataset("Dataset.header must be a Header instance.")

        markers = tuple(self.markers)
        for m in markers:
            if not isinstance(m, Marker):
                raise InvalidDataset("Dataset.markers must contain Marker instances.")
        object.__setattr__(self, "markers", markers)

        if self.samples is not None:
            data = np.asarray(self.samples, dtype=np.float64)
            if data.ndim != 2:
                raise InvalidDataset(f"Dataset.samples must be 2D, got shape {data.shape}")
            if self.header is not None and data.shape[1] != self.header.channel_count:
                raise InvalidDataset(
                    f"Dataset.samples has {data.shape[1]} columns but the header "
                    f"declares {self.header.channel_count} channels."
                )
            object.__setattr__(self, "samples", data)

    # ---- shape / metadata accessors ----
    @property
    def n_samples(self) -> int:
        return 0 if self.samples is None else int(self.samples.shape[0])

    @property
    def n_channels(self) -> int:
        if self.samples is not None:
            return int(self.samples.shape[1])
        return 0 if self.header is None else self.header.channel_count

    @property
    def labels(self) -> tuple[str, ...]:
        return () if self.header is None else self.header.labels

    @property
    def sampling_rate(self) -> float:
        return 0.0 if self.header is None else self.header.sampling_rate_hz

    @property
    def times(self) -> np.ndarray:
        """Elapsed seconds of each row, starting at 0."""
        rate = self.sampling_rate
        if rate <= 0:
            raise InvalidDataset("Dataset has no positive sampling rate.")
        return np.arange(self.n_samples, dtype=np.float64) / rate

    def channel(self, label: str) -> np.ndarray:
        """Column of samples for the channel named `label`."""
        if self.header is None or self.samples is None:
            raise ChannelNotFound(label)
        return self.samples[:, self.header.channel_index(label)]

    # ---- transformations ----
    def select_channels(self, channels: Iterable[int | str]) -> "Dataset":
        """
        Keep only the given channels, by 0-based index or label.

        Order follows `channels`.
        """
        if self.header is None or self.samples is None:
            raise InvalidSelection("select_channels() needs a header and samples.")

        indices = [self._resolve_channel(c) for c in channels]
        return Dataset(
            source_path=self.source_path,
            header=self.header.select(channel_indices=indices),
            samples=self.samples[:, indices],
            markers=self.markers,
        )

    def slice_samples(self, start: int | None = None, end: int | None = None) -> "Dataset":
        """
        Keep samples `start`..`end`, 1-based and inclusive like marker positions.

        Markers are kept unchanged, so their `sample` fields still refer to
        the full recording.
        """
        if self.samples is None:
            raise InvalidSelection("slice_samples() needs decoded samples.")

        n = self.n_samples
        first = 1 if start is None else int(start)
        last = n if end is None else int(end)
        if first < 1:
            raise InvalidSelection(f"start sample must be >= 1, got {first}.")
        if last > n:
            raise InvalidSelection(f"end sample {last} exceeds {n} available samples.")
        if last < first - 1:
            raise InvalidSelection(f"end sample {last} precedes start sample {first}.")

        window = self.samples[first - 1:last]
        header = None
        if self.header is not None:
            header = self.header.select(sample_count=int(window.shape[0]))
        return Dataset(
            source_path=self.source_path,
            header=header,
            samples=window,
            markers=self.markers,
        )

    def _resolve_channel(self, channel: int | str) -> int:
        if isinstance(channel, str):
            return self.header.channel_index(channel)
        if isinstance(channel, bool) or not isinstance(channel, (int, np.integer)):
            raise InvalidSelection(f"Channel selector must be an int or str, got {channel!r}.")
        idx = int(channel)
        if not 0 <= idx < self.n_channels:
            raise InvalidSelection(
                f"Channel index {idx} out of range for {self.n_channels} channels."
            )
        return idx

