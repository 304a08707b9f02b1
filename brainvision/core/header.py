# brainvision/core/header.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

from .exceptions import ChannelNotFound, InvalidHeader, InvalidSelection

MICROSECONDS_PER_SECOND = 1_000_000
DEFAULT_UNIT = "uV"
DEFAULT_RESOLUTION = 1.0
DEFAULT_GROUND = 1.0


@dataclass(frozen=True, slots=True)
class Impedance:
    """
    Electrode impedances (kOhm) from the "Impedance [kOhm]" block of a .vhdr.

    Only per-electrode values are collected. `ground` keeps its default and
    `reference` / `reference_channel` stay empty.
    """
    channels: tuple[float, ...] = ()
    reference: tuple[float, ...] = ()
    ground: float = DEFAULT_GROUND
    reference_channel: tuple[float, ...] = ()
    labels: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "channels", tuple(float(v) for v in self.channels))
        object.__setattr__(self, "reference", tuple(float(v) for v in self.reference))
        object.__setattr__(
            self, "reference_channel", tuple(float(v) for v in self.reference_channel)
        )
        object.__setattr__(self, "labels", tuple(self.labels))
        if self.labels and len(self.labels) != len(self.channels):
            raise InvalidHeader("Impedance.labels and Impedance.channels differ in length.")

    def as_dict(self) -> dict[str, float]:
        """Electrode name -> impedance value."""
        return dict(zip(self.labels, self.channels))


@dataclass(frozen=True, slots=True)
class Header:
    """
    Metadata from a .vhdr file.

    `labels`, `references`, `resolutions` and `units` are parallel: entry i
    describes channel i. `channel_count` is what the file declares in
    NumberOfChannels and is not forced to match the channel table.
    """
    data_file: str = ""
    marker_file: str = ""
    data_format: str = ""
    data_orientation: str = ""
    binary_format: str = ""
    channel_count: int = 0
    sampling_interval_us: float = 0.0
    sampling_rate_hz: float = 0.0
    labels: tuple[str, ...] = ()
    references: tuple[str, ...] = ()
    resolutions: tuple[float, ...] = ()
    units: tuple[str, ...] = ()
    sample_count: int = 0
    trial_count: int = 1
    pre_trigger_samples: int = 0
    impedance: Impedance | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for name in ("labels", "references", "resolutions", "units"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(self, "resolutions", tuple(float(r) for r in self.resolutions))

        n = len(self.labels)
        if not (len(self.references) == len(self.resolutions) == len(self.units) == n):
            raise InvalidHeader(
                "Header channel sequences must have equal length "
                f"(labels={n}, references={len(self.references)}, "
                f"resolutions={len(self.resolutions)}, units={len(self.units)})."
            )
        if self.channel_count < 0:
            raise InvalidHeader("Header.channel_count must be >= 0.")
        if self.sample_count < 0:
            raise InvalidHeader("Header.sample_count must be >= 0.")
        if self.impedance is not None and not isinstance(self.impedance, Impedance):
            raise InvalidHeader("Header.impedance must be an Impedance instance.")

    @property
    def is_consistent(self) -> bool:
        """True when the channel table matches NumberOfChannels."""
        return len(self.labels) == self.channel_count

    def channel_index(self, label: str) -> int:
        """0-based index of the first channel named `label`."""
        try:
            return self.labels.index(label)
        except ValueError as e:
            raise ChannelNotFound(label) from e

    def select(
        self,
        channel_indices: Sequence[int] | None = None,
        sample_count: int | None = None,
    ) -> "Header":
        """
        Return a Header describing a channel subset and/or a shorter recording.

        Used when a Dataset is narrowed after decoding; the source header is
        left untouched.
        """
        changes: dict[str, object] = {}
        if channel_indices is not None:
            indices = list(channel_indices)
            for i in indices:
                if not 0 <= i < len(self.labels):
                    raise InvalidSelection(
                        f"Channel index {i} out of range for {len(self.labels)} channels."
                    )
            changes.update(
                channel_count=len(indices),
                labels=tuple(self.labels[i] for i in indices),
                references=tuple(self.references[i] for i in indices),
                resolutions=tuple(self.resolutions[i] for i in indices),
                units=tuple(self.units[i] for i in indices),
            )
        if sample_count is not None:
            changes["sample_count"] = sample_count
        return replace(self, **changes)


@dataclass
class HeaderBuilder:
    """Mutable accumulator filled line by line, then frozen with `build()`."""
    data_file: str = ""
    marker_file: str = ""
    data_format: str = ""
    data_orientation: str = ""
    binary_format: str = ""
    channel_count: int = 0
    sampling_interval_us: float = 0.0
    labels: list[str] = field(default_factory=list)
    references: list[str] = field(default_factory=list)
    resolutions: list[float] = field(default_factory=list)
    units: list[str] = field(default_factory=list)
    sample_count: int = 0
    trial_count: int = 1
    pre_trigger_samples: int = 0
    impedance_labels: list[str] = field(default_factory=list)
    impedance_values: list[float] = field(default_factory=list)

    def add_channel(
        self,
        label: str,
        reference: str = "",
        resolution: float = DEFAULT_RESOLUTION,
        unit: str = DEFAULT_UNIT,
    ) -> None:
        # The four lists grow in lockstep.
        self.labels.append(label)
        self.references.append(reference)
        self.resolutions.append(resolution)
        self.units.append(unit)

    def add_impedance(self, label: str, value: float) -> None:
        self.impedance_labels.append(label)
        self.impedance_values.append(value)

    @property
    def sampling_rate_hz(self) -> float:
        if self.sampling_interval_us > 0:
            return MICROSECONDS_PER_SECOND / self.sampling_interval_us
        return 0.0

    def build(self) -> Header:
        impedance = None
        if self.impedance_values:
            impedance = Impedance(
                channels=tuple(self.impedance_values),
                labels=tuple(self.impedance_labels),
            )
        return Header(
            data_file=self.data_file,
            marker_file=self.marker_file,
            data_format=self.data_format,
            data_orientation=self.data_orientation,
            binary_format=self.binary_format,
            channel_count=self.channel_count,
            sampling_interval_us=self.sampling_interval_us,
            sampling_rate_hz=self.sampling_rate_hz,
            labels=tuple(self.labels),
            references=tuple(self.references),
            resolutions=tuple(self.resolutions),
            units=tuple(self.units),
            sample_count=self.sample_count,
            trial_count=self.trial_count,
            pre_trigger_samples=self.pre_trigger_samples,
            impedance=impedance,
        )
