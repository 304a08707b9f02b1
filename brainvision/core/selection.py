# brainvision/core/selection.py
"""
Marker queries and sample/time conversion.

The marker helpers accept a Dataset, a MarkerData or any iterable of
Marker objects and always return plain lists in file order.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union, overload

import numpy as np

from .dataset import Dataset
from .marker import Marker, MarkerData

MarkerSource = Union[Dataset, MarkerData, Iterable[Marker]]


def _iter_markers(data: MarkerSource) -> Iterable[Marker]:
    if isinstance(data, (Dataset, MarkerData)):
        return data.markers
    return data


def markers_by_type(data: MarkerSource, marker_type: str) -> list[Marker]:
    """Markers whose `type` equals `marker_type` exactly."""
    return [m for m in _iter_markers(data) if m.type == marker_type]


def markers_in_range(data: MarkerSource, start_sample: int, end_sample: int) -> list[Marker]:
    """Markers with `start_sample <= sample <= end_sample`."""
    return [m for m in _iter_markers(data) if start_sample <= m.sample <= end_sample]


def unique_types(data: MarkerSource) -> list[str]:
    """Distinct marker types in order of first occurrence."""
    seen: dict[str, None] = {}
    for m in _iter_markers(data):
        seen.setdefault(m.type, None)
    return list(seen)


@overload
def samples_to_time(samples: int, sampling_rate: float) -> float: ...


@overload
def samples_to_time(samples: Sequence[int] | np.ndarray, sampling_rate: float) -> np.ndarray: ...


def samples_to_time(samples, sampling_rate):
    """
    Convert sample counts to seconds: `samples / sampling_rate`.

    A zero rate yields +/-inf (nan for 0 / 0) instead of raising, and a
    negative rate yields negative times. Scalars give a float, sequences a
    float64 array.
    """
    rate = np.float64(sampling_rate)
    with np.errstate(divide="ignore", invalid="ignore"):
        if np.ndim(samples) == 0:
            return float(np.float64(samples) / rate)
        return np.asarray(samples, dtype=np.float64) / rate
