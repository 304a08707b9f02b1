# brainvision/core/__init__.py
"""
Core domain objects for brainvision.

This module defines the in-memory model of a BrainVision recording:
- Marker / MarkerData: events from the .vmrk file
- Header / HeaderBuilder / Impedance: metadata from the .vhdr file
- Dataset: header + scaled sample matrix + markers
- selection helpers over markers and sample/time conversion

The core layer does not touch the filesystem.
"""

from .marker import Marker, MarkerData
from .header import Header, HeaderBuilder, Impedance
from .dataset import Dataset
from .selection import markers_by_type, markers_in_range, unique_types, samples_to_time
from .exceptions import (
    BrainVisionError,
    FileNotFound,
    UnsupportedFormat,
    TruncatedData,
    InvalidMarker,
    InvalidHeader,
    InvalidDataset,
    InvalidSelection,
    ChannelNotFound,
)


__all__ = [
    # markers
    "Marker",
    "MarkerData",

    # header
    "Header",
    "HeaderBuilder",
    "Impedance",

    # dataset
    "Dataset",

    # selection
    "markers_by_type",
    "markers_in_range",
    "unique_types",
    "samples_to_time",

    # exceptions
    "BrainVisionError",
    "FileNotFound",
    "UnsupportedFormat",
    "TruncatedData",
    "InvalidMarker",
    "InvalidHeader",
    "InvalidDataset",
    "InvalidSelection",
    "ChannelNotFound",
]
