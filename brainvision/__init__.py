"""
brainvision: read BrainVision EEG recordings (.vhdr / .vmrk / .eeg).

    >>> from brainvision import read_brainvision, markers_by_type
    >>> ds = read_brainvision("experiment")
    >>> ds.samples.shape          # (samples, channels), physical units
    >>> markers_by_type(ds, "Stimulus")
"""

from brainvision.core import (
    Marker,
    MarkerData,
    Header,
    HeaderBuilder,
    Impedance,
    Dataset,
    markers_by_type,
    markers_in_range,
    unique_types,
    samples_to_time,
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
from brainvision.io import (
    BinaryFormat,
    ReadOptions,
    decode_samples,
    read_brainvision,
    read_header,
    read_markers,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "Marker",
    "MarkerData",
    "Header",
    "HeaderBuilder",
    "Impedance",
    "Dataset",
    "markers_by_type",
    "markers_in_range",
    "unique_types",
    "samples_to_time",
    "BinaryFormat",
    "ReadOptions",
    "decode_samples",
    "read_brainvision",
    "read_header",
    "read_markers",
    "tokenize",
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
