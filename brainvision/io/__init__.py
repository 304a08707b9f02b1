"""
Readers for the three BrainVision files.

- header_reader.read_header: .vhdr -> Header
- marker_reader.read_markers: .vmrk -> MarkerData
- binary.decode_samples: .eeg + Header -> scaled sample matrix
- load.read_brainvision: base path -> Dataset
"""

from .text import tokenize
from .binary import BinaryFormat, decode_samples
from .header_reader import read_header
from .marker_reader import read_markers
from .options import ReadOptions
from .load import read_brainvision

__all__ = [
    "tokenize",
    "BinaryFormat",
    "decode_samples",
    "read_header",
    "read_markers",
    "ReadOptions",
    "read_brainvision",
]
