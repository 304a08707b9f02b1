# brainvision/core/exceptions.py
from __future__ import annotations


class BrainVisionError(Exception):
    """Base error for all brainvision exceptions."""


# ---- Structural failures surfaced by the readers ----
class FileNotFound(BrainVisionError, FileNotFoundError):
    """Raised when a required .vhdr / .vmrk / .eeg file is absent."""


class UnsupportedFormat(BrainVisionError, ValueError):
    """Raised when the data layout or binary sample format is not supported."""


class TruncatedData(BrainVisionError, ValueError):
    """Raised when the binary file holds fewer bytes than the header implies."""


# ---- Validation / construction errors ----
class InvalidMarker(BrainVisionError, ValueError):
    """Raised when a Marker is constructed with invalid inputs."""


class InvalidHeader(BrainVisionError, ValueError):
    """Raised when a Header / Impedance is inconsistent."""


class InvalidDataset(BrainVisionError, ValueError):
    """Raised when a Dataset is constructed with invalid inputs."""


class InvalidSelection(BrainVisionError, ValueError):
    """Raised when a sample window or channel subset is out of range."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class ChannelNotFound(BrainVisionError, KeyError):
    """Raised when a requested channel label is not present."""
