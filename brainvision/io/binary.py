# brainvision/io/binary.py
from __future__ import annotations

from enum import Enum
from pathlib import Path

import numpy as np

from brainvision.core import FileNotFound, Header, TruncatedData, UnsupportedFormat
from brainvision.utils.logger import get_logger

logger = get_logger(__name__)

SUPPORTED_DATA_FORMAT = "BINARY"
SUPPORTED_ORIENTATIONS = {"", "MULTIPLEXED"}


class BinaryFormat(Enum):
    """Sample encodings of a BINARY .eeg file (all little-endian)."""

    INT_16 = "<i2"
    INT_32 = "<i4"
    IEEE_FLOAT_32 = "<f4"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.value)

    @property
    def itemsize(self) -> int:
        return self.dtype.itemsize

    @classmethod
    def lookup(cls, name: str) -> "BinaryFormat | None":
        """Case-insensitive lookup; None for unknown codes."""
        return _BY_NAME.get(name.strip().upper())

    @classmethod
    def from_header(cls, header: Header) -> "BinaryFormat":
        """Validate the header's layout and return its sample format."""
        if header.data_format.strip().upper() != SUPPORTED_DATA_FORMAT:
            raise UnsupportedFormat(
                f"Only BINARY data is supported, got DataFormat={header.data_format!r}"
            )
        fmt = cls.lookup(header.binary_format)
        if fmt is None:
            raise UnsupportedFormat(f"Unsupported binary format: {header.binary_format!r}")
        return fmt


_BY_NAME: dict[str, BinaryFormat] = {fmt.name: fmt for fmt in BinaryFormat}


def bytes_per_sample(data_format: str, binary_format: str) -> int:
    """Width of one channel value, or 0 when the layout is not decodable."""
    if data_format.strip().upper() != SUPPORTED_DATA_FORMAT:
        return 0
    fmt = BinaryFormat.lookup(binary_format)
    return 0 if fmt is None else fmt.itemsize


def count_samples(path: Path, channel_count: int, data_format: str, binary_format: str) -> int:
    """Number of whole multiplexed samples that fit in the file at `path`."""
    width = bytes_per_sample(data_format, binary_format)
    if width <= 0 or channel_count <= 0:
        return 0
    return path.stat().st_size // (channel_count * width)


def decode_samples(path: str | Path, header: Header) -> np.ndarray:
    """
    Decode a multiplexed .eeg file into a (samples x channels) float64 matrix.

    Every value is converted to float64 and multiplied by its channel's
    resolution, so the result is in physical units (usually µV).

    Each sample frame is `header.channel_count` values wide. Only channels
    that also appear in the channel table are returned, so the matrix has
    `min(channel_count, len(resolutions))` columns.

    Raises
    ------
    FileNotFound
        If `path` does not exist.
    UnsupportedFormat
        If the header describes a non-BINARY file, an unknown binary format
        or a VECTORIZED orientation.
    TruncatedData
        If the file is shorter than `header.sample_count` samples.
    """
    path = Path(path)
    if not path.is_file():
        logger.error("Data file not found: %s", path)
        raise FileNotFound(f"Data file not found: {path}")

    fmt = BinaryFormat.from_header(header)
    orientation = header.data_orientation.strip().upper()
    if orientation not in SUPPORTED_ORIENTATIONS:
        raise UnsupportedFormat(
            f"Only MULTIPLEXED data is supported, got DataOrientation={header.data_orientation!r}"
        )

    n_channels = header.channel_count
    n_columns = min(n_channels, len(header.resolutions))
    if n_channels != len(header.resolutions):
        logger.warning(
            "Header declares %d channels but describes %d; decoding %d",
            n_channels, len(header.resolutions), n_columns,
        )

    n_samples = header.sample_count
    n_bytes = n_samples * n_channels * fmt.itemsize
    with path.open("rb") as f:
        raw = f.read(n_bytes)
    if len(raw) < n_bytes:
        raise TruncatedData(
            f"{path} holds {len(raw)} bytes, expected {n_bytes} "
            f"({n_samples} samples x {n_channels} channels x {fmt.itemsize} bytes)"
        )

    values = np.frombuffer(raw, dtype=fmt.dtype).astype(np.float64)
    data = values.reshape(n_samples, n_channels)[:, :n_columns]
    data = data * np.asarray(header.resolutions[:n_columns], dtype=np.float64)
    logger.info(
        "Decoded %s: %d samples x %d channels (%s)", path.name, n_samples, n_columns, fmt.name
    )
    return data
