# brainvision/io/header_reader.py
from __future__ import annotations

from pathlib import Path

from brainvision.core import FileNotFound, Header, HeaderBuilder
from brainvision.core.header import DEFAULT_RESOLUTION, DEFAULT_UNIT
from brainvision.utils.logger import get_logger

from .binary import count_samples
from .text import is_skippable, parse_float, parse_int, read_lines, tokenize

logger = get_logger(__name__)

IMPEDANCE_MARKER = "Impedance [kOhm]"

_STRING_FIELDS = {
    "DataFile": "data_file",
    "MarkerFile": "marker_file",
    "DataFormat": "data_format",
    "DataOrientation": "data_orientation",
    "BinaryFormat": "binary_format",
}

# Sections that reuse "ChN=" keys for something other than the channel table.
_NON_CHANNEL_SECTIONS = {"coordinates", "channel user infos"}

# Micro sign (U+00B5) and Greek mu (U+03BC) spellings of microvolt.
_MICROVOLT_SPELLINGS = ("µV", "μV")


def _normalize_unit(unit: str) -> str:
    for spelling in _MICROVOLT_SPELLINGS:
        unit = unit.replace(spelling, DEFAULT_UNIT)
    return unit


def _section_name(line: str) -> str:
    return line.strip("[]").strip().lower()


def _parse_channel_info(builder: HeaderBuilder, value: str) -> None:
    """`Ch<N>=<label>,<reference>,<resolution>,<unit>` -> one channel."""
    info = tokenize(value, ",")
    if not info:
        return

    label = info[0]
    reference = info[1] if len(info) >= 2 else ""

    resolution = None
    if len(info) >= 3 and info[2]:
        resolution = parse_float(info[2])
    if resolution is None:
        resolution = DEFAULT_RESOLUTION

    unit = DEFAULT_UNIT
    if len(info) >= 4 and info[3]:
        unit = _normalize_unit(info[3])

    builder.add_channel(label, reference, resolution, unit)


def _parse_header_field(builder: HeaderBuilder, key: str, value: str, section: str | None) -> None:
    if key.startswith("Ch"):
        if section not in _NON_CHANNEL_SECTIONS:
            _parse_channel_info(builder, value)
        return

    if key in _STRING_FIELDS:
        setattr(builder, _STRING_FIELDS[key], value)
    elif key == "NumberOfChannels":
        n = parse_int(value)
        if n is not None and n >= 0:
            builder.channel_count = n
        else:
            logger.debug("Ignoring NumberOfChannels=%r", value)
    elif key == "SamplingInterval":
        interval = parse_float(value)
        if interval is not None:
            builder.sampling_interval_us = interval
        else:
            logger.debug("Ignoring SamplingInterval=%r", value)


def _parse_impedance_line(builder: HeaderBuilder, line: str) -> None:
    """`<electrode>: <kOhm>`; non-numeric values ("Out of Range!") are dropped."""
    name, sep, value = line.partition(":")
    if not sep:
        return
    impedance = parse_float(value.strip())
    if impedance is None:
        logger.debug("Dropping impedance line %r", line)
        return
    builder.add_impedance(name.strip(), impedance)


def read_header(path: str | Path) -> Header:
    """
    Read a BrainVision header file (.vhdr).

    Parameters
    ----------
    path:
        Path to the .vhdr file.

    Returns
    -------
    Header
        Channel table, sampling rate, file references and, when present,
        electrode impedances. `sample_count` is derived from the size of
        the referenced data file (0 if it is missing or not decodable).

    Raises
    ------
    FileNotFound
        If `path` does not exist.
    """
    path = Path(path)
    if not path.is_file():
        logger.error("Header file not found: %s", path)
        raise FileNotFound(f"Header file not found: {path}")

    builder = HeaderBuilder()
    section: str | None = None
    in_impedance = False

    for line in read_lines(path):
        if in_impedance and not line:
            in_impedance = False
            continue
        if line.startswith("["):
            section = _section_name(line)
            in_impedance = False
        if is_skippable(line):
            continue

        if IMPEDANCE_MARKER in line:
            in_impedance = True
            continue
        if in_impedance:
            _parse_impedance_line(builder, line)
            continue

        key, sep, value = line.partition("=")
        if not sep:
            continue
        _parse_header_field(builder, key.strip(), value.strip(), section)

    data_file = path.parent / builder.data_file
    if builder.data_file and data_file.is_file():
        builder.sample_count = count_samples(
            data_file, builder.channel_count, builder.data_format, builder.binary_format
        )

    header = builder.build()
    if not header.is_consistent:
        logger.warning(
            "%s declares %d channels but lists %d",
            path.name, header.channel_count, len(header.labels),
        )
    logger.info(
        "Read header %s: %d channels, %.1f Hz, %d samples",
        path.name, header.channel_count, header.sampling_rate_hz, header.sample_count,
    )
    return header
