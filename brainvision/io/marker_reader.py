# brainvision/io/marker_reader.py
from __future__ import annotations

import os
from pathlib import Path

from brainvision.core import FileNotFound, InvalidMarker, Marker, MarkerData
from brainvision.core.marker import is_timestamp
from brainvision.utils.logger import get_logger

from .text import is_skippable, parse_int, read_lines, tokenize

logger = get_logger(__name__)

MARKER_PREFIX = "Mk"
_MIN_TOKENS = 4
_TIMESTAMP_TOKEN = 5


def _parse_marker_line(line: str) -> Marker | None:
    """
    Parse `Mk<N>=<type>,<value>,<sample>,<duration>[,<channel>[,<timestamp>]]`.

    Returns None for lines that cannot be turned into a Marker.
    """
    _, sep, value = line.partition("=")
    if not sep:
        return None

    tokens = tokenize(value, ",")
    if len(tokens) < _MIN_TOKENS:
        return None

    sample = parse_int(tokens[2])
    duration = parse_int(tokens[3])
    if sample is None or duration is None:
        return None

    timestamp = None
    if len(tokens) > _TIMESTAMP_TOKEN and is_timestamp(tokens[_TIMESTAMP_TOKEN]):
        timestamp = tokens[_TIMESTAMP_TOKEN]

    try:
        return Marker(
            type=tokens[0],
            value=tokens[1],
            sample=sample,
            duration=duration,
            timestamp=timestamp,
        )
    except InvalidMarker:
        return None


def read_markers(path: str | Path) -> MarkerData:
    """
    Read a BrainVision marker file (.vmrk).

    Malformed `Mk` lines are skipped rather than failing the whole file;
    each one is logged at debug level and a warning reports how many were
    dropped.

    Raises
    ------
    FileNotFound
        If `path` does not exist.
    """
    filename = os.fspath(path)
    path = Path(path)
    if not path.is_file():
        logger.error("Marker file not found: %s", path)
        raise FileNotFound(f"Marker file not found: {path}")

    markers: list[Marker] = []
    skipped = 0
    for line_num, line in enumerate(read_lines(path), start=1):
        if is_skippable(line) or not line.startswith(MARKER_PREFIX):
            continue
        marker = _parse_marker_line(line)
        if marker is None:
            skipped += 1
            logger.debug("%s:%d: skipping malformed marker %r", path.name, line_num, line)
            continue
        markers.append(marker)

    if skipped:
        logger.warning("Skipped %d malformed marker line(s) in %s", skipped, path.name)
    logger.info("Read %d markers from %s", len(markers), path.name)
    return MarkerData(filename=filename, markers=tuple(markers))
