# brainvision/io/load.py
from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable

from brainvision.core import Dataset, FileNotFound
from brainvision.utils.logger import get_logger

from .binary import decode_samples
from .header_reader import read_header
from .marker_reader import read_markers
from .options import ReadOptions

logger = get_logger(__name__)

_EXTENSION_RE = re.compile(r"\.(vhdr|vmrk|eeg)$")


def _strip_extension(path: str) -> str:
    return _EXTENSION_RE.sub("", path)


def _require(path: Path, kind: str) -> Path:
    if not path.is_file():
        logger.error("%s file not found: %s", kind, path)
        raise FileNotFound(f"{kind} file not found: {path}")
    return path


def read_brainvision(
    base_path: str | os.PathLike[str],
    options: ReadOptions | None = None,
    *,
    start_sample: int | None = None,
    end_sample: int | None = None,
    channels: Iterable[int | str] | None = None,
) -> Dataset:
    """Read a complete BrainVision recording.

    Parameters
    ----------
    base_path:
        Path without extension (".vhdr", ".vmrk" or ".eeg" is stripped if
        present). `<base>.vhdr`, `<base>.vmrk` and `<base>.eeg` must all exist.
    options:
        Optional ReadOptions. Keyword arguments override its fields.
    start_sample, end_sample:
        1-based inclusive sample window.
    channels:
        Channel indices (0-based) or labels to keep.

    The whole .eeg file is decoded first; selection is applied afterwards.
    Markers are always returned in full.
    """
    base = _strip_extension(os.fspath(base_path))
    vhdr = _require(Path(f"{base}.vhdr"), "Header")
    vmrk = _require(Path(f"{base}.vmrk"), "Marker")
    eeg = _require(Path(f"{base}.eeg"), "EEG data")

    opts = options or ReadOptions()
    if start_sample is not None or end_sample is not None or channels is not None:
        opts = ReadOptions(
            start_sample=opts.start_sample if start_sample is None else start_sample,
            end_sample=opts.end_sample if end_sample is None else end_sample,
            channels=opts.channels if channels is None else tuple(channels),
        )

    header = read_header(vhdr)
    if header.data_file and header.data_file != eeg.name:
        # sample_count was sized from DataFile, not from <base>.eeg
        logger.warning("%s names DataFile=%s, reading %s", vhdr.name, header.data_file, eeg.name)
    markers = read_markers(vmrk)
    samples = decode_samples(eeg, header)
    if samples.shape[1] != header.channel_count:
        # describe only the channels that were decoded
        header = header.select(channel_indices=range(samples.shape[1]))

    ds = Dataset(
        source_path=base,
        header=header,
        samples=samples,
        markers=markers.markers,
    )

    if not opts.is_full_read:
        logger.info(
            "Selecting samples %s..%s, channels %s",
            opts.start_sample, opts.end_sample, opts.channels,
        )
        if opts.start_sample is not None or opts.end_sample is not None:
            ds = ds.slice_samples(opts.start_sample, opts.end_sample)
        if opts.channels is not None:
            ds = ds.select_channels(opts.channels)
    return ds
