# test/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
import pytest

_DTYPES = {"INT_16": "<i2", "INT_32": "<i4", "IEEE_FLOAT_32": "<f4"}


def vhdr_text(
    *,
    data_file: str = "test.eeg",
    marker_file: str = "test.vmrk",
    n_channels: int = 2,
    channels: Sequence[str] | None = None,
    binary_format: str = "IEEE_FLOAT_32",
    orientation: str = "MULTIPLEXED",
    data_format: str = "BINARY",
    interval: str = "1000",
    extra: str = "",
) -> str:
    if channels is None:
        channels = [f"chan{i + 1},,0.1,µV" for i in range(n_channels)]
    ch_lines = "\n".join(f"Ch{i + 1}={c}" for i, c in enumerate(channels))
    return (
        "Brain Vision Data Exchange Header File Version 1.0\n"
        "; Data created by the test suite\n"
        "\n"
        "[Common Infos]\n"
        "Codepage=UTF-8\n"
        f"DataFile={data_file}\n"
        f"MarkerFile={marker_file}\n"
        f"DataFormat={data_format}\n"
        "; Data orientation: MULTIPLEXED=ch1,pt1, ch2,pt1 ...\n"
        f"DataOrientation={orientation}\n"
        f"NumberOfChannels={n_channels}\n"
        "; Sampling interval in microseconds\n"
        f"SamplingInterval={interval}\n"
        "\n"
        "[Binary Infos]\n"
        f"BinaryFormat={binary_format}\n"
        "\n"
        "[Channel Infos]\n"
        "; Each entry: Ch<Channel number>=<Name>,<Reference channel name>,\n"
        "; <Resolution in \"Unit\">,<Unit>, Future extensions..\n"
        f"{ch_lines}\n"
        f"{extra}"
    )


def vmrk_text(samples: Sequence[int], *, data_file: str = "test.eeg", extra: str = "") -> str:
    lines = [
        "Brain Vision Data Exchange Marker File, Version 1.0",
        "",
        "[Common Infos]",
        "Codepage=UTF-8",
        f"DataFile={data_file}",
        "",
        "[Marker Infos]",
        "; Each entry: Mk<Marker number>=<Type>,<Description>,<Position in data points>,",
        "; <Size in data points>, <Channel number (0 = marker is related to all channels)>",
    ]
    for i, s in enumerate(samples, start=1):
        lines.append(f"Mk{i}=Stimulus,S  1,{s},1,0")
    return "\n".join(lines) + "\n" + extra


def write_eeg(path: Path, raw: np.ndarray, binary_format: str = "IEEE_FLOAT_32") -> Path:
    """Write `raw` (samples x channels) multiplexed in the given format."""
    np.ascontiguousarray(raw, dtype=_DTYPES[binary_format]).tofile(path)
    return path


@pytest.fixture
def recording(tmp_path: Path):
    """Factory writing a test.vhdr / test.vmrk / test.eeg triplet into tmp_path.

    Returns the base path (without extension) as a string.
    """

    def _make(
        raw: np.ndarray | None = None,
        *,
        binary_format: str = "IEEE_FLOAT_32",
        marker_samples: Sequence[int] = tuple(range(500, 10000, 1000)),
        name: str = "test",
        **header_kwargs,
    ) -> str:
        if raw is None:
            raw = np.arange(20000, dtype=np.float64).reshape(10000, 2)
        n_channels = raw.shape[1]
        header_kwargs.setdefault("n_channels", n_channels)
        (tmp_path / f"{name}.vhdr").write_text(
            vhdr_text(
                data_file=f"{name}.eeg",
                marker_file=f"{name}.vmrk",
                binary_format=binary_format,
                **header_kwargs,
            ),
            encoding="utf-8",
        )
        (tmp_path / f"{name}.vmrk").write_text(
            vmrk_text(marker_samples, data_file=f"{name}.eeg"), encoding="utf-8"
        )
        write_eeg(tmp_path / f"{name}.eeg", raw, binary_format)
        return str(tmp_path / name)

    return _make
