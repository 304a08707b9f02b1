# test/test_options.py
import pytest

from brainvision.core import InvalidSelection
from brainvision.io import ReadOptions
from brainvision.utils import load_config


def test_defaults_mean_full_read():
    opts = ReadOptions()
    assert opts.is_full_read
    assert opts.channels is None


def test_channels_normalized_to_tuple():
    assert ReadOptions(channels=[0, "Cz"]).channels == (0, "Cz")
    assert ReadOptions(channels="Cz").channels == ("Cz",)
    assert ReadOptions(channels=2).channels == (2,)
    assert not ReadOptions(channels=[1]).is_full_read


def test_rejects_non_integer_bounds():
    with pytest.raises(InvalidSelection):
        ReadOptions(start_sample=1.5)  # type: ignore[arg-type]
    with pytest.raises(InvalidSelection):
        ReadOptions(end_sample="10")  # type: ignore[arg-type]


def test_from_mapping_top_level_and_section():
    assert ReadOptions.from_mapping({"start_sample": 5}) == ReadOptions(start_sample=5)
    nested = {"read": {"end_sample": 20, "channels": ["Fp1"]}, "other": 1}
    assert ReadOptions.from_mapping(nested) == ReadOptions(end_sample=20, channels=("Fp1",))


def test_from_mapping_rejects_bad_section():
    with pytest.raises(InvalidSelection):
        ReadOptions.from_mapping({"read": [1, 2]})


def test_from_config_yaml(tmp_path):
    p = tmp_path / "read.yaml"
    p.write_text(
        "first: 2\n"
        "read:\n"
        "  start_sample: ${first}\n"
        "  end_sample: 8\n"
        "  channels: [0, Cz]\n",
        encoding="utf-8",
    )
    opts = ReadOptions.from_config(p)
    assert opts == ReadOptions(start_sample=2, end_sample=8, channels=(0, "Cz"))


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_json(tmp_path):
    p = tmp_path / "read.json"
    p.write_text('{"read": {"channels": [1]}}', encoding="utf-8")
    assert load_config(p) == {"read": {"channels": [1]}}
