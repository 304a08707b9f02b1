# test/test_header.py
import pytest

from brainvision.core import (
    ChannelNotFound,
    Header,
    HeaderBuilder,
    Impedance,
    InvalidHeader,
    InvalidSelection,
)


def test_builder_keeps_channel_sequences_in_lockstep():
    b = HeaderBuilder(channel_count=2)
    b.add_channel("Fp1")
    b.add_channel("Fp2", "Cz", 0.5, "mV")
    h = b.build()

    assert h.labels == ("Fp1", "Fp2")
    assert h.references == ("", "Cz")
    assert h.resolutions == (1.0, 0.5)
    assert h.units == ("uV", "mV")
    assert h.is_consistent


def test_builder_sampling_rate():
    assert HeaderBuilder(sampling_interval_us=2000).build().sampling_rate_hz == 500.0
    assert HeaderBuilder(sampling_interval_us=0).build().sampling_rate_hz == 0.0
    assert HeaderBuilder(sampling_interval_us=-5).build().sampling_rate_hz == 0.0


def test_builder_attaches_impedance_only_when_collected():
    assert HeaderBuilder().build().impedance is None

    b = HeaderBuilder()
    b.add_impedance("Fp1", 4.0)
    imp = b.build().impedance
    assert imp == Impedance(channels=(4.0,), labels=("Fp1",))
    assert imp.ground == 1.0


def test_header_defaults():
    h = Header()
    assert h.channel_count == 0
    assert h.sample_count == 0
    assert h.trial_count == 1
    assert h.pre_trigger_samples == 0
    assert h.impedance is None


def test_header_rejects_ragged_channel_table():
    with pytest.raises(InvalidHeader):
        Header(labels=("a", "b"), references=("",), resolutions=(1.0, 1.0), units=("uV", "uV"))


def test_header_rejects_negative_counts():
    with pytest.raises(InvalidHeader):
        Header(channel_count=-1)
    with pytest.raises(InvalidHeader):
        Header(sample_count=-1)


def test_header_is_consistent_flag():
    h = Header(channel_count=3, labels=("a",), references=("",), resolutions=(1.0,), units=("uV",))
    assert not h.is_consistent


def test_header_channel_index():
    b = HeaderBuilder(channel_count=2)
    b.add_channel("Fp1")
    b.add_channel("Fp2")
    h = b.build()
    assert h.channel_index("Fp2") == 1
    with pytest.raises(ChannelNotFound):
        h.channel_index("Cz")


def test_header_select():
    b = HeaderBuilder(channel_count=3, sample_count=100)
    for label, res in (("a", 0.1), ("b", 0.2), ("c", 0.3)):
        b.add_channel(label, "", res)
    h = b.build()

    sub = h.select(channel_indices=[2, 0], sample_count=10)
    assert sub.channel_count == 2
    assert sub.labels == ("c", "a")
    assert sub.resolutions == (0.3, 0.1)
    assert sub.sample_count == 10
    assert h.channel_count == 3

    with pytest.raises(InvalidSelection):
        h.select(channel_indices=[3])


def test_impedance_rejects_mismatched_labels():
    with pytest.raises(InvalidHeader):
        Impedance(channels=(1.0, 2.0), labels=("Fp1",))
