import pytest

from rfdecode.koppla import decode

SAMPLE = [
    825, 775, 750, 775, 750, 775, 1600, 1625, 1600, 775, 750, 775, 750, 1625,
    1600, 1625, 1600, 1625, 1625, 1625, 1600, 1625, 750, 750, 1600, 775, 750,
    1625, 1600, 1625, 1600, 775, 750, 1625, 1600, 775, 750,
]


def pair_checksum(value, pairs):
    checksum = 3
    for n in range(pairs):
        checksum ^= (value >> (2 * n)) & 3
    return checksum


def frame(sysunit, levelfade, cs1=None, cs2=None, preamble=0b1110):
    cs1 = pair_checksum(sysunit, 7) if cs1 is None else cs1
    cs2 = pair_checksum(levelfade, 3) if cs2 is None else cs2
    bits = f"{preamble:04b}{sysunit:014b}{cs1:02b}{levelfade:06b}{cs2:02b}"
    pulses = []
    for bit in bits:
        pulses += [750, 750] if bit == "1" else [1600]
    return pulses + [750]


def test_documented_on_sample():
    reading = decode(SAMPLE)
    assert reading.name == "Ikea Koppla"
    assert reading.fields["ID"] == "0c01"
    assert reading.fields["SWITCH"] == 0x02
    assert reading.fields["CMD"] == "ON"


def test_off_command():
    reading = decode(frame(0x0C01, 0x16))
    assert reading.fields["CMD"] == "OFF"


@pytest.mark.parametrize("levelfade,command", [(0x00, "BRIGHT"), (0x04, "DIM")])
def test_dim_commands(levelfade, command):
    pulses = frame(0x0C01, levelfade)
    if len(pulses) <= 52:
        reading = decode(pulses)
        assert reading.fields["CMD"] == command
    else:
        assert decode(pulses) is None


def test_level_value():
    reading = decode(frame(0x0C01, 0x2C))
    assert "CMD" not in reading.fields
    assert 0 <= reading.fields["SET_LEVEL"] <= 15


def test_bad_checksum_rejected():
    good = pair_checksum(0x0C01, 7)
    assert decode(frame(0x0C01, 0x02, cs1=good ^ 1)) is None


def test_bad_preamble_rejected():
    assert decode(frame(0x0C01, 0x02, preamble=0b1010)) is None


def test_too_long_pulse_rejected():
    pulses = list(SAMPLE)
    pulses[6] = 2000
    assert decode(pulses) is None


def test_wrong_length_rejected():
    assert decode(SAMPLE[:30]) is None