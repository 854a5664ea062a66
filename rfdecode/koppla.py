"""Decoder for the Ikea Koppla remote control protocol."""

from __future__ import annotations

from collections.abc import Sequence

from .core import Reading, RepeatGuard

KOPPLA_PULSECOUNT_MIN = 36
KOPPLA_PULSECOUNT_MAX = 52

_PULSE_MID = 1300
_PULSE_MAX = 1850
_PULSE_MIN = 650

_COMMANDS = {0x02: "ON", 0x16: "OFF", 0x00: "BRIGHT", 0x04: "DIM"}


def _read_bits(pulses: Sequence[int]) -> int | None:
    bitstream = 0
    last = len(pulses) - 1
    i = 0
    while i < last:
        pulse = pulses[i]
        bitstream <<= 1
        if pulse > _PULSE_MID:
            if pulse > _PULSE_MAX:
                return None
            i += 1
        else:
            follow = pulses[i + 1]
            if pulse < _PULSE_MIN or follow > _PULSE_MID or follow < _PULSE_MIN:
                return None
            bitstream |= 1
            i += 2
    return bitstream & 0xFFFFFFFF


def _pair_checksum(value: int, pairs: int) -> int:
    checksum = 3
    for shift in range(0, pairs * 2, 2):
        checksum ^= (value >> shift) & 3
    return checksum


def decode(pulses: Sequence[int], guard: RepeatGuard | None = None) -> Reading | None:
    """Decode pulse durations (microseconds) into a reading, or None.

    ``guard`` is accepted for a uniform decoder interface; this protocol
    does not suppress repeats.
    """
    if not KOPPLA_PULSECOUNT_MIN <= len(pulses) <= KOPPLA_PULSECOUNT_MAX:
        return None
    bitstream = _read_bits(pulses)
    if not bitstream:
        return None
    if (bitstream >> 24) & 0x0F != 0x0E:
        return None

    sysunit = (bitstream >> 10) & 0x3FFF
    checksum1 = (bitstream >> 8) & 0x03
    levelfade = (bitstream >> 2) & 0x3F
    checksum2 = bitstream & 0x03
    if checksum1 != _pair_checksum(sysunit, 7):
        return None
    if checksum2 != _pair_checksum(levelfade, 3):
        return None

    fields: dict[str, object] = {"ID": f"{sysunit:04x}", "SWITCH": levelfade}
    command = _COMMANDS.get(levelfade)
    if command is not None:
        fields["CMD"] = command
    else:
        level = 0
        for shift in range(2, 6):
            level = (level << 1) | ((levelfade >> shift) & 0x01)
        fields["SET_LEVEL"] = level
    return Reading("Ikea Koppla", fields)