"""Decoder for Cresta (Hideki) weather station sensors: thermo/hygro, anemometer, UV and rain."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor

from .core import Reading, RepeatGuard

CRESTA_MIN_PULSECOUNT = 124
CRESTA_MAX_PULSECOUNT = 284

_PULSE_MID = 700
_MAX_BYTES = 16
_MAX_LENGTH = 20
_REPEAT_WINDOW_MS = 500

_ANEMOMETER = 0x0C
_UV = 0x0D
_RAIN = 0x0E
_THERMO_HYGRO = 0x1E

# Number of bytes each sensor type reads from the packet.
_REQUIRED_BYTES = {_ANEMOMETER: 12, _UV: 9, _RAIN: 6, _THERMO_HYGRO: 7}

# Channel by the top three bits of byte 1; anemometer, rain and UV sensors report 1.
_CHANNELS = {1: 1, 2: 2, 3: 3, 4: 1, 5: 4, 6: 5}


def _reverse8(value: int) -> int:
    return int(f"{value & 0xFF:08b}"[::-1], 2)


def _read_bytes(pulses: Sequence[int]) -> list[int] | None:
    """Collect parity-checked bytes: a long pulse is a 1, two short pulses a 0."""
    data: list[int] = []
    current = 0
    bits = 0
    parity = 0
    halfbit = False
    for pulse in pulses:
        if pulse > _PULSE_MID:
            if halfbit:
                return None
            bit = 1
        elif not halfbit:
            halfbit = True
            continue
        else:
            halfbit = False
            bit = 0
        if bits == 8:
            if parity != bit:
                return None
            data.append(current)
            current = bits = parity = 0
            if len(data) >= _MAX_BYTES:
                break
        else:
            current = ((current << 1) | bit) & 0xFF
            parity ^= bit
            bits += 1
    return data


def _bcd_value(low: int, high: int) -> int:
    """Three BCD digits with the sign in bit 7 of ``high`` (clear means negative)."""
    value = (high & 0x3F) * 100 + (low >> 4) * 10 + (low & 0x0F)
    if not high & 0x80:
        value |= 0x8000
    return value


def wind_direction_segment(value: int) -> int:
    """Undo the Gray-style scrambling of the 4-bit wind direction segment."""
    value &= 0xF
    value ^= (value & 8) >> 1
    value ^= (value & 4) >> 1
    value ^= (value & 2) >> 1
    return -value & 0xF


def decode(pulses: Sequence[int], guard: RepeatGuard | None = None) -> Reading | None:
    """Decode pulse durations (microseconds) into a reading.

    Returns None when the pulses are not a valid packet of this protocol, or
    when ``guard`` marks the packet as a recent repeat.
    """
    if not CRESTA_MIN_PULSECOUNT <= len(pulses) <= CRESTA_MAX_PULSECOUNT:
        return None
    raw = _read_bytes(pulses)
    if raw is None:
        return None
    data = [_reverse8(byte) for byte in raw]
    if len(data) < 4:
        return None

    length = (data[2] & 0x3F) >> 1
    if not 1 <= length <= _MAX_LENGTH:
        return None
    if len(data) < length + 2:
        return None
    if reduce(xor, data[1 : length + 2], 0):
        return None

    channel = _CHANNELS.get(data[1] >> 5, 0)
    sensor_type = data[3] & 0x1F
    if len(data) < _REQUIRED_BYTES.get(sensor_type, 0):
        return None
    key = (sensor_type << 16) | (data[1] << 8) | channel
    if guard is not None and not guard.check(key, _REPEAT_WINDOW_MS):
        return None

    battery = "LOW" if data[2] >> 6 else "OK"
    fields: dict[str, object] = {"ID": f"{data[1]:02X}{channel:02X}"}

    if sensor_type == _ANEMOMETER:
        fields["WINDIR"] = wind_direction_segment(data[11] >> 4) & 0x0F
        fields["WINSP"] = (data[9] & 0x0F) * 100 + (data[8] >> 4) * 10 + (data[8] & 0x0F)
        fields["WINGS"] = (data[10] >> 4) * 100 + (data[10] & 0x0F) * 10 + (data[9] >> 4)
        fields["WINTMP"] = _bcd_value(data[4], data[5])
        fields["WINCHL"] = _bcd_value(data[6], data[7])
    elif sensor_type == _UV:
        # The UV sensor's temperature never carries a negative value.
        fields["TEMP"] = _bcd_value(data[4], data[5])
        fields["UV"] = ((data[8] & 0x0F) << 8) | data[7]
    elif sensor_type == _RAIN:
        fields["RAIN"] = ((data[5] << 8) + data[4]) * 7
    elif sensor_type == _THERMO_HYGRO:
        fields["TEMP"] = _bcd_value(data[4], data[5])
        fields["HUM"] = f"{data[6]:02x}"
    else:
        fields["DATA"] = bytes(data[: length + 2]).hex()
        return Reading("Cresta;DEBUG", fields)

    fields["BAT"] = battery
    return Reading("Cresta", fields)