"""Decoder for Alecto V3 weather station sensors (WS1100, WS1200, WSD-19)."""

from __future__ import annotations

from collections.abc import Sequence

from .core import Reading, RepeatGuard, alecto_crc8

WS1100_PULSECOUNT = 94
WS1200_PULSECOUNT = 126

_PULSE_MID = 300
_TEMP_LIMIT = 0x258
_TEMP_BASE = 400
# The 64 bits of interest start after a seven bit preamble; each bit is one
# pulse pair and only the first pulse of the pair carries the value.
_BIT_PULSES = range(14, 142, 2)


def _read_words(pulses: Sequence[int]) -> tuple[int, int]:
    """Return the two 32-bit words; bits past the end of the packet read as 0."""
    count = len(pulses)
    bits = "".join(
        "1" if index < count and pulses[index] < _PULSE_MID else "0"
        for index in _BIT_PULSES
    )
    return int(bits[:32], 2), int(bits[32:], 2)


def decode(pulses: Sequence[int], guard: RepeatGuard | None = None) -> Reading | None:
    """Decode pulse durations (microseconds) into a reading, or None.

    ``guard`` is accepted for a uniform decoder interface; this protocol
    does not suppress repeats.
    """
    count = len(pulses)
    if count not in (WS1100_PULSECOUNT, WS1200_PULSECOUNT):
        return None
    first, second = _read_words(pulses)
    if first == 0:
        return None

    data = first.to_bytes(4, "big") + bytes(((second >> 24) & 0xFF, (second >> 16) & 0xFF))
    is_ws1200 = count == WS1200_PULSECOUNT
    if is_ws1200:
        checksum = (second >> 8) & 0xFF
        expected = alecto_crc8(data[:6])
    else:
        checksum = (second >> 24) & 0xFF
        expected = alecto_crc8(data[:4])
    if checksum != expected:
        return None

    rolling_code = (first >> 20) & 0xFF
    temperature = (first >> 8) & 0x3FF
    if temperature < _TEMP_BASE:
        temperature = (_TEMP_BASE - temperature) | 0x8000
    elif temperature > _TEMP_LIMIT:
        return None

    fields: dict[str, object] = {"ID": f"{rolling_code:02x}", "TEMP": temperature}
    if is_ws1200:
        fields["RAIN"] = (((second >> 24) & 0xFF) << 8) | (first & 0xFF)
    else:
        fields["HUM"] = first & 0xFF
    return Reading("Alecto V3", fields)