"""Decoder for the Conrad 9771 pool thermometer."""

from __future__ import annotations

from collections.abc import Sequence

from .core import Reading, RepeatGuard

CONRAD_PULSECOUNT = 80

_PULSE_MAX = 5000
_PULSE_MIN = 2300
_REPEAT_WINDOW_MS = 500
_LEADING_ZERO_BITS = 8


def decode(pulses: Sequence[int], guard: RepeatGuard | None = None) -> Reading | None:
    """Decode pulse durations (microseconds) into a reading.

    Returns None when the pulses are not a valid packet of this protocol, or
    when ``guard`` marks the packet as a recent repeat.
    """
    if len(pulses) != CONRAD_PULSECOUNT:
        return None
    pairs = list(zip(pulses[0::2], pulses[1::2]))
    bitstream = 0
    for bitcount, (mark, space) in enumerate(pairs):
        is_last = bitcount == len(pairs) - 1
        if mark > _PULSE_MAX:
            if space > _PULSE_MAX and not is_last:
                return None
            if bitcount < _LEADING_ZERO_BITS:
                return None
            bitstream = (bitstream << 1) | 1
        else:
            if mark > _PULSE_MIN or space < _PULSE_MIN:
                return None
            if bitcount >= _LEADING_ZERO_BITS:
                bitstream <<= 1
    bitstream &= 0xFFFFFFFF
    if bitstream == 0:
        return None
    if guard is not None and not guard.check(bitstream, _REPEAT_WINDOW_MS):
        return None
    if (bitstream >> 4) & 0xF != 0x1:
        return None

    rolling_code = (bitstream >> 24) & 0xFF
    temperature = (((bitstream >> 14) & 0x3FF) - 500) & 0xFFFF
    return Reading("Conrad", {"ID": f"{rolling_code:04x}", "TEMP": temperature})