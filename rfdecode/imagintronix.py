"""Decoder for Imagintronix soil moisture sensors."""

from __future__ import annotations

from collections.abc import Sequence

from .core import Reading, RepeatGuard

IMAGINTRONIX_PULSECOUNT = 96

_PULSE_MID = 1000
_PULSE_SHORT = 550
_REPEAT_WINDOW_MS = 500
_REPEAT_KEY = 0


def _read_bytes(pulses: Sequence[int]) -> bytes | None:
    bits = []
    last = IMAGINTRONIX_PULSECOUNT - 2
    for index in range(0, IMAGINTRONIX_PULSECOUNT, 2):
        mark, space = pulses[index], pulses[index + 1]
        if mark <= _PULSE_MID and mark > _PULSE_SHORT:
            return None
        if index < last and not _PULSE_SHORT <= space <= _PULSE_MID:
            return None
        bits.append("0" if mark > _PULSE_MID else "1")
    return int("".join(bits), 2).to_bytes(len(bits) // 8, "big")


def decode(pulses: Sequence[int], guard: RepeatGuard | None = None) -> Reading | None:
    """Decode pulse durations (microseconds) into a reading.

    Returns None when the pulses are not a valid packet of this protocol, or
    when ``guard`` marks a packet as arriving within the repeat window.
    """
    if len(pulses) != IMAGINTRONIX_PULSECOUNT:
        return None
    data = _read_bytes(pulses)
    if data is None:
        return None
    if data[0] != 0xFF or data[1] >> 4 != 0x5 or data[4] != 0xFF:
        return None
    if sum(data[1:5]) & 0xFF != data[5]:
        return None
    # Every packet of this protocol shares one repeat key.
    if guard is not None and not guard.check(_REPEAT_KEY, _REPEAT_WINDOW_MS):
        return None

    rolling_code = data[1] & 0x3
    # The temperature byte is not decoded; TEMP only flags a non-zero value.
    temperature = 1 if data[3] else 0
    return Reading(
        "Imagintronix",
        {"ID": f"{rolling_code:04x}", "TEMP": temperature, "HUM": data[2]},
    )