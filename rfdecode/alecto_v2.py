"""Decoder for Alecto V2 (ACH2010/WS3000) and DKW2012 weather station sensors."""

from __future__ import annotations

from collections.abc import Sequence

from .core import Reading, RepeatGuard, alecto_crc8

ACH2010_MIN_PULSECOUNT = 160
ACH2010_MAX_PULSECOUNT = 160
DKW2012_MIN_PULSECOUNT = 170
DKW2012_MAX_PULSECOUNT = 178

_PULSE_MIN_MAX = 768
_REPEAT_WINDOW_MS = 1000


def _accepted_length(count: int) -> bool:
    return (ACH2010_MIN_PULSECOUNT <= count <= ACH2010_MAX_PULSECOUNT) or (
        DKW2012_MIN_PULSECOUNT <= count <= DKW2012_MAX_PULSECOUNT
    )


def decode(pulses: Sequence[int], guard: RepeatGuard | None = None) -> Reading | None:
    """Decode pulse durations (microseconds) into a reading.

    Returns None when the pulses are not a valid packet of this protocol, or
    when ``guard`` marks the packet as a recent repeat.
    """
    count = len(pulses)
    if not _accepted_length(count):
        return None
    size = 10 if count > ACH2010_MAX_PULSECOUNT else 9
    # The header is often cut short, so the message is read from the end.
    newest_first = pulses[count - 2 :: -2][: size * 8]
    if len(newest_first) < size * 8:
        return None
    bits = "".join("1" if p < _PULSE_MIN_MAX else "0" for p in reversed(newest_first))
    data = int(bits, 2).to_bytes(size, "big")

    if data[0] >> 4 not in (0xA, 0x5):
        return None
    if alecto_crc8(data[:-1]) != data[-1]:
        return None
    if guard is not None and not guard.check((data[0] << 8) | data[1], _REPEAT_WINDOW_MS):
        return None

    rolling_code = ((data[0] << 4) | (data[1] >> 4)) & 0xFF
    battery_ok = not (data[1] >> 3) & 0x1
    temperature = (((data[1] & 0x3) << 8) | data[2]) - 400
    if temperature < 0:
        temperature = -temperature + 0x8000
    is_dkw = count >= DKW2012_MIN_PULSECOUNT

    fields: dict[str, object] = {
        "ID": f"{rolling_code:04x}",
        "TEMP": temperature,
        "HUM": data[3],
        "WINSP": data[4] * 245 // 20,
        "WINGS": data[5] * 245 // 20,
        "RAIN": ((data[6] << 8) | data[7]) * 3,
    }
    if is_dkw:
        fields["WINDIR"] = data[8] & 0xF
    fields["BAT"] = "OK" if battery_ok else "LOW"
    return Reading("DKW2012" if is_dkw else "Alecto V2", fields)