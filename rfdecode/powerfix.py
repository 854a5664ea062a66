"""Decoder and encoder for the Powerfix RCB-i 3600 / Quigg GT7000 / Chacon switch protocol."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .core import Reading, RepeatGuard

POWERFIX_PULSECOUNT = 42
REPEATS = 7
REPEAT_DELAY_MS = 20

_PULSE_MID = 900
_PULSE_MIN = 450
_PULSE_MAX = 1400
_REPEAT_WINDOW_MS = 1500
_ADDRESS_BITS = 12

_RF_LOW = 650
_RF_HIGH = 1300

# The two unit-code bits are sent in reverse order.
_UNIT_TO_BUTTON = {0: 0, 1: 2, 2: 1, 3: 3}
_BUTTON_TO_COMMAND = {1: 0x82, 2: 0x40, 3: 0xC2}

_LEADING_INT = re.compile(r"\d+")
_HEX6 = re.compile(r"[0-9A-Fa-f]{6}")


def _read_bits(pulses: Sequence[int]) -> int | None:
    bitstream = 0
    parity = 0
    for bitcount, index in enumerate(range(1, POWERFIX_PULSECOUNT - 1, 2)):
        mark, space = pulses[index], pulses[index + 1]
        bitstream <<= 1
        if mark > _PULSE_MID:
            if mark > _PULSE_MAX or space > _PULSE_MID:
                return None
            bitstream |= 1
            if bitcount >= _ADDRESS_BITS:
                parity ^= 1
        elif mark < _PULSE_MIN or space < _PULSE_MID:
            return None
    if parity:
        return None
    return bitstream


def decode(pulses: Sequence[int], guard: RepeatGuard | None = None) -> Reading | None:
    """Decode pulse durations (microseconds) into a reading.

    Returns None when the pulses are not a valid packet of this protocol, or
    when ``guard`` marks the packet as a recent repeat.
    """
    if len(pulses) != POWERFIX_PULSECOUNT:
        return None
    if pulses[0] > _PULSE_MID:
        return None
    bitstream = _read_bits(pulses)
    if bitstream is None:
        return None
    if bitstream & 0x4:
        return None
    if guard is not None and not guard.check(bitstream, _REPEAT_WINDOW_MS):
        return None

    address = bitstream >> 8
    button = _UNIT_TO_BUTTON[(bitstream >> 6) & 0x03]
    low = bitstream & 0x3F
    state = (low >> 4) & 0x01
    if low & 0x08:
        command = "DIM" if state else "BRIGHT"
    else:
        command = "ON" if state else "OFF"
    return Reading("Powerfix", {"ID": f"{address:04x}", "SWITCH": button, "CMD": command})


def encode(bitstream: int) -> list[int]:
    """Build the 42 pulse durations (microseconds) that transmit ``bitstream``.

    Bits 19 to 1 of ``bitstream`` are sent most significant first; the final
    data bit is replaced by a parity bit computed over them.
    """
    pulses = [_RF_LOW]
    parity = 1
    for shift in range(19, 0, -1):
        if (bitstream >> shift) & 1:
            parity ^= 1
            pulses.extend((_RF_HIGH, _RF_LOW))
        else:
            pulses.extend((_RF_LOW, _RF_HIGH))
    pulses.extend((_RF_HIGH, _RF_LOW) if parity else (_RF_LOW, _RF_HIGH))
    pulses.append(_RF_LOW)
    return pulses


def encode_command(text: str) -> list[int] | None:
    """Turn a ``10;POWERFIX;<address>;<unit>;<command>;`` line into pulses.

    Returns None when the line is not addressed to this protocol and raises
    ValueError when it is but cannot be parsed.
    """
    if text[3:12].upper() != "POWERFIX;":
        return None
    if len(text) < 19 or text[18] != ";":
        raise ValueError(f"malformed POWERFIX command: {text!r}")
    if not _HEX6.fullmatch(text[12:18]):
        raise ValueError(f"invalid POWERFIX address: {text[12:18]!r}")
    address = int(text[12:18], 16)

    match = _LEADING_INT.match(text, 19)
    unit = int(match.group()) if match else 0
    command = _BUTTON_TO_COMMAND.get(unit, 0)

    word = text[21:].split(";", 1)[0].strip().upper()
    if word == "ON":
        command |= 0x10
    elif word == "ALLOFF":
        command = 0xE0
    elif word == "ALLON":
        command = 0xF0
    return encode((address << 8) + command)