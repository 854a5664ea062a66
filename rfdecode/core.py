"""Shared pieces for the RF protocol decoders: readings, repeat suppression, CRC."""

from __future__ import annotations

import time
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field

_FORMATS = {
    "SWITCH": "{:02x}",
    "TEMP": "{:04x}",
    "HUM": "{:02d}",
    "BARO": "{:04x}",
    "RAIN": "{:04x}",
    "WINSP": "{:04x}",
    "WINGS": "{:04x}",
    "WINDIR": "{:04d}",
    "WINTMP": "{:04x}",
    "WINCHL": "{:04x}",
    "UV": "{:04x}",
    "SET_LEVEL": "{:02d}",
}


@dataclass
class Reading:
    """A decoded packet: the protocol name and its fields in output order.

    String values are written as they are; integer values are formatted
    according to the field they belong to (for example TEMP as four hex digits).
    """

    name: str
    fields: dict[str, object] = field(default_factory=dict)

    def line(self, counter: int) -> str:
        """Render the reading as a ``20;NN;Name;KEY=VALUE;...`` line."""
        parts = ["20", f"{counter & 0xFF:02X}", self.name]
        parts.extend(f"{key}={_render(key, value)}" for key, value in self.fields.items())
        return ";".join(parts) + ";"


def _render(key: str, value: object) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return _FORMATS.get(key, "{:d}").format(value)
    return str(value)


@dataclass
class RepeatGuard:
    """Suppresses a packet that repeats the previous one within a time window.

    ``clock`` returns seconds; it defaults to :func:`time.monotonic`.
    """

    clock: Callable[[], float] = time.monotonic
    _key: Hashable = field(default=None, init=False, repr=False)
    _seen_ms: float | None = field(default=None, init=False, repr=False)

    def check(self, key: Hashable, window_ms: float) -> bool:
        """Return True if ``key`` is new, False if it repeats within ``window_ms``."""
        now = self.clock() * 1000.0
        repeat = (
            self._seen_ms is not None
            and key == self._key
            and now - self._seen_ms <= window_ms
        )
        self._key = key
        self._seen_ms = now
        return not repeat


def alecto_crc8(data: Iterable[int]) -> int:
    """CRC-8 with polynomial 0x31, initial value 0, MSB first, as used by Alecto sensors."""
    crc = 0
    for byte in data:
        inbyte = byte & 0xFF
        for _ in range(8):
            mix = (crc ^ inbyte) & 0x80
            crc = (crc << 1) & 0xFF
            if mix:
                crc ^= 0x31
            inbyte = (inbyte << 1) & 0xFF
    return crc