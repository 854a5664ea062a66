import pytest

from rfdecode.core import Reading, RepeatGuard, alecto_crc8


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_line_matches_documented_sample():
    reading = Reading("Alecto V1", {"ID": "006c", "TEMP": 0xED, "HUM": 38})
    assert reading.line(0xF5) == "20;F5;Alecto V1;ID=006c;TEMP=00ed;HUM=38;"


def test_line_switch_and_command():
    reading = Reading("HomeEasy", {"ID": "1234abcd", "SWITCH": 0x0B, "CMD": "ALLOFF"})
    assert reading.line(4) == "20;04;HomeEasy;ID=1234abcd;SWITCH=0b;CMD=ALLOFF;"


def test_line_counter_wraps_to_one_byte():
    reading = Reading("X", {})
    assert reading.line(0x1FF) == reading.line(0xFF)


def test_line_strings_pass_through():
    reading = Reading("X", {"BAT": "LOW"})
    assert reading.line(1).endswith(";BAT=LOW;")


def test_guard_first_packet_is_new():
    guard = RepeatGuard(clock=FakeClock())
    assert guard.check(42, 500) is True


def test_guard_suppresses_repeat_within_window():
    clock = FakeClock()
    guard = RepeatGuard(clock=clock)
    guard.check(42, 500)
    clock.now = 0.2
    assert guard.check(42, 500) is False


def test_guard_allows_repeat_after_window():
    clock = FakeClock()
    guard = RepeatGuard(clock=clock)
    guard.check(42, 500)
    clock.now = 2.0
    assert guard.check(42, 500) is True


def test_guard_allows_different_key():
    guard = RepeatGuard(clock=FakeClock())
    guard.check(42, 500)
    assert guard.check(43, 500) is True


def test_crc_of_empty_is_zero():
    assert alecto_crc8([]) == 0


def test_crc_of_one_is_polynomial():
    assert alecto_crc8([0x01]) == 0x31


@pytest.mark.parametrize("data", [b"\x00", b"\xa1\x23\x45", bytes(range(20))])
def test_crc_appended_gives_zero_remainder(data):
    crc = alecto_crc8(data)
    assert 0 <= crc <= 0xFF
    assert alecto_crc8(data + bytes([crc])) == 0