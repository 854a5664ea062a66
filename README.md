# rfdecode

Decoders for a set of 433 MHz remote-control and weather-sensor protocols.
Each decoder takes the pulse timings of one received radio packet (in
microseconds) and turns them into a `Reading`: the protocol name, the device
ID and the values it reported (switch command, temperature, humidity, rain,
wind, battery state and so on).

## Supported protocols

| Module | Devices | Reports |
| --- | --- | --- |
| `rfdecode.powerfix` | Powerfix RCB-i 3600, Quigg GT7000, Chacon | ID, SWITCH, CMD (decode and encode) |
| `rfdecode.koppla` | Ikea Koppla | ID, SWITCH, CMD or SET_LEVEL |
| `rfdecode.alecto_v2` | Alecto V2 (ACH2010, WS3000), DKW2012 | ID, TEMP, HUM, WINSP, WINGS, RAIN, WINDIR (DKW2012 only), BAT |
| `rfdecode.alecto_v3` | Alecto WS1100, WS1200, WSD-19 | ID, TEMP, HUM (WS1100) or RAIN (WS1200) |
| `rfdecode.conrad` | Conrad 9771 pool thermometer | ID, TEMP |
| `rfdecode.cresta` | Cresta / Hideki and compatible sensors | thermo/hygro, anemometer, UV and rain readings, BAT |
| `rfdecode.imagintronix` | Imagintronix soil sensors | ID, TEMP, HUM |

## Installation

```
pip install rfdecode
```

## Usage

Every protocol module has a `decode(pulses, guard=None)` function. `pulses`
is the sequence of pulse durations in microseconds as captured by a receiver,
first pulse first; its length is the packet's pulse count, which each decoder
checks against the counts its protocol uses. `guard` is an optional
`RepeatGuard`, which stops a packet that a transmitter sends several times in
a burst from being reported more than once.

```python
from rfdecode.core import RepeatGuard
from rfdecode import alecto_v2, cresta

guard = RepeatGuard()

reading = alecto_v2.decode(pulses, guard)
if reading is None:
    reading = cresta.decode(pulses, guard)

if reading is not None:
    print(reading.name, reading.fields)
    print(reading.line(1))   # e.g. 20;01;Alecto V2;ID=009a;TEMP=00e6;...
```

`decode` returns `None` when the pulses do not form a valid packet of that
protocol, or when the guard reports the packet as a recent repeat.

### Readings

`Reading` is a dataclass with a `name` and an ordered `fields` dictionary.
`Reading.line(counter)` renders it as `20;NN;Name;KEY=VALUE;...;`, where `NN`
is the counter as two hexadecimal digits. Integer values are formatted per
field: `TEMP`, `RAIN`, `WINSP`, `WINGS`, `BARO`, `UV`, `WINTMP` and `WINCHL`
as four hex digits, `SWITCH` as two hex digits, `HUM` and `SET_LEVEL` as two
decimal digits and `WINDIR` as four decimal digits. String values are written
as they are. Negative temperatures are carried with bit 15 set and the
magnitude in tenths of a degree in the low bits.

### Repeat suppression

`RepeatGuard(clock=time.monotonic)` remembers the last packet key it saw.
`RepeatGuard.check(key, window_ms)` returns `True` when the key is new and
`False` when the same key arrived again within `window_ms` milliseconds. Use
one guard for all decoders that share a receiver. The `koppla` and
`alecto_v3` decoders accept a guard but never suppress repeats.

### Sending Powerfix commands

```python
from rfdecode import powerfix

pulses = powerfix.encode_command("10;POWERFIX;000080;0;ON;")
```

`encode_command` parses a line of the form
`10;POWERFIX;<6 hex digit address>;<unit 0-3>;<ON|OFF|ALLON|ALLOFF>;` and
returns the 42 pulse durations to transmit. It returns `None` for a line
addressed to another protocol and raises `ValueError` for a malformed
POWERFIX line. `powerfix.encode(bitstream)` builds the pulse train for a raw
20-bit bitstream, ending it with the computed parity bit. The module also
exposes `REPEATS` and `REPEAT_DELAY_MS`, the number of retransmissions and
the pause between them that the protocol uses.

### Checksums

`rfdecode.core.alecto_crc8(data)` computes the CRC-8 (polynomial 0x31,
initial value 0, most significant bit first) used by the Alecto V2 and V3
protocols.

## What this package does not do

It works only on pulse timings that you supply: it does not talk to a radio
receiver or transmitter, and `powerfix` produces pulse durations without
sending them. There is no command-line tool and no listening loop; call the
decoders from your own code. Only the Powerfix protocol can be encoded.

## Running the tests

```
pip install -e .[test]
pytest
```