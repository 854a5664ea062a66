"""Decoders for 433 MHz switch and weather-sensor protocols (Powerfix, Ikea Koppla, Alecto V2/V3, Conrad, Cresta, Imagintronix) from raw pulse timings."""

__version__ = "0.1.0"