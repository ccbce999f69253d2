# src/dnp3/crc.py
"""
DNP3 link-layer CRC-16 (CRC-16/DNP, sent low byte first).

The decoder only reports whether the header CRC matches; a mismatch never
stops decoding.
"""
from crccheck.crc import Crc16Dnp

__all__ = ["crc16_dnp", "header_crc_ok"]


def crc16_dnp(data):
    return Crc16Dnp.calc(bytes(data))


def header_crc_ok(data, crc):
    """Compare the CRC over the first 8 link header bytes with the received value."""
    return crc16_dnp(data[0:8]) == crc
