# src/dnp3/utils.py
from .constants import (
    UNASSIGNED, IIN_CODES, OBJ_PREFIX_CODES, OBJ_RANGE_SPECIFIER_CODES,
    QUALIFIER_PREFIX, QUALIFIER_RANGE,
)

__all__ = [
    "intify", "u16_le", "u16_be", "lookup", "format_label",
    "describe_iin", "describe_qualifier",
]


def intify(x, default=None):
    """Convert decimal or hex-like strings to int; return default on failure/None."""
    if x is None:
        return default
    try:
        return int(str(x), 0)  # accepts '20000', 20000, '0x4e20', etc.
    except (TypeError, ValueError):
        return default


def u16_le(data, offset):
    return data[offset] | (data[offset + 1] << 8)


def u16_be(data, offset):
    return (data[offset] << 8) | data[offset + 1]


def lookup(table, code):
    """Table lookup that never fails; misses come back as the placeholder."""
    return table.get(code) or UNASSIGNED


def format_label(table, code, code_fmt="{}"):
    """Render "<name> (<code>)" with the code formatted by code_fmt."""
    return f"{lookup(table, code)} ({code_fmt.format(code)})"


def describe_iin(iin):
    """
    Labels for every IIN flag set in a 16-bit value laid out as
    [first octet][second octet]. Ordered by first octet then second, LSB first.
    """
    iin &= 0xFFFF
    order = [1 << (8 + i) for i in range(8)] + [1 << i for i in range(8)]
    return [IIN_CODES[bit] for bit in order if iin & bit]


def describe_qualifier(qualifier):
    """Return (prefix label, range specifier label) for an object qualifier byte."""
    return (
        lookup(OBJ_PREFIX_CODES, QUALIFIER_PREFIX.extract(qualifier)),
        lookup(OBJ_RANGE_SPECIFIER_CODES, QUALIFIER_RANGE.extract(qualifier)),
    )
