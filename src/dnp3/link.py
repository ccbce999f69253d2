# src/dnp3/link.py
from .constants import (
    MIN_HEADER_LENGTH, START_FIELD, LinkControl, PrimaryFlag,
    PRIMARY_FUNCTION_CODES, SECONDARY_FUNCTION_CODES,
)
from .crc import header_crc_ok
from .errors import FrameTooShort, NotDNP3
from .frame import DataLinkHeader
from .utils import u16_be, u16_le, format_label

__all__ = ["check_length", "check_start", "validate_frame", "link_function_table",
           "decode_link_header"]


def check_length(data, required=MIN_HEADER_LENGTH):
    if len(data) < required:
        raise FrameTooShort(required, len(data))


def check_start(data):
    if u16_be(data, 0) != START_FIELD:
        raise NotDNP3(bytes(data[0:2]).hex())


def validate_frame(data):
    """Length first, so nothing is read from a buffer that is too short."""
    check_length(data)
    check_start(data)


def link_function_table(primary):
    """PRM=1 -> primary codes, PRM=0 -> secondary (ack/status) codes."""
    if primary == PrimaryFlag.PRIMARY:
        return PRIMARY_FUNCTION_CODES
    return SECONDARY_FUNCTION_CODES


def decode_link_header(data):
    """
    Decode the 10-byte data link header of an already validated frame.

    The length byte is reported as-is and not compared with the buffer size.
    The CRC is checked only to fill crc_valid.
    """
    control = data[3]
    primary = LinkControl.PRIMARY.extract(control)
    func = LinkControl.FUNCTION_CODE.extract(control)
    crc = u16_le(data, 8)

    return DataLinkHeader(
        start=bytes(data[0:2]).hex(),
        length=data[2],
        control_byte=f"{control:02x}",
        is_master=LinkControl.IS_MASTER.extract(control),
        primary=primary,
        frame_count_bit=LinkControl.FRAME_COUNT_BIT.extract(control),
        frame_count_valid=LinkControl.FRAME_COUNT_VALID.extract(control),
        function_code=func,
        function_label=format_label(link_function_table(primary), func),
        destination=u16_le(data, 4),
        source=u16_le(data, 6),
        crc=f"0x{crc:04x}",
        crc_valid=header_crc_ok(data, crc),
    )
