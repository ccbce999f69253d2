# src/dnp3/application.py
from .constants import (
    APP_CONTROL_OFFSET, APP_FUNCTION_OFFSET, MIN_APP_HEADER_LENGTH,
    APP_FUNCTION_CODES, AppControl,
)
from .frame import ApplicationHeader
from .link import check_length
from .utils import format_label

__all__ = ["decode_application_header"]


def decode_application_header(data):
    """
    Application control byte (offset 11) and function code (offset 12).
    Raises FrameTooShort below 13 bytes even if the link header was fine.
    Unknown function codes get the Unassigned label.
    """
    check_length(data, MIN_APP_HEADER_LENGTH)

    ctl = data[APP_CONTROL_OFFSET]
    fc = data[APP_FUNCTION_OFFSET]
    return ApplicationHeader(
        control_byte=f"0x{ctl:x}",
        first=AppControl.FIRST.extract(ctl),
        final=AppControl.FINAL.extract(ctl),
        confirm=AppControl.CONFIRM.extract(ctl),
        unsolicited=AppControl.UNSOLICITED.extract(ctl),
        sequence=AppControl.SEQUENCE.extract(ctl),
        function_code=fc,
        function_label=format_label(APP_FUNCTION_CODES, fc, "0x{:x}"),
    )
