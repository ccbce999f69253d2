# src/dnp3/decoder.py
from .application import decode_application_header
from .frame import DecodedFrame
from .link import validate_frame, decode_link_header
from .transport import decode_transport_header

__all__ = ["decode_frame"]


def decode_frame(data):
    """
    Decode link, transport and application headers of one DNP3 frame.

    data: bytes-like starting at the 0x0564 start field. Bytes after the
    application function code are ignored.
    Raises FrameTooShort / NotDNP3 (both DecodeError) for a bad buffer.
    """
    data = bytes(data)
    validate_frame(data)
    return DecodedFrame(
        data_link=decode_link_header(data),
        transport=decode_transport_header(data),
        application=decode_application_header(data),
    )
