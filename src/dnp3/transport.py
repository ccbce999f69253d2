# src/dnp3/transport.py
from .constants import TRANSPORT_OFFSET, TransportControl
from .frame import TransportHeader
from .link import check_length

__all__ = ["decode_transport_header"]


def decode_transport_header(data):
    """
    Transport byte right after the link header. Non-final segments are
    decoded like final ones; reassembly is left to the caller.
    """
    check_length(data, TRANSPORT_OFFSET + 1)

    tb = data[TRANSPORT_OFFSET]
    return TransportHeader(
        transport_byte=f"0x{tb:02x}",
        final=TransportControl.FINAL.extract(tb),
        first=TransportControl.FIRST.extract(tb),
        sequence=TransportControl.SEQUENCE.extract(tb),
    )
