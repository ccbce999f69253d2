# src/dnp3/payload.py
import re
import string

from .constants import START_BYTES
from .errors import HexFormatError
from .utils import intify

__all__ = ["parse_hex_frame", "get_dnp3_payload_bytes", "is_dnp3_packet"]

_SEPARATORS = re.compile(r"[\s:\-]+")


def _strip_prefix(token):
    if token[:2].lower() == "0x":
        return token[2:]
    return token


def parse_hex_frame(text):
    """
    Turn "0564 08 c4 ..." / "05:64:08:c4" / "0x056408c4..." / "0x05 0x64 ..."
    into bytes. A 0x prefix is dropped from every separated token.
    Raises HexFormatError on odd length or non-hex characters.
    """
    s = "".join(_strip_prefix(tok) for tok in _SEPARATORS.split(text.strip()))
    if not s:
        raise HexFormatError(text, "empty")
    if len(s) % 2:
        raise HexFormatError(text, "odd number of hex digits")
    bad = [c for c in s if c not in string.hexdigits]
    if bad:
        raise HexFormatError(text, f"non-hex character {bad[0]!r}")
    return bytes.fromhex(s)


def get_dnp3_payload_bytes(packet):
    """
    TCP payload of a dissected packet (tcp.payload as "05:64:..."), or None
    when the packet has no payload or it does not start with 0x0564.
    """
    tcp = getattr(packet, "tcp", None)
    raw = getattr(tcp, "payload", None)
    if not raw:
        return None
    try:
        data = parse_hex_frame(str(raw))
    except HexFormatError:
        return None
    if not data.startswith(START_BYTES):
        return None
    return data


def is_dnp3_packet(packet, port):
    tcp = getattr(packet, "tcp", None)
    if tcp is None:
        return False
    sport = intify(getattr(tcp, "srcport", None))
    dport = intify(getattr(tcp, "dstport", None))
    return port in (sport, dport)
