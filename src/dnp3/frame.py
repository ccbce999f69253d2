# src/dnp3/frame.py
"""
Decoded DNP3 frame records.

One DecodedFrame is built per input buffer and never modified afterwards.
to_dict() uses the report key names ("Is Master", "Function Code", ...)
that MQTT subscribers and saved reports expect.
"""
import json
from dataclasses import dataclass

__all__ = [
    "DataLinkHeader", "TransportHeader", "ApplicationHeader", "DecodedFrame",
    "render_json", "render_text",
]


@dataclass(frozen=True)
class DataLinkHeader:
    start: str
    length: int
    control_byte: str
    is_master: int
    primary: int
    frame_count_bit: int
    frame_count_valid: int
    function_code: int
    function_label: str
    destination: int
    source: int
    crc: str
    crc_valid: bool

    def to_dict(self):
        return {
            "Start": self.start,
            "Length": self.length,
            "Control": {
                "ControlByte": self.control_byte,
                "Is Master": self.is_master,
                "Primary": self.primary,
                "Frame Count Bit": self.frame_count_bit,
                "Frame Count Valid": self.frame_count_valid,
                "Function Code": self.function_label,
            },
            "Destination": self.destination,
            "Source": self.source,
            "CRC": self.crc,
            "CRC Valid": self.crc_valid,
        }


@dataclass(frozen=True)
class TransportHeader:
    transport_byte: str
    final: int
    first: int
    sequence: int

    def to_dict(self):
        return {
            "TransportByte": self.transport_byte,
            "Final": self.final,
            "First": self.first,
            "Sequence": self.sequence,
        }


@dataclass(frozen=True)
class ApplicationHeader:
    control_byte: str
    first: int
    final: int
    confirm: int
    unsolicited: int
    sequence: int
    function_code: int
    function_label: str

    def to_dict(self):
        return {
            "Control": {
                "ControlByte": self.control_byte,
                "First": self.first,
                "Final": self.final,
                "Confirm": self.confirm,
                "Unsolicited": self.unsolicited,
                "Sequence": self.sequence,
            },
            "Function Code": self.function_label,
        }


@dataclass(frozen=True)
class DecodedFrame:
    data_link: DataLinkHeader
    transport: TransportHeader
    application: ApplicationHeader

    def to_dict(self):
        return {
            "DataLinkLayer": self.data_link.to_dict(),
            "TransportLayer": self.transport.to_dict(),
            "ApplicationLayer": self.application.to_dict(),
        }


def render_json(frame, indent=2):
    return json.dumps(frame.to_dict(), indent=indent)


def _tree_lines(node, depth):
    pad = "  " * depth
    for key, value in node.items():
        if isinstance(value, dict):
            yield f"{pad}{key}"
            yield from _tree_lines(value, depth + 1)
        else:
            yield f"{pad}{key}: {value}"


def render_text(frame):
    """Indented name: value tree, in the same order as to_dict()."""
    return "\n".join(_tree_lines(frame.to_dict(), 0))
