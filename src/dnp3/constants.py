# src/dnp3/constants.py
from enum import IntEnum

__all__ = [
    "MIN_HEADER_LENGTH", "TRANSPORT_OFFSET", "APP_CONTROL_OFFSET",
    "APP_FUNCTION_OFFSET", "MIN_APP_HEADER_LENGTH", "START_FIELD", "START_BYTES",
    "UNASSIGNED", "BitField", "LinkControl", "TransportControl", "AppControl",
    "QUALIFIER_PREFIX", "QUALIFIER_RANGE", "APP_FUNCTION_CODES",
    "PRIMARY_FUNCTION_CODES", "SECONDARY_FUNCTION_CODES", "IIN_CODES",
    "OBJ_PREFIX_CODES", "OBJ_RANGE_SPECIFIER_CODES", "PrimaryFlag",
]

# Link header: start(2) length(1) control(1) dst(2) src(2) crc(2)
MIN_HEADER_LENGTH = 10
TRANSPORT_OFFSET = 10
APP_CONTROL_OFFSET = 11
APP_FUNCTION_OFFSET = 12
MIN_APP_HEADER_LENGTH = APP_FUNCTION_OFFSET + 1

START_FIELD = 0x0564
START_BYTES = b"\x05\x64"

UNASSIGNED = "Unassigned"


class PrimaryFlag(IntEnum):
    SECONDARY = 0
    PRIMARY = 1


class BitField:
    """A named mask/shift pair applied to a single byte."""

    __slots__ = ("name", "mask", "shift")

    def __init__(self, name, mask, shift=0):
        self.name = name
        self.mask = mask
        self.shift = shift

    def extract(self, byte):
        return (byte & self.mask) >> self.shift

    def place(self, value):
        return (value << self.shift) & self.mask

    def __repr__(self):
        return f"BitField({self.name!r}, 0x{self.mask:02x}, {self.shift})"


class LinkControl:
    IS_MASTER = BitField("is_master", 0x80, 7)
    PRIMARY = BitField("primary", 0x40, 6)
    FRAME_COUNT_BIT = BitField("frame_count_bit", 0x20, 5)
    FRAME_COUNT_VALID = BitField("frame_count_valid", 0x10, 4)
    FUNCTION_CODE = BitField("function_code", 0x0F, 0)

    FIELDS = (IS_MASTER, PRIMARY, FRAME_COUNT_BIT, FRAME_COUNT_VALID, FUNCTION_CODE)


class TransportControl:
    FINAL = BitField("final", 0x80, 7)
    FIRST = BitField("first", 0x40, 6)
    SEQUENCE = BitField("sequence", 0x3F, 0)  # 6-bit, 0..63

    FIELDS = (FINAL, FIRST, SEQUENCE)


class AppControl:
    FIRST = BitField("first", 0x80, 7)
    FINAL = BitField("final", 0x40, 6)
    CONFIRM = BitField("confirm", 0x20, 5)
    UNSOLICITED = BitField("unsolicited", 0x10, 4)
    SEQUENCE = BitField("sequence", 0x0F, 0)  # 4-bit, 0..15

    FIELDS = (FIRST, FINAL, CONFIRM, UNSOLICITED, SEQUENCE)


# Object header qualifier byte (bit 7 reserved)
QUALIFIER_PREFIX = BitField("prefix", 0x70, 4)
QUALIFIER_RANGE = BitField("range_specifier", 0x0F, 0)


APP_FUNCTION_CODES = {
    0: "Confirm",
    1: "Read",
    2: "Write",
    3: "Select",
    4: "Operate",
    5: "Direct Operate",
    6: "Direct Operate No ACK",
    7: "Immediate Freeze",
    8: "Immediate Freeze No ACK",
    9: "Freeze and Clear",
    10: "Freeze and Clear No ACK",
    11: "Freeze With Time",
    12: "Freeze With Time No ACK",
    13: "Cold Restart",
    14: "Warm Restart",
    15: "Initialize Data",
    16: "Initialize Application",
    17: "Start Application",
    18: "Stop Application",
    19: "Save Configuration",
    20: "Enable Spontaneous Msg",
    21: "Disable Spontaneous Msg",
    22: "Assign Classes",
    23: "Delay Measurement",
    24: "Record Current Time",
    25: "Open File",
    26: "Close File",
    27: "Delete File",
    28: "Get File Info",
    29: "Authenticate File",
    30: "Abort File",
    31: "Activate Config",
    32: "Authentication Request",
    33: "Authentication Error",
    129: "Response",
    130: "Unsolicited Response",
    131: "Authentication Response",
}

# PRM=1
PRIMARY_FUNCTION_CODES = {
    0: "Reset of Remote Link",
    1: "Reset of User Process",
    2: "Test Function For Link",
    3: "User Data",
    4: "Unconfirmed User Data",
    5: UNASSIGNED,
    6: UNASSIGNED,
    7: UNASSIGNED,
    8: UNASSIGNED,
    9: "Request Link Status",
    10: UNASSIGNED,
    11: UNASSIGNED,
    12: UNASSIGNED,
    13: UNASSIGNED,
    14: UNASSIGNED,
    15: UNASSIGNED,
}

# PRM=0
SECONDARY_FUNCTION_CODES = {
    0: "ACK",
    1: "NAK",
    2: UNASSIGNED,
    3: UNASSIGNED,
    4: UNASSIGNED,
    5: UNASSIGNED,
    6: UNASSIGNED,
    7: UNASSIGNED,
    8: UNASSIGNED,
    9: UNASSIGNED,
    10: UNASSIGNED,
    11: "Status of Link",
    12: UNASSIGNED,
    13: UNASSIGNED,
    14: "Link Service Not Functioning",
    15: "Link Service Not Used or Implemented",
}

# IIN is two octets read as [first octet][second octet]
IIN_CODES = {
    # first octet
    0x0100: "Broadcast message rx'd",
    0x0200: "Class 1 Data Available",
    0x0400: "Class 2 Data Available",
    0x0800: "Class 3 Data Available",
    0x1000: "Time Sync Req'd from Master",
    0x2000: "Outputs in Local Mode",
    0x4000: "Device Trouble",
    0x8000: "Device Restart",
    # second octet
    0x0001: "Function code not implemented",
    0x0002: "Requested Objects Unknown",
    0x0004: "Parameters Invalid or Out of Range",
    0x0008: "Event Buffer Overflow",
    0x0010: "Operation Already Executing",
    0x0020: "Device Configuration Corrupt",
    0x0040: "Reserved",
    0x0080: "Reserved",
}

OBJ_PREFIX_CODES = {
    0: "Objects packed without a prefix",
    1: "Objects prefixed with 1-octet index",
    2: "Objects prefixed with 2-octet index",
    3: "Objects prefixed with 4-octet index",
    4: "Objects prefixed with 1-octet object size",
    5: "Objects prefixed with 2-octet object size",
    6: "Objects prefixed with 4-octet object size",
    7: "Reserved",
}

OBJ_RANGE_SPECIFIER_CODES = {
    0: "8-bit Start and Stop Indices in Range Field",
    1: "16-bit Start and Stop Indices in Range Field",
    2: "32-bit Start and Stop Indices in Range Field",
    3: "8-bit Absolute Address in Range Field",
    4: "16-bit Absolute Address in Range Field",
    5: "32-bit Absolute Address in Range Field",
    6: "Length of Range field is 0 (no range field)",
    7: "8-bit Single Field Quantity",
    8: "16-bit Single Field Quantity",
    9: "32-bit Single Field Quantity",
    10: "Reserved",
    11: "Free-format Qualifier, range field has 1 octet count of objects",
    12: "Reserved",
    13: "Reserved",
    14: "Reserved",
    15: "Reserved",
}
