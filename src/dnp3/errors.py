# src/dnp3/errors.py

__all__ = ["DecodeError", "FrameTooShort", "NotDNP3", "HexFormatError"]


class DecodeError(ValueError):
    """Base class for anything that stops one frame from decoding."""


class FrameTooShort(DecodeError):
    def __init__(self, required, actual):
        self.required = required
        self.actual = actual
        super().__init__(f"Invalid packet length: need {required} bytes, got {actual}")


class NotDNP3(DecodeError):
    def __init__(self, start):
        self.start = start
        super().__init__(f"This is not DNP3 (start field {start})")


class HexFormatError(DecodeError):
    def __init__(self, text, reason):
        self.text = text
        super().__init__(f"Cannot parse hex frame {text!r}: {reason}")
