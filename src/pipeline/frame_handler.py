from dataclasses import dataclass

from dnp3.decoder import decode_frame
from dnp3.errors import DecodeError
from dnp3.payload import get_dnp3_payload_bytes, is_dnp3_packet
from config import DNP3_PORT
from app_logging import log_err


@dataclass
class FrameStats:
    decoded: int = 0
    skipped: int = 0

    @property
    def total(self):
        return self.decoded + self.skipped


def frame_payload(frame, data):
    return {"hex": bytes(data).hex(), "frame": frame.to_dict()}


def handle_frame(data, publisher=None):
    """
    Decode one frame. A bad frame is logged and yields None so the caller
    can move on to the next one.
    """
    try:
        frame = decode_frame(data)
    except DecodeError as e:
        log_err(f"Frame skipped: {e}")
        return None

    if publisher is not None:
        publisher.publish(frame_payload(frame, data))
    return frame


def handle_packet(pkt, publisher=None, port=DNP3_PORT):
    """Dissected packet in, decoded frame (or None) out. port=None skips the port filter."""
    if port is not None and not is_dnp3_packet(pkt, port):
        return None
    data = get_dnp3_payload_bytes(pkt)
    if data is None:
        return None
    return handle_frame(data, publisher=publisher)


def process_frames(frames, emit, publisher=None, stats=None):
    """
    Decode every buffer in frames, hand each record to emit(frame) and
    return the decoded/skipped counts.
    """
    if stats is None:
        stats = FrameStats()
    for data in frames:
        frame = handle_frame(data, publisher=publisher)
        if frame is None:
            stats.skipped += 1
            continue
        stats.decoded += 1
        emit(frame)
    return stats
