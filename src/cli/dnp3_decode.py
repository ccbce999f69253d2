# src/cli/dnp3_decode.py
import sys
import argparse

from dnp3.errors import HexFormatError
from dnp3.frame import render_json, render_text
from dnp3.payload import parse_hex_frame
from pipeline.frame_handler import FrameStats, process_frames
from app_logging import log_err, log_info, log_report, log_warn
import config

from mqtt.client import FramePublisher


def _build_args(argv=None):
    ap = argparse.ArgumentParser(
        prog="dnp3-decode",
        description=(
            "Decode DNP3 link, transport and application headers from hex-encoded "
            "frames. Bad frames are reported and skipped."
        ),
    )

    src = ap.add_argument_group("source")
    src.add_argument(
        "frames", nargs="*",
        help='Hex frames, e.g. "0564 08 c4 0a00 0100 fc42 c0 c0 0e"'
    )
    src.add_argument(
        "--input", "-i",
        help="File with one hex frame per line ('-' for stdin). '#' starts a comment"
    )

    out = ap.add_argument_group("output")
    out.add_argument(
        "--format", choices=["json", "text"], default=config.DEFAULT_FORMAT,
        help="Report format per frame. Default: json"
    )
    out.add_argument(
        "--publish", action="store_true",
        help="Also publish each decoded frame to MQTT (see config.py)"
    )
    ap.add_argument(
        "--strict", action="store_true",
        help="Exit with status 1 if any frame was skipped"
    )

    return ap.parse_args(argv)


def _read_lines(path):
    if path == "-":
        yield from sys.stdin
        return
    with open(path, encoding="utf-8") as fh:
        yield from fh


def _iter_hex(args):
    yield from args.frames
    if not args.input:
        return
    for line in _read_lines(args.input):
        line = line.split("#", 1)[0].strip()
        if line:
            yield line


def _iter_frames(texts, stats):
    for text in texts:
        try:
            yield parse_hex_frame(text)
        except HexFormatError as e:
            log_err(f"Frame skipped: {e}")
            stats.skipped += 1


def _make_emitter(fmt):
    def _emit(frame):
        if fmt == "text":
            log_report(render_text(frame))
            log_report("")
        else:
            log_report(render_json(frame, indent=config.JSON_INDENT))
    return _emit


def main(argv=None):
    args = _build_args(argv)

    if not (args.frames or args.input):
        log_err("Give hex frames as arguments or --input <file|->")
        return 2

    publisher = None
    if args.publish:
        publisher = FramePublisher()
        if not publisher.connect():
            log_warn("Continuing without MQTT publishing")
            publisher = None

    stats = FrameStats()
    try:
        process_frames(
            _iter_frames(_iter_hex(args), stats),
            _make_emitter(args.format),
            publisher=publisher,
            stats=stats,
        )
    except OSError as e:
        log_err(f"Cannot read input: {e}")
        return 1
    finally:
        if publisher is not None:
            publisher.close()

    log_info(f"Decoded {stats.decoded} frame(s), skipped {stats.skipped}")

    if args.strict and stats.skipped:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
