# tests/conftest.py
import pytest
from pathlib import Path

# Captured master -> outstation request: unconfirmed user data, Warm Restart
WARM_RESTART_HEX = "056408c40a000100fc42c0c00e7edc"
# Captured outstation response with IIN 0x0001
RESPONSE_HEX = "05640a4401000a006e25c1c0810001c4fd"


def pytest_collection_modifyitems(config, items):
    for item in items:
        p = Path(str(item.fspath)).as_posix()
        if "/tests/integration/" in p or p.endswith("/tests/integration"):
            item.add_marker(pytest.mark.integration)
        elif "/tests/unit/" in p or p.endswith("/tests/unit"):
            item.add_marker(pytest.mark.unit)


def build_frame(control=0xC4, dst=10, src=1, crc=0x42FC, transport=0xC0,
                app_control=0xC0, function=0x0E, length=8, start=b"\x05\x64"):
    """Assemble link header + transport byte + application header."""
    return (
        start
        + bytes([length, control])
        + dst.to_bytes(2, "little")
        + src.to_bytes(2, "little")
        + crc.to_bytes(2, "little")
        + bytes([transport, app_control, function])
    )


@pytest.fixture
def warm_restart():
    return bytes.fromhex(WARM_RESTART_HEX)


@pytest.fixture
def response_frame():
    return bytes.fromhex(RESPONSE_HEX)


@pytest.fixture
def make_frame():
    return build_frame
