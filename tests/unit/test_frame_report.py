import json

from dnp3.decoder import decode_frame
from dnp3.frame import render_json, render_text


def test_to_dict_layout(warm_restart):
    d = decode_frame(warm_restart).to_dict()
    assert list(d) == ["DataLinkLayer", "TransportLayer", "ApplicationLayer"]

    dl = d["DataLinkLayer"]
    assert dl["Start"] == "0564"
    assert dl["Control"] == {
        "ControlByte": "c4",
        "Is Master": 1,
        "Primary": 1,
        "Frame Count Bit": 0,
        "Frame Count Valid": 0,
        "Function Code": "Unconfirmed User Data (4)",
    }
    assert (dl["Destination"], dl["Source"], dl["CRC"]) == (10, 1, "0x42fc")

    assert d["TransportLayer"] == {"TransportByte": "0xc0", "Final": 1, "First": 1, "Sequence": 0}
    assert d["ApplicationLayer"]["Function Code"] == "Warm Restart (0xe)"
    assert d["ApplicationLayer"]["Control"]["ControlByte"] == "0xc0"


def test_render_json_round_trips_to_dict(warm_restart):
    frame = decode_frame(warm_restart)
    assert json.loads(render_json(frame)) == frame.to_dict()


def test_render_text_tree(warm_restart):
    lines = render_text(decode_frame(warm_restart)).splitlines()
    assert lines[0] == "DataLinkLayer"
    assert "  Start: 0564" in lines
    assert "  Control" in lines
    assert "    Is Master: 1" in lines
    assert "TransportLayer" in lines
    assert "  Function Code: Warm Restart (0xe)" in lines


def test_render_is_deterministic(warm_restart):
    assert render_text(decode_frame(warm_restart)) == render_text(decode_frame(warm_restart))
    assert render_json(decode_frame(warm_restart)) == render_json(decode_frame(warm_restart))
