from dnp3.constants import (
    APP_FUNCTION_CODES, PRIMARY_FUNCTION_CODES, SECONDARY_FUNCTION_CODES,
    IIN_CODES, OBJ_PREFIX_CODES, OBJ_RANGE_SPECIFIER_CODES, UNASSIGNED,
    START_FIELD, START_BYTES, MIN_HEADER_LENGTH, MIN_APP_HEADER_LENGTH,
    LinkControl, TransportControl, AppControl,
)


def test_header_lengths():
    assert MIN_HEADER_LENGTH == 10
    assert MIN_APP_HEADER_LENGTH == 13


def test_start_field_matches_bytes():
    assert START_BYTES == START_FIELD.to_bytes(2, "big")


def test_app_function_table_shape():
    assert len(APP_FUNCTION_CODES) == 37
    assert set(APP_FUNCTION_CODES) == set(range(34)) | {129, 130, 131}
    assert APP_FUNCTION_CODES[14] == "Warm Restart"
    assert APP_FUNCTION_CODES[129] == "Response"


def test_link_tables_cover_every_nibble():
    assert sorted(PRIMARY_FUNCTION_CODES) == list(range(16))
    assert sorted(SECONDARY_FUNCTION_CODES) == list(range(16))


def test_primary_table_unused_slots_are_placeholders():
    unused = [5, 6, 7, 8, 10, 11, 12, 13, 14, 15]
    assert all(PRIMARY_FUNCTION_CODES[i] == UNASSIGNED for i in unused)
    assert PRIMARY_FUNCTION_CODES[9] == "Request Link Status"


def test_secondary_table_named_slots():
    named = {i: v for i, v in SECONDARY_FUNCTION_CODES.items() if v != UNASSIGNED}
    assert sorted(named) == [0, 1, 11, 14, 15]


def test_descriptive_tables_sizes():
    assert len(IIN_CODES) == 16
    assert len(OBJ_PREFIX_CODES) == 8
    assert len(OBJ_RANGE_SPECIFIER_CODES) == 16


def test_control_masks_partition_the_byte():
    for fields in (LinkControl.FIELDS, TransportControl.FIELDS, AppControl.FIELDS):
        masks = [f.mask for f in fields]
        combined = 0
        for m in masks:
            assert combined & m == 0
            combined |= m
        assert combined == 0xFF
