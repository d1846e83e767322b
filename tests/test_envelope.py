"""
Tests for envelope unwrapping of raw producer output.
"""

from mimbar.script.envelope import unwrap_envelope


def test_array_is_returned_unchanged():
    blocks = [{"type": "opening"}, {"type": "content"}, {"type": "doa"}]
    assert unwrap_envelope(blocks) is blocks


def test_script_envelope():
    inner = [{"type": "content", "text": "a"}]
    assert unwrap_envelope({"script": inner}) == inner


def test_data_envelope():
    inner = [{"type": "content", "text": "a"}]
    assert unwrap_envelope({"data": inner}) == inner


def test_script_key_wins_over_data():
    assert unwrap_envelope({"data": [{"n": 2}], "script": [{"n": 1}]}) == [{"n": 1}]


def test_non_array_script_falls_through_to_data():
    assert unwrap_envelope({"script": "oops", "data": [{"n": 2}]}) == [{"n": 2}]


def test_unrecognised_shapes_are_empty():
    for value in ({}, None, "text", 42, 3.5, True, {"blocks": [{"n": 1}]}):
        assert unwrap_envelope(value) == []
