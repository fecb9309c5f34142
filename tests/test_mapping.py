# tests/test_mapping.py
"""
Unit tests for dictionary value transformation.
"""

import pytest

from featuredemo import compact_map_values, parse_int


@pytest.mark.unit
class TestParseInt:
    """Test strict integer parsing."""

    @pytest.mark.parametrize("text, expected", [
        ("60", 60),
        ("-7", -7),
        ("+3", 3),
        ("007", 7),
    ])
    def test_valid(self, text, expected):
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", [
        "unknown", "", " 60", "60 ", "1_000", "4.0", "٣", "-", None,
        "99999999999999999999", "9223372036854775808", "-9223372036854775809",
    ])
    def test_invalid(self, text):
        assert parse_int(text) is None

    def test_64_bit_bounds(self):
        assert parse_int("9223372036854775807") == 2 ** 63 - 1
        assert parse_int("-9223372036854775808") == -2 ** 63


@pytest.mark.unit
class TestCompactMapValues:
    """Test filtering and transforming mapping values."""

    def test_drops_unparseable_values(self):
        access = {"walk": "60", "train": "20", "car": "unknown"}

        result = compact_map_values(access, parse_int)

        assert result == {"walk": 60, "train": 20}

    def test_key_set_is_parseable_subset(self):
        mapping = {"a": "1", "b": "x", "c": "-2", "d": "", "e": "3"}

        result = compact_map_values(mapping, parse_int)

        assert set(result) == {k for k, v in mapping.items() if parse_int(v) is not None}
        for key, value in result.items():
            assert value == parse_int(mapping[key])

    def test_default_transform_drops_none(self):
        ages = {"a": 20, "b": 21, "c": None}

        assert compact_map_values(ages) == {"a": 20, "b": 21}

    def test_falsy_values_are_kept(self):
        mapping = {"zero": 0, "empty": "", "false": False, "none": None}

        assert compact_map_values(mapping) == {"zero": 0, "empty": "", "false": False}

    def test_input_is_not_modified(self):
        ages = {"a": 1, "b": None}

        compact_map_values(ages)

        assert ages == {"a": 1, "b": None}

    def test_empty_mapping(self):
        assert compact_map_values({}, parse_int) == {}

    def test_preserves_order(self):
        mapping = {"z": "1", "y": "no", "x": "2"}

        assert list(compact_map_values(mapping, parse_int)) == ["z", "x"]
