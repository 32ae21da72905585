import pytest

from json_to_code.pipeline.errors import INVALID_JSON_MESSAGE, PARSE_FAILURE_MARKER, InvalidRootError, ParseError
from json_to_code.pipeline.normalizer import (
    canonical_schema,
    merge_object_into,
    normalize,
    parse_json,
    union_dict_from_array_elements,
)


class TestParseJson:
    """Test JSON parsing"""

    def test_valid(self):
        """Test parsing a valid document"""
        assert parse_json('{"a": [1, 2.5, null]}') == {"a": [1, 2.5, None]}

    def test_invalid(self):
        """Test that malformed input raises a ParseError with the marker"""
        with pytest.raises(ParseError) as exc_info:
            parse_json("{not json")
        assert exc_info.value.message == INVALID_JSON_MESSAGE
        assert exc_info.value.details.startswith(PARSE_FAILURE_MARKER)

    def test_empty_text(self):
        """Test that empty text is not valid JSON"""
        with pytest.raises(ParseError):
            parse_json("")


class TestMerge:
    """Test shallow merging of objects"""

    def test_last_value_wins(self):
        """Test that a later value replaces an earlier one"""
        target = {"a": 1, "b": "x"}
        merge_object_into(target, {"a": 2, "c": True})
        assert target == {"a": 2, "b": "x", "c": True}

    def test_null_does_not_replace_value(self):
        """Test that null never overwrites a known value"""
        target = {"a": 1}
        merge_object_into(target, {"a": None, "b": None})
        assert target == {"a": 1, "b": None}

    def test_value_replaces_null(self):
        """Test that a value replaces an earlier null"""
        target = {"a": None}
        merge_object_into(target, {"a": "x"})
        assert target == {"a": "x"}

    def test_union_of_array_elements(self):
        """Test key union over object elements, ignoring other elements"""
        items = [{"id": 1}, 5, "s", {"id": 2, "name": "n"}, None, [1]]
        assert union_dict_from_array_elements(items) == {"id": 2, "name": "n"}

    def test_union_keeps_first_seen_key_order(self):
        """Test that keys keep the order they were first seen in"""
        result = union_dict_from_array_elements([{"b": 1}, {"a": 1, "b": 2}])
        assert list(result) == ["b", "a"]


class TestNormalize:
    """Test reduction to a canonical schema"""

    def test_object_is_returned_unchanged(self):
        """Test that a top-level object is the schema itself"""
        value = {"a": 1}
        assert normalize(value) is value

    def test_array_of_objects(self):
        """Test that an array becomes the union of its objects"""
        assert normalize([{"a": 1}, {"b": 2}]) == {"a": 1, "b": 2}

    def test_empty_array(self):
        """Test that an empty array gives an empty schema"""
        assert normalize([]) == {}

    def test_array_without_objects(self):
        """Test that an array of scalars gives an empty schema"""
        assert normalize([1, 2, 3]) == {}

    @pytest.mark.parametrize("value", [1, 2.5, "text", True, None])
    def test_scalar_root_is_rejected(self, value):
        """Test that scalar roots raise InvalidRootError"""
        with pytest.raises(InvalidRootError):
            normalize(value)

    def test_canonical_schema(self):
        """Test parse and normalize in one step"""
        assert canonical_schema('[{"id": 1}, {"id": null, "tag": "x"}]') == {"id": 1, "tag": "x"}
