"""
Tests for structural equality over JSON-like values.

These tests pin down the edge cases field de-duplication relies on:
    - None vs missing keys
    - key-count mismatches
    - element order in sequences
    - bool vs number
"""

from gff.equality import deep_equal


class TestPrimitives:
    """Test primitive comparisons."""

    def test_identical_primitives(self):
        assert deep_equal(1, 1)
        assert deep_equal("a", "a")
        assert deep_equal(None, None)
        assert deep_equal(True, True)

    def test_different_primitives(self):
        assert not deep_equal(1, 2)
        assert not deep_equal("a", "b")
        assert not deep_equal("1", 1)

    def test_int_and_float_are_same_number(self):
        assert deep_equal(1, 1.0)

    def test_bool_is_not_a_number(self):
        """True must not match 1, as it would not in JSON."""
        assert not deep_equal(True, 1)
        assert not deep_equal(0, False)

    def test_none_is_not_an_empty_container(self):
        assert not deep_equal(None, {})
        assert not deep_equal([], None)

    def test_nan_is_not_equal_to_itself_by_value(self):
        assert not deep_equal(float("nan"), float("nan"))


class TestMappings:
    """Test mapping comparisons."""

    def test_equal_nested_mappings(self):
        a = {"id": "name", "params": {"minLength": 1, "tags": ["x", "y"]}}
        b = {"params": {"tags": ["x", "y"], "minLength": 1}, "id": "name"}
        assert deep_equal(a, b)

    def test_none_value_differs_from_missing_key(self):
        assert not deep_equal({"a": None}, {})
        assert not deep_equal({}, {"a": None})

    def test_key_count_mismatch(self):
        assert not deep_equal({"a": 1}, {"a": 1, "b": 2})

    def test_same_count_different_keys(self):
        assert not deep_equal({"a": 1}, {"b": 1})

    def test_nested_difference(self):
        assert not deep_equal({"p": {"minLength": 1}}, {"p": {"minLength": 2}})

    def test_same_object_is_equal(self):
        value = {"a": [1, 2, {"b": 3}]}
        assert deep_equal(value, value)


class TestSequences:
    """Sequences are compared as index-keyed objects."""

    def test_equal_lists(self):
        assert deep_equal([1, 2, 3], [1, 2, 3])

    def test_order_matters(self):
        assert not deep_equal([1, 2], [2, 1])

    def test_length_matters(self):
        assert not deep_equal([1, 2], [1, 2, 3])

    def test_list_and_tuple_compare_by_content(self):
        assert deep_equal([1, 2], (1, 2))

    def test_list_matches_index_keyed_mapping(self):
        """Arrays are objects with numeric keys."""
        assert deep_equal(["a", "b"], {"0": "a", "1": "b"})
        assert not deep_equal(["a", "b"], {"1": "a", "0": "b"})
