"""
Tests for the JSON formatting helpers.
"""

import json

from hypothesis import given, strategies as st, settings

from postwoman.services.json_formatter import format_json, is_valid_json, minify_json


json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(max_size=10),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=15,
)


class TestFormatJSON:

    def test_pretty_prints_with_sorted_keys(self):
        result = format_json('{"b":2,"a":1}')
        assert result == '{\n  "a": 1,\n  "b": 2\n}'
        assert '"a": 1' in result

    def test_invalid_input_returns_none(self):
        assert format_json("not json") is None
        assert format_json("") is None
        assert format_json("{'a': 1}") is None

    def test_slashes_and_unicode_are_not_escaped(self):
        assert format_json('{"url":"http://x/y","name":"caf\\u00e9"}') == (
            '{\n  "name": "café",\n  "url": "http://x/y"\n}'
        )

    def test_scalars_are_accepted(self):
        assert format_json("42") == "42"
        assert format_json('"text"') == '"text"'


class TestMinifyJSON:

    def test_removes_whitespace_and_keeps_order(self):
        assert minify_json('{\n  "b": [1, 2],\n  "a": null\n}') == '{"b":[1,2],"a":null}'

    def test_invalid_input_returns_none(self):
        assert minify_json("{") is None


class TestIsValidJSON:

    def test_valid_and_invalid(self):
        assert is_valid_json('{"a": [1, 2, 3]}')
        assert is_valid_json("null")
        assert not is_valid_json("not json")
        assert not is_valid_json("")

    @given(value=json_values)
    @settings(max_examples=50, deadline=None)
    def test_format_and_minify_preserve_value(self, value):
        text = json.dumps(value)
        assert is_valid_json(text)
        assert json.loads(format_json(text)) == value
        assert json.loads(minify_json(text)) == value

    def test_non_standard_constants_are_rejected(self):
        for text in ("NaN", "Infinity", "-Infinity", '{"a": NaN}', "[1, Infinity]"):
            assert not is_valid_json(text)
            assert format_json(text) is None
            assert minify_json(text) is None

    def test_out_of_range_numbers_are_rejected(self):
        assert not is_valid_json("1e999")
        assert format_json("[-1e999]") is None
        assert is_valid_json("1e308")
