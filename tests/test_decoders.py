"""
Tests for primitive decoders and the error helpers.
"""

import pytest

from dyndecode import (
    DecodeError,
    Err,
    Ok,
    bool_,
    bytes_,
    dynamic,
    float_,
    int_,
    map_,
    map_errors,
    push_path,
    shallow_list,
    string,
)


class TestPrimitives:
    @pytest.mark.parametrize(
        "decoder, value",
        [
            (string, "hello"),
            (string, ""),
            (int_, 0),
            (int_, -12),
            (float_, 2.5),
            (bool_, False),
            (bytes_, b"\x00\x01"),
        ],
    )
    def test_success_unwraps(self, decoder, value):
        assert decoder(value) == Ok(value)

    @pytest.mark.parametrize(
        "decoder, value, expected, found",
        [
            (string, 1, "String", "Int"),
            (int_, "1", "Int", "String"),
            (int_, True, "Int", "Bool"),
            (int_, 1.0, "Int", "Float"),
            (float_, 1, "Float", "Int"),
            (bool_, 1, "Bool", "Int"),
            (bytes_, "ab", "BitString", "String"),
            (string, None, "String", "Nil"),
        ],
    )
    def test_mismatch_is_single_error(self, decoder, value, expected, found):
        assert decoder(value) == Err([DecodeError(expected, found)])

    def test_dynamic_accepts_anything(self):
        marker = object()
        assert dynamic(marker).value is marker
        assert dynamic(None) == Ok(None)


class TestShallow:
    def test_shallow_list_keeps_elements_opaque(self):
        assert shallow_list([1, "a", None]) == Ok([1, "a", None])

    def test_shallow_list_rejects_tuple(self):
        assert shallow_list((1, 2)) == Err(
            [DecodeError("List", "Tuple of 2 elements")]
        )

    def test_map(self):
        assert map_({"a": 1}) == Ok({"a": 1})
        assert map_([("a", 1)]) == Err([DecodeError("Map", "List")])


class TestPathHelpers:
    def test_push_path_prepends(self):
        err = DecodeError("Int", "String", ("b",))
        assert push_path(err, "a").path == ("a", "b")
        assert err.path == ("b",)

    def test_push_path_renders_segments(self):
        err = DecodeError("Int", "String")
        assert push_path(err, 3).path == ("3",)
        assert push_path(err, -1).path == ("-1",)
        assert push_path(err, True).path == ("<Bool>",)
        assert push_path(err, 1.5).path == ("<Float>",)
        assert push_path(err, None).path == ("<Nil>",)

    def test_map_errors(self):
        failed = Err([DecodeError("Int", "String"), DecodeError("Bool", "Nil")])
        tagged = map_errors(failed, lambda e: push_path(e, "x"))
        assert [e.path for e in tagged.error] == [("x",), ("x",)]

    def test_map_errors_identity_on_ok(self):
        ok = Ok(1)
        assert map_errors(ok, lambda e: push_path(e, "x")) is ok
