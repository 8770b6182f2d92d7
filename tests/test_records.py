"""
Tests for decodeN multi-field construction.
"""

import pytest
from structstest import Contact, Patient, Point, patient_payload

from dyndecode import (
    DecodeError,
    Err,
    Ok,
    bool_,
    decode,
    decode2,
    decode3,
    decode4,
    decode9,
    field,
    int_,
    list_of,
    optional_field,
    string,
)

point = decode2(Point, field("x", int_), field("y", int_))
contact = decode2(Contact, field("system", string), field("value", string))
patient = decode4(
    Patient,
    field("id", string),
    field("active", bool_),
    field("contacts", list_of(contact)),
    optional_field("age", int_),
)


class TestDecode2:
    def test_success(self):
        assert point({"x": 1, "y": 2}) == Ok(Point(1, 2))

    def test_missing_both_fields(self):
        assert point({}) == Err(
            [
                DecodeError("field", "nothing", ("0", "x")),
                DecodeError("field", "nothing", ("1", "y")),
            ]
        )

    def test_one_bad_field(self):
        assert point({"x": 1, "y": "2"}) == Err(
            [DecodeError("Int", "String", ("1", "y"))]
        )

    def test_not_a_map_fails_every_slot(self):
        assert point(3) == Err(
            [
                DecodeError("Map", "Int", ("0",)),
                DecodeError("Map", "Int", ("1",)),
            ]
        )

    def test_constructor_not_called_on_failure(self):
        calls = []

        def build(x, y):
            calls.append((x, y))
            return (x, y)

        decode2(build, field("x", int_), field("y", int_))({"x": 1})
        assert calls == []


class TestNestedRecords:
    def test_patient(self):
        result = patient(patient_payload())
        assert result == Ok(
            Patient(
                id="abc123",
                active=True,
                contacts=[
                    Contact("phone", "555-1234"),
                    Contact("email", "john@example.com"),
                ],
                age=42,
            )
        )

    def test_patient_without_age(self):
        payload = patient_payload()
        del payload["age"]
        assert patient(payload).value.age is None

    def test_patient_reports_every_bad_field(self):
        payload = patient_payload()
        payload["id"] = 123
        payload["active"] = "yes"
        payload["contacts"][1]["value"] = None
        result = patient(payload)
        assert isinstance(result, Err)
        assert [e.path for e in result.error] == [
            ("0", "id"),
            ("1", "active"),
            ("2", "contacts", "*", "1", "value"),
        ]


class TestHigherArity:
    def test_decode3(self):
        decoder = decode3(
            lambda a, b, c: a + b + c,
            field("a", int_),
            field("b", int_),
            field("c", int_),
        )
        assert decoder({"a": 1, "b": 2, "c": 3}) == Ok(6)

    def test_decode9_slot_tags(self):
        names = "abcdefghi"
        decoder = decode9(lambda *xs: xs, *[field(n, int_) for n in names])
        assert decoder(dict.fromkeys(names, 0)) == Ok((0,) * 9)
        result = decoder({})
        assert [e.path for e in result.error] == [
            (str(i), n) for i, n in enumerate(names)
        ]

    def test_generic_decode_requires_decoders(self):
        with pytest.raises(ValueError):
            decode(tuple)
