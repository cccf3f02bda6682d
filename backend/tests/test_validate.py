import pytest

from app.errors import ValidationError
from app.validate import decode_body, validate_request


def test_valid_request_is_trimmed():
    req = validate_request({"focus": "  deep work ", "duration": 3, "constraints": "  lunch at 12 "})
    assert req.focus == "deep work"
    assert req.duration == 3
    assert req.constraints == "lunch at 12"


@pytest.mark.parametrize("focus", [None, "", "   ", 5, ["deep work"]])
def test_missing_focus(focus):
    with pytest.raises(ValidationError, match="Missing focus"):
        validate_request({"focus": focus, "duration": 3})


@pytest.mark.parametrize("duration", [
    0, 25, -1, 24.5, 0.99, None, "", "abc", "nan", "inf", float("nan"), 10 ** 400,
    False, [], [None], [1, 2], [True], {"hours": 3},
])
def test_invalid_duration(duration):
    with pytest.raises(ValidationError, match="Invalid duration"):
        validate_request({"focus": "x", "duration": duration})


@pytest.mark.parametrize("duration, expected", [
    (1, 1), (24, 24), ("3", 3), (3.0, 3), (" 7 ", 7), (2.5, 2.5),
    (True, 1), ([3], 3), (["4"], 4), ([[5]], 5),
])
def test_duration_bounds_and_coercion(duration, expected):
    assert validate_request({"focus": "x", "duration": duration}).duration == expected


def test_fractional_duration_kept_but_slots_floor():
    req = validate_request({"focus": "x", "duration": 2.5})
    assert req.slots == 2


@pytest.mark.parametrize("constraints", [None, 12, {"a": 1}])
def test_non_string_constraints_become_empty(constraints):
    assert validate_request({"focus": "x", "duration": 1, "constraints": constraints}).constraints == ""


def test_focus_checked_before_duration():
    with pytest.raises(ValidationError, match="Missing focus"):
        validate_request({"duration": 99})


@pytest.mark.parametrize("body", [None, "not json", [1, 2], 7])
def test_non_mapping_body_is_missing_focus(body):
    with pytest.raises(ValidationError, match="Missing focus"):
        validate_request(body)


def test_json_string_body_is_decoded_again():
    req = validate_request('{"focus": "reading", "duration": 2}')
    assert req.focus == "reading"


@pytest.mark.parametrize("raw, expected", [
    (b"", None),
    (b"   ", None),
    (None, None),
    (b'{"focus": "x"}', {"focus": "x"}),
    ("[1]", [1]),
    (b"focus=x", "focus=x"),
])
def test_decode_body(raw, expected):
    assert decode_body(raw) == expected
