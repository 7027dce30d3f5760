import re

import pytest

from zebrazpl.errors import ParameterTypeError
from zebrazpl.protocol.types import (
    Alphanumeric,
    AnyOf,
    Binary,
    BooleanValue,
    IntegerRange,
    Number,
    OneOf,
    Pattern,
    Text,
    as_param_type,
    validate_value,
)


def test_integer_range_bounds():
    """Values are valid exactly inside [min, max]."""
    bounds = IntegerRange(1, 5)
    for value in range(-2, 9):
        assert (bounds.validate(value) is None) == (1 <= value <= 5)
    assert bounds.validate(0) == "should be a number between 1 and 5"


def test_integer_range_rejects_non_integers():
    bounds = IntegerRange(0, 10)
    assert bounds.validate(2.0) is None
    assert bounds.validate(2.5) == "should be an integer"
    assert bounds.validate("3") == "should be an integer"
    assert bounds.validate(True) == "should be an integer"
    assert bounds.validate(float("nan")) == "should be an integer"
    assert bounds.validate(float("inf")) == "should be an integer"


def test_integer_range_min_greater_than_max():
    with pytest.raises(ParameterTypeError):
        IntegerRange(5, 1)
    with pytest.raises(TypeError):
        IntegerRange(5, 1)


def test_alphanumeric_unbounded():
    anything = Alphanumeric()
    assert anything.validate("abc123") is None
    assert anything.validate("ABC") is None
    assert anything.validate("") == "should be an alphanumeric string"
    assert anything.validate("ab-c") == "should be an alphanumeric string"
    assert anything.validate("abc\n") == "should be an alphanumeric string"
    assert anything.validate(5) == "should be a string"


def test_alphanumeric_bounded():
    name = Alphanumeric(1, 8)
    assert name.validate("LOGO") is None
    assert name.validate("ABCDEFGH") is None
    assert name.validate("ABCDEFGHI") == "should be an alphanumeric string with length between 1 and 8"
    assert Alphanumeric.of_length(1).validate("AB") == "should be an alphanumeric string of length 1"
    assert Alphanumeric(min_length=3).validate("AB") == "should be an alphanumeric string with length of at least 3"
    assert Alphanumeric(max_length=2).validate("ABC") == "should be an alphanumeric string with length of at most 2"


def test_alphanumeric_min_greater_than_max():
    with pytest.raises(ParameterTypeError):
        Alphanumeric(3, 2)


def test_one_of():
    choice = OneOf("A", "B")
    assert choice.validate("A") is None
    assert choice.validate("C") == "should be one of A, B"
    assert choice.validate(1) == "should be a string"


def test_boolean_value():
    yes_no = BooleanValue("Y", "N")
    assert yes_no.validate(True) is None
    assert yes_no.validate(False) is None
    assert yes_no.validate("Y") == "should be a boolean value"
    assert yes_no.token(True) == "Y"
    assert yes_no.token(False) == "N"


def test_binary():
    assert Binary().validate(b"\x00") is None
    assert Binary().validate(bytearray(b"x")) is None
    assert Binary().validate(memoryview(b"x")) is None
    assert Binary().validate("x") == "should be a byte sequence"


def test_text_number_pattern():
    assert Text().validate("x") is None
    assert Text().validate(1) == "should be a string"
    assert Number().validate(1.5) is None
    assert Number().validate(False) == "should be a number"
    assert Pattern(r"[A-Z]{2}").validate("AB") is None
    assert Pattern(r"[A-Z]{2}").validate("ABC") == "should match regular expression [A-Z]{2}"


def test_any_of_joins_errors():
    speed = AnyOf(IntegerRange(1, 14), OneOf("A", "B"))
    assert speed.validate(3) is None
    assert speed.validate("B") is None
    assert speed.validate("Z") == "should be an integer, or should be one of A, B"


def test_as_param_type_shorthands():
    assert isinstance(as_param_type("string"), Text)
    assert isinstance(as_param_type("number"), Number)
    assert isinstance(as_param_type("binary"), Binary)
    assert as_param_type({"B", "A"}).values == ("A", "B")
    assert isinstance(as_param_type(re.compile("x")), Pattern)
    union = as_param_type([IntegerRange(1, 2), "string"])
    assert isinstance(union, AnyOf)
    assert union.validate("x") is None


def test_as_param_type_rejects_unknown_descriptors():
    with pytest.raises(ParameterTypeError):
        as_param_type(42)
    with pytest.raises(ParameterTypeError):
        as_param_type("bogus")


def test_validate_value():
    assert validate_value("number", 3.5) is None
    assert validate_value(IntegerRange(1, 2), 3) == "should be a number between 1 and 2"
