import pytest

from svgtag import FillRule, InvalidValueError, SvgAttribute
from svgtag import validator


def test_one_of_accepts_members_and_wire_strings():
    assert validator.one_of(FillRule.NONZERO, FillRule, SvgAttribute.FILL_RULE) == "nonzero"
    assert validator.one_of("evenodd", FillRule, SvgAttribute.FILL_RULE) == "evenodd"


@pytest.mark.parametrize("value", [None, ""])
def test_one_of_passes_unset_through(value):
    assert validator.one_of(value, FillRule, "fill-rule") == value


def test_one_of_error_names_attribute_and_lists_values():
    with pytest.raises(InvalidValueError) as excinfo:
        validator.one_of("invalid-value", FillRule, SvgAttribute.FILL_RULE)

    assert str(excinfo.value) == (
        '"invalid-value" is not a valid value for "fill-rule". '
        "Valid values are: 'evenodd', 'nonzero'."
    )
    assert excinfo.value.attribute == "fill-rule"
    assert excinfo.value.value == "invalid-value"
    assert excinfo.value.allowed == ("evenodd", "nonzero")


def test_one_of_is_case_sensitive():
    with pytest.raises(InvalidValueError):
        validator.one_of("EvenOdd", FillRule, "fill-rule")


@pytest.mark.parametrize("value", [0, 1, 0.5, "0", "1", "0.25", 1.0])
def test_unit_interval_accepts_bounds(value):
    assert validator.unit_interval(value, "opacity") == value


@pytest.mark.parametrize("value", [-0.1, 1.1, "2", "abc", True, float("nan")])
def test_unit_interval_rejects(value):
    with pytest.raises(InvalidValueError, match="Value must be a number between 0 and 1 inclusive or None to unset."):
        validator.unit_interval(value, "opacity")


@pytest.mark.parametrize("value", [0, 1, "0.5", "0%", "50%", "100%"])
def test_offset_accepts_numbers_and_percentages(value):
    assert validator.offset(value) == value


def test_offset_rejects_percentage_above_hundred():
    with pytest.raises(InvalidValueError, match="between 0 and 100 inclusive"):
        validator.offset("120%")


@pytest.mark.parametrize("value", [1.5, "-1", "x%"])
def test_offset_rejects(value):
    with pytest.raises(InvalidValueError):
        validator.offset(value)


def test_non_negative():
    assert validator.non_negative(0, "pathLength") == 0
    assert validator.non_negative("12.5", "pathLength") == "12.5"
    with pytest.raises(InvalidValueError, match="Value must be a positive number or None to unset."):
        validator.non_negative(-1, "pathLength")


def test_at_least_one():
    assert validator.at_least_one(1, "stroke-miterlimit") == 1
    assert validator.at_least_one(None, "stroke-miterlimit") is None
    with pytest.raises(InvalidValueError) as excinfo:
        validator.at_least_one(0.5, "stroke-miterlimit")
    assert str(excinfo.value) == "Value must be a number greater than or equal to 1 or None to unset."
    assert excinfo.value.attribute == "stroke-miterlimit"


def test_invalid_value_error_is_a_value_error():
    with pytest.raises(ValueError):
        validator.unit_interval(5, "opacity")


@pytest.mark.parametrize("value", ["1e2", ".5", "+1", "-0.5", "1.", "2E-1"])
def test_to_number_accepts_svg_numbers(value):
    assert validator.to_number(value) == float(value)


@pytest.mark.parametrize("value", ["1_0", "１", " 1 ", "1e", "nan", "inf", "0x1", "1,5", "."])
def test_to_number_rejects_python_only_spellings(value):
    assert validator.to_number(value) is None
