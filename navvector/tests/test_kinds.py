import numpy as np
import pytest

from navvector.algebra.vec2 import Vector2
from navvector.algebra.vec3 import Vector3
from navvector.dispatch.errors import VectorTypeError
from navvector.dispatch.kinds import (
    HostBinding,
    Kind,
    check_number,
    check_vector2,
    check_vector3,
    classify,
    coerce_number,
    resolve_operand,
)


def test_resolve_native_values():
    assert resolve_operand(2, 1).kind is Kind.SCALAR
    assert resolve_operand(2, 1).value == 2.0
    assert resolve_operand(Vector3(1.0, 2.0, 3.0), 2).kind is Kind.VECTOR3
    operand = resolve_operand(Vector2(1.0, 2.0), 3)
    assert operand.kind is Kind.VECTOR2
    assert operand.value == Vector2(1.0, 2.0)
    assert operand.position == 3


def test_numeric_coercion_rules():
    assert coerce_number(1.5) == 1.5
    assert coerce_number(np.float32(0.5)) == 0.5
    assert coerce_number(" 4.25 ") == 4.25
    assert coerce_number("north") is None
    assert coerce_number(True) is None
    assert coerce_number(None) is None
    assert coerce_number(3 + 4j) is None


@pytest.mark.parametrize(
    "text, expected",
    [("12", 12.0), ("-0.5e1", -5.0), (".25", 0.25), ("0x10", 16.0), ("0x1p4", 16.0), (" 3. ", 3.0)],
)
def test_numeric_strings_follow_host_numerals(text, expected):
    assert coerce_number(text) == expected


@pytest.mark.parametrize("text", ["1_000", "nan", "infinity", "inf", "", "0x", "1e", "--1"])
def test_python_only_number_spellings_are_rejected(text):
    assert coerce_number(text) is None


def test_unresolvable_operand_carries_position():
    with pytest.raises(VectorTypeError) as excinfo:
        resolve_operand(object(), 2)
    assert excinfo.value.position == 2
    assert "bad argument #2" in str(excinfo.value)


def test_classify_does_not_raise():
    assert classify("12") is Kind.SCALAR
    assert classify(Vector2(0.0, 0.0)) is Kind.VECTOR2
    assert classify([1, 2, 3]) is None


def _sequence_binding() -> HostBinding:
    # A host whose vector accessors accept any sequence of the right length.
    def to_vector3(value):
        if isinstance(value, (tuple, list, str)) and len(value) == 3:
            return Vector3(*(float(c) for c in value))
        return None

    def to_vector2(value):
        if isinstance(value, (tuple, list, str)) and len(value) in (2, 3):
            return Vector2(float(value[0]), float(value[1]))
        return None

    return HostBinding(to_vector3=to_vector3, to_vector2=to_vector2)


def test_classification_order_is_number_then_vector3_then_vector2():
    binding = _sequence_binding()
    # "123" parses as a number before the vector accessors see it.
    assert resolve_operand("123", 1, binding).kind is Kind.SCALAR
    # Both vector accessors accept a 3-tuple; Vector3 wins.
    assert resolve_operand((1, 2, 3), 1, binding).kind is Kind.VECTOR3
    assert resolve_operand((1, 2), 1, binding).kind is Kind.VECTOR2


def test_strict_checkers():
    assert check_number("2", 1) == 2.0
    assert check_vector3(Vector3(1.0, 0.0, 0.0), 1) == Vector3(1.0, 0.0, 0.0)
    assert check_vector2(Vector2(1.0, 0.0), 1) == Vector2(1.0, 0.0)
    with pytest.raises(VectorTypeError) as excinfo:
        check_number(None, 3)
    assert excinfo.value.position == 3
    with pytest.raises(VectorTypeError):
        check_vector3(Vector2(1.0, 0.0), 1)
    with pytest.raises(VectorTypeError):
        check_vector2(Vector3(1.0, 0.0, 0.0), 2)
