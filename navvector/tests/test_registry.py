import pytest

from navvector.algebra.vec2 import Vector2
from navvector.algebra.vec3 import Vector3
from navvector.dispatch.errors import UnknownOperatorError, VectorTypeError
from navvector.dispatch.kinds import Kind
from navvector.dispatch.registry import build_registry


class _RecordingTrace:
    def __init__(self):
        self.calls = []

    def log(self, operator, operands, result=None, error=None):
        self.calls.append((operator, tuple(operands), result, error))


def test_registry_exposes_exact_operator_names():
    registry = build_registry()
    assert set(registry.library) == {"new", "length", "unit", "rotate", "lerp"}
    shared = {"add", "sub", "mul", "length", "unit", "rotate", "lerp", "angle"}
    assert shared | {"cross", "slerp", "upAndRight", "x", "y", "z"} <= set(registry.vector3_methods)
    assert shared | {"conj", "u", "v"} <= set(registry.vector2_methods)
    assert "conj" not in registry.vector3_methods
    assert not {"cross", "slerp", "upAndRight"} & set(registry.vector2_methods)


def test_registry_tables_are_read_only():
    registry = build_registry()
    with pytest.raises(TypeError):
        registry.library["new"] = None
    with pytest.raises(AttributeError):
        registry.nzero = Vector3(1.0, 0.0, 0.0)


def test_zero_constants():
    registry = build_registry()
    assert registry.nzero == Vector3(0.0, 0.0, 0.0)
    assert registry.pzero == Vector2(0.0, 0.0)


def test_methods_for_kind():
    registry = build_registry()
    assert registry.methods_for(Kind.VECTOR3) is registry.vector3_methods
    assert registry.methods_for(Kind.VECTOR2) is registry.vector2_methods
    with pytest.raises(UnknownOperatorError):
        registry.methods_for(Kind.SCALAR)


def test_call_routes_library_and_methods():
    registry = build_registry()
    assert registry.call("new", 1, 2, 3) == Vector3(1.0, 2.0, 3.0)
    assert registry.call("cross", Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)) == Vector3(0.0, 0.0, 1.0)
    assert registry.call("__mod", Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0)) == Vector3(1.0, 0.0, 0.0)
    assert registry.call("conj", Vector2(1.0, 1.0)) == Vector2(1.0, -1.0)
    assert registry.call("mul", 2, Vector2(1.0, 1.0)) == Vector2(2.0, 2.0)
    assert registry.call("__tostring", Vector2(1.0, 1.0)) == "(1.000, 1.000)"


def test_call_unknown_names():
    registry = build_registry()
    with pytest.raises(UnknownOperatorError):
        registry.call("conj", Vector3(1.0, 0.0, 0.0))
    with pytest.raises(UnknownOperatorError):
        registry.call("x", 5)
    with pytest.raises(UnknownOperatorError):
        registry.call("teleport")


def test_trace_sees_results_and_errors():
    trace = _RecordingTrace()
    registry = build_registry(trace=trace)
    registry.vector3_methods["mul"](Vector3(1.0, 0.0, 0.0), 2)
    with pytest.raises(VectorTypeError):
        registry.library["length"](3)

    assert trace.calls[0][0] == "mul"
    assert trace.calls[0][2] == Vector3(2.0, 0.0, 0.0)
    assert trace.calls[1][0] == "length"
    assert isinstance(trace.calls[1][3], VectorTypeError)


def test_call_with_missing_operand_reports_position():
    registry = build_registry()
    with pytest.raises(VectorTypeError) as excinfo:
        registry.call("length")
    assert excinfo.value.position == 1
    with pytest.raises(VectorTypeError) as excinfo:
        registry.call("add", Vector3(1.0, 0.0, 0.0))
    assert excinfo.value.position == 2
    assert registry.call("length", Vector3(3.0, 4.0, 0.0), 5.0) == 5.0
