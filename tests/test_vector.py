import dataclasses
import math

import numpy as np
import pytest

from polyvec.geometry import Vector3

SAMPLES = [
    Vector3(0.0, 0.0, 0.0),
    Vector3(1.0, -2.0, 3.5),
    Vector3(-4.25, 0.5, 12.0),
    Vector3(1e-3, 7.0, -7.0),
]
PAIRS = [(a, b) for a in SAMPLES for b in SAMPLES]


def test_default_is_zero_vector():
    assert Vector3() == Vector3(0.0, 0.0, 0.0)


def test_instances_are_frozen():
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0


def test_vector_and_scalar_arithmetic():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, -5.0, 0.5)
    assert a.add(b) == Vector3(5.0, -3.0, 3.5)
    assert a.subtract(b) == Vector3(-3.0, 7.0, 2.5)
    assert a.multiply(b) == Vector3(4.0, -10.0, 1.5)
    assert a.divide(b) == Vector3(0.25, -0.4, 6.0)
    assert a.add_scalar(1.0) == Vector3(2.0, 3.0, 4.0)
    assert a.subtract_scalar(1.0) == Vector3(0.0, 1.0, 2.0)
    assert a.multiply_scalar(2.0) == Vector3(2.0, 4.0, 6.0)
    assert a.divide_scalar(2.0) == Vector3(0.5, 1.0, 1.5)


def test_operators_delegate_to_methods():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, -5.0, 0.5)
    assert a + b == a.add(b)
    assert a - b == a.subtract(b)
    assert a * 3.0 == 3.0 * a == a.multiply_scalar(3.0)
    assert a / 4.0 == a.divide_scalar(4.0)
    assert -a == Vector3(-1.0, -2.0, -3.0)
    assert abs(Vector3(-1.0, 2.0, -3.0)) == Vector3(1.0, 2.0, 3.0)


def test_operations_do_not_mutate_operands():
    a = Vector3(1.0, 2.0, 3.0)
    a.add(Vector3(1.0, 1.0, 1.0)).multiply_scalar(5.0).normalize()
    assert a == Vector3(1.0, 2.0, 3.0)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("s", [0.0, 2.5, -13.0])
def test_scalar_add_then_subtract_is_identity(a, s):
    assert a.add_scalar(s).subtract_scalar(s).equals(a)


def test_absolute_and_apply():
    v = Vector3(-1.5, 2.25, -0.0)
    assert v.absolute() == Vector3(1.5, 2.25, 0.0)
    assert v.apply(math.floor) == Vector3(-2.0, 2.0, 0.0)
    clamp = lambda c: min(max(c, -1.0), 1.0)
    assert Vector3(-3.0, 0.5, 9.0).apply(clamp) == Vector3(-1.0, 0.5, 1.0)


@pytest.mark.parametrize("a,b", PAIRS)
def test_dot_is_symmetric(a, b):
    assert a.dot(b) == b.dot(a)


@pytest.mark.parametrize("a,b", PAIRS)
def test_cross_is_anticommutative_and_perpendicular(a, b):
    c = a.cross(b)
    assert c.equals(b.cross(a).multiply_scalar(-1))
    assert c.dot(a) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-9)


def test_cross_follows_right_hand_rule():
    x, y, z = Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1)
    assert x.cross(y) == z
    assert y.cross(z) == x
    assert z.cross(x) == y
    assert Vector3(1, 2, 3).cross(Vector3(2, 4, 6)) == Vector3()


def test_lengths():
    v = Vector3(2.0, 3.0, 6.0)
    assert v.sqr_length() == 49.0
    assert v.length() == 7.0
    assert Vector3().length() == 0.0


@pytest.mark.parametrize("a", SAMPLES[1:])
def test_normalize_gives_unit_length(a):
    assert a.normalize().length() == pytest.approx(1.0)


@pytest.mark.parametrize("a,b", PAIRS)
def test_distance_is_length_of_difference(a, b):
    assert a.distance(b) == a.subtract(b).length()
    assert a.distance(b) == pytest.approx(b.distance(a))


def test_distance_concrete():
    assert Vector3(1, 0, 0).distance(Vector3(0, 0, 0)) == 1


@pytest.mark.parametrize("a,b", PAIRS)
def test_lerp_endpoints(a, b):
    assert a.lerp(b, 0).equals(a)
    assert a.lerp(b, 1).equals(b)


def test_lerp_midpoint_and_extrapolation():
    a = Vector3(0.0, 0.0, 0.0)
    b = Vector3(2.0, -4.0, 8.0)
    assert a.lerp(b, 0.5) == Vector3(1.0, -2.0, 4.0)
    assert a.lerp(b, 2.0) == Vector3(4.0, -8.0, 16.0)
    assert a.lerp(b, -1.0) == Vector3(-2.0, 4.0, -8.0)


@pytest.mark.parametrize(
    "offset,expected",
    [
        (0.0, True),
        (0.009, True),
        (0.014, True),
        (0.016, False),
        (0.02, False),
        (1.0, False),
    ],
)
def test_equals_tolerance(offset, expected):
    assert Vector3(0, 0, 0).equals(Vector3(0, 0, offset)) is expected


@pytest.mark.parametrize("other", [None, "0 0 0", (0.0, 0.0, 0.0), 0, np.zeros(3)])
def test_equals_rejects_non_vectors(other):
    assert Vector3().equals(other) is False


def test_equals_is_false_for_nan():
    assert not Vector3(math.nan, 0, 0).equals(Vector3(math.nan, 0, 0))


def test_round_uses_every_component():
    assert Vector3(0.2, 7.6, -3.2).round() == Vector3(0.0, 8.0, -3.0)


def test_round_halves_go_up():
    assert Vector3(1.4, 2.5, -2.5).round() == Vector3(1.0, 3.0, -2.0)


def test_division_by_zero_scalar_propagates():
    v = Vector3(1.0, -1.0, 0.0).divide_scalar(0)
    assert v.x == math.inf
    assert v.y == -math.inf
    assert math.isnan(v.z)
    w = v.add(Vector3(1.0, 1.0, 1.0))
    assert w.x == math.inf and w.y == -math.inf and math.isnan(w.z)


def test_division_by_zero_component():
    v = Vector3(3.0, 4.0, 5.0).divide(Vector3(0.0, 2.0, 0.0))
    assert v.x == math.inf
    assert v.y == 2.0
    assert v.z == math.inf


def test_normalize_zero_vector_is_nan():
    n = Vector3().normalize()
    assert all(math.isnan(c) for c in n)


@pytest.mark.parametrize(
    "vec,text",
    [
        (Vector3(), "0 0 0"),
        (Vector3(1, 2.5, -0.125), "1 2.5 -0.125"),
        (Vector3(1 / 3, -2 / 3, 1e-9), "0.333333 -0.666667 0"),
        (Vector3(-1e-9, 0.1 + 0.2, 1e6), "0 0.3 1000000"),
        (Vector3(math.nan, math.inf, -math.inf), "NaN Infinity -Infinity"),
    ],
)
def test_to_str(vec, text):
    assert vec.to_str() == text
    assert str(vec) == text


def test_from_str_reads_to_str_output():
    v = Vector3(1.25, -3.5, 1 / 7)
    back = Vector3.from_str(v.to_str())
    assert back.x == 1.25 and back.y == -3.5
    assert back.z == pytest.approx(1 / 7, abs=1e-6)


@pytest.mark.parametrize("text", ["", "1 2", "1 2 3 4", "a b c"])
def test_from_str_rejects_malformed(text):
    with pytest.raises(ValueError):
        Vector3.from_str(text)


def test_array_interop():
    v = Vector3(1.0, 2.0, 3.0)
    np.testing.assert_array_equal(v.to_array(), [1.0, 2.0, 3.0])
    assert Vector3.from_array(np.array([4.0, 5.0, 6.0])) == Vector3(4.0, 5.0, 6.0)
    x, y, z = v
    assert (x, y, z) == (1.0, 2.0, 3.0)


def test_round_just_below_half_goes_down():
    below = 0.49999999999999994
    assert Vector3(below, -below, 2.0 + below).round() == Vector3(0.0, 0.0, 2.0)


def test_round_keeps_nan_and_inf():
    r = Vector3(math.nan, math.inf, -math.inf).round()
    assert math.isnan(r.x)
    assert r.y == math.inf and r.z == -math.inf
