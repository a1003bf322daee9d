import math

import pytest

from partiview.matrix import Matrix4x4
from partiview.quaternion import Quaternion, slerp
from partiview.vector import Vector3, Vector4


def test_zero_axis_gives_identity():
    q = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 0.0), 1.0)
    assert q.q == Vector4(0.0, 0.0, 0.0, 1.0)


def test_from_axis_angle_is_unit():
    q = Quaternion.from_axis_angle(Vector3(1.0, 2.0, 3.0), 0.7)
    assert math.sqrt(sum(c * c for c in q.q)) == pytest.approx(1.0)


def test_axis_angle_round_trip():
    axis = Vector3(0.0, 3.0, 4.0)
    q = Quaternion.from_axis_angle(axis, 1.2)
    out_axis, angle = q.axis_angle()
    assert angle == pytest.approx(1.2)
    assert tuple(out_axis) == pytest.approx((0.0, 0.6, 0.8), abs=1e-9)


def test_axis_angle_of_identity():
    axis, angle = Quaternion(Vector4(0.0, 0.0, 0.0, 1.0)).axis_angle()
    assert angle == 0.0
    assert axis == Vector3(0.0, 0.0, 0.0)


def test_identity_quaternion_matrix():
    m = Quaternion(Vector4(0.0, 0.0, 0.0, 1.0)).to_matrix()
    assert m == Matrix4x4.identity()


def test_rotate_vector_matches_matrix():
    q = Quaternion.from_axis_angle(Vector3(1.0, -2.0, 0.5), 0.9)
    v = Vector3(0.3, 1.7, -2.2)
    rotated = q.rotate_vector(v)
    assert tuple(rotated) == pytest.approx(tuple(v * q.to_matrix()), abs=1e-9)


def test_rotation_preserves_length():
    q = Quaternion.from_axis_angle(Vector3(2.0, 1.0, -1.0), 2.1)
    v = Vector3(1.0, 2.0, 3.0)
    r = q.rotate_vector(v)
    assert math.sqrt(sum(c * c for c in r)) == pytest.approx(math.sqrt(14.0))


def test_matrix_is_orthonormal():
    q = Quaternion.from_axis_angle(Vector3(0.2, 0.4, 0.9), 1.3)
    m = q.to_matrix()
    assert m.determinant() == pytest.approx(1.0)
    product = m * m.transpose()
    assert product.elements() == pytest.approx(Matrix4x4.identity().elements(), abs=1e-9)


def test_full_turn_returns_vector():
    q = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), 2.0 * math.pi)
    rotated = q.rotate_vector(Vector3(1.0, 2.0, 3.0))
    assert tuple(rotated) == pytest.approx((1.0, 2.0, 3.0), abs=1e-9)


def test_multiplication_composes_rotations():
    q1 = Quaternion.from_axis_angle(Vector3(1.0, 0.0, 0.0), 0.4)
    q2 = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 1.0), 1.1)
    v = Vector3(-1.0, 0.5, 2.0)
    composed = (q1 * q2).rotate_vector(v)
    sequential = q1.rotate_vector(q2.rotate_vector(v))
    assert tuple(composed) == pytest.approx(tuple(sequential), abs=1e-9)


def test_same_axis_angles_add():
    axis = Vector3(0.0, 0.0, 1.0)
    q = Quaternion.from_axis_angle(axis, 0.3) * Quaternion.from_axis_angle(axis, 0.5)
    expected = Quaternion.from_axis_angle(axis, 0.8)
    assert tuple(q.q) == pytest.approx(tuple(expected.q), abs=1e-9)


def test_multiply_by_non_quaternion_raises():
    with pytest.raises(TypeError):
        Quaternion(Vector4(0.0, 0.0, 0.0, 1.0)) * 2


def test_normalized_unit_length():
    q = Quaternion(Vector4(1.0, 2.0, 2.0, 4.0)).normalized()
    assert math.sqrt(sum(c * c for c in q.q)) == pytest.approx(1.0)


def test_normalized_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion().normalized()


def test_slerp_endpoints():
    axis = Vector3(0.0, 0.0, 1.0)
    a = Quaternion.from_axis_angle(axis, 0.0)
    b = Quaternion.from_axis_angle(axis, math.pi / 2)
    start = slerp(a, b, 0.0)
    end = slerp(a, b, 1.0)
    assert tuple(start.q) == pytest.approx(tuple(a.q), abs=1e-9)
    assert tuple(end.q) == pytest.approx(tuple(b.q), abs=1e-9)


def test_slerp_midpoint_halves_angle():
    axis = Vector3(0.0, 0.0, 1.0)
    a = Quaternion.from_axis_angle(axis, 0.0)
    b = Quaternion.from_axis_angle(axis, math.pi / 2)
    mid = slerp(a, b, 0.5)
    expected = Quaternion.from_axis_angle(axis, math.pi / 4)
    assert tuple(mid.q) == pytest.approx(tuple(expected.q), abs=1e-9)


def test_slerp_takes_shorter_path():
    axis = Vector3(1.0, 0.0, 0.0)
    a = Quaternion.from_axis_angle(axis, 0.2)
    b = Quaternion.from_axis_angle(axis, 1.0)
    flipped = Quaternion(-b.q)
    via_flipped = slerp(a, flipped, 0.5)
    direct = slerp(a, b, 0.5)
    assert tuple(via_flipped.q) == pytest.approx(tuple(direct.q), abs=1e-9)


def test_slerp_close_inputs_stay_unit():
    axis = Vector3(0.0, 1.0, 0.0)
    a = Quaternion.from_axis_angle(axis, 0.1)
    b = Quaternion.from_axis_angle(axis, 0.1001)
    r = slerp(a, b, 0.5)
    assert math.sqrt(sum(c * c for c in r.q)) == pytest.approx(1.0)
    assert r.axis_angle()[1] == pytest.approx(0.10005, abs=1e-6)


def test_slerp_without_normalizing_unit_inputs():
    axis = Vector3(0.0, 0.0, 1.0)
    a = Quaternion.from_axis_angle(axis, 0.0)
    b = Quaternion.from_axis_angle(axis, 1.0)
    r = slerp(a, b, 0.25, True)
    assert r.axis_angle()[1] == pytest.approx(0.25)