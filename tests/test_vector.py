import math

import pytest

from partiview.vector import (
    Vector2,
    Vector3,
    Vector4,
    clamp,
    cross,
    dot,
    length,
    lerp,
    max3,
    min3,
    normalize,
    smooth_step,
    vabs,
    vceil,
    vfloor,
    vmax,
    vmin,
)

A3 = Vector3(1.5, -2.0, 3.25)
B3 = Vector3(-0.5, 4.0, 2.0)


def test_default_is_zero():
    assert Vector3() == Vector3(0, 0, 0)
    assert tuple(Vector4()) == (0, 0, 0, 0)


def test_indexing_and_iteration():
    v = Vector4(1.0, 2.0, 3.0, 4.0)
    assert [v[i] for i in range(len(v))] == list(v)
    assert v[3] == v.w
    assert len(Vector2()) == 2


def test_addition_round_trip():
    assert (A3 + B3) - B3 == A3
    assert A3 + B3 == B3 + A3


def test_negation_cancels():
    assert A3 + (-A3) == Vector3()


def test_scalar_multiplication_and_division():
    assert A3 * 2 == A3 + A3
    assert 2 * A3 == A3 * 2
    assert (A3 / 4) * 4 == A3


def test_componentwise_multiplication_and_division():
    product = A3 * B3
    assert list(product) == [a * b for a, b in zip(A3, B3)]
    assert list(product / B3) == pytest.approx(list(A3))


def test_mixed_sizes_rejected():
    with pytest.raises(TypeError):
        Vector2(1, 2) + Vector3(1, 2, 3)
    with pytest.raises(TypeError):
        dot(Vector2(1, 2), Vector3(1, 2, 3))


def test_vectors_are_immutable():
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert v == Vector3(1.0, 2.0, 3.0)


def test_swizzles():
    assert Vector3(1, 2, 3).xy() == Vector2(1, 2)
    assert Vector4(1, 2, 3, 4).xyz() == Vector3(1, 2, 3)


def test_dot_and_length():
    assert length(A3) ** 2 == pytest.approx(dot(A3, A3))
    assert length(Vector3(3, 4, 0)) == pytest.approx(5.0)


def test_normalize_gives_unit_length():
    for v in (A3, B3, Vector2(0.1, -7.0), Vector4(1, 2, 3, 4)):
        n = normalize(v)
        assert length(n) == pytest.approx(1.0)
        assert dot(n, v) == pytest.approx(length(v))


def test_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(Vector3())


def test_cross_unit_axes():
    assert cross(Vector3(1, 0, 0), Vector3(0, 1, 0)) == Vector3(0, 0, 1)


def test_cross_invariants():
    c = cross(A3, B3)
    assert dot(c, A3) == pytest.approx(0.0, abs=1e-9)
    assert dot(c, B3) == pytest.approx(0.0, abs=1e-9)
    assert cross(B3, A3) == -c
    assert cross(A3, A3) == Vector3()


def test_cross_requires_vector3():
    with pytest.raises(TypeError):
        cross(Vector2(1, 0), Vector2(0, 1))


def test_min_max():
    lo, hi = vmin(A3, B3), vmax(A3, B3)
    for a, b, l, h in zip(A3, B3, lo, hi):
        assert l == min(a, b)
        assert h == max(a, b)


def test_abs():
    assert vabs(-A3) == vabs(A3)
    assert all(c >= 0 for c in vabs(A3))
    assert vabs(B3) + vabs(-B3) == vabs(B3) * 2


def test_floor_and_ceil():
    v = Vector3(1.25, -2.5, 3.0)
    f, c = vfloor(v), vceil(v)
    for orig, lo, hi in zip(v, f, c):
        assert lo <= orig <= hi
        assert lo == math.floor(orig)
        assert hi == math.ceil(orig)
        assert isinstance(lo, float)


def test_clamp_scalar():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_clamp_vector():
    low, high = Vector3(-1, -1, -1), Vector3(1, 1, 1)
    result = clamp(A3, low, high)
    assert all(-1 <= c <= 1 for c in result)
    assert clamp(Vector3(0.5, 0, -0.5), low, high) == Vector3(0.5, 0, -0.5)


def test_lerp_endpoints():
    assert lerp(A3, B3, 0.0) == A3
    assert lerp(A3, B3, 1.0) == B3
    mid = lerp(A3, B3, 0.5)
    assert length(mid - A3) == pytest.approx(length(B3 - mid))


def test_smooth_step():
    assert smooth_step(0.0, 1.0, -3.0) == 0.0
    assert smooth_step(0.0, 1.0, 7.0) == 1.0
    assert smooth_step(2.0, 4.0, 3.0) == pytest.approx(0.5)


def test_max3_min3():
    assert max3(1, 7, 3) == 7
    assert min3(4, 2, 9) == 2