import math

import pytest

from raycaster.vectors import Vec2


def test_add_then_sub_round_trip():
    a = Vec2(1.5, -2.25)
    b = Vec2(3.0, 4.5)
    assert tuple((a + b) - b) == pytest.approx(tuple(a))


def test_add_is_commutative():
    a = Vec2(1.0, 2.0)
    b = Vec2(-7.0, 0.5)
    assert a + b == b + a


def test_scale_matches_multiplication():
    v = Vec2(2.0, -3.0)
    assert v.scale(2.5) == v * 2.5
    assert 2.5 * v == v * 2.5


def test_multiplying_by_vector_is_rejected():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) * Vec2(1.0, 1.0)


def test_dot_with_self_is_length_squared():
    v = Vec2(3.0, 4.0)
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_cross_is_antisymmetric():
    a = Vec2(1.0, 2.0)
    b = Vec2(-3.0, 5.0)
    assert a.cross(b) == pytest.approx(-b.cross(a))
    assert a.cross(a) == 0.0


def test_normalize_gives_unit_length():
    v = Vec2(-6.0, 8.0).normalize()
    assert v.length() == pytest.approx(1.0)


def test_normalize_zero_vector_stays_zero():
    assert Vec2(0.0, 0.0).normalize() == Vec2(0.0, 0.0)


def test_distance_is_symmetric():
    a = Vec2(1.0, 1.0)
    b = Vec2(4.0, -3.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((a - b).length())


def test_rotate_quarter_turn():
    assert tuple(Vec2(1.0, 0.0).rotate(math.pi / 2)) == pytest.approx((0.0, 1.0), abs=1e-12)


def test_rotate_preserves_length_and_inverts():
    v = Vec2(2.0, -1.0)
    r = v.rotate(0.7)
    assert r.length() == pytest.approx(v.length())
    assert tuple(r.rotate(-0.7)) == pytest.approx(tuple(v))


def test_reciprocal_of_zero_component_is_far():
    r = Vec2(0.0, 0.0).reciprocal()
    assert r == Vec2(1e30, 1e30)


def test_reciprocal_is_absolute():
    v = Vec2(-2.0, 4.0)
    r = v.reciprocal()
    assert r.x * abs(v.x) == pytest.approx(1.0)
    assert r.y * abs(v.y) == pytest.approx(1.0)
    assert r.x > 0 and r.y > 0