import math

import pytest

from vectorpaint.units import Point, Rect, Size, Transform2D


def _approx_point(p):
    return pytest.approx((p.x, p.y), abs=1e-9)


def test_identity_leaves_point_unchanged():
    p = Point(3.5, -7.25)
    assert Transform2D.identity().transform_point(p) == p


def test_then_translate_moves_point():
    t = Transform2D.identity().then_translate(4.0, 6.0)
    assert t.transform_point(Point(1.0, 2.0)) == Point(1.0 + 4.0, 2.0 + 6.0)


def test_pre_rotate_quarter_turn():
    t = Transform2D.identity().pre_rotate(math.pi / 2)
    result = t.transform_point(Point(1.0, 0.0))
    assert (result.x, result.y) == pytest.approx((0.0, 1.0), abs=1e-12)


def test_pre_translate_applies_before_rotation():
    rot = Transform2D.identity().pre_rotate(math.pi / 2)
    pre = rot.pre_translate(1.0, 0.0)
    post = rot.then_translate(1.0, 0.0)
    origin = Point(0.0, 0.0)
    # pre-translation is rotated, post-translation is not
    assert (pre.transform_point(origin).x, pre.transform_point(origin).y) == \
        _approx_point(rot.transform_point(Point(1.0, 0.0)))
    assert post.transform_point(origin) == Point(1.0, 0.0)


def test_then_composes_in_order():
    a = Transform2D.identity().pre_rotate(0.3)
    b = Transform2D.identity().then_translate(2.0, -1.0)
    p = Point(5.0, 7.0)
    composed = a.then(b).transform_point(p)
    stepwise = b.transform_point(a.transform_point(p))
    assert (composed.x, composed.y) == _approx_point(stepwise)


def test_inverse_round_trip():
    t = Transform2D.identity().pre_rotate(1.1).then_translate(3.0, 9.0)
    inv = t.inverse()
    p = Point(-2.0, 11.0)
    back = inv.transform_point(t.transform_point(p))
    assert (back.x, back.y) == _approx_point(p)


def test_inverse_of_singular_is_none():
    assert Transform2D(0.0, 0.0, 0.0, 0.0, 1.0, 1.0).inverse() is None


def test_rect_intersection_overlap():
    a = Rect(Point(0.0, 0.0), Size(10.0, 10.0))
    b = Rect(Point(5.0, 2.0), Size(10.0, 4.0))
    assert a.intersection(b) == Rect(Point(5.0, 2.0), Size(5.0, 4.0))
    assert b.intersection(a) == a.intersection(b)


def test_rect_intersection_disjoint_and_touching():
    a = Rect(Point(0.0, 0.0), Size(10.0, 10.0))
    assert a.intersection(Rect(Point(20.0, 20.0), Size(1.0, 1.0))) is None
    assert a.intersection(Rect(Point(10.0, 0.0), Size(5.0, 5.0))) is None


def test_rect_intersection_with_itself():
    a = Rect(Point(1.0, 2.0), Size(3.0, 4.0))
    assert a.intersection(a) == a