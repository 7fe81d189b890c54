import pytest

from vectorpaint.clipping import clip_image, clip_line, clip_rect

BOX = (0.0, 0.0, 10.0, 10.0)


def test_line_inside_unchanged():
    assert clip_line(1.0, 2.0, 3.0, 4.0, *BOX) == (1.0, 2.0, 3.0, 4.0)


def test_line_outside_same_side_rejected():
    assert clip_line(-5.0, 1.0, -1.0, 9.0, *BOX) is None
    assert clip_line(1.0, 11.0, 9.0, 20.0, *BOX) is None


def test_line_missing_corner_rejected():
    assert clip_line(-10.0, 5.0, 5.0, -10.0, *BOX) is None


def test_horizontal_line_clipped_to_both_edges():
    assert clip_line(-5.0, 5.0, 15.0, 5.0, *BOX) == (0.0, 5.0, 10.0, 5.0)


@pytest.mark.parametrize(
    "line",
    [(-5.0, -3.0, 14.0, 12.0), (12.0, -2.0, -3.0, 8.0), (5.0, 5.0, 5.0, 30.0)],
)
def test_clipped_line_endpoints_inside_box(line):
    result = clip_line(*line, *BOX)
    x1, y1, x2, y2 = result
    for x, y in ((x1, y1), (x2, y2)):
        assert -1e-9 <= x <= 10.0 + 1e-9
        assert -1e-9 <= y <= 10.0 + 1e-9


def test_clipped_line_stays_on_original_line():
    x1, y1, x2, y2 = -5.0, -3.0, 14.0, 12.0
    cx1, cy1, cx2, cy2 = clip_line(x1, y1, x2, y2, *BOX)
    for px, py in ((cx1, cy1), (cx2, cy2)):
        cross = (x2 - x1) * (py - y1) - (y2 - y1) * (px - x1)
        assert cross == pytest.approx(0.0, abs=1e-9)


def test_rect_inside_unchanged():
    assert clip_rect(2.0, 3.0, 4.0, 5.0, *BOX) == (2.0, 3.0, 4.0, 5.0)


def test_rect_overlap_is_symmetric():
    a = (5.0, 5.0, 10.0, 10.0)
    assert clip_rect(*a, *BOX) == clip_rect(*BOX, *a) == (5.0, 5.0, 5.0, 5.0)


def test_rect_disjoint_or_touching_rejected():
    assert clip_rect(20.0, 20.0, 5.0, 5.0, *BOX) is None
    assert clip_rect(10.0, 0.0, 5.0, 5.0, *BOX) is None
    assert clip_rect(0.0, 10.0, 5.0, 5.0, *BOX) is None


def test_image_inside_keeps_uv():
    uv = (0.1, 0.2, 0.9, 0.8)
    assert clip_image(1.0, 1.0, 5.0, 5.0, *BOX, uv) == (1.0, 1.0, 5.0, 5.0, uv)


def test_image_half_clipped_uv():
    result = clip_image(0.0, 0.0, 10.0, 10.0, 5.0, 0.0, 10.0, 10.0, (0.0, 0.0, 1.0, 1.0))
    x, y, w, h, uv = result
    assert (x, y, w, h) == (5.0, 0.0, 5.0, 10.0)
    assert uv == pytest.approx((0.5, 0.0, 1.0, 1.0))


def test_image_disjoint_rejected():
    assert clip_image(20.0, 20.0, 5.0, 5.0, *BOX, (0.0, 0.0, 1.0, 1.0)) is None