import pytest

from pixeltint.geometry import Rect, best_fit_rect, map_point_to_image

CASES = [
    (200, 100, 400, 400),
    (100, 200, 400, 400),
    (640, 480, 780, 470),
    (1, 1, 780, 470),
    (1920, 1080, 300, 900),
    (33, 77, 1000, 10),
]


def test_rect_properties():
    rect = Rect(10, 20, 110, 70)
    assert rect.width == 100
    assert rect.height == 50
    assert rect.contains(10, 20)
    assert not rect.contains(110, 20)
    assert not rect.contains(10, 70)


def test_best_fit_worked_example():
    assert best_fit_rect(200, 100, 400, 400) == Rect(0, 100, 400, 300)


def test_best_fit_same_aspect_fills_window():
    assert best_fit_rect(100, 50, 200, 100) == Rect(0, 0, 200, 100)


@pytest.mark.parametrize("case", CASES)
def test_best_fit_stays_in_window_and_touches_an_edge(case):
    image_w, image_h, window_w, window_h = case
    rect = best_fit_rect(*case)
    assert 0 <= rect.left <= rect.right <= window_w
    assert 0 <= rect.top <= rect.bottom <= window_h
    assert rect.width == window_w or rect.height == window_h


@pytest.mark.parametrize("case", CASES)
def test_best_fit_is_centred(case):
    _, _, window_w, window_h = case
    rect = best_fit_rect(*case)
    assert abs(rect.left - (window_w - rect.right)) <= 1
    assert abs(rect.top - (window_h - rect.bottom)) <= 1


@pytest.mark.parametrize("case", CASES[:3])
def test_best_fit_keeps_aspect(case):
    image_w, image_h, _, _ = case
    rect = best_fit_rect(*case)
    assert rect.width / rect.height == pytest.approx(image_w / image_h, rel=0.02)


@pytest.mark.parametrize("bad", [(0, 10, 10, 10), (10, 0, 10, 10), (10, 10, -1, 10), (10, 10, 10, 0)])
def test_best_fit_rejects_non_positive(bad):
    with pytest.raises(ValueError):
        best_fit_rect(*bad)


def test_map_point_top_left_corner():
    rect = best_fit_rect(200, 100, 400, 400)
    assert map_point_to_image(rect.left, rect.top, 200, 100, 400, 400) == (0, 0)


def test_map_point_outside_is_none():
    rect = best_fit_rect(200, 100, 400, 400)
    assert map_point_to_image(0, rect.top - 1, 200, 100, 400, 400) is None
    assert map_point_to_image(0, rect.bottom, 200, 100, 400, 400) is None
    assert map_point_to_image(rect.right, rect.top, 200, 100, 400, 400) is None


@pytest.mark.parametrize("case", CASES)
def test_map_point_bottom_right_stays_in_image(case):
    image_w, image_h, _, _ = case
    rect = best_fit_rect(*case)
    if rect.width == 0 or rect.height == 0:
        assert map_point_to_image(rect.left, rect.top, *case) is None
    else:
        image_x, image_y = map_point_to_image(rect.right - 1, rect.bottom - 1, *case)
        assert 0 <= image_x < image_w
        assert 0 <= image_y < image_h


def test_map_point_scales_identity_when_sizes_match():
    assert map_point_to_image(37, 12, 100, 50, 100, 50) == (37, 12)