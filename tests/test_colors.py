import pytest

from ourpaint.colors import (
    BLACK,
    WHITE,
    average_color,
    choose_frame_color,
    contrast_color,
    relative_luminance,
)


def uniform(color, width, height):
    return [[color] * width for _ in range(height)]


def test_average_of_uniform_image_is_its_color():
    assert average_color(uniform((12, 200, 77), 5, 4)) == (12, 200, 77)


def test_average_of_empty_image_is_none():
    assert average_color([]) is None
    assert average_color([[]]) is None


def test_average_rejects_ragged_rows():
    with pytest.raises(ValueError):
        average_color([[(0, 0, 0), (0, 0, 0)], [(0, 0, 0)]])


def test_average_samples_on_grid_for_large_images():
    sampled = (40, 80, 120)
    skipped = (250, 250, 250)
    rows = [
        [sampled if x % 2 == 0 and y % 2 == 0 else skipped for x in range(200)]
        for y in range(200)
    ]
    assert average_color(rows) == sampled


def test_average_lies_between_extremes():
    rows = [[(0, 0, 0), (255, 255, 255)], [(10, 20, 30), (100, 110, 120)]]
    result = average_color(rows)
    assert all(0 <= channel <= 255 for channel in result)


def test_luminance_bounds():
    assert relative_luminance(0, 0, 0) == 0.0
    assert relative_luminance(255, 255, 255) == pytest.approx(1.0)


def test_luminance_green_brighter_than_blue():
    assert relative_luminance(0, 255, 0) > relative_luminance(0, 0, 255)


def test_contrast_color_extremes():
    assert contrast_color(0, 0, 0) == WHITE
    assert contrast_color(255, 255, 255) == BLACK


def test_frame_color_for_dark_and_light_backgrounds():
    assert choose_frame_color(uniform((10, 10, 10), 3, 3)) == WHITE
    assert choose_frame_color(uniform((240, 240, 240), 3, 3)) == BLACK


def test_frame_color_for_empty_image_is_white():
    assert choose_frame_color([]) == WHITE


def test_frame_color_matches_contrast_of_average():
    rows = [[(30, 200, 60), (90, 10, 250)], [(0, 0, 0), (255, 128, 64)]]
    assert choose_frame_color(rows) == contrast_color(*average_color(rows))