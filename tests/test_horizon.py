import pytest

from horizonkit.horizon import (
    MonoFramebuffer,
    bias_label,
    draw_center_marker,
    draw_horizon,
)


def _column(fb, x):
    return [fb.get_pixel(x, y) for y in range(fb.height)]


def _lit_count(fb, x):
    return sum(_column(fb, x))


def test_new_framebuffer_is_dark():
    fb = MonoFramebuffer(128, 64)
    assert not any(fb.get_pixel(x, y) for x in range(128) for y in range(64))


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        MonoFramebuffer(0, 64)


def test_set_get_and_clear():
    fb = MonoFramebuffer(8, 4)
    fb.set_pixel(3, 2, True)
    assert fb.get_pixel(3, 2) is True
    fb.set_pixel(3, 2, False)
    assert fb.get_pixel(3, 2) is False
    fb.set_pixel(1, 1, True)
    fb.clear()
    assert fb.get_pixel(1, 1) is False


def test_out_of_range_write_ignored_and_read_raises():
    fb = MonoFramebuffer(8, 4)
    fb.set_pixel(-1, 0, True)
    fb.set_pixel(8, 0, True)
    assert not any(fb.get_pixel(x, 0) for x in range(8))
    with pytest.raises(IndexError):
        fb.get_pixel(8, 0)


def test_level_horizon_splits_at_center():
    fb = MonoFramebuffer(128, 64)
    draw_horizon(fb, 0.0, 0.0)
    expected = [True] * 32 + [False] * 32
    columns = [[fb.get_pixel(x, y) for y in range(64)] for x in range(128)]
    assert columns == [expected] * 128


def test_pitch_moves_horizon_by_scale():
    fb = MonoFramebuffer(128, 64)
    draw_horizon(fb, 0.0, 5.0, pitch_scale=2.0)
    up = _lit_count(fb, 0)
    draw_horizon(fb, 0.0, -5.0, pitch_scale=2.0)
    down = _lit_count(fb, 0)
    assert up - down == 2 * 5 * 2


def test_extreme_pitch_fills_or_empties():
    fb = MonoFramebuffer(128, 64)
    draw_horizon(fb, 0.0, 1000.0)
    assert all(fb.get_pixel(x, y) for x in range(128) for y in range(64))
    draw_horizon(fb, 0.0, -1000.0)
    assert not any(fb.get_pixel(x, y) for x in range(128) for y in range(64))


def test_roll_tilts_monotonically():
    fb = MonoFramebuffer(128, 64)
    draw_horizon(fb, 30.0, 0.0)
    counts = [_lit_count(fb, x) for x in range(128)]
    assert counts == sorted(counts)
    assert counts[0] < counts[-1]
    assert counts[64] == 32


def test_roll_sign_mirrors():
    fb = MonoFramebuffer(128, 64)
    draw_horizon(fb, 20.0, 0.0)
    right = [_lit_count(fb, x) for x in range(128)]
    draw_horizon(fb, -20.0, 0.0)
    left = [_lit_count(fb, x) for x in range(128)]
    assert right[100] > 32 > left[100]


def test_center_marker_pixels():
    fb = MonoFramebuffer(128, 64)
    draw_center_marker(fb)
    assert fb.get_pixel(64, 32)
    assert fb.get_pixel(62, 32)
    assert fb.get_pixel(66, 32)
    assert not fb.get_pixel(63, 32)
    assert not fb.get_pixel(65, 32)


def test_bias_label_format():
    assert bias_label(0.0) == "Bias: 0.000"
    assert bias_label(0.12345).startswith("Bias: 0.12")


def test_bias_label_truncated_to_buffer():
    label = bias_label(1e40)
    assert len(label) == 31
    assert label.startswith("Bias: 1")