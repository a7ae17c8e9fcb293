import pytest

from fractview.events import Key, MouseButton, handle_key, handle_mouse
from fractview.fractal import Fractal, FractalKind


@pytest.fixture
def fractal():
    return Fractal(FractalKind.MANDELBROT)


def test_escape_closes(fractal):
    assert handle_key(fractal, Key.ESCAPE) is False


def test_other_keys_keep_running(fractal):
    assert handle_key(fractal, Key.LEFT) is True
    assert handle_key(fractal, 0x61) is True


def test_left_pans_half_zoom(fractal):
    handle_key(fractal, Key.LEFT)
    assert fractal.shift_x == -0.5


def test_up_pans_half_zoom(fractal):
    handle_key(fractal, Key.UP)
    assert fractal.shift_y == 0.5


def test_opposite_pans_cancel(fractal):
    handle_key(fractal, Key.RIGHT)
    handle_key(fractal, Key.LEFT)
    handle_key(fractal, Key.DOWN)
    handle_key(fractal, Key.UP)
    assert (fractal.shift_x, fractal.shift_y) == (0.0, 0.0)


def test_pan_scales_with_zoom(fractal):
    handle_key(fractal, Key.RIGHT)
    single = fractal.shift_x
    fractal.shift_x = 0.0
    fractal.zoom = 2.0
    handle_key(fractal, Key.RIGHT)
    assert fractal.shift_x == 2 * single


def test_shift_keys_change_iterations(fractal):
    before = fractal.iterations
    handle_key(fractal, Key.SHIFT_R)
    assert fractal.iterations == before + 10
    handle_key(fractal, Key.SHIFT_L)
    handle_key(fractal, Key.SHIFT_L)
    assert fractal.iterations == before - 10


def test_unknown_key_changes_nothing(fractal):
    handle_key(fractal, 0x61)
    assert fractal == Fractal(FractalKind.MANDELBROT)


def test_wheel_down_zooms_out(fractal):
    handle_mouse(fractal, MouseButton.WHEEL_DOWN)
    assert fractal.zoom == pytest.approx(1.10)


def test_wheel_up_zooms_in(fractal):
    handle_mouse(fractal, MouseButton.WHEEL_UP)
    assert fractal.zoom == pytest.approx(0.90)


def test_other_button_keeps_zoom(fractal):
    handle_mouse(fractal, 1)
    assert fractal.zoom == 1.0