from fractview.fractal import (
    DEFAULT_ITERATIONS,
    ESCAPE_VALUE,
    Fractal,
    FractalKind,
)


def test_defaults():
    fractal = Fractal(FractalKind.MANDELBROT)
    assert fractal.iterations == 42
    assert fractal.escape_value == 4
    assert fractal.zoom == 1.0
    assert (fractal.shift_x, fractal.shift_y) == (0.0, 0.0)


def test_name_follows_kind():
    assert Fractal(FractalKind.JULIA).name == "julia"
    assert Fractal(FractalKind.MANDELBROT).name == "mandelbrot"


def test_reset_restores_defaults():
    fractal = Fractal(FractalKind.JULIA, julia=complex(0.25, -0.5))
    fractal.zoom = 3.5
    fractal.shift_x = 1.0
    fractal.shift_y = -1.0
    fractal.iterations = 7
    fractal.escape_value = 9.0
    fractal.reset()
    assert fractal.zoom == 1.0
    assert (fractal.shift_x, fractal.shift_y) == (0.0, 0.0)
    assert fractal.iterations == DEFAULT_ITERATIONS
    assert fractal.escape_value == ESCAPE_VALUE
    assert fractal.julia == complex(0.25, -0.5)


def test_seed_mandelbrot_uses_point():
    z = complex(0.3, -1.2)
    assert Fractal(FractalKind.MANDELBROT).seed(z) == z


def test_seed_julia_uses_constant():
    constant = complex(-0.8, 0.156)
    assert Fractal(FractalKind.JULIA, julia=constant).seed(complex(1.0, 1.0)) == constant