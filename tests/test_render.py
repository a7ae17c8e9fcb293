from fractview.fractal import BLACK, BLUE1, PALETTE, Fractal, FractalKind
from fractview.render import pixel_color, render


def test_corner_escapes_first_step():
    assert pixel_color(0, 0, Fractal(FractalKind.MANDELBROT)) == BLUE1


def test_origin_stays_black():
    assert pixel_color(750, 750, Fractal(FractalKind.MANDELBROT)) == BLACK


def test_zero_iterations_is_black():
    fractal = Fractal(FractalKind.JULIA, julia=complex(1.5, 1.5))
    fractal.iterations = 0
    image = render(fractal, 8, 8)
    assert {image.get_pixel(x, y) for x in range(8) for y in range(8)} == {BLACK}


def test_colors_come_from_palette():
    image = render(Fractal(FractalKind.MANDELBROT), 16, 16)
    values = {image.get_pixel(x, y) for x in range(16) for y in range(16)}
    assert values <= set(PALETTE) | {BLACK}
    assert len(values) > 1


def test_render_matches_pixel_color_mandelbrot():
    fractal = Fractal(FractalKind.MANDELBROT)
    fractal.zoom = 0.8
    fractal.shift_x = -0.4
    image = render(fractal, 24, 20)
    assert (image.width, image.height) == (24, 20)
    for y in range(20):
        for x in range(24):
            assert image.get_pixel(x, y) == pixel_color(x, y, fractal, 24, 20)


def test_render_matches_pixel_color_julia():
    fractal = Fractal(FractalKind.JULIA, julia=complex(-0.8, 0.156))
    image = render(fractal, 20, 20)
    for y in range(20):
        for x in range(20):
            assert image.get_pixel(x, y) == pixel_color(x, y, fractal, 20, 20)