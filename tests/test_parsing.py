import pytest

from fractview.complexmath import atodbl
from fractview.fractal import FractalKind
from fractview.parsing import UsageError, inside_limits, is_number, julia_error, parse_args


@pytest.mark.parametrize("text", ["1.5", "-1", "0", "-0.285", "2", "1-2"])
def test_is_number_accepts(text):
    assert is_number(text) is True


@pytest.mark.parametrize("text", ["", "-", "1-", "1..2", "1.2.3", "--1", "abc", "1a", "+1", " 1"])
def test_is_number_rejects(text):
    assert is_number(text) is False


@pytest.mark.parametrize("text", ["2", "-2", "0", "1.999", "-0.5"])
def test_inside_limits_accepts(text):
    assert inside_limits(text) is True


@pytest.mark.parametrize("text", ["2.01", "-3", "10", "-2.5"])
def test_inside_limits_rejects(text):
    assert inside_limits(text) is False


def test_julia_error_ok():
    assert julia_error("0.285", "0.01") is False


@pytest.mark.parametrize("real, imag", [("3", "0"), ("a", "0"), ("0", "-"), ("0", "1..0")])
def test_julia_error_bad(real, imag):
    assert julia_error(real, imag) is True


def test_parse_mandelbrot():
    fractal = parse_args(["mandelbrot"])
    assert fractal.kind is FractalKind.MANDELBROT


def test_parse_julia():
    fractal = parse_args(["julia", "-0.8", "0.156"])
    assert fractal.kind is FractalKind.JULIA
    assert fractal.julia == complex(atodbl("-0.8"), atodbl("0.156"))


@pytest.mark.parametrize(
    "args",
    [[], ["Mandelbrot"], ["mandelbrot", "x"], ["julia"], ["julia", "5", "0"], ["julia", "0", "x"],
     ["julia", "0", "0", "0"], ["other"]],
)
def test_parse_rejects(args):
    with pytest.raises(UsageError):
        parse_args(args)