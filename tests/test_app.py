import pytest

from fractview.app import main, usage


def test_usage_mentions_both_fractals():
    text = usage()
    assert "mandelbrot" in text
    assert "julia" in text


@pytest.mark.parametrize(
    "argv",
    [[], ["nothing"], ["julia", "3", "0"], ["mandelbrot", "extra"], ["julia", "0.1"]],
)
def test_bad_arguments_print_usage_and_fail(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == usage()