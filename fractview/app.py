"""Command entry point: parse arguments and show the fractal in a window."""

from __future__ import annotations

import sys

import numpy as np

from fractview.events import Key, handle_key, handle_mouse
from fractview.fractal import HEIGHT, WIDTH, Fractal
from fractview.parsing import UsageError, parse_args
from fractview.render import render

_USAGE = (
    "     Incorrect fractal name\n"
    "     try ./fractol mandelbrot\n"
    "     or ./fractol julia real i\n"
    "     were real and im are number -2<+2\n"
    "     with decimals separated by a .\n"
)


def usage() -> str:
    """Return the help text printed for a bad command line."""
    return _USAGE


def _draw(pygame, screen, fractal: Fractal) -> None:
    pixels = render(fractal, WIDTH, HEIGHT).as_array()
    rgb = np.dstack(((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF))
    surface = pygame.surfarray.make_surface(rgb.astype(np.uint8).swapaxes(0, 1))
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def run(fractal: Fractal) -> None:
    """Open a window on ``fractal`` and react to input until it is closed."""
    import pygame

    keys = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LSHIFT: Key.SHIFT_L,
        pygame.K_RSHIFT: Key.SHIFT_R,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(fractal.name)
        _draw(pygame, screen, fractal)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                if not handle_key(fractal, keys.get(event.key, event.key)):
                    return
                _draw(pygame, screen, fractal)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                handle_mouse(fractal, event.button)
                _draw(pygame, screen, fractal)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Run the viewer; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        fractal = parse_args(args)
    except UsageError:
        sys.stdout.write(usage())
        return 1
    run(fractal)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())