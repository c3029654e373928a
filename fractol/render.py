"""Mapping pixels to the complex plane and drawing fractals into an image."""

from __future__ import annotations

import enum
from array import array
from dataclasses import dataclass

from fractol.equations import MAX_ITERATIONS, julia_iterations, mandelbrot_iterations

WIDTH = 800
HEIGHT = 600
MIN_REAL_AXIS = -2.0
MAX_REAL_AXIS = 2.0
MIN_IMAGIN_AXIS = -1.5
MAX_IMAGIN_AXIS = 1.5
DEFAULT_ZOOM_LEVEL = 1.0
PINK = 0xFF00FF
BLACK = 0x000000

_PIXEL_MASK = 0xFFFFFFFF


class FractalKind(enum.Enum):
    """The fractal families that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


@dataclass(frozen=True)
class Fractal:
    """A fractal to draw; ``julia_c`` is the constant used for Julia sets."""

    kind: FractalKind
    julia_c: complex = 0j

    @property
    def name(self) -> str:
        return self.kind.value


@dataclass
class View:
    """Current pan offsets, zoom factor and image size."""

    real_offset: float = 0.0
    imag_offset: float = 0.0
    zoom: float = DEFAULT_ZOOM_LEVEL
    width: int = WIDTH
    height: int = HEIGHT


class Image:
    """A 32-bit-per-pixel image buffer."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = array("L", bytes(array("L").itemsize * width * height))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store *color*, truncated to 32 bits, at (x, y)."""
        self._pixels[self._index(x, y)] = color & _PIXEL_MASK

    def pixel(self, x: int, y: int) -> int:
        """Return the color stored at (x, y)."""
        return self._pixels[self._index(x, y)]


def pixel_to_complex(x: int, y: int, view: View) -> complex:
    """Map screen coordinates to a point of the complex plane."""
    real_range = (MAX_REAL_AXIS - MIN_REAL_AXIS) * view.zoom
    imag_range = (MAX_IMAGIN_AXIS - MIN_IMAGIN_AXIS) * view.zoom
    real = MIN_REAL_AXIS + view.real_offset + (x / float(view.width)) * real_range
    imag = MIN_IMAGIN_AXIS + view.imag_offset + (y / float(view.height)) * imag_range
    return complex(real, imag)


def color_for(iterations: int) -> int:
    """Color for an escape count; points that never escape are black.

    The product wraps to 32 bits, as the pixel store does.
    """
    if iterations >= MAX_ITERATIONS:
        return BLACK
    return (PINK * iterations * MAX_ITERATIONS) & _PIXEL_MASK


def iterations_at(fractal: Fractal, point: complex) -> int:
    """Escape count of *point* for the given fractal."""
    if fractal.kind is FractalKind.MANDELBROT:
        return mandelbrot_iterations(point)
    if fractal.kind is FractalKind.JULIA:
        return julia_iterations(point, fractal.julia_c)
    return 0


def render(fractal: Fractal, view: View) -> Image:
    """Draw *fractal* as seen through *view* into a new image."""
    image = Image(view.width, view.height)
    for y in range(view.height):
        for x in range(view.width):
            point = pixel_to_complex(x, y, view)
            image.put_pixel(x, y, color_for(iterations_at(fractal, point)))
    return image