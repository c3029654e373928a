# fractol

Computes images of the Mandelbrot set and of Julia sets. Each pixel of an
image (800×600 by default) is mapped onto the complex plane (real axis −2 to
2, imaginary axis −1.5 to 1.5, shifted and scaled by the current view) and
coloured by how many steps of `z = z² + c` it takes to escape a radius of 2,
up to 50 iterations. Points that never escape are black.

## Installing

```
pip install .
```

There are no runtime dependencies.

## Usage

```python
from fractol.equations import mandelbrot_iterations, julia_iterations
from fractol.render import Fractal, FractalKind, View, render, color_for, pixel_to_complex

print(mandelbrot_iterations(0j))          # never escapes: 51
print(julia_iterations(0j, complex(2, 0)))  # escapes after 2 steps
print(color_for(50))                      # 0 (black)

view = View(width=80, height=60)
image = render(Fractal(FractalKind.JULIA, julia_c=complex(-0.8, 0.156)), view)
print(hex(image.pixel(0, 0)))

print(pixel_to_complex(0, 0, View()))     # (-2-1.5j)
```

- `fractol.equations`: `square`, `quadratic_step`, `mandelbrot_iterations`,
  `julia_iterations`.
- `fractol.render`: `FractalKind`, `Fractal`, `View` (pan offsets `real_offset`
  and `imag_offset`, `zoom`, `width`, `height`), `Image` (`put_pixel`, `pixel`;
  32-bit values), `pixel_to_complex`, `color_for`, `iterations_at`, `render`.
- `fractol.numbers.parse_float`: a lenient parser for a leading
  `[+-]digits[.digits]` prefix; it never raises and stops at the first
  character it does not understand.

The package also carries small utility modules:

- `fractol.libft.text`, `fractol.libft.chars`, `fractol.libft.memory`,
  `fractol.libft.lists` and `fractol.libft.output`: string, character,
  byte-buffer, linked-list (`LinkedList`) and `printf`-style formatting
  (`format`, `printf`) helpers.
- `fractol.mlx.colornames`: the X11 colour name table (`lookup("red")` gives
  `0xff0000`, `lookup("none")` gives `-1`).
- `fractol.mlx.xpm`: a parser for XPM images (`parse_xpm_text`,
  `parse_xpm_data`, returning an `XpmImage`; malformed data raises `XpmError`).

## What it does not do

The package has no command-line program and opens no window. It does not
display the images it renders, and there is no interactive panning or zooming
by keyboard or mouse; to move or zoom, change the fields of a `View` and call
`render` again. Getting an `Image` onto the screen or into a file is left to
the caller.

## Tests

```
pip install .[test]
pytest
```