import pytest

from fractol.equations import MAX_ITERATIONS
from fractol.render import (
    BLACK,
    HEIGHT,
    MAX_IMAGIN_AXIS,
    MAX_REAL_AXIS,
    MIN_IMAGIN_AXIS,
    MIN_REAL_AXIS,
    PINK,
    WIDTH,
    Fractal,
    FractalKind,
    Image,
    View,
    color_for,
    iterations_at,
    pixel_to_complex,
    render,
)


def test_default_view_uses_window_size():
    view = View()
    assert (view.width, view.height) == (WIDTH, HEIGHT)
    assert view.zoom == 1.0


def test_top_left_pixel_is_plane_corner():
    assert pixel_to_complex(0, 0, View()) == complex(MIN_REAL_AXIS, MIN_IMAGIN_AXIS)


def test_far_edge_maps_to_max_axes():
    view = View()
    point = pixel_to_complex(view.width, view.height, view)
    assert point == pytest.approx(complex(MAX_REAL_AXIS, MAX_IMAGIN_AXIS))


def test_centre_pixel_maps_to_origin():
    view = View()
    assert pixel_to_complex(view.width // 2, view.height // 2, view) == pytest.approx(0j)


def test_offsets_shift_the_mapping():
    base = pixel_to_complex(100, 200, View())
    shifted = pixel_to_complex(100, 200, View(real_offset=0.5, imag_offset=-0.25))
    assert shifted - base == pytest.approx(complex(0.5, -0.25))


def test_zoom_scales_distance_from_corner():
    corner = complex(MIN_REAL_AXIS, MIN_IMAGIN_AXIS)
    plain = pixel_to_complex(300, 150, View()) - corner
    zoomed = pixel_to_complex(300, 150, View(zoom=2.0)) - corner
    assert zoomed == pytest.approx(plain * 2)


def test_color_of_non_escaping_point_is_black():
    assert color_for(MAX_ITERATIONS) == BLACK
    assert color_for(MAX_ITERATIONS + 1) == BLACK


def test_color_of_zero_iterations_is_black_too():
    assert color_for(0) == 0


def test_color_of_one_iteration():
    assert color_for(1) == PINK * MAX_ITERATIONS


def test_colors_fit_in_32_bits():
    for iterations in range(MAX_ITERATIONS + 2):
        assert 0 <= color_for(iterations) <= 0xFFFFFFFF


def test_image_round_trip():
    image = Image(4, 3)
    image.put_pixel(3, 2, PINK)
    assert image.pixel(3, 2) == PINK
    assert image.pixel(0, 0) == 0


def test_image_truncates_to_32_bits():
    image = Image(1, 1)
    image.put_pixel(0, 0, (1 << 32) + 7)
    assert image.pixel(0, 0) == 7


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_image_rejects_out_of_range(x, y):
    image = Image(4, 3)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        image.pixel(x, y)


def test_image_rejects_empty_size():
    with pytest.raises(ValueError):
        Image(0, 5)


def test_fractal_name_follows_kind():
    assert Fractal(FractalKind.MANDELBROT).name == "mandelbrot"
    assert Fractal(FractalKind.JULIA, -0.8 + 0.156j).name == "julia"


def test_iterations_dispatch_by_kind():
    assert iterations_at(Fractal(FractalKind.MANDELBROT), 0j) == MAX_ITERATIONS + 1
    assert iterations_at(Fractal(FractalKind.JULIA, 0j), 0j) == MAX_ITERATIONS


def test_render_produces_image_of_view_size():
    view = View(width=8, height=6)
    image = render(Fractal(FractalKind.MANDELBROT), view)
    assert (image.width, image.height) == (8, 6)


def test_render_centre_of_mandelbrot_is_black():
    view = View(width=8, height=6)
    image = render(Fractal(FractalKind.MANDELBROT), view)
    assert image.pixel(4, 3) == BLACK


def test_render_pixels_match_color_of_mapped_point():
    fractal = Fractal(FractalKind.JULIA, -0.4 + 0.6j)
    view = View(width=10, height=7, zoom=0.8)
    image = render(fractal, view)
    for y in range(view.height):
        for x in range(view.width):
            expected = color_for(iterations_at(fractal, pixel_to_complex(x, y, view)))
            assert image.pixel(x, y) == expected