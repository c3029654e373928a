import pytest

from fractol.equations import (
    MAX_ITERATIONS,
    julia_iterations,
    mandelbrot_iterations,
    quadratic_step,
    square,
)


@pytest.mark.parametrize("z", [0j, 1 + 0j, 1j, 0.5 - 0.25j, -1.5 + 2j])
def test_square_matches_complex_product(z):
    assert square(z) == pytest.approx(z * z)


@pytest.mark.parametrize(
    "z, c", [(0j, 1 + 1j), (1j, -1 + 0j), (0.3 + 0.4j, -0.8 + 0.156j)]
)
def test_quadratic_step_adds_constant(z, c):
    assert quadratic_step(z, c) == pytest.approx(z * z + c)


def test_imaginary_unit_squares_to_minus_one():
    assert square(1j) == -1 + 0j


def test_mandelbrot_bounded_point_exceeds_limit():
    assert mandelbrot_iterations(0j) == MAX_ITERATIONS + 1
    assert mandelbrot_iterations(-1 + 0j) == MAX_ITERATIONS + 1


def test_mandelbrot_far_point_escapes_after_one_step():
    assert mandelbrot_iterations(3 + 0j) == 1


def test_mandelbrot_count_never_exceeds_limit_plus_one():
    for c in (0.25 + 0j, 0.3 + 0.5j, -2 + 0j, 1 + 1j, -0.75 + 0.1j):
        count = mandelbrot_iterations(c)
        assert 1 <= count <= MAX_ITERATIONS + 1


def test_mandelbrot_is_symmetric_about_real_axis():
    for c in (0.3 + 0.5j, -0.75 + 0.1j, 0.4 + 0.3j):
        assert mandelbrot_iterations(c) == mandelbrot_iterations(c.conjugate())


def test_julia_bounded_point_stops_at_limit():
    assert julia_iterations(0j, 0j) == MAX_ITERATIONS


def test_julia_far_point_escapes_immediately():
    assert julia_iterations(3 + 0j, 0j) == 1


def test_julia_count_within_bounds():
    c = -0.8 + 0.156j
    for z in (0j, 0.5 + 0.5j, -1 + 0.2j, 1.9 + 0j):
        count = julia_iterations(z, c)
        assert 1 <= count <= MAX_ITERATIONS


def test_julia_is_point_symmetric():
    c = -0.4 + 0.6j
    for z in (0.1 + 0.2j, -0.7 + 0.3j, 0.5 - 0.5j):
        assert julia_iterations(z, c) == julia_iterations(-z, c)