"""Escape-time iteration of z -> z**2 + c."""

from __future__ import annotations

MAX_ITERATIONS = 50
ESCAPE_RADIUS_SQUARED = 2 * 2


def square(z: complex) -> complex:
    """Return z squared, computed component-wise."""
    return complex(z.real * z.real - z.imag * z.imag, 2 * z.real * z.imag)


def quadratic_step(z: complex, c: complex) -> complex:
    """One step of the quadratic map: z**2 + c."""
    squared = square(z)
    return complex(squared.real + c.real, squared.imag + c.imag)


def _norm_squared(z: complex) -> float:
    return z.real * z.real + z.imag * z.imag


def mandelbrot_iterations(c: complex) -> int:
    """Count steps for the orbit of 0 under z**2 + c to leave radius 2.

    A point that never escapes reports ``MAX_ITERATIONS + 1``.
    """
    z = 0j
    iteration = 0
    while _norm_squared(z) <= ESCAPE_RADIUS_SQUARED:
        exhausted = iteration >= MAX_ITERATIONS
        iteration += 1
        if exhausted:
            break
        z = quadratic_step(z, c)
    return iteration


def julia_iterations(z: complex, c: complex) -> int:
    """Count steps for the orbit of *z* under z**2 + c to leave radius 2.

    At most ``MAX_ITERATIONS`` steps are taken.
    """
    iteration = 0
    while iteration < MAX_ITERATIONS:
        z = quadratic_step(z, c)
        iteration += 1
        if _norm_squared(z) > ESCAPE_RADIUS_SQUARED:
            break
    return iteration