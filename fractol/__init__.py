"""Mandelbrot and Julia set rendering, with string, list, formatting and XPM helpers."""

__version__ = "0.1.0"