"""Discretization module initialization."""

from .discretizer import (
    ALPHABET,
    gaussian_breakpoints,
    paa,
    to_symbols,
    window_to_word,
    discretize,
)

__all__ = [
    "ALPHABET",
    "gaussian_breakpoints",
    "paa",
    "to_symbols",
    "window_to_word",
    "discretize",
]
