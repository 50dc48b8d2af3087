"""Word bag module initialization."""

from .builder import (
    WordBag,
    build_bags,
    reduce_numerosity,
    series_to_bag,
    series_to_words,
    symbol_drift,
)

__all__ = [
    "WordBag",
    "build_bags",
    "reduce_numerosity",
    "series_to_bag",
    "series_to_words",
    "symbol_drift",
]
