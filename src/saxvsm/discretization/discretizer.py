"""
Symbolic discretization of numeric series.

Converts a series into an ordered sequence of SAX words by sliding a window over
it, z-normalizing each window, reducing it with piecewise aggregate
approximation (PAA), and mapping each aggregate to a letter through Gaussian
breakpoints.
"""

import logging
from functools import lru_cache
from typing import List

import numpy as np
from scipy.stats import norm

from ..config import SAXParams, MAX_ALPHABET_SIZE
from ..errors import ConfigurationError, EmptySeriesError
from ..utils.preprocessing import znorm

logger = logging.getLogger(__name__)

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


@lru_cache(maxsize=None)
def _breakpoints(alphabet_size: int) -> np.ndarray:
    cuts = norm.ppf(np.arange(1, alphabet_size) / alphabet_size)
    cuts.flags.writeable = False
    return cuts


def gaussian_breakpoints(alphabet_size: int) -> np.ndarray:
    """
    Cut points dividing N(0, 1) into ``alphabet_size`` equiprobable regions.

    Args:
        alphabet_size: Number of symbols

    Returns:
        Sorted, read-only array of ``alphabet_size - 1`` breakpoints, shared
        between calls with the same alphabet size
    """
    if not 2 <= alphabet_size <= MAX_ALPHABET_SIZE:
        raise ConfigurationError(
            f"alphabet_size must be between 2 and {MAX_ALPHABET_SIZE}, got {alphabet_size}"
        )
    return _breakpoints(alphabet_size)


def paa(data: np.ndarray, paa_size: int) -> np.ndarray:
    """
    Piecewise aggregate approximation.

    When ``paa_size`` does not divide the series length, samples straddling a
    segment boundary contribute to both segments in proportion to their overlap.

    Args:
        data: Input series
        paa_size: Number of segments

    Returns:
        Array of ``paa_size`` segment means
    """
    data = np.asarray(data, dtype=float)
    n = len(data)
    if paa_size <= 0 or paa_size > n:
        raise ConfigurationError(f"paa_size must be in [1, {n}], got {paa_size}")
    if n == paa_size:
        return data.copy()
    if n % paa_size == 0:
        return data.reshape(paa_size, n // paa_size).mean(axis=1)
    # repeating every sample paa_size times makes the n * paa_size points
    # split evenly into paa_size groups of n, each an overlap-weighted mean
    return np.repeat(data, paa_size).reshape(paa_size, n).mean(axis=1)


def to_symbols(values: np.ndarray, alphabet_size: int) -> str:
    """
    Map real values to letters.

    A value equal to a breakpoint falls into the upper region.

    Args:
        values: Values to map
        alphabet_size: Number of symbols

    Returns:
        String with one letter per value
    """
    cuts = gaussian_breakpoints(alphabet_size)
    indices = np.searchsorted(cuts, np.asarray(values, dtype=float), side="right")
    return "".join(ALPHABET[i] for i in indices)


def window_to_word(window: np.ndarray, params: SAXParams) -> str:
    """
    Discretize one window into a word of ``params.paa_size`` letters.

    A window whose standard deviation is below ``params.norm_threshold`` is
    constant for discretization purposes: its mean is mapped to a single
    symbol repeated ``params.paa_size`` times.
    """
    window = np.asarray(window, dtype=float)
    if np.std(window) < params.norm_threshold:
        return to_symbols([np.mean(window)], params.alphabet_size) * params.paa_size
    normalized = znorm(window, params.norm_threshold)
    return to_symbols(paa(normalized, params.paa_size), params.alphabet_size)


def discretize(series: np.ndarray, params: SAXParams) -> List[str]:
    """
    Convert a series into its sliding-window word sequence.

    Args:
        series: Input series
        params: Discretization parameters

    Returns:
        One word per window position, ``len(series) - window_size + 1`` words
    """
    series = np.asarray(series, dtype=float)
    if series.ndim != 1:
        raise ValueError(f"Expected a 1D series, got shape {series.shape}")

    w = params.window_size
    if len(series) < w:
        raise EmptySeriesError(len(series), w)

    words = [window_to_word(series[i : i + w], params) for i in range(len(series) - w + 1)]
    logger.debug("Discretized series of length %d into %d words", len(series), len(words))
    return words
