"""
Word bag construction.

Accumulates the discretized words of every series of a class into a single
frequency table, after suppressing redundant consecutive words.
"""

import logging
import warnings
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import numpy as np

from ..config import NumerosityReduction, SAXParams
from ..discretization import ALPHABET, discretize
from ..errors import DegenerateClassWarning

logger = logging.getLogger(__name__)


class WordBag:
    """Word frequency table for one class on one dimension."""

    def __init__(self, label: str, words: Optional[Mapping[str, int]] = None):
        self.label = label
        self.words = Counter(words or {})

    def add_word(self, word: str, count: int = 1) -> None:
        """Increment the count of a word."""
        self.words[word] += count

    def add_words(self, words: Iterable[str]) -> None:
        """Increment the count of every word in ``words``."""
        self.words.update(words)

    def merge(self, other: "WordBag") -> None:
        """Pool another bag's counts into this one."""
        self.words.update(other.words)

    def __contains__(self, word: str) -> bool:
        return self.words.get(word, 0) > 0

    def __getitem__(self, word: str) -> int:
        return self.words.get(word, 0)

    def __len__(self) -> int:
        return len(self.words)

    def is_empty(self) -> bool:
        return not self.words

    def to_dict(self) -> Dict[str, int]:
        """Convert to a plain word -> count dictionary."""
        return dict(self.words)

    def __repr__(self) -> str:
        return f"WordBag(label={self.label}, words={len(self.words)}, total={sum(self.words.values())})"


def symbol_drift(word: str, other: str) -> Optional[int]:
    """
    Number of positions at which two words differ by exactly one symbol.

    Returns None when the words have different lengths or any position differs
    by more than one symbol.
    """
    if len(word) != len(other):
        return None
    drift = 0
    for a, b in zip(word, other):
        if a == b:
            continue
        if abs(ALPHABET.index(a) - ALPHABET.index(b)) > 1:
            return None
        drift += 1
    return drift


def reduce_numerosity(
    words: Sequence[str],
    strategy: NumerosityReduction,
    tolerance: int = 1,
) -> List[str]:
    """
    Suppress redundant consecutive words.

    Args:
        words: Ordered word sequence of one series
        strategy: NONE keeps everything, EXACT collapses runs of identical words,
            MINDIST also drops a word within ``tolerance`` one-symbol drifts of
            the last retained word
        tolerance: Positions allowed to drift under MINDIST

    Returns:
        Retained words in order
    """
    if strategy is NumerosityReduction.NONE:
        return list(words)

    retained: List[str] = []
    for word in words:
        if retained:
            previous = retained[-1]
            if word == previous:
                continue
            if strategy is NumerosityReduction.MINDIST:
                drift = symbol_drift(word, previous)
                if drift is not None and drift <= tolerance:
                    continue
        retained.append(word)
    return retained


def series_to_words(series: np.ndarray, params: SAXParams) -> List[str]:
    """Discretize one series and apply the configured numerosity reduction."""
    return reduce_numerosity(
        discretize(series, params), params.nr_strategy, params.mindist_tolerance
    )


def series_to_bag(label: str, series: np.ndarray, params: SAXParams) -> WordBag:
    """Build the bag of one series."""
    bag = WordBag(label)
    bag.add_words(series_to_words(series, params))
    return bag


def build_bags(
    labeled_series: Mapping[str, Sequence[np.ndarray]], params: SAXParams
) -> Dict[str, WordBag]:
    """
    Build one word bag per class.

    Args:
        labeled_series: Mapping of class label to that class's series on one dimension
        params: Discretization parameters

    Returns:
        Mapping of class label to its pooled WordBag, in input order
    """
    bags: Dict[str, WordBag] = {}
    for label, series_list in labeled_series.items():
        bag = WordBag(label)
        if len(series_list) == 0:
            message = f"Class {label} has no training series; its word bag is empty"
            logger.warning(message)
            warnings.warn(message, DegenerateClassWarning, stacklevel=2)
        for series in series_list:
            bag.merge(series_to_bag(label, series, params))
        bags[label] = bag
        logger.debug("Class %s: %d series, %d distinct words", label, len(series_list), len(bag))

    logger.info(
        "Built %d word bags (strategy %s, window %d, PAA %d, alphabet %d)",
        len(bags),
        params.nr_strategy,
        params.window_size,
        params.paa_size,
        params.alphabet_size,
    )
    return bags
