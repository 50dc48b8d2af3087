"""
Discriminative word weighting.

Treats each class's word bag as a document and weights every word by its
in-class frequency times its inverse class frequency, so vocabulary shared by
all classes is discarded and class-exclusive vocabulary weighs the most.
"""

import logging
import math
from typing import Dict, Mapping

from ..bags import WordBag

logger = logging.getLogger(__name__)

WeightedVector = Dict[str, float]


def document_frequencies(bags: Mapping[str, WordBag]) -> Dict[str, int]:
    """Number of bags containing each word."""
    df: Dict[str, int] = {}
    for bag in bags.values():
        for word, count in bag.words.items():
            if count > 0:
                df[word] = df.get(word, 0) + 1
    return df


def inverse_document_frequencies(bags: Mapping[str, WordBag]) -> Dict[str, float]:
    """
    ``log(N / df)`` for every word seen in any bag, ``N`` being the number of classes.

    Empty bags count towards ``N`` but never towards any ``df``.
    """
    n_classes = len(bags)
    return {
        word: math.log(n_classes / df) for word, df in document_frequencies(bags).items()
    }


def compute_weights(bags: Mapping[str, WordBag]) -> Dict[str, WeightedVector]:
    """
    Compute a weighted vector per class.

    Args:
        bags: Mapping of class label to WordBag for one dimension

    Returns:
        Mapping of class label to word -> tf * idf, zero weights omitted
    """
    idf = inverse_document_frequencies(bags)
    vectors: Dict[str, WeightedVector] = {}
    for label, bag in bags.items():
        vector: WeightedVector = {}
        for word, tf in bag.words.items():
            weight = tf * idf[word] if tf > 0 else 0.0
            if weight > 0:
                vector[word] = weight
        vectors[label] = vector

    dropped = sum(1 for v in idf.values() if v == 0)
    logger.info(
        "Weighted %d classes over %d words (%d shared by all classes dropped)",
        len(vectors),
        len(idf),
        dropped,
    )
    return vectors
