"""Weighting module initialization."""

from .tfidf import (
    WeightedVector,
    compute_weights,
    document_frequencies,
    inverse_document_frequencies,
)

__all__ = [
    "WeightedVector",
    "compute_weights",
    "document_frequencies",
    "inverse_document_frequencies",
]
