"""
Batch evaluation of a multi-dimensional test set.
"""

import logging
from typing import Any, Dict, Iterator, List, Mapping, Sequence, Tuple

import numpy as np
from sklearn.metrics import accuracy_score

from ..config import SAXParams
from ..errors import EmptyInputError
from .classifier import ClassModel, predict, train_models

logger = logging.getLogger(__name__)

LabeledSeries = Mapping[str, Sequence[np.ndarray]]


class EvaluationResult:
    """Outcome of classifying every sample of a test set."""

    def __init__(self, labels: List[str], predictions: List[str]):
        self.labels = labels
        self.predictions = predictions

    @property
    def outcomes(self) -> List[int]:
        """1 for every correctly classified sample, 0 otherwise."""
        return [int(p == t) for t, p in zip(self.labels, self.predictions)]

    @property
    def total(self) -> int:
        return len(self.labels)

    @property
    def correct(self) -> int:
        return sum(self.outcomes)

    @property
    def accuracy(self) -> float:
        return float(accuracy_score(self.labels, self.predictions))

    @property
    def error(self) -> float:
        return 1.0 - self.accuracy

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "correct": self.correct,
            "total": self.total,
            "accuracy": self.accuracy,
            "error": self.error,
        }

    def __repr__(self) -> str:
        return f"EvaluationResult(correct={self.correct}, total={self.total}, accuracy={self.accuracy:.4f})"


def iter_samples(
    data_by_dimension: Sequence[LabeledSeries],
) -> Iterator[Tuple[str, List[np.ndarray]]]:
    """
    Yield ``(label, sample_by_dimension)`` for every sample of a dataset.

    Classes are visited in the first dimension's order.
    """
    first = data_by_dimension[0]
    for label, series in first.items():
        for sample_idx in range(len(series)):
            yield label, [dim[label][sample_idx] for dim in data_by_dimension]


def evaluate_models(
    models: Mapping[str, ClassModel],
    test_by_dimension: Sequence[LabeledSeries],
    params: SAXParams,
) -> EvaluationResult:
    """Classify every test sample against prebuilt class models."""
    if not test_by_dimension:
        raise EmptyInputError("Test data has no dimensions")

    labels: List[str] = []
    predictions: List[str] = []
    for label, sample in iter_samples(test_by_dimension):
        labels.append(label)
        predictions.append(predict(sample, models, params))

    if not labels:
        raise EmptyInputError("Test data has no samples")

    result = EvaluationResult(labels, predictions)
    logger.info("Classified %d of %d test samples correctly", result.correct, result.total)
    return result


def evaluate(
    train_by_dimension: Sequence[LabeledSeries],
    test_by_dimension: Sequence[LabeledSeries],
    params: SAXParams,
) -> EvaluationResult:
    """
    Train on one dataset and evaluate on another.

    Args:
        train_by_dimension: One label -> series mapping per dimension
        test_by_dimension: Same layout for the test set
        params: Discretization parameters

    Returns:
        EvaluationResult with per-sample outcomes
    """
    models = train_models(train_by_dimension, params)
    return evaluate_models(models, test_by_dimension, params)


def _format_number(value: float) -> str:
    """At least two, at most five decimals."""
    text = f"{value:.5f}".rstrip("0")
    integer, _, decimals = text.partition(".")
    return f"{integer}.{decimals.ljust(2, '0')}"


def format_results(params: SAXParams, accuracy: float, error: float) -> str:
    """One-line summary of a run."""
    return (
        f"strategy {params.nr_strategy.name}, "
        f"window {params.window_size}, "
        f"PAA {params.paa_size}, "
        f"alphabet {params.alphabet_size}, "
        f" accuracy {_format_number(accuracy)}, "
        f" error {_format_number(error)}"
    )
