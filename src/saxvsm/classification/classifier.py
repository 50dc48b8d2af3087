"""
Multi-dimensional SAX-VSM classification.

Scores a sample against per-class weighted vectors on every dimension and picks
the class with the largest summed score.
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin

from ..bags import build_bags, series_to_words
from ..config import NumerosityReduction, SAXParams
from ..errors import EmptyInputError
from ..weighting import WeightedVector, compute_weights

logger = logging.getLogger(__name__)

LabeledSeries = Mapping[str, Sequence[np.ndarray]]


class ClassModel:
    """Weighted vectors of one class, one per dimension."""

    def __init__(self, label: str, vectors: Optional[List[WeightedVector]] = None):
        self.label = label
        self.vectors = vectors or []

    @property
    def num_dimensions(self) -> int:
        return len(self.vectors)

    def vector(self, dimension: int) -> WeightedVector:
        """Weighted vector for a dimension."""
        return self.vectors[dimension]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "label": self.label,
            "vectors": [dict(v) for v in self.vectors],
        }

    def __repr__(self) -> str:
        sizes = ", ".join(str(len(v)) for v in self.vectors)
        return f"ClassModel(label={self.label}, words=[{sizes}])"


ModelLike = Union[ClassModel, Sequence[WeightedVector]]


def _vectors(model: ModelLike) -> Sequence[WeightedVector]:
    if isinstance(model, ClassModel):
        return model.vectors
    return model


def train_models(
    train_by_dimension: Sequence[LabeledSeries], params: SAXParams
) -> Dict[str, ClassModel]:
    """
    Build class models from a multi-dimensional training set.

    Each dimension is bagged and weighted independently; the per-dimension
    vectors are then regrouped by class. A class absent from a dimension gets
    an empty vector there.

    Args:
        train_by_dimension: One label -> series mapping per dimension
        params: Discretization parameters

    Returns:
        Mapping of class label to ClassModel, in first-encountered label order
    """
    if not train_by_dimension:
        raise EmptyInputError("Training data has no dimensions")

    per_dimension = [compute_weights(build_bags(dim, params)) for dim in train_by_dimension]

    labels: List[str] = []
    for weights in per_dimension:
        for label in weights:
            if label not in labels:
                labels.append(label)

    models = {
        label: ClassModel(label, [weights.get(label, {}) for weights in per_dimension])
        for label in labels
    }
    logger.info(
        "Trained %d class models over %d dimensions", len(models), len(per_dimension)
    )
    return models


def sample_counts(series: np.ndarray, params: SAXParams) -> Counter:
    """Word counts of a single test series under the configured reduction."""
    return Counter(series_to_words(series, params))


def score_dimension(counts: Mapping[str, float], vector: WeightedVector) -> float:
    """Sparse dot product of a sample's word counts with a class vector."""
    return float(sum(count * vector.get(word, 0.0) for word, count in counts.items()))


def score(
    sample_by_dimension: Sequence[np.ndarray],
    models: Mapping[str, ModelLike],
    params: SAXParams,
) -> Dict[str, float]:
    """
    Score a sample against every class.

    Args:
        sample_by_dimension: One series per dimension
        models: Mapping of class label to its per-dimension weighted vectors
        params: Discretization parameters

    Returns:
        Mapping of class label to summed per-dimension score, in model order
    """
    if not models:
        raise EmptyInputError("No class models to score against")
    if len(sample_by_dimension) == 0:
        raise EmptyInputError("Sample has no dimensions")

    counts = [sample_counts(series, params) for series in sample_by_dimension]

    scores: Dict[str, float] = {}
    for label, model in models.items():
        vectors = _vectors(model)
        if len(vectors) != len(counts):
            raise ValueError(
                f"Class {label} has {len(vectors)} dimensions, sample has {len(counts)}"
            )
        scores[label] = sum(
            score_dimension(dim_counts, vector) for dim_counts, vector in zip(counts, vectors)
        )
    logger.debug("Scores: %s", scores)
    return scores


def best_label(scores: Mapping[str, float]) -> str:
    """Arg-max label; ties go to the label that comes first in ``scores``."""
    best = None
    for label, value in scores.items():
        if best is None or value > scores[best]:
            best = label
    if best is None:
        raise EmptyInputError("No scores to choose from")
    return best


def predict(
    sample_by_dimension: Sequence[np.ndarray],
    models: Mapping[str, ModelLike],
    params: SAXParams,
) -> str:
    """Predict the class label of a sample."""
    return best_label(score(sample_by_dimension, models, params))


def classify(
    true_label: str,
    sample_by_dimension: Sequence[np.ndarray],
    models: Mapping[str, ModelLike],
    params: SAXParams,
) -> int:
    """
    Classify a sample and compare with its known label.

    Returns:
        1 if the predicted label equals ``true_label``, else 0
    """
    predicted = predict(sample_by_dimension, models, params)
    logger.debug("True label %s, predicted %s", true_label, predicted)
    return int(predicted == true_label)


class SAXVSMClassifier(ClassifierMixin, BaseEstimator):
    """
    scikit-learn style estimator wrapping the SAX-VSM pipeline.

    ``X`` is a sequence of samples; each sample is either a single 1D series or
    a sequence of series, one per dimension.
    """

    def __init__(
        self,
        window_size: int = 30,
        paa_size: int = 6,
        alphabet_size: int = 6,
        norm_threshold: float = 0.01,
        nr_strategy: str = "EXACT",
        mindist_tolerance: int = 1,
    ):
        self.window_size = window_size
        self.paa_size = paa_size
        self.alphabet_size = alphabet_size
        self.norm_threshold = norm_threshold
        self.nr_strategy = nr_strategy
        self.mindist_tolerance = mindist_tolerance

    def _params(self) -> SAXParams:
        return SAXParams(
            window_size=self.window_size,
            paa_size=self.paa_size,
            alphabet_size=self.alphabet_size,
            norm_threshold=self.norm_threshold,
            nr_strategy=NumerosityReduction.parse(self.nr_strategy),
            mindist_tolerance=self.mindist_tolerance,
        )

    @staticmethod
    def _as_dimensions(sample) -> List[np.ndarray]:
        if isinstance(sample, np.ndarray) and sample.ndim == 1:
            return [sample]
        if len(sample) > 0 and np.isscalar(sample[0]):
            return [np.asarray(sample, dtype=float)]
        return [np.asarray(dim, dtype=float) for dim in sample]

    def fit(self, X, y):
        """Build class models from training samples and labels."""
        if len(X) != len(y):
            raise ValueError(f"X has {len(X)} samples but y has {len(y)} labels")
        if len(X) == 0:
            raise EmptyInputError("No training samples")

        self.params_ = self._params()
        samples = [self._as_dimensions(sample) for sample in X]
        n_dims = len(samples[0])
        train_by_dimension: List[Dict[str, List[np.ndarray]]] = [{} for _ in range(n_dims)]
        for sample, label in zip(samples, y):
            if len(sample) != n_dims:
                raise ValueError(f"Expected {n_dims} dimensions, got {len(sample)}")
            for dim_idx, series in enumerate(sample):
                train_by_dimension[dim_idx].setdefault(label, []).append(series)

        self.models_ = train_models(train_by_dimension, self.params_)
        self.classes_ = np.array(list(self.models_.keys()))
        return self

    def decision_function(self, X) -> np.ndarray:
        """Per-class scores, columns ordered as ``classes_``."""
        return np.array(
            [
                list(score(self._as_dimensions(sample), self.models_, self.params_).values())
                for sample in X
            ]
        )

    def predict(self, X) -> np.ndarray:
        """Predict a label for every sample."""
        return np.array(
            [predict(self._as_dimensions(sample), self.models_, self.params_) for sample in X]
        )
