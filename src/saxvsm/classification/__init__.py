"""Classification module initialization."""

from .classifier import (
    ClassModel,
    SAXVSMClassifier,
    best_label,
    classify,
    predict,
    sample_counts,
    score,
    score_dimension,
    train_models,
)
from .evaluate import (
    EvaluationResult,
    evaluate,
    evaluate_models,
    format_results,
    iter_samples,
)

__all__ = [
    "ClassModel",
    "SAXVSMClassifier",
    "best_label",
    "classify",
    "predict",
    "sample_counts",
    "score",
    "score_dimension",
    "train_models",
    "EvaluationResult",
    "evaluate",
    "evaluate_models",
    "format_results",
    "iter_samples",
]
