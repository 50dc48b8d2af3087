"""
SAX-VSM: Symbolic Time Series Classification

Classifies multi-dimensional time series by converting them into bags of SAX
words, weighting the words of each class by how discriminative they are, and
scoring unseen series against every class's weighted vector.
"""

__version__ = "0.1.0"

from .config import SAXParams, NumerosityReduction
from .errors import (
    SAXVSMError,
    ConfigurationError,
    EmptySeriesError,
    EmptyInputError,
    DegenerateClassWarning,
)
from .discretization import discretize
from .bags import WordBag, build_bags
from .weighting import compute_weights
from .classification import (
    ClassModel,
    SAXVSMClassifier,
    EvaluationResult,
    classify,
    evaluate,
    predict,
    train_models,
)

__all__ = [
    "SAXParams",
    "NumerosityReduction",
    "SAXVSMError",
    "ConfigurationError",
    "EmptySeriesError",
    "EmptyInputError",
    "DegenerateClassWarning",
    "discretize",
    "WordBag",
    "build_bags",
    "compute_weights",
    "ClassModel",
    "SAXVSMClassifier",
    "EvaluationResult",
    "classify",
    "evaluate",
    "predict",
    "train_models",
]
