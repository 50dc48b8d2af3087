"""Tests for multi-dimensional classification."""

import math
from collections import Counter

import numpy as np
import pytest
from saxvsm import EmptyInputError
from saxvsm.classification import (
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


class TestClassModel:
    """Test ClassModel."""

    def test_model_creation(self):
        """Test creating a class model."""
        model = ClassModel("A", [{"aa": 1.0}, {}])
        assert model.label == "A"
        assert model.num_dimensions == 2
        assert model.vector(0) == {"aa": 1.0}

    def test_to_dict(self):
        """Test converting a model to a dictionary."""
        model_dict = ClassModel("A", [{"aa": 1.0}]).to_dict()
        assert model_dict == {"label": "A", "vectors": [{"aa": 1.0}]}


class TestScoring:
    """Test per-dimension scoring."""

    def test_dot_product(self):
        """Test the sparse dot product."""
        counts = {"aa": 2, "bb": 1}
        vector = {"aa": 0.5, "cc": 3.0}
        assert score_dimension(counts, vector) == pytest.approx(1.0)

    def test_unknown_words_score_zero(self):
        """Test that words absent from every vector contribute nothing."""
        assert score_dimension({"zz": 10}, {"aa": 1.0}) == 0.0
        assert score_dimension({"zz": 10}, {}) == 0.0

    def test_scaling_counts_scales_score(self):
        """Test that scaling all counts by k scales the score by k."""
        counts = {"aa": 2, "bb": 3, "cc": 1}
        vectors = {"A": {"aa": 0.7, "cc": 0.1}, "B": {"bb": 0.4}}
        base = {label: score_dimension(counts, v) for label, v in vectors.items()}
        k = 3.5
        scaled_counts = {word: k * count for word, count in counts.items()}
        scaled = {label: score_dimension(scaled_counts, v) for label, v in vectors.items()}
        for label in vectors:
            assert scaled[label] == pytest.approx(k * base[label])
        assert best_label(scaled) == best_label(base)

    def test_sample_counts(self, ramp_params):
        """Test counting the words of a test series."""
        assert sample_counts(np.arange(20.0), ramp_params) == Counter({"abcd": 1})


class TestBestLabel:
    """Test arg-max selection."""

    def test_maximum(self):
        """Test picking the highest score."""
        assert best_label({"A": 0.1, "B": 2.0, "C": 1.0}) == "B"

    def test_ties_go_to_first_label(self):
        """Test the deterministic tie-break."""
        assert best_label({"A": 1.0, "B": 1.0}) == "A"
        assert best_label({"B": 1.0, "A": 1.0}) == "B"

    def test_empty(self):
        """Test that no scores raise."""
        with pytest.raises(EmptyInputError):
            best_label({})


class TestClassify:
    """Test classify and predict."""

    def test_two_class_flat_scenario(self, flat_params):
        """Test the classic two-class example with exclusive vocabularies."""
        train = [{"A": [np.full(8, -1.0)], "B": [np.full(8, 1.0)]}]
        models = train_models(train, flat_params)
        assert models["A"].vector(0) == pytest.approx({"aa": math.log(2)})
        assert models["B"].vector(0) == pytest.approx({"bb": math.log(2)})

        sample = [np.full(8, -2.0)]
        scores = score(sample, models, flat_params)
        assert scores["A"] > scores["B"]
        assert classify("A", sample, models, flat_params) == 1
        assert classify("B", sample, models, flat_params) == 0

    def test_accepts_plain_vector_lists(self, flat_params):
        """Test that models may be given as lists of vectors."""
        models = {"A": [{"aa": 1.0}], "B": [{"bb": 1.0}]}
        assert predict([np.full(8, 3.0)], models, flat_params) == "B"

    def test_unknown_words_do_not_crash(self, ramp_params, ramp_train):
        """Test a sample whose words were never seen in training."""
        models = train_models(ramp_train, ramp_params)
        flat = [np.zeros(20)]
        scores = score(flat, models, ramp_params)
        assert scores == {"inc": 0.0, "dec": 0.0}
        # tie resolved in favour of the first class
        assert predict(flat, models, ramp_params) == "inc"

    def test_multi_dimensional_evidence_is_summed(self, ramp_params):
        """Test that per-dimension scores add up."""
        ramp = np.linspace(0.0, 5.0, 30)
        train = [
            {"A": [ramp], "B": [ramp[::-1].copy()]},
            {"A": [ramp], "B": [ramp[::-1].copy()]},
        ]
        models = train_models(train, ramp_params)
        scores = score([ramp, ramp], models, ramp_params)
        assert scores["A"] == pytest.approx(2 * math.log(2))
        assert scores["B"] == 0.0

        mixed = score([ramp, ramp[::-1].copy()], models, ramp_params)
        assert mixed["A"] == pytest.approx(mixed["B"])

    def test_class_missing_from_a_dimension(self, ramp_params):
        """Test that a class absent from one dimension gets an empty vector there."""
        ramp = np.arange(20.0)
        train = [
            {"A": [ramp], "B": [ramp[::-1].copy()]},
            {"A": [ramp]},
        ]
        models = train_models(train, ramp_params)
        assert models["B"].num_dimensions == 2
        assert models["B"].vector(1) == {}

    def test_dimension_mismatch(self, ramp_params, ramp_train):
        """Test that a sample with the wrong number of dimensions is rejected."""
        models = train_models(ramp_train, ramp_params)
        with pytest.raises(ValueError):
            score([np.arange(20.0), np.arange(20.0)], models, ramp_params)

    def test_empty_models(self, ramp_params):
        """Test classifying against no models."""
        with pytest.raises(EmptyInputError):
            classify("A", [np.arange(20.0)], {}, ramp_params)

    def test_empty_sample(self, ramp_params, ramp_train):
        """Test classifying a sample with no dimensions."""
        models = train_models(ramp_train, ramp_params)
        with pytest.raises(EmptyInputError):
            classify("inc", [], models, ramp_params)

    def test_empty_training_class(self, ramp_params):
        """Test that a class with no training series has an empty vector."""
        train = [{"inc": [np.arange(20.0)], "dec": [np.arange(20.0)[::-1].copy()], "none": []}]
        with pytest.warns(UserWarning):
            models = train_models(train, ramp_params)
        assert models["none"].vector(0) == {}
        assert predict([np.arange(20.0)], models, ramp_params) == "inc"

    def test_no_dimensions(self, ramp_params):
        """Test training on an empty dataset."""
        with pytest.raises(EmptyInputError):
            train_models([], ramp_params)


class TestSAXVSMClassifier:
    """Test the estimator interface."""

    def make_data(self):
        rng = np.random.default_rng(0)
        X, y = [], []
        for _ in range(3):
            slope = rng.uniform(0.5, 2.0)
            ramp = slope * np.arange(30.0) + rng.uniform(-5, 5)
            X.append(ramp)
            y.append("inc")
            X.append(ramp[::-1].copy())
            y.append("dec")
        return X, y

    def test_fit_predict(self):
        """Test fitting and predicting single-dimension samples."""
        X, y = self.make_data()
        clf = SAXVSMClassifier(window_size=8, paa_size=4, alphabet_size=4)
        clf.fit(X, y)

        assert list(clf.classes_) == ["inc", "dec"]
        assert list(clf.predict(X)) == y
        assert clf.score(X, y) == 1.0

    def test_multi_dimensional_samples(self):
        """Test samples given as one series per dimension."""
        X, y = self.make_data()
        X2 = [[x, x] for x in X]
        clf = SAXVSMClassifier(window_size=8, paa_size=4, alphabet_size=4).fit(X2, y)
        assert all(model.num_dimensions == 2 for model in clf.models_.values())
        assert list(clf.predict(X2)) == y

    def test_decision_function(self):
        """Test per-class score matrix."""
        X, y = self.make_data()
        clf = SAXVSMClassifier(window_size=8, paa_size=4, alphabet_size=4).fit(X, y)
        scores = clf.decision_function(X[:2])
        assert scores.shape == (2, 2)
        assert scores[0, 0] > scores[0, 1]
        assert scores[1, 1] > scores[1, 0]

    def test_get_params(self):
        """Test scikit-learn parameter introspection."""
        clf = SAXVSMClassifier(window_size=12, nr_strategy="NONE")
        params = clf.get_params()
        assert params["window_size"] == 12
        assert params["nr_strategy"] == "NONE"

    def test_length_mismatch(self):
        """Test that X and y must align."""
        with pytest.raises(ValueError):
            SAXVSMClassifier(window_size=8, paa_size=4, alphabet_size=4).fit(
                [np.arange(20.0)], ["a", "b"]
            )
