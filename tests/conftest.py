"""Shared fixtures for the test suite."""

import numpy as np
import pytest

from saxvsm import SAXParams


@pytest.fixture
def ramp_params():
    """Window 8, PAA 4, alphabet 4: any linear window maps to 'abcd' or 'dcba'."""
    return SAXParams(window_size=8, paa_size=4, alphabet_size=4, norm_threshold=0.01)


@pytest.fixture
def flat_params():
    """Window 4, PAA 2, alphabet 2: flat windows keep their raw level."""
    return SAXParams(window_size=4, paa_size=2, alphabet_size=2, norm_threshold=0.01)


@pytest.fixture
def ramp_train():
    """Single-dimension training set with an increasing and a decreasing class."""
    ramp = np.linspace(0.0, 10.0, 40)
    return [{"inc": [ramp], "dec": [ramp[::-1].copy()]}]


@pytest.fixture
def rng():
    return np.random.default_rng(42)
