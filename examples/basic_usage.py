"""
Example: Basic usage of SAX-VSM on a synthetic two-dimensional dataset.
"""

import logging

import numpy as np

from saxvsm import SAXParams, NumerosityReduction, SAXVSMClassifier
from saxvsm.bags import build_bags
from saxvsm.classification import evaluate, format_results, train_models
from saxvsm.weighting import compute_weights


def generate_synthetic_dataset(samples_per_class=10, length=128, seed=42):
    """Generate sine, square and sawtooth series on two correlated dimensions."""
    rng = np.random.default_rng(seed)
    t = np.linspace(0, 4 * np.pi, length)

    generators = {
        "sine": lambda phase: np.sin(t + phase),
        "square": lambda phase: np.sign(np.sin(t + phase)),
        "sawtooth": lambda phase: ((t + phase) % (2 * np.pi)) / np.pi - 1,
    }

    dims = [{}, {}]
    for label, gen in generators.items():
        for _ in range(samples_per_class):
            phase = rng.uniform(0, 2 * np.pi)
            base = gen(phase)
            dims[0].setdefault(label, []).append(base + 0.1 * rng.standard_normal(length))
            dims[1].setdefault(label, []).append(
                np.gradient(base) + 0.05 * rng.standard_normal(length)
            )
    return dims


def main():
    """Run example workflow."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s - %(message)s")

    print("=" * 70)
    print("SAX-VSM: Symbolic Time Series Classification")
    print("=" * 70)
    print()

    print("1. Generating synthetic data...")
    train = generate_synthetic_dataset(seed=1)
    test = generate_synthetic_dataset(seed=2)
    print(f"   {len(train)} dimensions, classes: {list(train[0])}")
    print()

    params = SAXParams(
        window_size=32,
        paa_size=6,
        alphabet_size=5,
        norm_threshold=0.01,
        nr_strategy=NumerosityReduction.EXACT,
    )

    print("2. Building word bags for dimension 0...")
    bags = build_bags(train[0], params)
    for label, bag in bags.items():
        top = sorted(bag.words.items(), key=lambda kv: -kv[1])[:3]
        print(f"   {label}: {len(bag)} distinct words, most frequent {top}")
    print()

    print("3. Weighting words...")
    vectors = compute_weights(bags)
    for label, vector in vectors.items():
        print(f"   {label}: {len(vector)} discriminative words")
    print()

    print("4. Evaluating on the test set...")
    result = evaluate(train, test, params)
    print("   " + format_results(params, result.accuracy, result.error))
    print()

    print("5. Comparing numerosity reduction strategies...")
    for strategy in NumerosityReduction:
        p = SAXParams(32, 6, 5, nr_strategy=strategy)
        r = evaluate(train, test, p)
        print(f"   {strategy.name:<8} accuracy {r.accuracy:.3f}")
    print()

    print("6. Using the scikit-learn estimator interface...")
    X_train, y_train = [], []
    for label in train[0]:
        for i in range(len(train[0][label])):
            X_train.append([dim[label][i] for dim in train])
            y_train.append(label)
    X_test, y_test = [], []
    for label in test[0]:
        for i in range(len(test[0][label])):
            X_test.append([dim[label][i] for dim in test])
            y_test.append(label)

    clf = SAXVSMClassifier(window_size=32, paa_size=6, alphabet_size=5).fit(X_train, y_train)
    print(f"   models: {list(train_models(train, params))}")
    print(f"   accuracy {clf.score(X_test, y_test):.3f}")


if __name__ == "__main__":
    main()
