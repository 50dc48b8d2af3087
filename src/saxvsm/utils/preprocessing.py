"""
Utility functions for series normalization and dataset summaries.
"""

import logging
from typing import Any, Dict, List, Mapping, Sequence

import numpy as np

logger = logging.getLogger(__name__)


def znorm(data: np.ndarray, threshold: float = 0.01) -> np.ndarray:
    """
    Z-normalize a series.

    Series whose standard deviation falls below ``threshold`` are returned
    unchanged, so near-flat segments keep their raw level instead of being
    blown up by a near-zero divisor.

    Args:
        data: Input series
        threshold: Standard deviation below which normalization is skipped

    Returns:
        Normalized copy of the series
    """
    data = np.asarray(data, dtype=float)
    std = np.std(data)
    if std < threshold:
        return data.copy()
    return (data - np.mean(data)) / std


def calculate_statistics(data: np.ndarray) -> dict:
    """
    Calculate basic statistics of an array of values.

    Args:
        data: Input values

    Returns:
        Dictionary of statistics
    """
    return {
        "mean": float(np.mean(data)),
        "std": float(np.std(data)),
        "min": float(np.min(data)),
        "max": float(np.max(data)),
        "median": float(np.median(data)),
        "count": int(np.size(data)),
    }


def describe_dataset(
    data: Sequence[Mapping[str, List[np.ndarray]]], description: str
) -> Dict[str, Any]:
    """
    Log and return the class/sample layout of a multi-dimensional dataset.

    Args:
        data: One mapping of class label to series per dimension
        description: Name of the dataset used in log lines ('train', 'test')

    Returns:
        Dictionary with the class count and, per class, the per-sample lengths
        across dimensions and statistics of those lengths
    """
    if not data:
        logger.info("%s classes count: 0", description)
        return {"classes": 0, "samples": {}, "length_stats": {}}

    first = data[0]
    logger.info("%s classes count: %d", description, len(first))
    samples = {}
    length_stats = {}
    for label, series in first.items():
        logger.info("  class %s, samples %d", label, len(series))
        lengths = []
        for sample_idx in range(len(series)):
            dims = [len(dim[label][sample_idx]) for dim in data]
            logger.info("    sample dim lengths %s", " ".join(str(n) for n in dims))
            lengths.append(dims)
        samples[label] = lengths
        if lengths:
            stats = calculate_statistics(np.array(lengths))
            length_stats[label] = stats
            logger.info(
                "    series length min %d, max %d, mean %.2f",
                stats["min"],
                stats["max"],
                stats["mean"],
            )

    return {"classes": len(first), "samples": samples, "length_stats": length_stats}
