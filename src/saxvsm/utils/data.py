"""
Readers for UCR-formatted series archives.

Each line holds one series: the class label followed by its values, separated
by whitespace and/or commas. Multi-dimensional datasets are stored one file per
dimension, ``<prefix>0.txt``, ``<prefix>1.txt`` and so on.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Union

import numpy as np

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")

PathLike = Union[str, Path]


def _canonical_label(token: str) -> str:
    """Render numeric labels such as '1.0000000e+00' as '1'."""
    try:
        value = float(token)
    except ValueError:
        return token
    if value.is_integer():
        return str(int(value))
    return token


def read_ucr_data(filepath: PathLike) -> Dict[str, List[np.ndarray]]:
    """
    Read a UCR-format file.

    Args:
        filepath: Path to the data file

    Returns:
        Mapping of class label to its series, classes in first-encountered order
    """
    data: Dict[str, List[np.ndarray]] = {}
    with open(filepath, "r") as f:
        for line_no, line in enumerate(f, start=1):
            tokens = [t for t in _SEPARATORS.split(line.strip()) if t]
            if not tokens:
                continue
            label = _canonical_label(tokens[0])
            try:
                values = np.array(tokens[1:], dtype=float)
            except ValueError as e:
                raise ValueError(f"{filepath}:{line_no}: {e}") from e
            data.setdefault(label, []).append(values)

    logger.debug(
        "Read %d series in %d classes from %s",
        sum(len(v) for v in data.values()),
        len(data),
        filepath,
    )
    return data


def load_dimensions(prefix: str, num_dimensions: int) -> List[Dict[str, List[np.ndarray]]]:
    """
    Load a multi-dimensional dataset stored one file per dimension.

    Args:
        prefix: Path prefix; dimension ``i`` is read from ``f"{prefix}{i}.txt"``
        num_dimensions: Number of dimension files

    Returns:
        List with one label-to-series mapping per dimension
    """
    if num_dimensions <= 0:
        raise ValueError(f"num_dimensions must be positive, got {num_dimensions}")

    dimensions = [read_ucr_data(f"{prefix}{i}.txt") for i in range(num_dimensions)]

    reference = dimensions[0]
    for dim_idx, dim in enumerate(dimensions[1:], start=1):
        if set(dim.keys()) != set(reference.keys()):
            raise ValueError(
                f"Dimension {dim_idx} has classes {list(dim.keys())}, "
                f"expected {list(reference.keys())}"
            )
        for label, series in reference.items():
            if len(dim[label]) != len(series):
                raise ValueError(
                    f"Dimension {dim_idx} has {len(dim[label])} samples of class "
                    f"{label}, expected {len(series)}"
                )

    return dimensions
