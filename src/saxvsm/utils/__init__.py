"""Utils module initialization."""

from .preprocessing import znorm, calculate_statistics, describe_dataset
from .data import read_ucr_data, load_dimensions

__all__ = [
    "znorm",
    "calculate_statistics",
    "describe_dataset",
    "read_ucr_data",
    "load_dimensions",
]
