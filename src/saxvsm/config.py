"""
Discretization and numerosity-reduction parameters.

Provides a validated, immutable parameter set shared by every stage of the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict

from .errors import ConfigurationError

MAX_ALPHABET_SIZE = 26


class NumerosityReduction(Enum):
    """Policy for suppressing redundant consecutive words."""

    NONE = "NONE"
    EXACT = "EXACT"
    MINDIST = "MINDIST"

    @classmethod
    def parse(cls, value: Any) -> "NumerosityReduction":
        """Accept an enum member or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            valid = ", ".join(m.name for m in cls)
            raise ConfigurationError(
                f"Unknown numerosity reduction strategy: {value} (expected one of {valid})"
            ) from None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SAXParams:
    """SAX discretization parameters."""
    window_size: int
    paa_size: int
    alphabet_size: int
    norm_threshold: float = 0.01
    nr_strategy: NumerosityReduction = NumerosityReduction.EXACT
    mindist_tolerance: int = 1

    def __post_init__(self):
        """Validate parameter consistency."""
        # frozen dataclass, so coerce through object.__setattr__
        object.__setattr__(self, "nr_strategy", NumerosityReduction.parse(self.nr_strategy))

        if self.window_size <= 0:
            raise ConfigurationError(f"window_size must be positive, got {self.window_size}")
        if self.paa_size <= 0:
            raise ConfigurationError(f"paa_size must be positive, got {self.paa_size}")
        if self.paa_size > self.window_size:
            raise ConfigurationError(
                f"paa_size ({self.paa_size}) must not exceed window_size ({self.window_size})"
            )
        if not 2 <= self.alphabet_size <= MAX_ALPHABET_SIZE:
            raise ConfigurationError(
                f"alphabet_size must be between 2 and {MAX_ALPHABET_SIZE}, "
                f"got {self.alphabet_size}"
            )
        if self.norm_threshold < 0:
            raise ConfigurationError(
                f"norm_threshold must be non-negative, got {self.norm_threshold}"
            )
        if self.mindist_tolerance < 0:
            raise ConfigurationError(
                f"mindist_tolerance must be non-negative, got {self.mindist_tolerance}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        result = asdict(self)
        result["nr_strategy"] = self.nr_strategy.name
        return result
