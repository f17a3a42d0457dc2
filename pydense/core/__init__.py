"""
Core infrastructure for PyDense.

Shared abstractions used by the linalg, activations and layer submodules.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers for approximate comparison
"""

from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    DimensionMismatchError,
    RaggedRowsError,
    IndexOutOfBoundsError,
    UnsupportedOperandError,
    InsufficientRankError,
    InvalidLayerSpecError,
    UnknownActivationError,
)
from pydense.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Exceptions
    "PyDenseError",
    "ValidationError",
    "DimensionMismatchError",
    "RaggedRowsError",
    "IndexOutOfBoundsError",
    "UnsupportedOperandError",
    "InsufficientRankError",
    "InvalidLayerSpecError",
    "UnknownActivationError",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
