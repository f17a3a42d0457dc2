"""
PyDense: minimal linear algebra and a dense neural-network layer.

Fixed-size vectors and rectangular matrices with arithmetic, transposition
and element-wise function application, used to build one feed-forward
dense layer with forward and backward passes.

Submodules:
    linalg: Vector and Matrix
    activations: Activation functions and derivatives by name
    layer: DenseVectorLayer
    core: Exceptions, validation, tolerance tiers
"""

import logging

__version__ = "0.1.0"

from pydense.linalg import Vector, Matrix
from pydense.activations import get_activation, list_activations
from pydense.layer import DenseVectorLayer, LayerDefinition
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

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "get_activation",
    "list_activations",
    "DenseVectorLayer",
    "LayerDefinition",
    "PyDenseError",
    "ValidationError",
    "DimensionMismatchError",
    "RaggedRowsError",
    "IndexOutOfBoundsError",
    "UnsupportedOperandError",
    "InsufficientRankError",
    "InvalidLayerSpecError",
    "UnknownActivationError",
]
