"""
DenseVectorLayer: activation values of one fully connected layer.

A DenseVectorLayer is a Vector that also carries the activation function
and its derivative, resolved from the activation registry when the layer
is built.

Forward pass (weights W, bias b, current activations a):
    z   = b + W . a
    out = activation(z)          element-wise, this layer's activation
    -> new DenseVectorLayer(out) tagged with the next layer's activation

Backward pass (weights W, incoming gradient g):
    delta = (W^T . g) * activation'(a)      '*' is the Hadamard product
    -> plain Vector
"""

from __future__ import annotations

import logging
import numbers
import warnings
from typing import Any

import numpy as np

from pydense.activations.registry import ActivationName, get_activation
from pydense.core.exceptions import InvalidLayerSpecError, UnsupportedOperandError
from pydense.layer.design import LayerDefinition
from pydense.linalg._common import as_values
from pydense.linalg.matrix import Matrix
from pydense.linalg.vector import Vector

logger = logging.getLogger(__name__)


def _invalid_layer(detail: str) -> InvalidLayerSpecError:
    return InvalidLayerSpecError(f"[LAYC] Layer must have at least one value: {detail}")


class DenseVectorLayer(Vector):
    """
    Vector of activation values for one dense layer.

    Construction:
        DenseVectorLayer(num_neurons=3, activation='relu')          # zeros
        DenseVectorLayer(initial_values=[0.1, 0.2], activation='tanh')
        DenseVectorLayer.from_definition(LayerDefinition(...))

    Attributes:
        activation_key: Registry name of the activation
        activation: Scalar activation function
        activation_gradient: Its derivative
    """

    __slots__ = ('activation_key', 'activation', 'activation_gradient')

    def __init__(
        self,
        num_neurons: int = 0,
        activation: ActivationName = 'sigmoid',
        initial_values: Any = None,
    ):
        if initial_values is not None:
            values = as_values(initial_values, 'initial_values')
            if values.shape[0] == 0:
                raise _invalid_layer("initial_values is empty")
            if (
                isinstance(num_neurons, numbers.Integral)
                and num_neurons > 0
                and num_neurons != values.shape[0]
            ):
                warnings.warn(
                    f"num_neurons={num_neurons} ignored, initial_values has "
                    f"{values.shape[0]} values",
                    UserWarning,
                    stacklevel=2,
                )
        else:
            if isinstance(num_neurons, bool) or not isinstance(num_neurons, numbers.Integral):
                raise InvalidLayerSpecError(
                    f"[LAYC] num_neurons must be an integer, got {type(num_neurons).__name__}"
                )
            if num_neurons <= 0:
                raise _invalid_layer(f"num_neurons={num_neurons} and no initial_values")
            values = np.zeros(int(num_neurons), dtype=np.float64)

        pair = get_activation(activation)
        self._data = values
        self.activation_key = pair.name
        self.activation = pair.activation
        self.activation_gradient = pair.gradient
        logger.debug("Built %d-neuron layer (activation=%s)", values.shape[0], pair.name)

    @classmethod
    def from_definition(cls, definition: LayerDefinition) -> DenseVectorLayer:
        """Build a layer from a LayerDefinition."""
        return cls(
            num_neurons=definition.num_neurons,
            activation=definition.activation,
            initial_values=definition.initial_values,
        )

    def forward_pass(
        self,
        weights: Matrix,
        bias: Vector,
        activation: ActivationName = 'sigmoid',
    ) -> DenseVectorLayer:
        """
        Compute the next layer's activations.

        Args:
            weights: (next width) x len(self) matrix
            bias: Vector of length weights.num_rows
            activation: Activation key of the returned layer

        Returns:
            New DenseVectorLayer; self is unchanged.

        Raises:
            DimensionMismatchError: weights.num_cols != len(self) or
                len(bias) != weights.num_rows
            UnknownActivationError: activation is not a registered key
            UnsupportedOperandError: weights is not a Matrix or bias not a Vector
        """
        _require(weights, Matrix, 'weights')
        _require(bias, Vector, 'bias')
        get_activation(activation)

        z = bias.add(weights.dot(self))
        out = z.apply(self.activation)
        logger.debug(
            "Forward pass %d -> %d (%s, next=%s)",
            len(self), len(out), self.activation_key, activation,
        )
        return DenseVectorLayer(
            num_neurons=len(out),
            activation=activation,
            initial_values=out,
        )

    def backward_pass(self, weights: Matrix, incoming_gradient: Vector) -> Vector:
        """
        Local error signal to propagate to the previous layer.

        Args:
            weights: Matrix with num_rows == len(incoming_gradient) and
                num_cols == len(self)
            incoming_gradient: Gradient arriving from the next layer

        Returns:
            Plain Vector of length len(self).

        Raises:
            DimensionMismatchError: on either shape violation
            UnsupportedOperandError: wrong operand types
        """
        _require(weights, Matrix, 'weights')
        _require(incoming_gradient, Vector, 'incoming_gradient')

        propagated = weights.transpose().dot(incoming_gradient)
        local = propagated.direct_dot(self.apply(self.activation_gradient))
        logger.debug(
            "Backward pass %d -> %d (%s)",
            len(incoming_gradient), len(local), self.activation_key,
        )
        return local

    def __repr__(self) -> str:
        return f"DenseVectorLayer({self._data.tolist()}, activation={self.activation_key!r})"


def _require(value: Any, expected: type, name: str) -> None:
    if not isinstance(value, expected):
        raise UnsupportedOperandError(
            f"{name} must be a {expected.__name__}, got {type(value).__name__}",
            operand_type=type(value).__name__,
        )
