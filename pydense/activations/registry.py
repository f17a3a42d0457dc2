"""
Activation functions and their analytic derivatives.

Each entry pairs a scalar nonlinearity a -> f(a) with its derivative
a -> f'(a). Both take and return plain floats so they can be passed to
Vector.apply / Matrix.apply.

    name      f(a)                 f'(a)
    sigmoid   1 / (1 + e^-a)       s(a)(1 - s(a))
    tanh      2 s(2a) - 1          1 - tanh(a)^2
    relu      max(0, a)            1 if a > 0 else 0
    swish     a s(a)               s(a) + a s(a)(1 - s(a))

The logistic function is computed with scipy.special.expit, which does
not overflow for large negative arguments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal

from scipy.special import expit

from pydense.core.exceptions import UnknownActivationError, ValidationError

logger = logging.getLogger(__name__)

ActivationFunction = Callable[[float], float]
ActivationName = Literal['sigmoid', 'tanh', 'relu', 'swish']


def sigmoid(a: float) -> float:
    return float(expit(a))


def sigmoid_gradient(a: float) -> float:
    s = sigmoid(a)
    return s * (1.0 - s)


def tanh(a: float) -> float:
    return 2.0 * sigmoid(2.0 * a) - 1.0


def tanh_gradient(a: float) -> float:
    t = tanh(a)
    return 1.0 - t * t


def relu(a: float) -> float:
    return float(max(0.0, a))


def relu_gradient(a: float) -> float:
    return 1.0 if a > 0 else 0.0


def swish(a: float) -> float:
    return float(a) * sigmoid(a)


def swish_gradient(a: float) -> float:
    s = sigmoid(a)
    return s + float(a) * s * (1.0 - s)


@dataclass(frozen=True)
class ActivationPair:
    """A named activation function and its derivative."""
    name: str
    activation: ActivationFunction
    gradient: ActivationFunction


_REGISTRY: dict[str, ActivationPair] = {
    pair.name: pair
    for pair in (
        ActivationPair('sigmoid', sigmoid, sigmoid_gradient),
        ActivationPair('tanh', tanh, tanh_gradient),
        ActivationPair('relu', relu, relu_gradient),
        ActivationPair('swish', swish, swish_gradient),
    )
}


def list_activations() -> tuple[str, ...]:
    """Registered activation names, sorted."""
    return tuple(sorted(_REGISTRY))


def get_activation(name: str) -> ActivationPair:
    """Look up an activation/gradient pair by name (case-insensitive).

    Args:
        name: One of 'sigmoid', 'tanh', 'relu', 'swish'.

    Returns:
        ActivationPair.

    Raises:
        UnknownActivationError: If the name is not registered.
        ValidationError: If `name` is not a string.
    """
    if not isinstance(name, str):
        raise ValidationError(
            f"activation name must be str, got {type(name).__name__}"
        )
    pair = _REGISTRY.get(name.lower())
    if pair is None:
        valid = list_activations()
        raise UnknownActivationError(
            f"Unknown activation: {name!r}. Valid activations: {', '.join(valid)}",
            name=name,
            valid=valid,
        )
    logger.debug("Resolved activation %r", pair.name)
    return pair
