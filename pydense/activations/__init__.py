"""
Activation registry.

Public API:
    get_activation(name)  - (activation, gradient) pair by name
    list_activations()    - registered names
"""

from pydense.activations.registry import (
    ActivationFunction,
    ActivationName,
    ActivationPair,
    get_activation,
    list_activations,
)

__all__ = [
    "ActivationFunction",
    "ActivationName",
    "ActivationPair",
    "get_activation",
    "list_activations",
]
