"""
LayerDefinition: declarative description of a dense layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class LayerDefinition:
    """
    Parameters for building a DenseVectorLayer.

    Attributes:
        num_neurons: Layer width when no initial values are given
        activation: Registry name of the layer's activation
        initial_values: Explicit activation values; takes precedence over
            num_neurons when given
    """
    num_neurons: int = 0
    activation: str = 'sigmoid'
    initial_values: Sequence[float] | None = None
