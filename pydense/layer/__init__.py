"""
Dense layer module.

Public API:
    DenseVectorLayer  - layer activations with forward_pass / backward_pass
    LayerDefinition   - declarative layer parameters
"""

from pydense.layer.design import LayerDefinition
from pydense.layer.dense import DenseVectorLayer

__all__ = [
    "DenseVectorLayer",
    "LayerDefinition",
]
