"""
Linear algebra module.

Fixed-length vectors and rectangular matrices backed by numpy buffers.

Public API:
    Vector   - add, direct_dot, dot, outer_dot, norm, apply
    Matrix   - add, dot (matrix / vector / scalar), transpose, norm, apply,
               row and column accessors, vector_apply, vector_reduce
"""

from pydense.linalg._common import Axis
from pydense.linalg.vector import Vector
from pydense.linalg.matrix import Matrix

__all__ = [
    "Axis",
    "Vector",
    "Matrix",
]
