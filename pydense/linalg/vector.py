"""
Vector: fixed-length ordered sequence of real numbers.

Wraps an owned, contiguous float64 buffer. Every operation returns a new
Vector (or a float); the buffer itself is never handed out.

Operations:
    add          element-wise sum
    direct_dot   element-wise (Hadamard) product
    vector_dot   inner product
    number_dot   scaling by a scalar
    dot          dispatch between vector_dot and number_dot
    outer_dot    outer product, returns a Matrix
    norm         Euclidean norm
    apply        element-wise scalar function
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.exceptions import (
    IndexOutOfBoundsError,
    UnsupportedOperandError,
    ValidationError,
)
from pydense.core.tolerances import DEFAULT, ToleranceTier, select_tolerance
from pydense.core.validation import check_same_shape, is_scalar
from pydense.linalg._common import as_values

if TYPE_CHECKING:
    from pydense.linalg.matrix import Matrix


ScalarFunction = Callable[[float], float]


class Vector:
    """
    Immutable-length real vector.

    Construction:
        Vector(1, 2, 3)
        Vector.from_array(np.array([1.0, 2.0, 3.0]))
    """

    __slots__ = ('_data',)

    def __init__(self, *values: float):
        self._data = as_values(values, 'values')

    @classmethod
    def from_array(cls, values: ArrayLike) -> Vector:
        """Build a Vector from any 1D array-like (list, ndarray, Vector)."""
        return Vector._from_buffer(as_values(values, 'values'))

    @classmethod
    def zeros(cls, length: int) -> Vector:
        """Vector of `length` zeros."""
        if length < 0:
            raise ValidationError(f"length must be non-negative, got {length}")
        return Vector._from_buffer(np.zeros(length, dtype=np.float64))

    @staticmethod
    def _from_buffer(data: NDArray[np.float64]) -> Vector:
        # Takes ownership of `data`; callers pass freshly computed arrays.
        vec = Vector.__new__(Vector)
        vec._data = data
        return vec

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------

    def add(self, other: Vector) -> Vector:
        """Element-wise sum."""
        other_data = self._operand(other, 'VECADD')
        return Vector._from_buffer(self._data + other_data)

    def direct_dot(self, other: Vector) -> Vector:
        """Element-wise (Hadamard) product."""
        other_data = self._operand(other, 'VECHAD')
        return Vector._from_buffer(self._data * other_data)

    def vector_dot(self, other: Vector) -> float:
        """Inner product sum(a_i * b_i)."""
        other_data = self._operand(other, 'VECMUL')
        return float(np.dot(self._data, other_data))

    def number_dot(self, scalar: float) -> Vector:
        """Every element multiplied by `scalar`."""
        if not is_scalar(scalar):
            raise UnsupportedOperandError(
                f"[VECMUL] expected a real scalar, got {type(scalar).__name__}",
                operand_type=type(scalar).__name__,
            )
        return Vector._from_buffer(self._data * float(scalar))

    def dot(self, other: Vector | float) -> float | Vector:
        """
        Generic product.

        Vector operand -> inner product (float).
        Real scalar    -> scaled Vector.

        Raises:
            DimensionMismatchError: Vector operand of a different length
            UnsupportedOperandError: any other operand type
        """
        if isinstance(other, Vector):
            return self.vector_dot(other)
        if is_scalar(other):
            return self.number_dot(other)
        raise UnsupportedOperandError(
            f"[VECMUL] operand must be a Vector or a number, got {type(other).__name__}",
            operand_type=type(other).__name__,
        )

    def outer_dot(self, other: Vector) -> Matrix:
        """
        Outer product: n x m Matrix with cell (i, j) = a[i] * b[j].

        The two lengths are unrelated; both must be at least 1.
        """
        from pydense.linalg.matrix import Matrix

        if not isinstance(other, Vector):
            raise UnsupportedOperandError(
                f"[VECOUT] operand must be a Vector, got {type(other).__name__}",
                operand_type=type(other).__name__,
            )
        return Matrix.from_array(np.outer(self._data, other._data))

    def norm(self) -> float:
        """Euclidean norm."""
        return float(np.sqrt(np.dot(self._data, self._data)))

    def apply(self, f: ScalarFunction) -> Vector:
        """New Vector with `f` applied to every element."""
        n = self._data.shape[0]
        out = np.fromiter((f(x) for x in self._data.tolist()), dtype=np.float64, count=n)
        return Vector._from_buffer(out)

    def _operand(self, other: Any, operation: str) -> NDArray[np.float64]:
        if not isinstance(other, Vector):
            raise UnsupportedOperandError(
                f"[{operation}] operand must be a Vector, got {type(other).__name__}",
                operand_type=type(other).__name__,
            )
        check_same_shape(self._data, other._data, operation)
        return other._data

    # -----------------------------------------------------------------
    # Comparison and conversion
    # -----------------------------------------------------------------

    def allclose(self, other: Vector, tier: str | ToleranceTier = DEFAULT) -> bool:
        """Approximate equality under a tolerance tier; False if lengths differ."""
        tol = select_tolerance(tier)
        if not isinstance(other, Vector) or other._data.shape != self._data.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=tol.rtol, atol=tol.atol))

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the values as a 1D numpy array."""
        return self._data.copy()

    def tolist(self) -> list[float]:
        return self._data.tolist()

    def __array__(self, dtype=None, copy=None) -> NDArray:
        return np.array(self._data, dtype=dtype)

    def __len__(self) -> int:
        return self._data.shape[0]

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __getitem__(self, index: int | slice) -> float | Vector:
        n = self._data.shape[0]
        if isinstance(index, slice):
            return Vector._from_buffer(self._data[index].copy())
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise ValidationError(
                f"element index must be an integer, got {type(index).__name__}"
            )
        if not -n <= index < n:
            raise IndexOutOfBoundsError(
                f"element index {index} out of bounds for length {n}",
                index=int(index),
                bound=n,
                axis='element',
            )
        return float(self._data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()})"
