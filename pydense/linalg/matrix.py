"""
Matrix: rectangular 2D array of real numbers built from row vectors.

Wraps an owned, contiguous float64 buffer. The shape is fixed at
construction; cell values change only through set_row / set_column.
Everything else returns a new Matrix, Vector or float.

Operations:
    add              element-wise sum
    normal_dot       A . B
    transposed_dot   A^T . B without building A^T
    matrix_dot       normal_dot or transposed_dot
    vector_dot       A . v
    number_dot       A * s
    dot              dispatch on operand type
    transpose        A^T
    norm             entrywise L1 norm
    apply            element-wise scalar function
    get_row / get_column / set_row / set_column
    vector_apply     Vector -> Vector function over rows or columns
    vector_reduce    left fold over rows or columns
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.exceptions import (
    DimensionMismatchError,
    InsufficientRankError,
    UnsupportedOperandError,
    ValidationError,
)
from pydense.core.tolerances import DEFAULT, ToleranceTier, select_tolerance
from pydense.core.validation import (
    check_array,
    check_index,
    check_ndim,
    check_rows,
    check_same_shape,
    is_scalar,
)
from pydense.linalg._common import Axis, as_values, check_axis
from pydense.linalg.vector import ScalarFunction, Vector


VectorizedFunction = Callable[[Vector], Vector]
VectorizedAccFunction = Callable[[Vector, Vector], Vector]


def _shape_mismatch(operation: str, a: NDArray, b: NDArray, what: str) -> DimensionMismatchError:
    return DimensionMismatchError(
        f"[{operation}] {what} (a = {list(a.shape)}, b = {list(b.shape)})",
        operation=operation,
        left_shape=a.shape,
        right_shape=b.shape,
    )


class Matrix:
    """
    Rectangular real matrix.

    Construction:
        Matrix([1, 2], [3, 4])
        Matrix.from_array(np.eye(3))

    Rows must be non-empty and all of the same length; ragged input
    raises RaggedRowsError.
    """

    __slots__ = ('_data',)

    def __init__(self, *rows: ArrayLike):
        self._data = check_rows(rows, 'rows')

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """Build a Matrix from a 2D array-like (ndarray, nested lists, Matrix)."""
        data = check_array(array, 'array')
        check_ndim(data, 2, 'array')
        if data.shape[0] < 1 or data.shape[1] < 1:
            raise ValidationError(
                f"array: a matrix needs at least one row and one column, got shape {data.shape}"
            )
        return Matrix._from_buffer(data)

    @classmethod
    def zeros(cls, num_rows: int, num_cols: int) -> Matrix:
        """num_rows x num_cols matrix of zeros."""
        return cls.from_array(np.zeros((num_rows, num_cols), dtype=np.float64))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """size x size identity matrix."""
        return cls.from_array(np.eye(size, dtype=np.float64))

    @staticmethod
    def _from_buffer(data: NDArray[np.float64]) -> Matrix:
        # Takes ownership of `data`; callers pass freshly computed arrays.
        mat = Matrix.__new__(Matrix)
        mat._data = np.ascontiguousarray(data, dtype=np.float64)
        return mat

    @property
    def num_rows(self) -> int:
        return self._data.shape[0]

    @property
    def num_cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self._data.shape[0], self._data.shape[1])

    def copy(self) -> Matrix:
        return Matrix._from_buffer(self._data.copy())

    # -----------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum; both matrices must have the same shape."""
        self._require_matrix(other, 'MATADD')
        check_same_shape(self._data, other._data, 'MATADD')
        return Matrix._from_buffer(self._data + other._data)

    def normal_dot(self, b: Matrix) -> Matrix:
        """
        Matrix product A . B.

        Requires A.num_cols == B.num_rows; result is A.num_rows x B.num_cols.
        """
        self._require_matrix(b, 'MATMUL')
        if self.num_cols != b.num_rows:
            raise _shape_mismatch(
                'MATMUL', self._data, b._data, 'matrices must have consistent dimensions'
            )
        return Matrix._from_buffer(self._data @ b._data)

    def transposed_dot(self, b: Matrix) -> Matrix:
        """
        Matrix product A^T . B.

        Requires A.num_rows == B.num_rows (the contraction runs over rows of
        both operands); result is A.num_cols x B.num_cols.
        """
        self._require_matrix(b, 'MATMUL')
        if self.num_rows != b.num_rows:
            raise _shape_mismatch(
                'MATMUL', self._data, b._data,
                'matrices must share their row count for a transposed product',
            )
        # .T is a strided view, no copy of A is made
        return Matrix._from_buffer(self._data.T @ b._data)

    def matrix_dot(self, b: Matrix, transpose: bool = False) -> Matrix:
        """A . B, or A^T . B when `transpose` is set."""
        if not transpose:
            return self.normal_dot(b)
        return self.transposed_dot(b)

    def vector_dot(self, b: Vector) -> Vector:
        """Matrix-vector product; requires num_cols == len(b)."""
        if not isinstance(b, Vector):
            raise UnsupportedOperandError(
                f"[VECMUL] operand must be a Vector, got {type(b).__name__}",
                operand_type=type(b).__name__,
            )
        b_data = b.to_numpy()
        if self.num_cols != b_data.shape[0]:
            raise DimensionMismatchError(
                f"[VECMUL] vector length must match column count "
                f"(a = [{self.num_rows}, {self.num_cols}], b = [{b_data.shape[0]}])",
                operation='VECMUL',
                left_shape=self.shape,
                right_shape=b_data.shape,
            )
        return Vector._from_buffer(self._data @ b_data)

    def number_dot(self, b: float) -> Matrix:
        """Every cell multiplied by the scalar `b`."""
        if not is_scalar(b):
            raise UnsupportedOperandError(
                f"[MATMUL] expected a real scalar, got {type(b).__name__}",
                operand_type=type(b).__name__,
            )
        return Matrix._from_buffer(self._data * float(b))

    def dot(self, b: Matrix | Vector | float, transpose: bool = False) -> Matrix | Vector:
        """
        Generic product.

        Matrix operand -> matrix_dot(b, transpose)
        Vector operand -> vector_dot(b)
        Real scalar    -> number_dot(b)

        `transpose` only affects the Matrix case.

        Raises:
            DimensionMismatchError: incompatible shapes
            UnsupportedOperandError: any other operand type
        """
        if isinstance(b, Matrix):
            return self.matrix_dot(b, transpose)
        if isinstance(b, Vector):
            return self.vector_dot(b)
        if is_scalar(b):
            return self.number_dot(b)
        raise UnsupportedOperandError(
            f"[MATMUL] operand must be a Matrix, Vector or number, got {type(b).__name__}",
            operand_type=type(b).__name__,
        )

    def transpose(self) -> Matrix:
        """New num_cols x num_rows matrix with result[j][i] = self[i][j]."""
        return Matrix._from_buffer(self._data.T.copy())

    def norm(self) -> float:
        """
        Entrywise L1 norm: sum of absolute values of all cells.

        Not an operator norm. Used as a cheap magnitude, e.g. to check
        that ||A - B|| is close to zero.
        """
        return float(np.abs(self._data).sum())

    def apply(self, f: ScalarFunction) -> Matrix:
        """New Matrix with `f` applied to every cell."""
        flat = self._data.ravel().tolist()
        out = np.fromiter((f(x) for x in flat), dtype=np.float64, count=len(flat))
        return Matrix._from_buffer(out.reshape(self._data.shape))

    # -----------------------------------------------------------------
    # Row / column access
    # -----------------------------------------------------------------

    def get_row(self, idx: int) -> Vector:
        """Copy of row `idx`."""
        idx = check_index(idx, self.num_rows, 'row')
        return Vector._from_buffer(self._data[idx, :].copy())

    def get_column(self, idx: int) -> Vector:
        """Copy of column `idx`."""
        idx = check_index(idx, self.num_cols, 'column')
        return Vector._from_buffer(self._data[:, idx].copy())

    def set_row(self, idx: int, row: Vector | ArrayLike) -> None:
        """Overwrite row `idx` in place; `row` must have num_cols values."""
        idx = check_index(idx, self.num_rows, 'row')
        values = as_values(row, 'row')
        if values.shape[0] != self.num_cols:
            raise DimensionMismatchError(
                f"[ROW] row must have {self.num_cols} values, got {values.shape[0]}",
                operation='ROW',
                left_shape=(self.num_cols,),
                right_shape=values.shape,
            )
        self._data[idx, :] = values

    def set_column(self, idx: int, col: Vector | ArrayLike) -> None:
        """Overwrite column `idx` in place; `col` must have num_rows values."""
        idx = check_index(idx, self.num_cols, 'column')
        values = as_values(col, 'column')
        if values.shape[0] != self.num_rows:
            raise DimensionMismatchError(
                f"[COL] column must have {self.num_rows} values, got {values.shape[0]}",
                operation='COL',
                left_shape=(self.num_rows,),
                right_shape=values.shape,
            )
        self._data[:, idx] = values

    # -----------------------------------------------------------------
    # Axis-wise operations
    # -----------------------------------------------------------------

    def vector_apply(self, f: VectorizedFunction, axis: Axis = 'row') -> Matrix:
        """
        Apply a Vector -> Vector function to every row or column.

        Row axis: f(get_row(idx)) for each idx, assembled as the rows of a
        new Matrix. The results may change the row width but must agree
        with each other.

        Column axis: f(get_column(idx)) for each idx, written into a copy
        with set_column, so each result must have num_rows values.

        The receiver is not modified.
        """
        check_axis(axis)
        if axis == 'row':
            rows = [as_values(f(self.get_row(idx)), 'row') for idx in range(self.num_rows)]
            return Matrix(*rows)

        result = self.copy()
        for idx in range(self.num_cols):
            result.set_column(idx, f(self.get_column(idx)))
        return result

    def vector_reduce(self, f: VectorizedAccFunction, axis: Axis = 'row') -> Vector:
        """
        Left fold over rows (or columns), seeded with the first one.

        Raises:
            InsufficientRankError: fewer than two rows/columns on `axis`
        """
        check_axis(axis)
        if axis == 'row':
            size, getter = self.num_rows, self.get_row
        else:
            size, getter = self.num_cols, self.get_column

        if size < 2:
            raise InsufficientRankError(
                f"[MATACC] unable to accumulate because matrix has less than two "
                f"{axis}s (got {size})",
                axis=axis,
                size=size,
            )

        result = getter(0)
        for idx in range(1, size):
            result = f(result, getter(idx))
        if not isinstance(result, Vector):
            result = Vector.from_array(result)
        return result

    # -----------------------------------------------------------------
    # Comparison and conversion
    # -----------------------------------------------------------------

    def allclose(self, other: Matrix, tier: str | ToleranceTier = DEFAULT) -> bool:
        """Approximate equality under a tolerance tier; False if shapes differ."""
        tol = select_tolerance(tier)
        if not isinstance(other, Matrix) or other.shape != self.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=tol.rtol, atol=tol.atol))

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the cells as a 2D numpy array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def _require_matrix(self, other: Any, operation: str) -> None:
        if not isinstance(other, Matrix):
            raise UnsupportedOperandError(
                f"[{operation}] operand must be a Matrix, got {type(other).__name__}",
                operand_type=type(other).__name__,
            )

    def __array__(self, dtype=None, copy=None) -> NDArray:
        return np.array(self._data, dtype=dtype)

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: int | tuple[int, int]) -> Vector | float:
        if isinstance(index, tuple):
            if len(index) != 2:
                raise ValidationError(f"expected (row, column) index, got {index!r}")
            i = check_index(index[0], self.num_rows, 'row')
            j = check_index(index[1], self.num_cols, 'column')
            return float(self._data[i, j])
        return self.get_row(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()})"
