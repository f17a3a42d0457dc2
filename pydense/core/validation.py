"""
Input validation utilities for PyDense.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No truncation or padding of mismatched operands
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pydense.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    RaggedRowsError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to an owned float64 numpy array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (mixed types, ragged nesting) or any other non-numeric dtype. The
    returned array never shares memory with the input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return np.ascontiguousarray(result, dtype=np.float64)


def check_rows(rows: tuple[Any, ...] | list[Any], name: str) -> NDArray[np.float64]:
    """
    Validate a sequence of rows and stack them into a 2D float64 array.

    Args:
        rows: Sequence of row-like sequences
        name: Parameter name for error messages

    Returns:
        2D numpy.ndarray (len(rows) x row length)

    Raises:
        ValidationError: If there are no rows, or rows are empty
        RaggedRowsError: If rows do not all have the same length
    """
    if len(rows) == 0:
        raise ValidationError(f"{name}: a matrix needs at least one row")

    lengths = []
    for idx, row in enumerate(rows):
        if (isinstance(row, (str, bytes)) or not hasattr(row, '__len__')
                or (isinstance(row, np.ndarray) and row.ndim == 0)):
            raise ValidationError(
                f"{name}: row {idx} is not a sequence (got {type(row).__name__})"
            )
        lengths.append(len(row))

    if len(set(lengths)) > 1:
        raise RaggedRowsError(
            f"{name}: rows must have the same length, got lengths {lengths}",
            row_lengths=tuple(lengths),
        )

    if lengths[0] == 0:
        raise ValidationError(f"{name}: rows must contain at least one value")

    data = check_array([list(row) for row in rows], name)
    check_ndim(data, 2, name)
    return data


def check_ndim(array: NDArray[np.float64], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionMismatchError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionMismatchError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_same_shape(
    left: NDArray[np.float64],
    right: NDArray[np.float64],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Receiver's buffer
        right: Other operand's buffer
        operation: Tag used in the message, e.g. 'VECADD'

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if left.shape != right.shape:
        raise DimensionMismatchError(
            f"[{operation}] operands must have the same dimensions "
            f"(a = {list(left.shape)}, b = {list(right.shape)})",
            operation=operation,
            left_shape=left.shape,
            right_shape=right.shape,
        )


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify an index lies in [0, bound).

    Args:
        index: Candidate index (int or numpy integer)
        bound: Exclusive upper bound
        axis: 'row', 'column' or 'element', used in the message

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfBoundsError: If index is outside the range
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ValidationError(
            f"{axis} index must be an integer, got {type(index).__name__}"
        )
    index = int(index)
    if index < 0 or index >= bound:
        raise IndexOutOfBoundsError(
            f"{axis} index {index} out of bounds (valid range [0, {bound}))",
            index=index,
            bound=bound,
            axis=axis,
        )
    return index


def is_scalar(value: Any) -> bool:
    """True for real numbers, numpy real scalars included, but not bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))
