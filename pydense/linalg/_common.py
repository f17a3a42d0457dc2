"""
Shared helpers for the linalg module.
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from pydense.core.exceptions import ValidationError
from pydense.core.validation import check_array, check_ndim


Axis = Literal['row', 'column']

_AXES = ('row', 'column')


def check_axis(axis: Any) -> Axis:
    """Reject anything but 'row' or 'column'."""
    if axis not in _AXES:
        raise ValidationError(
            f"axis must be one of {list(_AXES)}, got {axis!r}"
        )
    return axis


def as_values(values: Any, name: str) -> NDArray[np.float64]:
    """
    Convert a Vector or 1D array-like into an owned float64 buffer.

    Raises:
        ValidationError: non-numeric input
        DimensionMismatchError: input is not 1D
    """
    data = check_array(values, name)
    check_ndim(data, 1, name)
    return data
