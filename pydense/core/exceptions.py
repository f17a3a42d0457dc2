"""
Exception hierarchy for PyDense.

All exceptions inherit from PyDenseError to allow catching any
library-specific error. Shape and operand problems are ValidationErrors:
they are detected before any arithmetic runs.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDenseError(Exception):
    """Base exception for all PyDense errors."""
    pass


class ValidationError(PyDenseError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes:
        operation: Short tag of the failing operation (e.g. 'vector.add')
        left_shape: Shape of the receiver
        right_shape: Shape of the other operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class RaggedRowsError(DimensionMismatchError):
    """
    Matrix rows do not all have the same length.

    Attributes:
        row_lengths: Length of every supplied row, in order
    """

    def __init__(self, message: str, row_lengths: tuple[int, ...] | None = None):
        super().__init__(message, operation='matrix.init')
        self.row_lengths = row_lengths


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Row, column or element index outside the valid range.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound of the valid range
        axis: 'row', 'column' or 'element'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class UnsupportedOperandError(ValidationError, TypeError):
    """
    Operand type not accepted by a polymorphic operation such as dot().

    Attributes:
        operand_type: Name of the rejected operand's type
    """

    def __init__(self, message: str, operand_type: str | None = None):
        super().__init__(message)
        self.operand_type = operand_type


class InsufficientRankError(ValidationError):
    """
    Axis reduction attempted with fewer than two rows or columns.

    Attributes:
        axis: 'row' or 'column'
        size: Number of rows/columns available along the axis
    """

    def __init__(self, message: str, axis: str | None = None, size: int | None = None):
        super().__init__(message)
        self.axis = axis
        self.size = size


class InvalidLayerSpecError(ValidationError):
    """
    Layer constructed with no values.

    Raised for zero (or negative) neurons without initial values, or for an
    empty initial value list.
    """
    pass


class UnknownActivationError(ValidationError):
    """
    Activation name not present in the registry.

    Attributes:
        name: The requested name
        valid: Registered names
    """

    def __init__(self, message: str, name: str | None = None, valid: tuple[str, ...] = ()):
        super().__init__(message)
        self.name = name
        self.valid = valid
