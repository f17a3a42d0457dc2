"""
Tests for Vector.

Covers construction, arithmetic, dispatch in dot(), outer products, norm,
element-wise apply, and the value-type behaviour (copies, equality).
"""

import math

import numpy as np
import pytest

from pydense import Matrix, Vector
from pydense.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    UnsupportedOperandError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_values(self):
        v = Vector(1, 2, 3)
        assert len(v) == 3
        assert v.tolist() == [1.0, 2.0, 3.0]

    def test_from_array(self):
        v = Vector.from_array(np.array([0.5, -1.5]))
        assert v.tolist() == [0.5, -1.5]

    def test_from_array_copies(self):
        source = np.array([1.0, 2.0])
        v = Vector.from_array(source)
        source[0] = 10.0
        assert v[0] == 1.0

    def test_empty(self):
        assert len(Vector()) == 0

    def test_zeros(self):
        assert Vector.zeros(3) == Vector(0, 0, 0)

    def test_zeros_negative(self):
        with pytest.raises(ValidationError):
            Vector.zeros(-1)

    def test_list_argument_is_2d(self):
        """Each positional argument is one value; lists are not flattened."""
        with pytest.raises(DimensionMismatchError, match="expected 1D"):
            Vector([1, 2], [3, 4])

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            Vector("a", "b")


# ═══════════════════════════════════════════════════════════════════════
# Element-wise arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestAdd:

    def test_adds(self):
        assert Vector(1, 2, 3).add(Vector(4, 5, 6)) == Vector(5, 7, 9)

    def test_is_addition_not_product(self):
        assert Vector(2, 3).add(Vector(2, 3)) == Vector(4, 6)

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError, match=r"a = \[3\], b = \[2\]"):
            Vector(1, 2, 3).add(Vector(1, 2))

    def test_non_vector(self):
        with pytest.raises(UnsupportedOperandError):
            Vector(1, 2).add([1, 2])

    def test_does_not_mutate(self):
        a = Vector(1, 2)
        a.add(Vector(1, 1))
        assert a == Vector(1, 2)


class TestDirectDot:

    def test_hadamard(self):
        assert Vector(1, 2, 3).direct_dot(Vector(4, 5, 6)) == Vector(4, 10, 18)

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            Vector(1, 2).direct_dot(Vector(1, 2, 3))


# ═══════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════


class TestDot:

    def test_inner_product(self):
        assert Vector(1, 2, 3).dot(Vector(4, 5, 6)) == 32

    def test_inner_product_returns_float(self):
        assert isinstance(Vector(1, 2).dot(Vector(3, 4)), float)

    def test_scalar(self):
        assert Vector(1, -2).dot(3) == Vector(3, -6)

    def test_numpy_scalar(self):
        assert Vector(1, 2).dot(np.float64(0.5)) == Vector(0.5, 1.0)

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            Vector(1, 2, 3).dot(Vector(1, 2))

    @pytest.mark.parametrize("operand", ["2", [1, 2], None, True])
    def test_unsupported(self, operand):
        with pytest.raises(UnsupportedOperandError):
            Vector(1, 2).dot(operand)

    def test_vector_dot_and_number_dot(self):
        v = Vector(1, 2)
        assert v.vector_dot(Vector(1, 1)) == 3.0
        assert v.number_dot(2) == Vector(2, 4)

    def test_number_dot_rejects_vector(self):
        with pytest.raises(UnsupportedOperandError):
            Vector(1, 2).number_dot(Vector(1, 2))

    def test_norm_is_sqrt_self_dot(self, random_vector):
        for length in (1, 4, 17):
            v = random_vector(length)
            assert math.isclose(v.norm(), math.sqrt(v.dot(v)), rel_tol=1e-12)

    @pytest.mark.parametrize("s", [-3.0, 0.0, 0.25, 7.0])
    def test_scaled_norm(self, random_vector, s):
        v = random_vector(6)
        assert math.isclose(v.number_dot(s).norm(), abs(s) * v.norm(), rel_tol=1e-12, abs_tol=1e-12)


class TestOuterDot:

    def test_scenario(self):
        assert Vector(1, 2).outer_dot(Vector(3, 4)) == Matrix([3, 4], [6, 8])

    def test_shape_unrelated_lengths(self):
        m = Vector(1, 2, 3).outer_dot(Vector(1, 2))
        assert m.shape == (3, 2)
        assert m[2, 1] == 6.0

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            Vector().outer_dot(Vector(1, 2))

    def test_non_vector(self):
        with pytest.raises(UnsupportedOperandError):
            Vector(1, 2).outer_dot(Matrix([1, 2]))


# ═══════════════════════════════════════════════════════════════════════
# Norm / apply
# ═══════════════════════════════════════════════════════════════════════


class TestNorm:

    def test_pythagoras(self):
        assert Vector(3, 4).norm() == 5.0

    def test_empty(self):
        assert Vector().norm() == 0.0


class TestApply:

    def test_applies_each_element(self):
        assert Vector(1, 2, 3).apply(lambda a: a * a) == Vector(1, 4, 9)

    def test_receives_python_floats(self):
        seen = []
        Vector(1, 2).apply(lambda a: seen.append(type(a)) or 0.0)
        assert seen == [float, float]

    def test_original_unchanged(self):
        v = Vector(1, 2)
        v.apply(lambda a: 0.0)
        assert v == Vector(1, 2)


# ═══════════════════════════════════════════════════════════════════════
# Value-type behaviour
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_getitem(self):
        v = Vector(1, 2, 3)
        assert v[0] == 1.0
        assert v[-1] == 3.0

    def test_getitem_out_of_range(self):
        with pytest.raises(IndexOutOfBoundsError):
            Vector(1, 2)[2]

    def test_getitem_non_integer(self):
        with pytest.raises(ValidationError):
            Vector(1, 2)[0.5]

    def test_slice(self):
        assert Vector(1, 2, 3)[1:] == Vector(2, 3)

    def test_iter(self):
        assert list(Vector(1, 2)) == [1.0, 2.0]

    def test_to_numpy_is_copy(self):
        v = Vector(1, 2)
        arr = v.to_numpy()
        arr[0] = 100.0
        assert v[0] == 1.0

    def test_numpy_interop(self):
        np.testing.assert_array_equal(np.asarray(Vector(1, 2)), [1.0, 2.0])


class TestEquality:

    def test_equal(self):
        assert Vector(1, 2) == Vector(1.0, 2.0)

    def test_length_differs(self):
        assert Vector(1, 2) != Vector(1, 2, 0)

    def test_not_equal_to_list(self):
        assert Vector(1, 2) != [1.0, 2.0]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector(1, 2))

    def test_allclose(self):
        assert Vector(0.1 + 0.2, 1.0).allclose(Vector(0.3, 1.0))
        assert not Vector(1.0).allclose(Vector(1.001))
        assert Vector(1.0).allclose(Vector(1.00001), tier='loose')

    def test_allclose_shape_mismatch(self):
        assert not Vector(1, 2).allclose(Vector(1, 2, 3))

    def test_repr(self):
        assert repr(Vector(1, 2)) == "Vector([1.0, 2.0])"
