"""
Tests for Matrix construction, cloning and element access.
"""

import numpy as np
import pytest

from pymatrix import Matrix, ValidationError
from pymatrix.core.exceptions import DimensionError
from pymatrix.core.protocols import MatrixLike


class TestConstruction:
    """Matrix(rows, columns) allocates a zero-filled row-major buffer."""

    @pytest.mark.parametrize("rows,columns", [(0, 0), (0, 4), (4, 0), (1, 1), (3, 7)])
    def test_buffer_length_and_zeros(self, rows, columns):
        m = Matrix(rows, columns)
        assert m.rows == rows
        assert m.columns == columns
        assert m.shape == (rows, columns)
        assert m.size == rows * columns
        assert m.buffer.shape == (rows * columns,)
        assert m.buffer.dtype == np.float64
        assert np.all(m.buffer == 0.0)

    def test_negative_dimension_rejected(self):
        with pytest.raises(ValidationError, match="columns"):
            Matrix(2, -1)

    def test_float_dimension_rejected(self):
        with pytest.raises(ValidationError, match="rows"):
            Matrix(2.0, 3)

    def test_shape_is_read_only(self):
        m = Matrix(2, 2)
        with pytest.raises(AttributeError):
            m.rows = 5

    def test_satisfies_protocol(self):
        assert isinstance(Matrix(1, 1), MatrixLike)

    def test_repr(self):
        assert repr(Matrix(2, 3)) == "Matrix(rows=2, columns=3)"

    def test_package_metadata(self):
        import pymatrix
        assert pymatrix.__version__ == "0.1.0"
        assert pymatrix.__author__


class TestFromArray:

    def test_nested_lists(self):
        m = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        np.testing.assert_array_equal(m.buffer, [1, 2, 3, 4, 5, 6])

    def test_1d_becomes_row(self):
        m = Matrix.from_array([1.0, 2.0])
        assert m.shape == (1, 2)

    def test_copies_input(self):
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = Matrix.from_array(source)
        source[0, 0] = 99.0
        assert m[0, 0] == 1.0

    def test_fortran_input_stored_c_contiguous(self):
        source = np.asfortranarray([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        m = Matrix.from_array(source)
        assert m.buffer.flags['C_CONTIGUOUS']
        np.testing.assert_array_equal(m.buffer, [1, 2, 3, 4, 5, 6])

    def test_3d_rejected(self):
        with pytest.raises(DimensionError):
            Matrix.from_array(np.ones((2, 2, 2)))

    def test_round_trip_to_array(self):
        data = np.arange(12.0).reshape(3, 4)
        np.testing.assert_array_equal(Matrix.from_array(data).to_array(), data)

    def test_to_array_is_copy(self, m23):
        out = m23.to_array()
        out[0, 0] = -1.0
        assert m23[0, 0] == 1.0


class TestElementAccess:

    def test_row_major_indexing(self, m23):
        assert m23[0, 0] == 1.0
        assert m23[0, 2] == 3.0
        assert m23[1, 0] == 4.0
        assert m23[1, 2] == 6.0

    @pytest.mark.parametrize("key", [(2, 0), (0, 3), (-1, 0)])
    def test_out_of_range(self, m23, key):
        with pytest.raises(IndexError):
            m23[key]


class TestClone:
    """clone() produces an independent deep copy."""

    def test_same_shape_and_values(self, m23):
        c = m23.clone()
        assert c is not m23
        assert c == m23

    def test_mutating_clone_leaves_source(self, m23):
        c = m23.clone()
        c.buffer[0] = 100.0
        c.multiply_by_scalar(2.0)
        assert m23[0, 0] == 1.0

    def test_mutating_source_leaves_clone(self, m23):
        c = m23.clone()
        m23.buffer[5] = -6.0
        assert c[1, 2] == 6.0

    def test_clone_of_empty(self):
        c = Matrix(0, 3).clone()
        assert c.shape == (0, 3)
        assert c.size == 0


class TestEquality:

    def test_equal(self):
        assert Matrix(2, 2).set([1, 2, 3, 4]) == Matrix(2, 2).set([1, 2, 3, 4])

    def test_same_buffer_different_shape(self):
        assert Matrix(2, 3) != Matrix(3, 2)

    def test_nan_never_equal(self):
        a = Matrix(1, 1).set([np.nan])
        assert not a.equals(a.clone())

    def test_non_matrix(self):
        assert Matrix(1, 1) != [0.0]
        assert not Matrix(1, 1).equals([0.0])

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix(1, 1))
