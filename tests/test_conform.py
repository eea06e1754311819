"""
Tests for shape validation and pressure broadcasting.
"""

import numpy as np
import pytest

from pyosmotic.calc.conform import check_nargs, conform_inputs, restore_orientation
from pyosmotic.errors import ArgumentCountError, OsmoticError, ShapeMismatchError


class TestCheckNargs:
    """Test argument counting."""

    def test_three_inputs_pass(self):
        check_nargs((1, 2, 3), 'f')

    @pytest.mark.parametrize('args', [(), (1,), (1, 2), (1, 2, 3, 4)])
    def test_wrong_count_raises(self, args):
        with pytest.raises(ArgumentCountError, match='Requires 3 inputs'):
            check_nargs(args, 'f')

    def test_error_is_type_error(self):
        """ArgumentCountError is also a TypeError and an OsmoticError."""
        with pytest.raises(TypeError):
            check_nargs((1, 2), 'f')
        assert issubclass(ArgumentCountError, OsmoticError)


class TestPressureBroadcast:
    """Test each broadcast rule for p against a 3x4 grid."""

    SA = np.full((3, 4), 35.0)
    t = np.full((3, 4), 10.0)

    def test_scalar(self):
        c = conform_inputs(self.SA, self.t, 100.0)
        np.testing.assert_array_equal(c.p, np.full((3, 4), 100.0))

    def test_one_by_one(self):
        c = conform_inputs(self.SA, self.t, [[7.0]])
        np.testing.assert_array_equal(c.p, np.full((3, 4), 7.0))

    def test_row(self):
        row = np.array([[1.0, 2.0, 3.0, 4.0]])
        c = conform_inputs(self.SA, self.t, row)
        np.testing.assert_array_equal(c.p, np.repeat(row, 3, axis=0))

    def test_column(self):
        col = np.array([[1.0], [2.0], [3.0]])
        c = conform_inputs(self.SA, self.t, col)
        np.testing.assert_array_equal(c.p, np.repeat(col, 4, axis=1))

    def test_transposed_column(self):
        """A 1xM row is read as the M pressures of each row."""
        p = np.array([[1.0, 2.0, 3.0]])
        c = conform_inputs(self.SA, self.t, p)
        np.testing.assert_array_equal(c.p, np.repeat(p.T, 4, axis=1))

    def test_transposed_row(self):
        """An Nx1 column is read as the N pressures of each column."""
        p = np.array([[1.0], [2.0], [3.0], [4.0]])
        c = conform_inputs(self.SA, self.t, p)
        np.testing.assert_array_equal(c.p, np.repeat(p.T, 3, axis=0))

    def test_full_grid(self):
        p = np.arange(12.0).reshape(3, 4)
        c = conform_inputs(self.SA, self.t, p)
        np.testing.assert_array_equal(c.p, p)

    def test_one_dimensional_row(self):
        c = conform_inputs(self.SA, self.t, [1.0, 2.0, 3.0, 4.0])
        np.testing.assert_array_equal(c.p[2], [1.0, 2.0, 3.0, 4.0])

    def test_unconformable_raises(self):
        with pytest.raises(ShapeMismatchError, match=r'\(2, 5\)'):
            conform_inputs(np.ones((3, 3)), np.ones((3, 3)), np.ones((2, 5)))

    def test_pressure_is_a_copy(self):
        p = np.arange(12.0).reshape(3, 4)
        c = conform_inputs(self.SA, self.t, p)
        c.p[0, 0] = -1.0
        assert p[0, 0] == 0.0


class TestShapeValidation:
    """Test SA/t shape checks."""

    def test_sa_t_mismatch(self):
        with pytest.raises(ShapeMismatchError, match='same dimensions'):
            conform_inputs(np.ones((3, 4)), np.ones((4, 3)), 0.0)

    def test_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            conform_inputs(np.ones((2, 2)), np.ones((2, 3)), 0.0)

    def test_three_dimensional_rejected(self):
        with pytest.raises(ShapeMismatchError, match='at most 2 dimensions'):
            conform_inputs(np.ones((2, 2, 2)), np.ones((2, 2, 2)), 0.0)


class TestOrientation:
    """Test single-row transposition bookkeeping."""

    def test_single_row_is_transposed(self):
        SA = np.array([[30.0, 35.0, 40.0]])
        c = conform_inputs(SA, SA + 1, [[5.0]])
        assert c.transposed
        assert c.SA.shape == (3, 1)
        assert c.t.shape == (3, 1)
        assert c.p.shape == (3, 1)

    def test_multi_row_not_transposed(self):
        c = conform_inputs(np.ones((2, 3)), np.ones((2, 3)), 0.0)
        assert not c.transposed
        assert c.SA.shape == (2, 3)

    def test_restore_single_row(self):
        SA = np.array([[30.0, 35.0, 40.0]])
        c = conform_inputs(SA, SA, 0.0)
        out = restore_orientation(c.SA * 2, c)
        np.testing.assert_array_equal(out, SA * 2)

    @pytest.mark.parametrize('SA', [35.0, [35.0, 36.0], [[35.0], [36.0]]])
    def test_restore_original_shape(self, SA):
        c = conform_inputs(SA, SA, 0.0)
        out = restore_orientation(np.zeros(c.SA.shape), c)
        assert out.shape == np.shape(SA)
