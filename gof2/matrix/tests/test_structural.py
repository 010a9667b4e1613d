"""Tests for the structural module."""
import doctest
import unittest

from hypothesis import given
from hypothesis.strategies import integers

from gof2.field.core import ZERO, ONE
from gof2.matrix.core import ImmutableMatrixError
from gof2.matrix.structural import Identity, Zero, Rotation, Shift


MAX_SIZE = 12


def get_all_elements(m):
    rows, cols = m.size()
    return [[int(m.at(r, c)) for c in range(1, cols + 1)] for r in range(1, rows + 1)]


class TestStructural(unittest.TestCase):
    """Tests common to all the structural matrices."""

    def get_matrices(self):
        return [Identity(3, 4), Zero(4, 2), Rotation(5, 2), Shift(4, -1)]

    def test_invalid_size(self):
        for size in [0, -1]:
            with self.assertRaises(ValueError):
                Identity(size, 2)
            with self.assertRaises(ValueError):
                Zero(2, size)
            with self.assertRaises(ValueError):
                Rotation(size, 1)
            with self.assertRaises(ValueError):
                Shift(size, 1)

    def test_no_size_limit(self):
        self.assertEqual(Identity(70000, 70000).at(69999, 69999), 1)
        self.assertEqual(Zero(1, 100000).size(), (1, 100000))
        self.assertEqual(Rotation(70000, 1).at(70000, 1), 1)

    def test_out_of_bounds(self):
        for m in self.get_matrices():
            rows, cols = m.size()
            for r, c in [(0, 1), (1, 0), (rows + 1, 1), (1, cols + 1), (-1, -1)]:
                with self.assertRaises(IndexError):
                    m.at(r, c)
            with self.assertRaises(TypeError):
                m.at(1.0, 1)

    def test_immutable(self):
        for m in self.get_matrices():
            before = get_all_elements(m)
            with self.assertRaises(ImmutableMatrixError):
                m.set_at(1, 1, 1)
            with self.assertRaises(ImmutableMatrixError):
                m.add_at(1, 1, 1)
            with self.assertRaises(ImmutableMatrixError):
                m.mul_at(1, 1, 0)
            with self.assertRaises(TypeError):
                m[1, 1] = 0
            self.assertEqual(get_all_elements(m), before)

    def test_shared_constants(self):
        for m in self.get_matrices():
            rows, cols = m.size()
            for r in range(1, rows + 1):
                for c in range(1, cols + 1):
                    self.assertIn(m.at(r, c), [ZERO, ONE])
                    self.assertTrue(m.at(r, c) is ZERO or m.at(r, c) is ONE)


class TestIdentity(unittest.TestCase):
    """Tests of the Identity class."""

    def test_elements(self):
        self.assertEqual(get_all_elements(Identity(2, 3)), [[1, 0, 0], [0, 1, 0]])
        self.assertEqual(get_all_elements(Identity(3, 2)), [[1, 0], [0, 1], [0, 0]])
        self.assertEqual(list(Identity(3, 2)._ones()), [(0, 0), (1, 1)])


class TestZero(unittest.TestCase):
    """Tests of the Zero class."""

    def test_elements(self):
        self.assertEqual(get_all_elements(Zero(2, 3)), [[0, 0, 0], [0, 0, 0]])
        self.assertEqual(list(Zero(2, 3)._ones()), [])


class TestRotation(unittest.TestCase):
    """Tests of the Rotation class."""

    def test_elements(self):
        self.assertEqual(
            get_all_elements(Rotation(3, 1)),
            [[0, 1, 0], [0, 0, 1], [1, 0, 0]]
        )
        self.assertEqual(get_all_elements(Rotation(3, 0)), get_all_elements(Identity(3, 3)))
        self.assertEqual(get_all_elements(Rotation(3, -1)), get_all_elements(Rotation(3, 2)))
        self.assertEqual(Rotation(4, -1).shift, 3)
        self.assertEqual(Rotation(4, 9).shift, 1)

    @given(
        integers(min_value=1, max_value=MAX_SIZE),
        integers(min_value=-3 * MAX_SIZE, max_value=3 * MAX_SIZE),
    )
    def test_closed_form(self, size, shift):
        m = Rotation(size, shift)
        for r in range(1, size + 1):
            for c in range(1, size + 1):
                self.assertEqual(m.at(r, c), int((r - 1 + shift) % size + 1 == c))
        ones = sorted(m._ones())
        expected = sorted((r, c) for r in range(size) for c in range(size) if m.at(r + 1, c + 1))
        self.assertEqual(ones, expected)
        # a permutation matrix
        self.assertEqual(len(ones), size)


class TestShift(unittest.TestCase):
    """Tests of the Shift class."""

    def test_elements(self):
        self.assertEqual(
            get_all_elements(Shift(3, 1)),
            [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
        )
        self.assertEqual(
            get_all_elements(Shift(3, -2)),
            [[0, 0, 0], [0, 0, 0], [1, 0, 0]]
        )
        self.assertEqual(get_all_elements(Shift(3, 3)), get_all_elements(Zero(3, 3)))
        self.assertEqual(get_all_elements(Shift(3, 0)), get_all_elements(Identity(3, 3)))

    @given(
        integers(min_value=1, max_value=MAX_SIZE),
        integers(min_value=-2 * MAX_SIZE, max_value=2 * MAX_SIZE),
    )
    def test_closed_form(self, size, shift):
        m = Shift(size, shift)
        for r in range(1, size + 1):
            for c in range(1, size + 1):
                self.assertEqual(m.at(r, c), int(r + shift == c))
        ones = sorted(m._ones())
        expected = sorted((r, c) for r in range(size) for c in range(size) if m.at(r + 1, c + 1))
        self.assertEqual(ones, expected)
        self.assertEqual(len(ones), max(0, size - abs(shift)))


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import gof2.matrix.structural
    tests.addTests(doctest.DocTestSuite(gof2.matrix.structural))
    return tests
