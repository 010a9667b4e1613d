"""Tests for the core, context and printing modules."""
import doctest
import unittest

from gof2.field.core import Polynomial
from gof2.matrix.binary import SparseMatrix, FullMatrix
from gof2.matrix.context import FastPaths, SparseCompaction
from gof2.matrix.core import check_size, Matrix, MAX_DIMENSION
from gof2.matrix.polynomial import PSparseMatrix, PFullMatrix
from gof2.matrix.structural import Identity, Rotation, Shift

import gof2.matrix.context
import gof2.matrix.core
import gof2.matrix.printing


class TestMatrix(unittest.TestCase):
    """Tests of the Matrix base class."""

    def test_check_size(self):
        check_size(1, 1)
        check_size(MAX_DIMENSION, MAX_DIMENSION)
        check_size(MAX_DIMENSION + 1, 1, packed=False)
        with self.assertRaises(ValueError):
            check_size(MAX_DIMENSION + 1, 1)
        with self.assertRaises(ValueError):
            check_size(0, 0, packed=False)
        with self.assertRaises(TypeError):
            check_size("1", 1)
        with self.assertRaises(TypeError):
            check_size(True, True)
        with self.assertRaises(TypeError):
            SparseMatrix(True, 2)

    def test_abstract(self):
        m = Matrix()
        with self.assertRaises(NotImplementedError):
            m.size()
        with self.assertRaises(NotImplementedError):
            m.at(1, 1)
        with self.assertRaises(NotImplementedError):
            m.set_at(1, 1, 0)

    def test_equality(self):
        s, f, p = SparseMatrix(2, 2), FullMatrix(2, 2), PFullMatrix(2, 2)
        for m in [s, f, p]:
            m.set_at(1, 1, 1)
            m.set_at(2, 2, 1)
        self.assertEqual(s, f)
        self.assertEqual(f, p)
        self.assertEqual(p, Identity(2, 2))
        self.assertNotEqual(s, Identity(2, 3))
        p.add_at(1, 2, 0b10)
        self.assertNotEqual(p, s)
        self.assertNotEqual(s, "matrix")
        with self.assertRaises(TypeError):
            hash(s)

    def test_indexing(self):
        m = PSparseMatrix(2, 2)
        m[1, 2] = 0b11
        self.assertEqual(m[1, 2], 0b11)
        self.assertEqual((m.rows, m.cols), (2, 2))
        with self.assertRaises(TypeError):
            list(m)
        with self.assertRaises(IndexError):
            m[3, 1]

    def test_repr(self):
        self.assertEqual(repr(SparseMatrix(2, 3)), "SparseMatrix(2, 3)")
        self.assertEqual(repr(Identity(2, 3)), "Identity(2, 3)")
        self.assertEqual(repr(Rotation(3, -1)), "Rotation(3, 2)")
        self.assertEqual(repr(Shift(3, -1)), "Shift(3, -1)")


class TestContext(unittest.TestCase):
    """Tests of the context managers."""

    def test_nested(self):
        self.assertTrue(FastPaths.current_context)
        with FastPaths(False):
            self.assertFalse(FastPaths.current_context)
            with FastPaths(True):
                self.assertTrue(FastPaths.current_context)
            self.assertFalse(FastPaths.current_context)
        self.assertTrue(FastPaths.current_context)

    def test_restored_after_error(self):
        with self.assertRaises(ValueError):
            with SparseCompaction(True):
                raise ValueError("error")
        self.assertFalse(SparseCompaction.current_context)

    def test_invalid_args(self):
        with self.assertRaises(AssertionError):
            FastPaths("yes")
        with self.assertRaises(AssertionError):
            SparseCompaction(None)


class TestPrinting(unittest.TestCase):
    """Tests of the printing of matrices."""

    def test_str(self):
        self.assertEqual(str(Identity(2, 2)), "[1 0]\n[0 1]")
        m = PFullMatrix(1, 3)
        m.set_at(1, 2, Polynomial(0b1011))
        self.assertEqual(str(m), "[0, x**3 + x + 1, 0]")
        f = FullMatrix(2, 1)
        f.set_at(2, 1, 1)
        self.assertEqual(str(f), "[0]\n[1]")


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    tests.addTests(doctest.DocTestSuite(gof2.matrix.context))
    tests.addTests(doctest.DocTestSuite(gof2.matrix.core))
    tests.addTests(doctest.DocTestSuite(gof2.matrix.printing))
    return tests
