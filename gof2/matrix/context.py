"""Provide context managers to modify the conversion and multiplication of matrices."""
import contextlib


class StatefulContext(contextlib.AbstractContextManager):
    """Base class for context managers with history."""

    current_context = None

    def __init__(self, new_context):
        """Initialize the context."""
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context

    def __exit__(self, *args):
        type(self).current_context = self.previous_context


class FastPaths(StatefulContext):
    """Control the FastPaths context.

    Control whether or not the converters and the multiplication
    functions exploit the kinds of their arguments (sparse storage,
    closed-form structural matrices, etc.). By default, fast paths
    are enabled.

    When the FastPaths context is disabled, every conversion reads
    each element through `Matrix.at` and every product is computed
    with the dense element-by-element algorithm. The results are the
    same, only slower.

        >>> from gof2.matrix.context import FastPaths
        >>> from gof2.matrix.structural import Identity
        >>> from gof2.matrix.binary import SparseMatrix
        >>> from gof2.matrix.mul import fmul
        >>> a = SparseMatrix(2, 2)
        >>> type(fmul(a, Identity(2, 2))).__name__
        'SparseMatrix'
        >>> with FastPaths(False):
        ...     type(fmul(a, Identity(2, 2))).__name__
        'FullMatrix'

    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [True, False]
        super().__init__(new_context)


class SparseCompaction(StatefulContext):
    """Control the SparseCompaction context.

    Control whether or not `PSparseMatrix.add_at` and
    `PSparseMatrix.mul_at` remove the entries that become zero.
    By default, compaction is disabled: these methods always keep
    (and return) the stored polynomial, even when it is zero,
    so that the returned reference stays live.

        >>> from gof2.matrix.context import SparseCompaction
        >>> from gof2.matrix.polynomial import PSparseMatrix
        >>> m = PSparseMatrix(2, 2)
        >>> m.add_at(1, 1, 0b101)
        Polynomial(0b101)
        >>> m.add_at(1, 1, 0b101)
        Polynomial(0b0)
        >>> m.stored()
        1
        >>> with SparseCompaction(True):
        ...     m.add_at(2, 2, 1)
        ...     m.add_at(2, 2, 1)
        Polynomial(0b1)
        Polynomial(0b0)
        >>> m.stored()
        1

    When enabled, the returned polynomial of an operation that
    leaves a zero element is no longer stored in the matrix.
    """

    current_context = False

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [True, False]
        super().__init__(new_context)
