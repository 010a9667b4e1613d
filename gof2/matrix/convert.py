"""Convert matrices between the different kinds.

.. autosummary::
   :nosignatures:

    sparse
    full
    psparse
    pfull
    to_sympy
    iter_ones
    iter_terms

The converters accept any `Matrix` and return a new matrix that
shares no mutable state with the argument. When the kind of the
argument is known (storage or structural matrices), only its non-zero
elements are visited; otherwise (or when the `FastPaths` context
is disabled) every element is read with `Matrix.at`.
"""
import warnings

from gof2.field.core import Polynomial, check01
from gof2.matrix import core
from gof2.matrix import context
from gof2.matrix.binary import SparseMatrix, FullMatrix
from gof2.matrix.polynomial import PSparseMatrix, PFullMatrix
from gof2.matrix.structural import StructuralMatrix


def _iter_elements(m):
    rows, cols = m.size()
    if rows * cols > core.SLOW_PRODUCT_THRESHOLD:
        warnings.warn(f"slow element-by-element conversion of a "
                      f"{rows}x{cols} {type(m).__name__}")
    for c in range(cols):
        for r in range(rows):
            yield r, c, m.at(r + 1, c + 1)


def _generic_ones(m):
    for r, c, p in _iter_elements(m):
        if check01(p):
            yield r, c


def _generic_terms(m):
    for r, c, p in _iter_elements(m):
        if p:
            yield r, c, int(p)


def _psparse_ones(m):
    for k, p in list(m._entries.items()):
        if check01(p):
            yield k


def _pfull_ones(m):
    rows = m.rows
    for i, p in enumerate(m._elements):
        if check01(p):
            yield i % rows, i // rows


def iter_ones(m):
    """Return an iterator over the zero-based positions of the ones of *m*.

    Raise `ValueError` (while iterating) if an element of *m*
    is not 0 or 1.

        >>> from gof2.matrix.convert import iter_ones
        >>> from gof2.matrix.structural import Rotation
        >>> list(iter_ones(Rotation(3, 1)))
        [(0, 1), (1, 2), (2, 0)]

    """
    if not context.FastPaths.current_context:
        return _generic_ones(m)
    if isinstance(m, SparseMatrix):
        return iter(list(m._entries))
    elif isinstance(m, (FullMatrix, StructuralMatrix)):
        return m._ones()
    elif isinstance(m, PSparseMatrix):
        return _psparse_ones(m)
    elif isinstance(m, PFullMatrix):
        return _pfull_ones(m)
    else:
        return _generic_ones(m)


def iter_terms(m):
    """Return an iterator over the non-zero elements of *m*.

    Each non-zero element is given as a tuple ``(row, col, val)``
    with zero-based ``row`` and ``col`` and the integer
    encoding ``val`` of the polynomial.
    """
    if not context.FastPaths.current_context:
        return _generic_terms(m)
    if isinstance(m, (SparseMatrix, FullMatrix, StructuralMatrix)):
        return ((r, c, 1) for r, c in iter_ones(m))
    elif isinstance(m, PSparseMatrix):
        return ((r, c, p.val) for (r, c), p in list(m._entries.items()) if p)
    elif isinstance(m, PFullMatrix):
        rows = m.rows
        return ((i % rows, i // rows, p.val) for i, p in enumerate(m._elements) if p)
    else:
        return _generic_terms(m)


def sparse(m):
    """Convert a matrix to a new `SparseMatrix`.

    Raise `ValueError` if *m* has an element that is not 0 or 1,
    or if *m* has more than 65535 rows or columns.

        >>> from gof2.matrix.convert import sparse
        >>> from gof2.matrix.structural import Shift
        >>> m = sparse(Shift(3, 1))
        >>> m.nnz()
        2
        >>> print(m)
        [0 1 0]
        [0 0 1]
        [0 0 0]

    """
    rows, cols = m.size()
    result = SparseMatrix(rows, cols)
    for k in iter_ones(m):
        result._entries[k] = 1
    return result


def full(m):
    """Convert a matrix to a new `FullMatrix`.

    Raise `ValueError` if *m* has an element that is not 0 or 1,
    or if *m* has more than 65535 rows or columns.
    """
    rows, cols = m.size()
    result = FullMatrix(rows, cols)
    if context.FastPaths.current_context and isinstance(m, FullMatrix):
        result._buffer[:] = m._buffer
        return result
    set_bit = result._set_bit
    for r, c in iter_ones(m):
        set_bit(c * rows + r)
    return result


def psparse(m):
    """Convert a matrix to a new `PSparseMatrix`.

    Every non-zero element is copied to a new `Polynomial`.
    Raise `ValueError` if *m* has more than 65535 rows or columns.
    """
    rows, cols = m.size()
    result = PSparseMatrix(rows, cols)
    for r, c, val in iter_terms(m):
        result._entries[r, c] = Polynomial(val)
    return result


def pfull(m):
    """Convert a matrix to a new `PFullMatrix`.

    Every element is a new `Polynomial`.
    Raise `ValueError` if *m* has more than 65535 rows or columns.

        >>> from gof2.matrix.convert import pfull
        >>> from gof2.matrix.structural import Identity
        >>> m = pfull(Identity(2, 2))
        >>> m.add_at(1, 2, 0b110)
        Polynomial(0b110)
        >>> print(m)
        [1, x**2 + x]
        [0, 1]

    """
    rows, cols = m.size()
    result = PFullMatrix(rows, cols)
    for r, c, val in iter_terms(m):
        result._elements[c * rows + r].set(val)
    return result


def to_sympy(m, symbol=None):
    """Return a SymPy matrix with the elements of *m* as polynomial expressions.

    The polynomials are expressed in *symbol* (by default ``x``).

        >>> from gof2.matrix.convert import to_sympy
        >>> from gof2.matrix.structural import Identity
        >>> to_sympy(Identity(2, 3))
        Matrix([
        [1, 0, 0],
        [0, 1, 0]])

    """
    import sympy
    x = sympy.Symbol("x") if symbol is None else symbol
    rows, cols = m.size()
    result = sympy.zeros(rows, cols)
    for r, c, val in iter_terms(m):
        result[r, c] = Polynomial(val).as_expr(x)
    return result
