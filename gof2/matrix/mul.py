"""Multiply matrices over GF(2) and GF(2)[x].

.. autosummary::
   :nosignatures:

    fmul
    pmul
    mul

The multiplication functions inspect the kinds of their arguments
and use the first algorithm that applies:

1. If an argument is a `Zero` matrix, the product is a `Zero` matrix
   (for `fmul`, only if the other argument has binary elements).
2. If the left argument is sparse, only its non-zero elements are
   visited, each of them combined with the non-zero elements of the
   matching row of the right argument (found with a row index
   if the right argument is sparse, with the closed-form rule if it is
   a structural matrix, or by reading the row otherwise).
3. Symmetrically, if the right argument is sparse.
4. If an argument is an `Identity` matrix, the product is
   a (possibly resized) copy of the other argument.
5. Otherwise, every element of the product is computed from the
   corresponding row and column of the arguments.

The product of a sparse matrix by a `Rotation` or `Shift` matrix
(or vice versa) moves the non-zero elements without
any multiplication, following the closed-form rule of the
structural matrix.
"""
import warnings

from gof2.field.core import Polynomial, check01, clmul
from gof2.matrix import core
from gof2.matrix import context
from gof2.matrix.binary import SparseMatrix, FullMatrix
from gof2.matrix.convert import full, iter_ones, iter_terms
from gof2.matrix.polynomial import PSparseMatrix, PFullMatrix
from gof2.matrix.structural import StructuralMatrix, Identity, Zero, Rotation, Shift
from gof2.matrix.view import View


_SPARSE = (SparseMatrix, PSparseMatrix)


def _is_binary(m):
    if isinstance(m, View):
        return _is_binary(m.matrix)
    return isinstance(m, (SparseMatrix, FullMatrix, StructuralMatrix))


def _is_polynomial(m):
    if isinstance(m, View):
        return _is_polynomial(m.matrix)
    return isinstance(m, (PSparseMatrix, PFullMatrix))


def _check_product(a, b):
    for m in (a, b):
        if not isinstance(m, core.Matrix):
            raise TypeError(f"expected a Matrix, not {type(m).__name__}")
    ar, ac = a.size()
    br, bc = b.size()
    if ac != br:
        raise core.DimensionMismatchError(f"inner dimension mismatch: {ar}x{ac} * {br}x{bc}")
    return ar, ac, bc


def _warn_if_slow(a, b):
    ar, ac = a.size()
    br, bc = b.size()
    if ar * ac * bc > core.SLOW_PRODUCT_THRESHOLD:
        warnings.warn(f"slow dense multiplication of {type(a).__name__} ({ar}x{ac}) "
                      f"and {type(b).__name__} ({br}x{bc})")


def _parity(x):
    return bin(x).count("1") & 1


def _row_reader(m):
    """Return a function mapping a zero-based row to its non-zero ``(col, val)``."""
    rows, cols = m.size()
    cache = {}
    if isinstance(m, FullMatrix):
        s = m._bitstring()

        def read(t):
            return [(j, 1) for j in range(cols) if s[j * rows + t] == "1"]
    elif isinstance(m, PFullMatrix):
        elements = m._elements

        def read(t):
            row = (elements[j * rows + t] for j in range(cols))
            return [(j, p.val) for j, p in enumerate(row) if p]
    else:
        def read(t):
            row = (m.at(t + 1, j + 1) for j in range(cols))
            return [(j, int(p)) for j, p in enumerate(row) if p]

    def row_terms(t):
        terms = cache.get(t)
        if terms is None:
            terms = cache[t] = read(t)
        return terms

    return row_terms


def _col_reader(m):
    """Return a function mapping a zero-based column to its non-zero ``(row, val)``."""
    rows, cols = m.size()
    cache = {}
    if isinstance(m, FullMatrix):
        s = m._bitstring()

        def read(t):
            return [(i, 1) for i, b in enumerate(s[t * rows:(t + 1) * rows]) if b == "1"]
    elif isinstance(m, PFullMatrix):
        elements = m._elements

        def read(t):
            return [(i, p.val) for i, p in enumerate(elements[t * rows:(t + 1) * rows]) if p]
    else:
        def read(t):
            col = (m.at(i + 1, t + 1) for i in range(rows))
            return [(i, int(p)) for i, p in enumerate(col) if p]

    def col_terms(t):
        terms = cache.get(t)
        if terms is None:
            terms = cache[t] = read(t)
        return terms

    return col_terms


def _group(terms, by_col=False):
    """Group ``(row, col, val)`` terms by row (or by column)."""
    groups = {}
    for r, c, val in terms:
        if by_col:
            groups.setdefault(c, []).append((r, val))
        else:
            groups.setdefault(r, []).append((c, val))
    return groups


# Products over GF(2)


def fmul(a, b):
    """Multiply two matrices over GF(2).

    Every element of the arguments must be 0 or 1 (otherwise
    `ValueError` is raised); the elements of the polynomial storage
    matrices are checked before the product. The product is a `SparseMatrix` if
    an argument is sparse, a `Zero` or an `Identity` matrix
    in the trivial cases, and a `FullMatrix` otherwise.

    Raise `DimensionMismatchError` if the number of columns of *a*
    is not the number of rows of *b*.

        >>> from gof2.matrix.binary import FullMatrix
        >>> from gof2.matrix.structural import Rotation
        >>> from gof2.matrix.mul import fmul
        >>> x = FullMatrix(1, 4)
        >>> x.set_at(1, 1, 1)
        >>> print(fmul(x, Rotation(4, 1)))
        [0 1 0 0]

    """
    ar, ac, bc = _check_product(a, b)
    if not context.FastPaths.current_context:
        return _fmul_full(a, b)
    for m in (a, b):
        if isinstance(m, (PSparseMatrix, PFullMatrix)):
            for _ in iter_ones(m):
                pass
    if (isinstance(a, Zero) and _is_binary(b)) or (isinstance(b, Zero) and _is_binary(a)):
        return Zero(ar, bc)
    if isinstance(a, _SPARSE):
        return _fmul_sparse_left(a, b)
    if isinstance(b, _SPARSE):
        return _fmul_sparse_right(a, b)
    if isinstance(a, Identity) or isinstance(b, Identity):
        return _fmul_identity(a, b)
    return _fmul_full(a, b)


def _fmul_full(a, b):
    """Multiply two matrices into a new `FullMatrix`."""
    ar, ac = a.size()
    bc = b.cols
    _warn_if_slow(a, b)
    result = FullMatrix(ar, bc)
    # row i of a and column j of b as bit-vectors indexed by the inner dimension
    a_rows = [0] * ar
    for i, t in iter_ones(a):
        a_rows[i] |= 1 << t
    b_cols = [0] * bc
    for t, j in iter_ones(b):
        b_cols[j] |= 1 << t
    set_bit = result._set_bit
    for j, col in enumerate(b_cols):
        if not col:
            continue
        for i, row in enumerate(a_rows):
            if _parity(row & col):
                set_bit(j * ar + i)
    return result


def _fmul_sparse_left(a, b):
    """Multiply a sparse matrix by another matrix into a new `SparseMatrix`."""
    ar, ac = a.size()
    bc = b.cols
    result = SparseMatrix(ar, bc)
    toggle = result._toggle
    ones = iter_ones(a)
    if isinstance(b, _SPARSE):
        b_rows = {}
        for t, j in iter_ones(b):
            b_rows.setdefault(t, []).append(j)
        for i, t in ones:
            # a[i][t] * b[t][j] is a term of result[i][j]
            for j in b_rows.get(t, ()):
                toggle((i, j))
    elif isinstance(b, Identity):
        for i, t in ones:
            if t < bc:
                toggle((i, t))
    elif isinstance(b, Rotation):
        for i, t in ones:
            toggle((i, (t + b.shift) % bc))
    elif isinstance(b, Shift):
        for i, t in ones:
            j = t + b.shift
            if 0 <= j < bc:
                toggle((i, j))
    elif isinstance(b, Zero):
        for _ in ones:
            pass
    else:
        row_terms = _row_reader(b)
        for i, t in ones:
            for j, val in row_terms(t):
                if check01(val):
                    toggle((i, j))
    return result


def _fmul_sparse_right(a, b):
    """Multiply a matrix by a sparse matrix into a new `SparseMatrix`."""
    ar, ac = a.size()
    bc = b.cols
    result = SparseMatrix(ar, bc)
    toggle = result._toggle
    ones = iter_ones(b)
    if isinstance(a, Identity):
        for t, j in ones:
            if t < ar:
                toggle((t, j))
    elif isinstance(a, Rotation):
        for t, j in ones:
            toggle(((t - a.shift) % ar, j))
    elif isinstance(a, Shift):
        for t, j in ones:
            i = t - a.shift
            if 0 <= i < ar:
                toggle((i, j))
    elif isinstance(a, Zero):
        for _ in ones:
            pass
    else:
        col_terms = _col_reader(a)
        for t, j in ones:
            # a[i][t] * b[t][j] is a term of result[i][j]
            for i, val in col_terms(t):
                if check01(val):
                    toggle((i, j))
    return result


def _fmul_identity(a, b):
    """Multiply a matrix by an identity matrix (or vice versa)."""
    ar, ac = a.size()
    bc = b.cols
    if isinstance(a, Identity) and isinstance(b, Identity) and ac >= min(ar, bc):
        return Identity(ar, bc)
    other = b if isinstance(a, Identity) else a
    if other.size() == (ar, bc):
        return full(other)
    result = FullMatrix(ar, bc)
    set_bit = result._set_bit
    for r, c in iter_ones(other):
        if r < ar and c < bc:
            set_bit(c * ar + r)
    return result


# Products over GF(2)[x]


def pmul(a, b):
    """Multiply two matrices over the polynomial ring GF(2)[x].

    The elements of the product are the sums (XOR) of the
    carryless products of the elements of the arguments.
    The product is a `PSparseMatrix` if an argument is sparse,
    a `Zero` or an `Identity` matrix in the trivial cases,
    and a `PFullMatrix` otherwise.

    Raise `DimensionMismatchError` if the number of columns of *a*
    is not the number of rows of *b*.

        >>> from gof2.matrix.polynomial import PSparseMatrix
        >>> from gof2.matrix.structural import Shift
        >>> from gof2.matrix.mul import pmul
        >>> x = PSparseMatrix(2, 2)
        >>> x.set_at(1, 1, 0b11)
        >>> x.set_at(2, 1, 0b10)
        >>> print(pmul(x, x))
        [x**2 + 1, 0]
        [x**2 + x, 0]
        >>> print(pmul(x, Shift(2, 1)))
        [0, x + 1]
        [0, x]

    """
    ar, ac, bc = _check_product(a, b)
    if not context.FastPaths.current_context:
        return _pmul_full(a, b)
    if isinstance(a, Zero) or isinstance(b, Zero):
        return Zero(ar, bc)
    if isinstance(a, _SPARSE):
        return _pmul_sparse_left(a, b)
    if isinstance(b, _SPARSE):
        return _pmul_sparse_right(a, b)
    if isinstance(a, Identity) or isinstance(b, Identity):
        return _pmul_identity(a, b)
    return _pmul_full(a, b)


def _psparse_from(acc, rows, cols):
    result = PSparseMatrix(rows, cols)
    for k, val in acc.items():
        if val:
            result._entries[k] = Polynomial(val)
    return result


def _pmul_full(a, b):
    """Multiply two matrices into a new `PFullMatrix`."""
    ar, ac = a.size()
    bc = b.cols
    _warn_if_slow(a, b)
    result = PFullMatrix(ar, bc)
    a_rows = _group(iter_terms(a))
    b_cols = _group(iter_terms(b), by_col=True)
    for j, col in b_cols.items():
        col = dict(col)
        for i, row in a_rows.items():
            val = 0
            for t, x in row:
                y = col.get(t)
                if y:
                    val ^= clmul(x, y)
            if val:
                result._elements[j * ar + i].set(val)
    return result


def _pmul_sparse_left(a, b):
    """Multiply a sparse matrix by another matrix into a new `PSparseMatrix`."""
    ar, ac = a.size()
    bc = b.cols
    acc = {}
    terms = iter_terms(a)
    if isinstance(b, _SPARSE):
        b_rows = _group(iter_terms(b))
        for i, t, x in terms:
            for j, y in b_rows.get(t, ()):
                acc[i, j] = acc.get((i, j), 0) ^ clmul(x, y)
    elif isinstance(b, Identity):
        for i, t, x in terms:
            if t < bc:
                acc[i, t] = x
    elif isinstance(b, Rotation):
        for i, t, x in terms:
            acc[i, (t + b.shift) % bc] = x
    elif isinstance(b, Shift):
        for i, t, x in terms:
            j = t + b.shift
            if 0 <= j < bc:
                acc[i, j] = x
    else:
        row_terms = _row_reader(b)
        for i, t, x in terms:
            for j, y in row_terms(t):
                acc[i, j] = acc.get((i, j), 0) ^ clmul(x, y)
    return _psparse_from(acc, ar, bc)


def _pmul_sparse_right(a, b):
    """Multiply a matrix by a sparse matrix into a new `PSparseMatrix`."""
    ar, ac = a.size()
    bc = b.cols
    acc = {}
    terms = iter_terms(b)
    if isinstance(a, Identity):
        for t, j, y in terms:
            if t < ar:
                acc[t, j] = y
    elif isinstance(a, Rotation):
        for t, j, y in terms:
            acc[(t - a.shift) % ar, j] = y
    elif isinstance(a, Shift):
        for t, j, y in terms:
            i = t - a.shift
            if 0 <= i < ar:
                acc[i, j] = y
    else:
        col_terms = _col_reader(a)
        for t, j, y in terms:
            for i, x in col_terms(t):
                acc[i, j] = acc.get((i, j), 0) ^ clmul(x, y)
    return _psparse_from(acc, ar, bc)


def _pmul_identity(a, b):
    """Multiply a matrix by an identity matrix (or vice versa) into a new `PFullMatrix`."""
    ar, ac = a.size()
    bc = b.cols
    if isinstance(a, Identity) and isinstance(b, Identity) and ac >= min(ar, bc):
        return Identity(ar, bc)
    other = b if isinstance(a, Identity) else a
    result = PFullMatrix(ar, bc)
    for r, c, val in iter_terms(other):
        if r < ar and c < bc:
            result._elements[c * ar + r].set(val)
    return result


def mul(a, b):
    """Multiply two matrices.

    Use `pmul` if an argument is a polynomial storage matrix
    (`PSparseMatrix` or `PFullMatrix`, possibly behind a `View`)
    and `fmul` otherwise. This function implements the ``@`` operator.

        >>> from gof2.matrix.binary import SparseMatrix
        >>> from gof2.matrix.structural import Identity
        >>> m = SparseMatrix(2, 2)
        >>> m[1, 2] = 1
        >>> (m @ Identity(2, 2)) == m
        True

    """
    if _is_polynomial(a) or _is_polynomial(b):
        return pmul(a, b)
    return fmul(a, b)
