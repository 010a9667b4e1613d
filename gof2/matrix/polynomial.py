"""Provide the storage matrices with polynomial elements.

.. autosummary::
   :nosignatures:

    PSparseMatrix
    PFullMatrix
"""
from gof2.field.core import Polynomial, polynomialify
from gof2.matrix import core
from gof2.matrix import context


class PSparseMatrix(core.Matrix):
    """Represent a sparse matrix of polynomial elements.

    The matrix is stored as a mapping from (zero-based) ``(row, col)``
    positions to `Polynomial` objects. Both dimensions must be in
    ``[1, 65535]``.

    Elements are stored and returned by reference:

    - `at` returns the stored polynomial if it is non-zero. Otherwise
      it returns a new zero polynomial (and removes the stored zero
      polynomial, if any).
    - `set_at` removes the element if the polynomial is zero;
      otherwise the polynomial is stored without copying it.
    - `add_at` and `mul_at` modify the stored polynomial in place
      (storing a new zero polynomial first if the element is not stored)
      and return it, even if the result is zero.

    Therefore, `add_at` and `mul_at` may leave zero polynomials stored,
    and two equal matrices can have a different number of `stored`
    polynomials. This can be disabled with the `SparseCompaction` context.

        >>> from gof2.matrix.polynomial import PSparseMatrix
        >>> m = PSparseMatrix(2, 2)
        >>> p = m.add_at(1, 1, 0b101)
        >>> m.mul_at(1, 1, 0b11)
        Polynomial(0b1111)
        >>> p
        Polynomial(0b1111)
        >>> m.at(1, 1) is p
        True
        >>> print(m)
        [x**3 + x**2 + x + 1, 0]
        [0, 0]

    """

    def __init__(self, rows, cols):
        core.check_size(rows, cols)
        self._rows = rows
        self._cols = cols
        # (row, col) -> Polynomial
        self._entries = {}

    def size(self):
        return self._rows, self._cols

    def at(self, r, c):
        k = self._index(r, c)
        p = self._entries.get(k)
        if p is not None and not p.is_zero():
            return p
        if p is not None:
            del self._entries[k]
        return Polynomial()

    def set_at(self, r, c, p):
        k = self._index(r, c)
        p = polynomialify(p)
        if p.is_zero():
            self._entries.pop(k, None)
        else:
            self._entries[k] = p

    def add_at(self, r, c, p):
        k = self._index(r, c)
        p = polynomialify(p)
        q = self._entries.get(k)
        if q is None:
            q = Polynomial()
            self._entries[k] = q
        q ^= p
        if q.is_zero() and context.SparseCompaction.current_context:
            del self._entries[k]
        return q

    def mul_at(self, r, c, p):
        k = self._index(r, c)
        p = polynomialify(p)
        q = self._entries.get(k)
        if q is None:
            q = Polynomial()
            if not context.SparseCompaction.current_context:
                self._entries[k] = q
            return q
        q *= p
        if q.is_zero() and context.SparseCompaction.current_context:
            del self._entries[k]
        return q

    def stored(self):
        """Return the number of stored polynomials (including stored zeros)."""
        return len(self._entries)

    def nnz(self):
        """Return the number of non-zero elements."""
        return sum(1 for p in self._entries.values() if not p.is_zero())


class PFullMatrix(core.Matrix):
    """Represent a dense matrix of polynomial elements.

    The matrix is stored as a column-major list with one `Polynomial`
    object per element, all of them allocated (as zero polynomials)
    when the matrix is created. Both dimensions must be in ``[1, 65535]``.

    .. warning::

        `at` returns the stored polynomial itself, not a copy.
        Modifying the returned polynomial modifies the matrix.
        Similarly, `set_at` stores the given polynomial without copying it
        and `add_at` and `mul_at` modify the stored polynomial in place
        and return it.

    ::

        >>> from gof2.field.core import Polynomial
        >>> from gof2.matrix.polynomial import PFullMatrix
        >>> m = PFullMatrix(1, 2)
        >>> p = m.at(1, 2)
        >>> p += 0b10
        >>> m.at(1, 2)
        Polynomial(0b10)
        >>> m.mul_at(1, 2, 0b10) is p
        True
        >>> print(m)
        [0, x**2]

    """

    def __init__(self, rows, cols):
        core.check_size(rows, cols)
        self._rows = rows
        self._cols = cols
        self._elements = [Polynomial() for _ in range(rows * cols)]

    def size(self):
        return self._rows, self._cols

    def at(self, r, c):
        return self._elements[self._list_index(r, c)]

    def set_at(self, r, c, p):
        self._elements[self._list_index(r, c)] = polynomialify(p)

    def add_at(self, r, c, p):
        q = self._elements[self._list_index(r, c)]
        q ^= p
        return q

    def mul_at(self, r, c, p):
        q = self._elements[self._list_index(r, c)]
        q *= p
        return q

    def nnz(self):
        """Return the number of non-zero elements."""
        return sum(1 for p in self._elements if not p.is_zero())

    def _list_index(self, r, c):
        r, c = self._index(r, c)
        return c * self._rows + r
