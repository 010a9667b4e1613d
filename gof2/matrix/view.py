"""Provide submatrix views."""
from gof2.matrix import core


class View(core.Matrix):
    """Represent a submatrix view of another matrix.

    The view of size ``rows x cols`` with top-left corner at the
    one-based position ``(row, col)`` of the viewed matrix forwards
    each access of ``(r, c)`` to the position ``(row + r - 1, col + c - 1)``.
    The view does not copy any element and modifying the view
    modifies the viewed matrix.

    The view only checks its own bounds; an access outside the viewed
    matrix raises the error of the viewed matrix.

        >>> from gof2.matrix.structural import Identity
        >>> from gof2.matrix.view import View
        >>> print(View(Identity(4, 4), 2, 1, 2, 3))
        [0 1 0]
        [0 0 1]

    """

    def __init__(self, matrix, row, col, rows, cols):
        core.check_size(rows, cols, packed=False)
        self._matrix = matrix
        self._row = row
        self._col = col
        self._rows = rows
        self._cols = cols

    @property
    def matrix(self):
        """The viewed matrix."""
        return self._matrix

    def size(self):
        return self._rows, self._cols

    def _translate(self, r, c):
        r, c = self._index(r, c)
        return self._row + r, self._col + c

    def at(self, r, c):
        return self._matrix.at(*self._translate(r, c))

    def set_at(self, r, c, p):
        r, c = self._translate(r, c)
        self._matrix.set_at(r, c, p)

    def add_at(self, r, c, p):
        r, c = self._translate(r, c)
        return self._matrix.add_at(r, c, p)

    def mul_at(self, r, c, p):
        r, c = self._translate(r, c)
        return self._matrix.mul_at(r, c, p)

    def __repr__(self):
        return "{}({!r}, {}, {}, {}, {})".format(
            type(self).__name__, self._matrix, self._row, self._col, self._rows, self._cols)
