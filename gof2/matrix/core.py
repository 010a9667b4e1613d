"""Provide the base matrix type and the validation of sizes and indices.

.. autosummary::
   :nosignatures:

    MAX_DIMENSION
    SLOW_PRODUCT_THRESHOLD
    DimensionMismatchError
    ImmutableMatrixError
    Matrix
    check_size
"""

#: Largest number of rows or columns of the storage matrices.
MAX_DIMENSION = 65535

#: Number of element reads above which the generic algorithms warn.
SLOW_PRODUCT_THRESHOLD = 2 ** 24


class DimensionMismatchError(ValueError):
    """Raised when the inner dimensions of a matrix product differ."""
    pass


class ImmutableMatrixError(TypeError):
    """Raised when a structural (immutable) matrix is modified."""
    pass


def _is_index(i):
    return isinstance(i, int) and not isinstance(i, bool)


def check_size(rows, cols, packed=True):
    """Validate the size of a new matrix.

    Raise `ValueError` if *rows* or *cols* is not positive or, when
    *packed* is ``True``, if any of them is larger than `MAX_DIMENSION`.

        >>> from gof2.matrix.core import check_size
        >>> check_size(3, 65536)
        Traceback (most recent call last):
         ...
        ValueError: cannot make 3x65536 matrix: maximum dimension is 65535

    """
    if not _is_index(rows) or not _is_index(cols):
        raise TypeError(f"matrix size must be integer, not {rows!r}x{cols!r}")
    if rows <= 0 or cols <= 0:
        raise ValueError(f"cannot make {rows}x{cols} matrix: size must be positive")
    if packed and (rows > MAX_DIMENSION or cols > MAX_DIMENSION):
        raise ValueError(f"cannot make {rows}x{cols} matrix: "
                         f"maximum dimension is {MAX_DIMENSION}")


class Matrix(object):
    """Represent matrices over GF(2) or GF(2)[x].

    Every matrix kind (storage matrices, structural matrices and views)
    implements the same element-access interface with one-based
    row and column indices:

    - `size` returns the number of rows and columns.
    - `at` returns the element as a `Polynomial`.
    - `set_at` replaces an element.
    - `add_at` adds (XOR) a polynomial to an element and returns the result.
    - `mul_at` multiplies an element by a polynomial and returns the result.

    For matrices with binary elements, the polynomials returned
    are the shared constants `ZERO` and `ONE`, and writing
    a polynomial that is not 0 or 1 raises `ValueError`.
    Out-of-bounds accesses raise `IndexError`.

    Matrices can also be indexed with ``m[r, c]``, compared element-wise
    with ``==`` and multiplied with ``@`` (see `mul.mul`).

    This class is not meant to be instantiated but to provide a base
    class for the different kinds of matrices.

    .. Implementation details:

        Subclasses must implement size() and at(); mutable
        subclasses also set_at(), add_at() and mul_at().

    """

    def size(self):
        """Return the number of rows and columns of the matrix."""
        raise NotImplementedError("subclasses need to override this method")

    def at(self, r, c):
        """Return the element at the given one-based row and column."""
        raise NotImplementedError("subclasses need to override this method")

    def set_at(self, r, c, p):
        """Replace the element at the given one-based row and column."""
        raise NotImplementedError("subclasses need to override this method")

    def add_at(self, r, c, p):
        """Add a polynomial to the element at the given one-based row and column."""
        raise NotImplementedError("subclasses need to override this method")

    def mul_at(self, r, c, p):
        """Multiply by a polynomial the element at the given one-based row and column."""
        raise NotImplementedError("subclasses need to override this method")

    @property
    def rows(self):
        """The number of rows."""
        return self.size()[0]

    @property
    def cols(self):
        """The number of columns."""
        return self.size()[1]

    def _index(self, r, c):
        """Return the zero-based index of a one-based index.

        Raise `TypeError` if the index is not an integer and
        `IndexError` if the index is out of bounds.
        """
        if not _is_index(r) or not _is_index(c):
            raise TypeError(f"matrix index must be integer, not ({r!r}, {c!r})")
        rows, cols = self.size()
        if not 1 <= r <= rows:
            raise IndexError(f"row index {r} out of bounds (size {rows}x{cols})")
        if not 1 <= c <= cols:
            raise IndexError(f"column index {c} out of bounds (size {rows}x{cols})")
        return r - 1, c - 1

    def __getitem__(self, key):
        """Override [] operator."""
        r, c = key
        return self.at(r, c)

    def __setitem__(self, key, p):
        r, c = key
        self.set_at(r, c, p)

    def __iter__(self):
        # Necessary since __getitem__ is defined
        raise TypeError(f"{type(self).__name__} is not iterable")

    def __eq__(self, other):
        """Return True if both matrices have the same size and elements."""
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.size() != other.size():
            return False
        rows, cols = self.size()
        for c in range(1, cols + 1):
            for r in range(1, rows + 1):
                if self.at(r, c) != other.at(r, c):
                    return False
        return True

    __hash__ = None

    def __matmul__(self, other):
        """Override @ operator."""
        from gof2.matrix import mul
        return mul.mul(self, other)

    def __str__(self):
        """Return the element-wise string representation."""
        from gof2.matrix import printing
        return (printing.MatrixStrPrinter()).doprint(self)

    def __repr__(self):
        return "{}({}, {})".format(type(self).__name__, *self.size())
