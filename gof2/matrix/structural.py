"""Provide the immutable matrices defined by a closed-form rule.

.. autosummary::
   :nosignatures:

    StructuralMatrix
    Identity
    Zero
    Rotation
    Shift
"""
from gof2.field.core import to01, ZERO
from gof2.matrix import core


class StructuralMatrix(core.Matrix):
    """Base class for immutable matrices without element storage.

    The element at ``(r, c)`` is computed from a closed-form rule and
    returned as one of the shared constants `ZERO` and `ONE`.
    Modifying a structural matrix raises `ImmutableMatrixError`;
    convert it first (see `convert`).

    .. Implementation details:

        Subclasses implement _ones() returning the zero-based
        positions of the non-zero elements, which the converters
        and the multiplication functions use instead of probing
        every element.

    """

    def __init__(self, rows, cols):
        core.check_size(rows, cols, packed=False)
        self._rows = rows
        self._cols = cols

    def size(self):
        return self._rows, self._cols

    def set_at(self, r, c, p):
        raise core.ImmutableMatrixError("immutable matrix must be converted before modifying")

    def add_at(self, r, c, p):
        raise core.ImmutableMatrixError("immutable matrix must be converted before modifying")

    def mul_at(self, r, c, p):
        raise core.ImmutableMatrixError("immutable matrix must be converted before modifying")

    def _ones(self):
        raise NotImplementedError("subclasses need to override this method")


class Identity(StructuralMatrix):
    """Represent the rectangular identity matrix.

    The element at ``(r, c)`` is 1 if ``r == c`` and 0 otherwise.

        >>> from gof2.matrix.structural import Identity
        >>> print(Identity(2, 3))
        [1 0 0]
        [0 1 0]

    """

    def at(self, r, c):
        r, c = self._index(r, c)
        return to01(r == c)

    def _ones(self):
        for k in range(min(self._rows, self._cols)):
            yield k, k


class Zero(StructuralMatrix):
    """Represent the rectangular zero matrix."""

    def at(self, r, c):
        self._index(r, c)
        return ZERO

    def _ones(self):
        return iter(())


class Rotation(StructuralMatrix):
    """Represent the square left-rotation matrix.

    Given a matrix ``X`` with ``size`` columns, the product
    ``X @ Rotation(size, n)`` rotates each row of ``X`` by ``n``
    positions, that is, the column ``c`` of ``X`` becomes the
    column ``(c + n) mod size`` of the product (zero-based).

    The element at ``(r, c)`` is 1 if ``((r - 1 + n) mod size) + 1 == c``
    and 0 otherwise. The rotation amount is stored modulo ``size``.

        >>> from gof2.matrix.structural import Rotation
        >>> Rotation(4, 5)
        Rotation(4, 1)
        >>> print(Rotation(3, 1))
        [0 1 0]
        [0 0 1]
        [1 0 0]

    """

    def __init__(self, size, shift):
        super().__init__(size, size)
        self._shift = shift % size

    @property
    def shift(self):
        """The rotation amount (in ``[0, size)``)."""
        return self._shift

    def at(self, r, c):
        r, c = self._index(r, c)
        return to01((r + self._shift) % self._rows == c)

    def _ones(self):
        for i in range(self._rows):
            yield i, (i + self._shift) % self._rows

    def __repr__(self):
        return "{}({}, {})".format(type(self).__name__, self._rows, self._shift)


class Shift(StructuralMatrix):
    """Represent the square logical shift matrix.

    Given a matrix ``X`` with ``size`` columns, the product
    ``X @ Shift(size, n)`` shifts each row of ``X`` by ``n`` positions
    (towards higher column indices for ``n > 0`` and towards
    lower column indices for ``n < 0``), filling with zeros.

    The element at ``(r, c)`` is 1 if ``r + n == c`` and 0 otherwise.
    Contrary to `Rotation`, the shift amount is not reduced and
    ``|n| >= size`` gives the zero matrix.

        >>> from gof2.matrix.structural import Shift
        >>> print(Shift(3, -1))
        [0 0 0]
        [1 0 0]
        [0 1 0]

    """

    def __init__(self, size, shift):
        super().__init__(size, size)
        self._shift = shift

    @property
    def shift(self):
        """The shift amount."""
        return self._shift

    def at(self, r, c):
        r, c = self._index(r, c)
        return to01(r + self._shift == c)

    def _ones(self):
        n = self._shift
        for i in range(max(0, -n), min(self._rows, self._rows - n)):
            yield i, i + n

    def __repr__(self):
        return "{}({}, {})".format(type(self).__name__, self._rows, self._shift)
