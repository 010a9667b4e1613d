"""Provide the storage matrices with binary elements.

.. autosummary::
   :nosignatures:

    SparseMatrix
    FullMatrix
"""
from gof2.field.core import check01, to01
from gof2.matrix import core


class SparseMatrix(core.Matrix):
    """Represent a sparse matrix of binary elements.

    The matrix is stored as the set of (zero-based) ``(row, col)``
    positions of its non-zero elements, so memory and the cost of
    the sparse algorithms grow with the number of ones.
    Both dimensions must be in ``[1, 65535]``.

    Elements are returned as the shared constants `ZERO` and `ONE`,
    which must not be modified. Writing a polynomial that is not
    0 or 1 raises `ValueError`.

        >>> from gof2.matrix.binary import SparseMatrix
        >>> m = SparseMatrix(2, 3)
        >>> m.set_at(1, 2, 1)
        >>> m.add_at(2, 3, 1)
        Polynomial(0b1)
        >>> m.mul_at(2, 3, 0)
        Polynomial(0b0)
        >>> print(m)
        [0 1 0]
        [0 0 0]
        >>> m.nnz()
        1

    """

    def __init__(self, rows, cols):
        core.check_size(rows, cols)
        self._rows = rows
        self._cols = cols
        # (row, col) -> 1, zero elements are not stored
        self._entries = {}

    def size(self):
        return self._rows, self._cols

    def at(self, r, c):
        return to01(self._index(r, c) in self._entries)

    def set_at(self, r, c, p):
        k = self._index(r, c)
        if check01(p):
            self._entries[k] = 1
        else:
            self._entries.pop(k, None)

    def add_at(self, r, c, p):
        k = self._index(r, c)
        if check01(p):
            self._toggle(k)
        return to01(k in self._entries)

    def mul_at(self, r, c, p):
        k = self._index(r, c)
        if not check01(p):
            self._entries.pop(k, None)
        return to01(k in self._entries)

    def nnz(self):
        """Return the number of non-zero elements."""
        return len(self._entries)

    def _toggle(self, k):
        if k in self._entries:
            del self._entries[k]
        else:
            self._entries[k] = 1


class FullMatrix(core.Matrix):
    """Represent a dense matrix of binary elements.

    The matrix is stored as a packed bit-vector (a `bytearray`, least
    significant bit first) in column-major order, where the element at
    the zero-based position ``(row, col)`` is the bit ``col * rows + row``.
    Writes modify the buffer in place.
    Both dimensions must be in ``[1, 65535]``.

    The bit ``rows * cols`` (one past the last element) is always set
    so that the buffer is allocated with its full length once.
    This guard bit is not an element; `bits` returns the bit-vector
    without it.

    Elements are returned as the shared constants `ZERO` and `ONE`,
    which must not be modified.

        >>> from gof2.matrix.binary import FullMatrix
        >>> m = FullMatrix(2, 2)
        >>> m.set_at(2, 1, 1)
        >>> m.add_at(1, 2, 1)
        Polynomial(0b1)
        >>> bin(m.bits)
        '0b110'

    """

    def __init__(self, rows, cols):
        core.check_size(rows, cols)
        self._rows = rows
        self._cols = cols
        n = rows * cols
        self._buffer = bytearray(n // 8 + 1)
        self._set_bit(n)

    def size(self):
        return self._rows, self._cols

    @property
    def bits(self):
        """The column-major bit-vector of the elements (without the guard bit)."""
        n = self._rows * self._cols
        return int.from_bytes(self._buffer, "little") & ((1 << n) - 1)

    def at(self, r, c):
        return to01(self._get_bit(self._bit_index(r, c)))

    def set_at(self, r, c, p):
        k = self._bit_index(r, c)
        if check01(p):
            self._set_bit(k)
        else:
            self._buffer[k >> 3] &= ~(1 << (k & 7))

    def add_at(self, r, c, p):
        k = self._bit_index(r, c)
        self._buffer[k >> 3] ^= check01(p) << (k & 7)
        return to01(self._get_bit(k))

    def mul_at(self, r, c, p):
        k = self._bit_index(r, c)
        if not check01(p):
            self._buffer[k >> 3] &= ~(1 << (k & 7))
        return to01(self._get_bit(k))

    def nnz(self):
        """Return the number of non-zero elements."""
        return bin(self.bits).count("1")

    def _bit_index(self, r, c):
        r, c = self._index(r, c)
        return c * self._rows + r

    def _get_bit(self, k):
        return (self._buffer[k >> 3] >> (k & 7)) & 1

    def _set_bit(self, k):
        self._buffer[k >> 3] |= 1 << (k & 7)

    def _bitstring(self):
        """Return the elements as a string of '0' and '1' indexed by bit position."""
        n = self._rows * self._cols
        return format(self.bits, "0{}b".format(n))[::-1]

    def _ones(self):
        """Yield the zero-based positions of the non-zero elements."""
        rows = self._rows
        s = self._bitstring()
        k = s.find("1")
        while k != -1:
            yield k % rows, k // rows
            k = s.find("1", k + 1)
