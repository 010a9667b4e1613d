"""Provide the polynomial element type and the binary element helpers.

.. autosummary::
   :nosignatures:

    Polynomial
    clmul
    polynomialify
    check01
    to01
"""


def clmul(a, b):
    """Return the carryless product of two non-negative integers.

    The integers are interpreted as polynomials over GF(2)
    (bit i is the coefficient of :math:`x^i`).

        >>> from gof2.field.core import clmul
        >>> bin(clmul(0b11, 0b11))
        '0b101'
        >>> bin(clmul(0b101, 0b10))
        '0b1010'

    """
    assert a >= 0 and b >= 0
    if a.bit_length() < b.bit_length():
        a, b = b, a
    result = 0
    while b:
        low = b & -b
        result ^= a << (low.bit_length() - 1)
        b ^= low
    return result


class Polynomial(object):
    """Represent a (mutable) polynomial over GF(2).

    A polynomial is stored as a non-negative integer where the
    i-th bit is the coefficient of :math:`x^i`. Addition (``+``, ``-``
    and ``^``) is the bitwise XOR and multiplication (``*``) is the
    carryless convolution of the coefficients.

    The in-place operators (``+=``, ``-=``, ``^=``, ``*=``) and `set`
    modify the object itself, so every holder of a reference
    observes the new value. Polynomial matrices rely on this
    to return live references to their elements.

    Args:
        val: the integer encoding of the polynomial (or another `Polynomial`
            to copy its value).

    ::

        >>> from gof2.field.core import Polynomial
        >>> p = Polynomial(0b101)
        >>> p
        Polynomial(0b101)
        >>> print(p)
        x**2 + 1
        >>> p * Polynomial(0b11)
        Polynomial(0b1111)
        >>> p + p
        Polynomial(0b0)
        >>> p.degree()
        2

    """

    __slots__ = ["_val"]

    def __init__(self, val=0):
        if isinstance(val, Polynomial):
            val = val.val
        if isinstance(val, bool) or not isinstance(val, int):
            raise TypeError(f"cannot convert '{type(val).__name__}' to a polynomial")
        if val < 0:
            raise ValueError(f"polynomials over GF(2) are non-negative, not {val}")
        self._val = val

    @property
    def val(self):
        """The integer encoding of the polynomial."""
        return self._val

    def degree(self):
        """Return the degree of the polynomial (-1 for the zero polynomial)."""
        return self._val.bit_length() - 1

    def bit(self, i):
        """Return the coefficient of :math:`x^i`."""
        return (self._val >> i) & 1

    def is_zero(self):
        return self._val == 0

    def copy(self):
        """Return a new (mutable) polynomial with the same value."""
        return Polynomial(self._val)

    def __bool__(self):
        return self._val != 0

    def __int__(self):
        return self._val

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self._val == other._val
        elif isinstance(other, int) and not isinstance(other, bool):
            return self._val == other
        return NotImplemented

    __hash__ = None

    # Ring operations

    def __xor__(self, other):
        """Override ^ operator (polynomial addition)."""
        return Polynomial(self._val ^ _val(other))

    __rxor__ = __xor__
    __add__ = __xor__
    __radd__ = __xor__
    __sub__ = __xor__
    __rsub__ = __xor__

    def __mul__(self, other):
        """Override * operator (carryless multiplication)."""
        return Polynomial(clmul(self._val, _val(other)))

    __rmul__ = __mul__

    # In-place operations

    def set(self, other):
        """Overwrite the value of the polynomial and return it."""
        self._val = _val(other)
        return self

    def __ixor__(self, other):
        self._val ^= _val(other)
        return self

    __iadd__ = __ixor__
    __isub__ = __ixor__

    def __imul__(self, other):
        self._val = clmul(self._val, _val(other))
        return self

    def as_expr(self, symbol=None):
        """Return the polynomial as a SymPy expression.

            >>> from gof2.field.core import Polynomial
            >>> Polynomial(0b110).as_expr()
            x**2 + x

        """
        import sympy
        x = sympy.Symbol("x") if symbol is None else symbol
        val = self._val
        terms = []
        i = 0
        while val:
            if val & 1:
                terms.append(x ** i)
            val >>= 1
            i += 1
        return sympy.Add(*terms)

    def __str__(self):
        from gof2.field import printing
        return (printing.PolynomialStrPrinter()).doprint(self)

    def __repr__(self):
        return "{}({})".format(type(self).__name__, bin(self._val))


class _ConstantPolynomial(Polynomial):
    """Shared read-only polynomial returned by binary element matrices."""

    __slots__ = []

    def _immutable(self, *args):
        raise TypeError(f"constant polynomial {bin(self._val)} cannot be modified")

    set = _immutable
    __ixor__ = _immutable
    __iadd__ = _immutable
    __isub__ = _immutable
    __imul__ = _immutable

    def __repr__(self):
        return "Polynomial({})".format(bin(self._val))


#: Shared constant 0 (must not be modified).
ZERO = _ConstantPolynomial(0)
#: Shared constant 1 (must not be modified).
ONE = _ConstantPolynomial(1)


def _val(p):
    if isinstance(p, Polynomial):
        return p.val
    elif isinstance(p, int) and not isinstance(p, bool) and p >= 0:
        return p
    elif isinstance(p, int) and not isinstance(p, bool):
        raise ValueError(f"polynomials over GF(2) are non-negative, not {p}")
    else:
        msg = "cannot convert '{}' to a polynomial"
        raise TypeError(msg.format(type(p).__name__))


def polynomialify(p):
    """Convert the argument *p* to a `Polynomial`.

    Integers and the shared constants `ZERO` and `ONE` are converted
    to a new `Polynomial` object, while other `Polynomial` objects
    are returned without copying.

        >>> from gof2.field.core import polynomialify, Polynomial, ONE
        >>> polynomialify(0b1011)
        Polynomial(0b1011)
        >>> q = Polynomial(3)
        >>> polynomialify(q) is q
        True
        >>> polynomialify(ONE) is ONE
        False

    """
    if isinstance(p, Polynomial) and not isinstance(p, _ConstantPolynomial):
        return p
    return Polynomial(_val(p))


def check01(p):
    """Return the bit of a polynomial used as a binary element.

    Raise `ValueError` if *p* is negative or has degree 2 or higher,
    since such a value is not an element of GF(2).

        >>> from gof2.field.core import check01, Polynomial
        >>> check01(Polynomial(1)), check01(0)
        (1, 0)
        >>> check01(0b10)
        Traceback (most recent call last):
         ...
        ValueError: cannot use polynomial +10 in binary element matrix

    """
    if isinstance(p, Polynomial):
        val = p.val
    elif isinstance(p, int) and not isinstance(p, bool):
        val = p
    else:
        msg = "cannot convert '{}' to a binary element"
        raise TypeError(msg.format(type(p).__name__))
    if val < 0 or val.bit_length() > 1:
        sign = "-" if val < 0 else "+"
        raise ValueError(f"cannot use polynomial {sign}{abs(val):b} in binary element matrix")
    return val


def to01(b):
    """Return the shared constant `ONE` if *b* is true, or `ZERO` otherwise."""
    return ONE if b else ZERO
