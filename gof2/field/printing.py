"""Manage the representation of polynomials over GF(2)."""
from sympy.printing import str as sympy_str


# noinspection PyPep8Naming,PyMethodMayBeStatic
class PolynomialStrPrinter(sympy_str.StrPrinter):
    """Printing class that handles the `str` method of `Polynomial`.

        >>> from gof2.field.core import Polynomial
        >>> from gof2.field.printing import PolynomialStrPrinter
        >>> PolynomialStrPrinter().doprint(Polynomial(0b1011))
        'x**3 + x + 1'
        >>> PolynomialStrPrinter().doprint(Polynomial(0))
        '0'

    """

    def _print_Polynomial(self, p):
        return self._print(p.as_expr())
