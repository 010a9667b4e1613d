"""Manage the representation of matrices."""
from gof2.field.printing import PolynomialStrPrinter


# noinspection PyPep8Naming
class MatrixStrPrinter(PolynomialStrPrinter):
    """Printing class that handles the `str` method of `Matrix`.

    Each row is printed in a separate line. Elements are separated
    by spaces when all of them are 0 or 1 and by commas otherwise.

        >>> from gof2.matrix.polynomial import PSparseMatrix
        >>> from gof2.matrix.printing import MatrixStrPrinter
        >>> m = PSparseMatrix(2, 2)
        >>> m.set_at(2, 1, 0b100)
        >>> print(MatrixStrPrinter().doprint(m))
        [0, 0]
        [x**2, 0]
        >>> m.set_at(2, 1, 1)
        >>> print(MatrixStrPrinter().doprint(m))
        [0 0]
        [1 0]

    """

    def _print(self, expr, **kwargs):
        # SymPy's printers define methods for some names of the matrix
        # kinds (e.g., _print_Identity), so matrices skip the lookup by name
        from gof2.matrix.core import Matrix
        if isinstance(expr, Matrix):
            return self._print_Matrix(expr)
        return super()._print(expr, **kwargs)

    def _print_Matrix(self, m):
        rows, cols = m.size()
        elements = [[m.at(r, c) for c in range(1, cols + 1)] for r in range(1, rows + 1)]
        binary = all(p.degree() < 1 for row in elements for p in row)
        delimiter = " " if binary else ", "
        lines = []
        for row in elements:
            lines.append("[{}]".format(delimiter.join(self._print(p) for p in row)))
        return "\n".join(lines)
