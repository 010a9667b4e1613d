"""Matrices over GF(2) and GF(2)[x].

The matrix kinds are the storage matrices `binary.SparseMatrix`,
`binary.FullMatrix`, `polynomial.PSparseMatrix` and `polynomial.PFullMatrix`,
the structural matrices `structural.Identity`, `structural.Zero`,
`structural.Rotation` and `structural.Shift`, and `view.View`.
"""
