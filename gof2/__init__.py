"""Linear algebra over GF(2) and GF(2)[x] with sparse, dense and structural matrices."""
