"""Elements of GF(2) and of the polynomial ring GF(2)[x]."""
