"""Fixed-length bit-arrays, bit iterators, and LU and Gaussian solvers over GF(2)."""

__version__ = "2.0.0"
__all__ = ["array", "gauss", "iterators", "lu", "naive"]