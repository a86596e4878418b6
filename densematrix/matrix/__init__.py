"""
Dense matrix type and operations.

Public API:
    Matrix                  - dense float64 matrix with explicit lifecycle
    get(M, i, j)            - element read
    put(M, i, j, val)       - element write
    release(M), destroy(M)  - teardown
    add(A, B)               - entry-wise sum
    multiply(A, B)          - matrix product
    l1_norm(A), l2_norm(A)  - entry-wise norms
"""

from densematrix.matrix.matrix import Matrix, get, put, release, destroy
from densematrix.matrix.operations import add, multiply, l1_norm, l2_norm

__all__ = [
    "Matrix",
    "get",
    "put",
    "release",
    "destroy",
    "add",
    "multiply",
    "l1_norm",
    "l2_norm",
]
