"""Matrix operations on matrices represented as lists of rows of floats."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from linmath import vector

Matrix = list[list[float]]
MatrixLike = Sequence[Sequence[float]]


def _check_same_rows(A: MatrixLike, B: MatrixLike) -> None:
    if len(A) != len(B):
        raise ValueError(f"matrix row counts differ: {len(A)} and {len(B)}")


def _map(func, A: MatrixLike) -> Matrix:
    return [[func(x) for x in row] for row in A]


def gram_matrix(A: MatrixLike) -> Matrix:
    """The Gram matrix A^T A."""
    return matmult(transpose(A), A)


def linear_independence_checker(A: MatrixLike) -> bool:
    """True when the columns of ``A`` are linearly independent."""
    G = gram_matrix(A)
    return det(G, len(G)) != 0.0


def gaussian_noise(n: int, m: int) -> Matrix:
    """An n x m matrix of standard normal samples."""
    return [[random.gauss(0.0, 1.0) for _ in range(m)] for _ in range(n)]


def addition(A: MatrixLike, B: MatrixLike) -> Matrix:
    """Element-wise sum."""
    _check_same_rows(A, B)
    return [vector.addition(a, b) for a, b in zip(A, B)]


def subtraction(A: MatrixLike, B: MatrixLike) -> Matrix:
    """Element-wise difference A - B."""
    _check_same_rows(A, B)
    return [vector.subtraction(a, b) for a, b in zip(A, B)]


def matmult(A: MatrixLike, B: MatrixLike) -> Matrix:
    """Matrix product A B."""
    if not B:
        raise ValueError("right-hand matrix is empty")
    inner = len(B)
    for row in A:
        if len(row) != inner:
            raise ValueError(
                f"cannot multiply: row length {len(row)} does not match {inner} rows"
            )
    columns = list(zip(*B))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in A]


def hadamard_product(A: MatrixLike, B: MatrixLike) -> Matrix:
    """Element-wise product."""
    _check_same_rows(A, B)
    return [vector.hadamard_product(a, b) for a, b in zip(A, B)]


def kronecker_product(A: MatrixLike, B: MatrixLike) -> Matrix:
    """Kronecker product of two matrices."""
    return [
        [value for a in a_row for value in vector.scalar_multiply(a, b_row)]
        for a_row in A
        for b_row in B
    ]


def element_wise_division(A: MatrixLike, B: MatrixLike) -> Matrix:
    """Element-wise quotient A / B."""
    _check_same_rows(A, B)
    return [vector.element_wise_division(a, b) for a, b in zip(A, B)]


def transpose(A: MatrixLike) -> Matrix:
    """Transpose of a matrix."""
    return [list(col) for col in zip(*A)]


def scalar_multiply(scalar: float, A: MatrixLike) -> Matrix:
    """Multiply every element by ``scalar``."""
    return [vector.scalar_multiply(scalar, row) for row in A]


def scalar_add(scalar: float, A: MatrixLike) -> Matrix:
    """Add ``scalar`` to every element."""
    return [vector.scalar_add(scalar, row) for row in A]


def log(A: MatrixLike) -> Matrix:
    """Natural logarithm of each element."""
    return _map(math.log, A)


def log10(A: MatrixLike) -> Matrix:
    """Base-10 logarithm of each element."""
    return _map(math.log10, A)


def exp(A: MatrixLike) -> Matrix:
    """Exponential of each element."""
    return _map(math.exp, A)


def erf(A: MatrixLike) -> Matrix:
    """Error function of each element."""
    return _map(math.erf, A)


def exponentiate(A: MatrixLike, p: float) -> Matrix:
    """Raise each element to the power ``p``."""
    return [vector.exponentiate(row, p) for row in A]


def sqrt(A: MatrixLike) -> Matrix:
    """Square root of each element."""
    return exponentiate(A, 0.5)


def cbrt(A: MatrixLike) -> Matrix:
    """Cube root of each (non-negative) element, computed as a power of 1/3."""
    return exponentiate(A, 1.0 / 3.0)


def matrix_power(A: MatrixLike, n: int) -> Matrix:
    """A raised to the integer power ``n``; negative powers use the inverse."""
    result = identity(len(A))
    if n == 0:
        return result
    base = inverse(A) if n < 0 else [list(row) for row in A]
    for _ in range(abs(n)):
        result = matmult(result, base)
    return result


def absolute(A: MatrixLike) -> Matrix:
    """Absolute value of each element."""
    return [vector.absolute(row) for row in A]


def det(A: MatrixLike, d: int) -> float:
    """Determinant of the leading d x d block of ``A`` by cofactor expansion."""
    if d == 1:
        return float(A[0][0])
    if d == 2:
        return float(A[0][0] * A[1][1] - A[0][1] * A[1][0])
    total = 0.0
    for i in range(d):
        minor = [[row[k] for k in range(d) if k != i] for row in A[1:d]]
        sign = 1.0 if i % 2 == 0 else -1.0
        total += sign * A[0][i] * det(minor, d - 1)
    return total


def trace(A: MatrixLike) -> float:
    """Sum of the diagonal elements."""
    return sum((A[i][i] for i in range(len(A))), 0.0)


def cofactor(A: MatrixLike, n: int, i: int, j: int) -> Matrix:
    """Minor of ``A`` without row i and column j, padded with zeros to A's size."""
    size = len(A)
    cof = zeromat(size, size)
    minor = [
        [A[row][col] for col in range(n) if col != j]
        for row in range(n)
        if row != i
    ]
    for r, values in enumerate(minor):
        for c, value in enumerate(values):
            cof[r][c] = value
    return cof


def adjoint(A: MatrixLike) -> Matrix:
    """Adjugate (classical adjoint) of a square matrix."""
    size = len(A)
    if size == 1:
        return [[1.0]]
    if size == 2:
        return [[A[1][1], -A[0][1]], [-A[1][0], A[0][0]]]
    adj = zeromat(size, size)
    for i in range(size):
        for j in range(size):
            sign = 1 if (i + j) % 2 == 0 else -1
            adj[j][i] = sign * det(cofactor(A, size, i, j), size - 1)
    return adj


def inverse(A: MatrixLike) -> Matrix:
    """Inverse of a square matrix; raises ValueError when it is singular."""
    determinant = det(A, len(A))
    if determinant == 0.0:
        raise ValueError("matrix is singular and has no inverse")
    return scalar_multiply(1.0 / determinant, adjoint(A))


def pinverse(A: MatrixLike) -> Matrix:
    """Moore-Penrose pseudo-inverse (A^T A)^-1 A^T."""
    At = transpose(A)
    return matmult(inverse(matmult(At, A)), At)


def zeromat(n: int, m: int) -> Matrix:
    """An n x m matrix of zeros."""
    return [[0.0] * m for _ in range(n)]


def onemat(n: int, m: int) -> Matrix:
    """An n x m matrix of ones."""
    return full(n, m, 1)


def full(n: int, m: int, k: float) -> Matrix:
    """An n x m matrix filled with ``k``."""
    return [[float(k)] * m for _ in range(n)]


def sin(A: MatrixLike) -> Matrix:
    """Sine of each element."""
    return _map(math.sin, A)


def cos(A: MatrixLike) -> Matrix:
    """Cosine of each element."""
    return _map(math.cos, A)


def rotate(A: MatrixLike, theta: float, axis: int = -1) -> Matrix:
    """Multiply ``A`` by a rotation matrix: 2-D by default, or about axis 0, 1 or 2."""
    c, s = math.cos(theta), math.sin(theta)
    if axis == 0:
        rotation = [[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]]
    elif axis == 1:
        rotation = [[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]]
    elif axis == 2:
        rotation = [[c, -s, 0.0], [s, c, 0.0], [1.0, 0.0, 0.0]]
    else:
        rotation = [[c, -s], [s, c]]
    return matmult(A, rotation)


def maximum(A: MatrixLike, B: MatrixLike) -> Matrix:
    """Element-wise maximum of two matrices."""
    _check_same_rows(A, B)
    return [vector.maximum(a, b) for a, b in zip(A, B)]


def max_value(A: MatrixLike) -> float:
    """Largest element, truncated toward zero to a whole number."""
    return vector.max_value(flatten(A))


def min_value(A: MatrixLike) -> float:
    """Smallest element, truncated toward zero to a whole number."""
    return vector.min_value(flatten(A))


def rounded(A: MatrixLike) -> Matrix:
    """Round each element to the nearest whole number, halves away from zero."""
    return [vector.rounded(row) for row in A]


def norm_2(A: MatrixLike) -> float:
    """Frobenius norm."""
    return math.sqrt(sum(vector.norm_sq(row) for row in A))


def identity(d: float) -> Matrix:
    """The d x d identity matrix."""
    size = int(d)
    return [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]


def diag(a: Sequence[float]) -> Matrix:
    """Square matrix with ``a`` on its diagonal."""
    B = zeromat(len(a), len(a))
    for i, value in enumerate(a):
        B[i][i] = value
    return B


def flatten(A: MatrixLike) -> list[float]:
    """All elements in row-major order."""
    return [x for row in A for x in row]


def sum_elements(A: MatrixLike) -> float:
    """Sum of all elements."""
    return sum((vector.sum_elements(row) for row in A), 0.0)


def mat_vec_add(A: MatrixLike, b: Sequence[float]) -> Matrix:
    """Add ``b`` to every row of ``A``."""
    return [vector.addition(row, b) for row in A]


def mat_vec_mult(A: MatrixLike, b: Sequence[float]) -> list[float]:
    """Matrix-vector product A b."""
    return [vector.dot(row, b) for row in A]


def format_matrix(A: MatrixLike) -> str:
    """Render a matrix, one line per row."""
    return "".join(vector.format_vector(row) + "\n" for row in A)


def print_matrix(A: MatrixLike) -> None:
    """Print a matrix, one line per row."""
    print(format_matrix(A), end="")