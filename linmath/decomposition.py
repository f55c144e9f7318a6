"""Eigen, singular value, QR and Cholesky decompositions and related checks."""

from __future__ import annotations

import math
from collections.abc import Sequence

from linmath import matrix, vector

Matrix = list[list[float]]
MatrixLike = Sequence[Sequence[float]]


def _off_diagonal(size: int):
    return ((i, j) for i in range(size) for j in range(size) if i != j)


def _largest_off_diagonal(A: Matrix) -> tuple[float, int, int]:
    """Pick the rotation pivot the way the Jacobi sweep expects it."""
    a_ij, sub_i, sub_j = A[0][1], 0, 1
    for i, row in enumerate(A):
        for j, value in enumerate(row):
            if i == j:
                continue
            if abs(value) > a_ij:
                a_ij, sub_i, sub_j = value, i, j
            elif abs(value) == a_ij and i < sub_i:
                a_ij, sub_i, sub_j = value, i, j
    return a_ij, sub_i, sub_j


def eig(A: MatrixLike) -> tuple[Matrix, Matrix]:
    """Eigenvectors and eigenvalues of a symmetric matrix by Jacobi rotations.

    Returns ``(eigenvectors, eigenvalues)``: the eigenvectors are the columns of
    the first matrix and the eigenvalues sit, in descending order, on the
    diagonal of the second.
    """
    current = [[float(x) for x in row] for row in A]
    size = len(current)
    if size < 2 or any(len(row) != size for row in current):
        raise ValueError("eig() needs a square matrix of size at least 2")

    eigenvectors = matrix.identity(size)
    while True:
        a_ij, sub_i, sub_j = _largest_off_diagonal(current)
        a_ii = current[sub_i][sub_i]
        a_jj = current[sub_j][sub_j]
        if a_ii == a_jj:
            theta = math.pi / 4
        else:
            theta = 0.5 * math.atan(2 * a_ij / (a_ii - a_jj))

        rotation = matrix.identity(size)
        rotation[sub_i][sub_j] = -math.sin(theta)
        rotation[sub_i][sub_i] = math.cos(theta)
        rotation[sub_j][sub_j] = math.cos(theta)
        rotation[sub_j][sub_i] = math.sin(theta)

        a_new = matrix.matmult(matrix.matmult(matrix.inverse(rotation), current), rotation)

        # Off-diagonal entries that round to zero are treated as zero.
        for i, j in _off_diagonal(size):
            if abs(a_new[i][j]) < 0.5:
                a_new[i][j] = 0.0
        diagonal = all(a_new[i][j] == 0 for i, j in _off_diagonal(size))

        if a_new == current:
            diagonal = True
            for i, j in _off_diagonal(size):
                a_new[i][j] = 0.0

        eigenvectors = matrix.matmult(eigenvectors, rotation)
        current = a_new
        if diagonal:
            break

    prior = [current[i][i] for i in range(size)]
    ordered = sorted(prior, reverse=True)
    for i, value in enumerate(ordered):
        current[i][i] = value

    mapping = [0] * size
    for i, value in enumerate(ordered):
        for j, original in enumerate(prior):
            if value == original:
                mapping[i] = j

    reordered = [[row[mapping[j]] for j in range(size)] for row in eigenvectors]
    return reordered, current


def svd(A: MatrixLike) -> tuple[Matrix, Matrix, Matrix]:
    """Singular value decomposition ``(U, Sigma, V)`` built from two eigen-decompositions."""
    At = matrix.transpose(A)
    left_vectors, eigenvalues = eig(matrix.matmult(A, At))
    right_vectors, _ = eig(matrix.matmult(At, A))

    singular_values = matrix.sqrt(eigenvalues)
    rows, cols = len(A), len(A[0])
    sigma = matrix.zeromat(rows, cols)
    for i, row in enumerate(singular_values):
        for j, value in enumerate(row[:cols]):
            sigma[i][j] = value
    return left_vectors, sigma, right_vectors


def vector_projection(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Projection of ``b`` onto the direction of ``a``."""
    factor = vector.dot(a, b) / vector.dot(a, a)
    return vector.scalar_multiply(factor, a)


def gram_schmidt_process(A: MatrixLike) -> Matrix:
    """Orthonormalise the columns of ``A``."""
    columns = matrix.transpose(A)
    basis: Matrix = []
    for column in columns:
        current = list(column)
        for previous in reversed(basis):
            current = vector.subtraction(current, vector_projection(previous, column))
        basis.append(vector.scalar_multiply(1 / vector.norm_2(current), current))
    return matrix.transpose(basis)


def qrd(A: MatrixLike) -> tuple[Matrix, Matrix]:
    """QR decomposition ``(Q, R)`` with ``Q`` from Gram-Schmidt."""
    Q = gram_schmidt_process(A)
    R = matrix.matmult(matrix.transpose(Q), A)
    return Q, R


def chol(A: MatrixLike) -> tuple[Matrix, Matrix]:
    """Cholesky decomposition ``(L, L^T)`` of a symmetric positive definite matrix."""
    size = len(A)
    L = matrix.zeromat(size, len(A[0]))
    for j in range(size):
        for i in range(j, size):
            if i == j:
                remainder = A[i][j] - sum(L[i][k] * L[i][k] for k in range(j))
                if remainder < 0 or math.isnan(remainder):
                    raise ValueError("matrix is not positive definite")
                L[i][j] = math.sqrt(remainder)
            else:
                partial = sum(L[i][k] * L[j][k] for k in range(j))
                L[i][j] = (A[i][j] - partial) / L[j][j]
    return L, matrix.transpose(L)


def solve(A: MatrixLike, b: Sequence[float]) -> list[float]:
    """Solve ``A x = b`` through the inverse of ``A``."""
    return matrix.mat_vec_mult(matrix.inverse(A), b)


def _eigenvalues(A: MatrixLike) -> list[float]:
    _, values = eig(A)
    return [values[i][i] for i in range(len(values))]


def positive_definite_checker(A: MatrixLike) -> bool:
    """True when every eigenvalue is positive."""
    return all(value > 0 for value in _eigenvalues(A))


def negative_definite_checker(A: MatrixLike) -> bool:
    """True when every eigenvalue is negative."""
    return all(value < 0 for value in _eigenvalues(A))


def zero_eigenvalue(A: MatrixLike) -> bool:
    """True when some eigenvalue is exactly zero."""
    return any(value == 0 for value in _eigenvalues(A))