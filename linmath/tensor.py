"""Operations on third-order tensors represented as lists of matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

from linmath import matrix, vector

Tensor = list[list[list[float]]]
TensorLike = Sequence[Sequence[Sequence[float]]]


def _check_same_slices(A: TensorLike, B: TensorLike) -> None:
    if len(A) != len(B):
        raise ValueError(f"tensor slice counts differ: {len(A)} and {len(B)}")


def addition(A: TensorLike, B: TensorLike) -> Tensor:
    """Element-wise sum."""
    _check_same_slices(A, B)
    return [matrix.addition(a, b) for a, b in zip(A, B)]


def element_wise_division(A: TensorLike, B: TensorLike) -> Tensor:
    """Element-wise quotient A / B."""
    _check_same_slices(A, B)
    return [matrix.element_wise_division(a, b) for a, b in zip(A, B)]


def sqrt(A: TensorLike) -> Tensor:
    """Square root of each element."""
    return [matrix.sqrt(a) for a in A]


def exponentiate(A: TensorLike, p: float) -> Tensor:
    """Raise each element to the power ``p``."""
    return [matrix.exponentiate(a, p) for a in A]


def tensor_vec_mult(A: TensorLike, b: Sequence[float]) -> matrix.Matrix:
    """Contract the last axis of ``A`` with ``b``, giving a matrix."""
    return [[vector.dot(fibre, b) for fibre in slice_] for slice_ in A]


def flatten(A: TensorLike) -> list[float]:
    """All elements, slice by slice, in row-major order."""
    return [x for slice_ in A for x in matrix.flatten(slice_)]


def format_tensor(A: TensorLike) -> str:
    """Render a tensor as its matrices separated by blank lines."""
    return "\n".join(matrix.format_matrix(slice_) for slice_ in A)


def print_tensor(A: TensorLike) -> None:
    """Print a tensor as its matrices separated by blank lines."""
    print(format_tensor(A), end="")


def scalar_multiply(scalar: float, A: TensorLike) -> Tensor:
    """Multiply every element by ``scalar``."""
    return [matrix.scalar_multiply(scalar, a) for a in A]


def scalar_add(scalar: float, A: TensorLike) -> Tensor:
    """Add ``scalar`` to every element."""
    return [matrix.scalar_add(scalar, a) for a in A]


def _resized(values: Sequence, size: int, fill) -> list:
    kept = list(values[:size])
    kept.extend(fill() for _ in range(size - len(kept)))
    return kept


def resize(A: TensorLike, B: TensorLike) -> Tensor:
    """Reshape ``A`` to the shape of ``B``, keeping existing values and padding with zeros."""
    slices = _resized(A, len(B), list)
    result: Tensor = []
    for slice_, shape_slice in zip(slices, B):
        rows = _resized(slice_, len(shape_slice), list)
        result.append(
            [
                [float(x) for x in _resized(row, len(shape_row), float)]
                for row, shape_row in zip(rows, shape_slice)
            ]
        )
    return result


def maximum(A: TensorLike, B: TensorLike) -> Tensor:
    """Element-wise maximum of two tensors."""
    _check_same_slices(A, B)
    return [matrix.maximum(a, b) for a, b in zip(A, B)]


def absolute(A: TensorLike) -> Tensor:
    """Absolute value of each element."""
    return [matrix.absolute(a) for a in A]


def norm_2(A: TensorLike) -> float:
    """Frobenius norm over all elements."""
    return math.sqrt(sum(x * x for x in flatten(A)))


def vector_wise_tensor_product(A: TensorLike, B: Sequence[Sequence[float]]) -> Tensor:
    """Multiply ``B`` into every fibre of ``A`` taken along its first axis."""
    depth = len(A)
    if depth == 0:
        return []
    if len(B) < depth:
        raise ValueError(
            f"matrix has {len(B)} rows but the tensor has {depth} slices"
        )
    result = resize([], A)
    for i, row in enumerate(A[0]):
        for j in range(len(row)):
            fibre = [A[k][i][j] for k in range(depth)]
            product = matrix.mat_vec_mult(B, fibre)
            for k in range(depth):
                result[k][i][j] = product[k]
    return result