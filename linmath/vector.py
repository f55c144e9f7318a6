"""Element-wise and reduction operations on vectors represented as lists of floats."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

Vector = list[float]


def _pairs(a: Sequence[float], b: Sequence[float]) -> Iterable[tuple[float, float]]:
    if len(a) != len(b):
        raise ValueError(f"vector lengths differ: {len(a)} and {len(b)}")
    return zip(a, b)


def _apply(func: Callable[[float], float], a: Sequence[float]) -> Vector:
    return [func(x) for x in a]


def _round_half_away(x: float) -> float:
    if math.isnan(x) or math.isinf(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def hadamard_product(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Element-wise product of two vectors."""
    return [x * y for x, y in _pairs(a, b)]


def element_wise_division(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Element-wise quotient a / b."""
    return [x / y for x, y in _pairs(a, b)]


def scalar_multiply(scalar: float, a: Sequence[float]) -> Vector:
    """Multiply every element by ``scalar``."""
    return [scalar * x for x in a]


def scalar_add(scalar: float, a: Sequence[float]) -> Vector:
    """Add ``scalar`` to every element."""
    return [x + scalar for x in a]


def addition(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Element-wise sum."""
    return [x + y for x, y in _pairs(a, b)]


def subtraction(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Element-wise difference a - b."""
    return [x - y for x, y in _pairs(a, b)]


def subtract_matrix_rows(a: Sequence[float], rows: Iterable[Sequence[float]]) -> Vector:
    """Subtract every row of a matrix from ``a`` in turn."""
    result = list(a)
    for row in rows:
        result = subtraction(result, row)
    return result


def log(a: Sequence[float]) -> Vector:
    """Natural logarithm of each element."""
    return _apply(math.log, a)


def log10(a: Sequence[float]) -> Vector:
    """Base-10 logarithm of each element."""
    return _apply(math.log10, a)


def exp(a: Sequence[float]) -> Vector:
    """Exponential of each element."""
    return _apply(math.exp, a)


def erf(a: Sequence[float]) -> Vector:
    """Error function of each element."""
    return _apply(math.erf, a)


def exponentiate(a: Sequence[float], p: float) -> Vector:
    """Raise each element to the power ``p``."""
    return [math.pow(x, p) for x in a]


def sqrt(a: Sequence[float]) -> Vector:
    """Square root of each element."""
    return exponentiate(a, 0.5)


def cbrt(a: Sequence[float]) -> Vector:
    """Cube root of each (non-negative) element, computed as a power of 1/3."""
    return exponentiate(a, 1.0 / 3.0)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product."""
    return sum(x * y for x, y in _pairs(a, b))


def cross(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Cross product of two vectors in R^3."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("cross product is defined for 3-dimensional vectors only")
    return [
        a[1] * b[2] - a[2] * b[1],
        -(a[0] * b[2] - a[2] * b[0]),
        a[0] * b[1] - a[1] * b[0],
    ]


def absolute(a: Sequence[float]) -> Vector:
    """Absolute value of each element."""
    return [abs(x) for x in a]


def zerovec(n: int) -> Vector:
    """Vector of ``n`` zeros."""
    return [0.0] * n


def onevec(n: int) -> Vector:
    """Vector of ``n`` ones."""
    return full(n, 1)


def full(n: int, k: float) -> Vector:
    """Vector of ``n`` copies of ``k``."""
    return [float(k)] * n


def sin(a: Sequence[float]) -> Vector:
    """Sine of each element."""
    return _apply(math.sin, a)


def cos(a: Sequence[float]) -> Vector:
    """Cosine of each element."""
    return _apply(math.cos, a)


def maximum(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Element-wise maximum of two vectors."""
    return [x if x >= y else y for x, y in _pairs(a, b)]


def max_value(a: Sequence[float]) -> float:
    """Largest element, truncated toward zero to a whole number."""
    if not a:
        raise ValueError("max_value() of an empty vector")
    return float(math.trunc(max(a)))


def min_value(a: Sequence[float]) -> float:
    """Smallest element, truncated toward zero to a whole number."""
    if not a:
        raise ValueError("min_value() of an empty vector")
    return float(math.trunc(min(a)))


def rounded(a: Sequence[float]) -> Vector:
    """Round each element to the nearest whole number, halves away from zero."""
    return _apply(_round_half_away, a)


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(sum((x - y) ** 2 for x, y in _pairs(a, b)))


def norm_2(a: Sequence[float]) -> float:
    """Euclidean norm."""
    return math.sqrt(norm_sq(a))


def norm_sq(a: Sequence[float]) -> float:
    """Squared Euclidean norm."""
    return sum(x * x for x in a)


def sum_elements(a: Sequence[float]) -> float:
    """Sum of all elements."""
    return sum(a, 0.0)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors."""
    return dot(a, b) / (norm_2(a) * norm_2(b))


def outer_product(a: Sequence[float], b: Sequence[float]) -> list[Vector]:
    """Outer product a b^T as a list of rows."""
    return [scalar_multiply(x, b) for x in a]


def format_vector(a: Sequence[float]) -> str:
    """Render a vector as one line, each element followed by a space."""
    return "".join(f"{x:g} " for x in a)


def print_vector(a: Sequence[float]) -> None:
    """Print a vector on one line."""
    print(format_vector(a))