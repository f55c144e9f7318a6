"""Numerical differentiation, root finding, ODE stepping and Taylor approximations."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

from linmath import decomposition, matrix, vector

ScalarFunction = Callable[[float], float]
VectorFunction = Callable[[Sequence[float]], float]

_FIRST_ORDER_STEP = 1e-10
_HIGHER_ORDER_STEP = 1e-5
# Third-order partial derivatives use a step of 2**31 - 1.
_THIRD_ORDER_PARTIAL_STEP = float(2**31 - 1)


def _steps(count: float) -> range:
    """Iterations of a loop that runs while a counter from zero stays below ``count``."""
    if math.isnan(count) or count <= 0:
        return range(0)
    return range(math.ceil(count))


def _shifted(x: Sequence[float], axes: Iterable[int], step: float) -> list[float]:
    shifted = list(x)
    for axis in axes:
        shifted[axis] += step
    return shifted


def num_diff(function: ScalarFunction, x: float) -> float:
    """First derivative by a forward difference."""
    eps = _FIRST_ORDER_STEP
    return (function(x + eps) - function(x)) / eps


def num_diff_2(function: ScalarFunction, x: float) -> float:
    """Second derivative by a forward difference."""
    eps = _HIGHER_ORDER_STEP
    return (function(x + 2 * eps) - 2 * function(x + eps) + function(x)) / (eps * eps)


def num_diff_3(function: ScalarFunction, x: float) -> float:
    """Third derivative by a forward difference."""
    eps = _HIGHER_ORDER_STEP
    t1 = function(x + 3 * eps) - 2 * function(x + 2 * eps) + function(x + eps)
    t2 = function(x + 2 * eps) - 2 * function(x + eps) + function(x)
    return (t1 - t2) / (eps * eps * eps)


def constant_approximation(function: ScalarFunction, c: float) -> float:
    """Zeroth-order Taylor approximation around ``c``."""
    return function(c)


def linear_approximation(function: ScalarFunction, c: float, x: float) -> float:
    """First-order Taylor approximation around ``c`` evaluated at ``x``."""
    return constant_approximation(function, c) + num_diff(function, c) * (x - c)


def quadratic_approximation(function: ScalarFunction, c: float, x: float) -> float:
    """Second-order Taylor approximation around ``c`` evaluated at ``x``."""
    return linear_approximation(function, c, x) + 0.5 * num_diff_2(function, c) * (x - c) ** 2


def cubic_approximation(function: ScalarFunction, c: float, x: float) -> float:
    """Third-order Taylor approximation; the third-order term carries zero weight,
    so the result equals the quadratic approximation."""
    return quadratic_approximation(function, c, x)


def partial_diff(function: VectorFunction, x: Sequence[float], axis: int) -> float:
    """Partial derivative with respect to ``axis`` by a forward difference."""
    eps = _FIRST_ORDER_STEP
    return (function(_shifted(x, (axis,), eps)) - function(list(x))) / eps


def partial_diff_2(
    function: VectorFunction, x: Sequence[float], axis1: int, axis2: int
) -> float:
    """Second-order partial derivative with respect to ``axis1`` and ``axis2``."""
    eps = _HIGHER_ORDER_STEP
    x_pp = _shifted(x, (axis1, axis2), eps)
    x_np = _shifted(x, (axis2,), eps)
    x_pn = _shifted(x, (axis1,), eps)
    return (function(x_pp) - function(x_np) - function(x_pn) + function(list(x))) / (eps * eps)


def partial_diff_3(
    function: VectorFunction, x: Sequence[float], axis1: int, axis2: int, axis3: int
) -> float:
    """Third-order partial derivative with respect to three axes."""
    eps = _THIRD_ORDER_PARTIAL_STEP
    x_ppp = _shifted(x, (axis1, axis2, axis3), eps)
    x_npp = _shifted(x, (axis2, axis3), eps)
    x_pnp = _shifted(x, (axis1, axis3), eps)
    x_nnp = _shifted(x, (axis3,), eps)
    x_ppn = _shifted(x, (axis1, axis2), eps)
    x_npn = _shifted(x, (axis2,), eps)
    x_pnn = _shifted(x, (axis1,), eps)

    third_axis = function(x_ppp) - function(x_npp) - function(x_pnp) + function(x_nnp)
    no_third_axis = function(x_ppn) - function(x_npn) - function(x_pnn) + function(list(x))
    return (third_axis - no_third_axis) / (eps * eps * eps)


def newton_raphson_method(function: ScalarFunction, x_0: float, epoch_num: float) -> float:
    """Root of ``function`` by Newton-Raphson iteration from ``x_0``."""
    x = x_0
    for _ in _steps(epoch_num):
        x -= function(x) / num_diff(function, x)
    return x


def halley_method(function: ScalarFunction, x_0: float, epoch_num: float) -> float:
    """Root of ``function`` by Halley's method from ``x_0``."""
    x = x_0
    for _ in _steps(epoch_num):
        fx = function(x)
        d1 = num_diff(function, x)
        d2 = num_diff_2(function, x)
        x -= (2 * fx * d1) / (2 * d1 * d1 - fx * d2)
    return x


def inv_quadratic_interpolation(
    function: ScalarFunction, x_0: Sequence[float], epoch_num: float
) -> float:
    """Root of ``function`` by inverse quadratic interpolation from three starting points.

    Returns 0.0 when no iteration is run.
    """
    if len(x_0) < 3:
        raise ValueError("inverse quadratic interpolation needs three starting points")
    points = list(x_0)
    x = 0.0
    for _ in _steps(epoch_num):
        x0, x1, x2 = points[:3]
        f0, f1, f2 = function(x0), function(x1), function(x2)
        t1 = (f1 * f2) / ((f0 - f1) * (f0 - f2)) * x0
        t2 = (f0 * f2) / ((f1 - f0) * (f1 - f2)) * x1
        t3 = (f0 * f1) / ((f2 - f0) * (f2 - f1)) * x2
        x = t1 + t2 + t3
        points = points[1:] + [x]
    return x


def eulerian_method(
    derivative: ScalarFunction, q_0: Sequence[float], p: float, h: float
) -> float:
    """Euler's method for dy/dx = f(x) from the point ``q_0`` up to ``x = p``."""
    x, y = q_0[0], q_0[1]
    for _ in _steps((p - q_0[0]) / h):
        y += h * derivative(x)
        x += h
    return y


def eulerian_method_multivariate(
    derivative: VectorFunction, q_0: Sequence[float], p: float, h: float
) -> float:
    """Euler's method for dy/dx = f([x, y]) from the point ``q_0`` up to ``x = p``."""
    x, y = q_0[0], q_0[1]
    for _ in _steps((p - q_0[0]) / h):
        y += h * derivative([x, y])
        x += h
    return y


def growth_method(c: float, k: float, t: float) -> float:
    """Solution C e^(kt) of the growth equation dP/dt = kP."""
    return c * math.exp(k * t)


def jacobian(function: VectorFunction, x: Sequence[float]) -> list[float]:
    """Gradient of a scalar function at ``x``."""
    return [partial_diff(function, x, axis) for axis in range(len(x))]


def hessian(function: VectorFunction, x: Sequence[float]) -> list[list[float]]:
    """Matrix of second-order partial derivatives at ``x``."""
    size = len(x)
    return [[partial_diff_2(function, x, i, j) for j in range(size)] for i in range(size)]


def third_order_tensor(
    function: VectorFunction, x: Sequence[float]
) -> list[list[list[float]]]:
    """Tensor of third-order partial derivatives at ``x``."""
    size = len(x)
    return [
        [[partial_diff_3(function, x, i, j, k) for k in range(size)] for j in range(size)]
        for i in range(size)
    ]


def constant_approximation_multivariate(function: VectorFunction, c: Sequence[float]) -> float:
    """Zeroth-order Taylor approximation around ``c``."""
    return function(list(c))


def linear_approximation_multivariate(
    function: VectorFunction, c: Sequence[float], x: Sequence[float]
) -> float:
    """``f(c)`` plus the first-order term, taken as the leading entry of the
    outer product of the gradient and ``x - c`` (so only the first axis counts)."""
    diff = vector.subtraction(x, c)
    first_order = matrix.matmult(matrix.transpose([jacobian(function, c)]), [diff])[0][0]
    return constant_approximation_multivariate(function, c) + first_order


def quadratic_approximation_multivariate(
    function: VectorFunction, c: Sequence[float], x: Sequence[float]
) -> float:
    """Linear approximation plus the Hessian quadratic form of ``x - c``."""
    diff = vector.subtraction(x, c)
    quadratic = matrix.matmult(
        [diff], matrix.matmult(hessian(function, c), matrix.transpose([diff]))
    )[0][0]
    return linear_approximation_multivariate(function, c, x) + 0.5 * quadratic


def cubic_approximation_multivariate(
    function: VectorFunction, c: Sequence[float], x: Sequence[float]
) -> float:
    """Third-order Taylor approximation; the third-order term carries zero weight,
    so the result equals the quadratic approximation."""
    return quadratic_approximation_multivariate(function, c, x)


def laplacian(function: VectorFunction, x: Sequence[float]) -> float:
    """Sum of the unmixed second-order partial derivatives at ``x``."""
    hessian_matrix = hessian(function, x)
    return sum(row[i] for i, row in enumerate(hessian_matrix))


def second_partial_derivative_test(function: VectorFunction, x: Sequence[float]) -> str:
    """Classify the critical point ``x`` as "min", "max", "saddle" or
    "test was inconclusive"."""
    hessian_matrix = hessian(function, x)
    if len(x) == 2:
        determinant = matrix.det(hessian_matrix, len(hessian_matrix))
        second_derivative = partial_diff_2(function, x, 0, 0)
        if second_derivative > 0 and determinant > 0:
            return "min"
        if second_derivative < 0 and determinant > 0:
            return "max"
        if determinant < 0:
            return "saddle"
        return "test was inconclusive"

    if decomposition.positive_definite_checker(hessian_matrix):
        return "min"
    if decomposition.negative_definite_checker(hessian_matrix):
        return "max"
    if not decomposition.zero_eigenvalue(hessian_matrix):
        return "saddle"
    return "test was inconclusive"