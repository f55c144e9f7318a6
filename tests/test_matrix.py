import math

import pytest

from linmath import matrix

A3 = [[2.0, 1.0, 0.0], [1.0, 3.0, 1.0], [0.0, 1.0, 4.0]]
B3 = [[1.0, 2.0, 3.0], [0.0, 1.0, 4.0], [5.0, 6.0, 0.0]]


def assert_close(X, Y, tol=1e-9):
    assert len(X) == len(Y)
    for rx, ry in zip(X, Y):
        assert rx == pytest.approx(ry, abs=tol)


def test_transpose_round_trip():
    M = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    T = matrix.transpose(M)
    assert len(T) == 3 and len(T[0]) == 2
    assert matrix.transpose(T) == M


def test_addition_subtraction_round_trip():
    assert_close(matrix.subtraction(matrix.addition(A3, B3), B3), A3)


def test_elementwise_shape_mismatch():
    with pytest.raises(ValueError):
        matrix.addition(A3, [[1.0, 2.0, 3.0]])


def test_hadamard_and_division():
    ones = matrix.onemat(3, 3)
    assert matrix.hadamard_product(A3, ones) == A3
    nonzero = matrix.scalar_add(1.0, B3)
    assert matrix.element_wise_division(nonzero, nonzero) == ones


def test_matmult_identity_and_mismatch():
    assert_close(matrix.matmult(A3, matrix.identity(3)), A3)
    assert_close(matrix.matmult(matrix.identity(3), B3), B3)
    with pytest.raises(ValueError):
        matrix.matmult([[1.0, 2.0]], [[1.0, 2.0]])


def test_kronecker_with_unit():
    assert matrix.kronecker_product([[1.0]], B3) == B3
    K = matrix.kronecker_product(A3, [[1.0, 2.0]])
    assert len(K) == 3 and len(K[0]) == 6
    assert K[1][2] == A3[1][1] * 1.0


def test_scalar_ops():
    assert_close(matrix.scalar_multiply(0.5, matrix.scalar_multiply(2.0, A3)), A3)
    assert_close(matrix.scalar_add(-3.0, matrix.scalar_add(3.0, A3)), A3)


def test_log_exp_round_trip():
    M = [[0.5, 1.0], [2.0, 3.0]]
    assert_close(matrix.log(matrix.exp(M)), M)
    assert_close(matrix.log10(matrix.exponentiate([[10.0]], 2.0)), [[2.0]])


def test_sqrt_cbrt():
    M = [[4.0, 9.0], [2.0, 7.0]]
    assert_close(matrix.exponentiate(matrix.sqrt(M), 2.0), M)
    assert_close(matrix.exponentiate(matrix.cbrt(M), 3.0), M)


def test_erf_sin_cos():
    M = [[0.0, 0.3], [-0.7, 1.2]]
    assert matrix.erf(M)[0][0] == 0.0
    s, c = matrix.sin(M), matrix.cos(M)
    summed = matrix.addition(matrix.exponentiate(s, 2), matrix.exponentiate(c, 2))
    assert_close(summed, matrix.onemat(2, 2))


def test_absolute():
    M = [[-1.5, 2.0], [0.0, -3.0]]
    assert matrix.absolute(M) == matrix.absolute(matrix.scalar_multiply(-1.0, M))
    assert min(matrix.flatten(matrix.absolute(M))) >= 0.0


def test_det_properties():
    assert matrix.det(matrix.identity(4), 4) == pytest.approx(1.0)
    assert matrix.det(A3, 3) == pytest.approx(matrix.det(matrix.transpose(A3), 3))
    product = matrix.matmult(A3, B3)
    assert matrix.det(product, 3) == pytest.approx(
        matrix.det(A3, 3) * matrix.det(B3, 3)
    )
    assert matrix.det([[7.0]], 1) == 7.0


def test_cofactor_padded():
    cof = matrix.cofactor(A3, 3, 0, 0)
    assert len(cof) == 3 and all(len(r) == 3 for r in cof)
    assert cof[0][:2] == [A3[1][1], A3[1][2]]
    assert cof[2] == [0.0, 0.0, 0.0]


def test_adjoint_identity():
    d = matrix.det(A3, 3)
    assert_close(matrix.matmult(A3, matrix.adjoint(A3)), matrix.scalar_multiply(d, matrix.identity(3)))
    assert matrix.adjoint([[5.0]]) == [[1.0]]


def test_inverse_and_singular():
    assert_close(matrix.matmult(A3, matrix.inverse(A3)), matrix.identity(3))
    with pytest.raises(ValueError):
        matrix.inverse([[1.0, 2.0], [2.0, 4.0]])


def test_pinverse_of_square_is_inverse():
    assert_close(matrix.pinverse(A3), matrix.inverse(A3), tol=1e-7)


def test_matrix_power():
    assert_close(matrix.matrix_power(A3, 2), matrix.matmult(A3, A3))
    assert matrix.matrix_power(A3, 0) == matrix.identity(3)
    assert_close(matrix.matrix_power(A3, -1), matrix.inverse(A3))


def test_gram_and_independence():
    G = matrix.gram_matrix(B3)
    assert_close(G, matrix.transpose(G))
    assert matrix.linear_independence_checker(matrix.identity(3)) is True
    assert matrix.linear_independence_checker([[1.0, 1.0], [2.0, 2.0]]) is False


def test_gaussian_noise_shape():
    noise = matrix.gaussian_noise(4, 5)
    assert len(noise) == 4 and all(len(r) == 5 for r in noise)
    assert all(math.isfinite(x) for x in matrix.flatten(noise))


def test_constructors():
    assert matrix.zeromat(2, 3) == [[0.0] * 3] * 2
    assert matrix.full(2, 2, 7) == [[7.0, 7.0], [7.0, 7.0]]
    assert matrix.sum_elements(matrix.onemat(3, 4)) == 12.0


def test_rotate_preserves_norm():
    pts = [[1.0, 2.0, 3.0], [-1.0, 0.5, 2.0]]
    assert matrix.norm_2(matrix.rotate(pts, 0.7, 0)) == pytest.approx(matrix.norm_2(pts))
    assert matrix.norm_2(matrix.rotate(pts, 0.7, 1)) == pytest.approx(matrix.norm_2(pts))
    flat = [[1.0, 2.0]]
    assert_close(matrix.rotate(flat, 0.0), flat)


def test_maximum():
    M = matrix.maximum(A3, B3)
    assert M == matrix.maximum(B3, A3)
    assert all(m >= a for m, a in zip(matrix.flatten(M), matrix.flatten(A3)))


def test_max_min_value_truncate():
    assert matrix.max_value([[1.7, 3.9]]) == 3.0
    assert matrix.min_value([[2.0, 5.0], [-1.0, 4.0]]) == -1.0


def test_rounded_half_away():
    assert matrix.rounded([[2.5, -2.5]]) == [[3.0, -3.0]]


def test_norm_2():
    assert matrix.norm_2([[3.0, 4.0]]) == 5.0


def test_diag_and_flatten():
    values = [1.0, 2.0, 3.0]
    D = matrix.diag(values)
    assert [D[0][0], D[1][1], D[2][2]] == values
    assert matrix.sum_elements(D) == sum(values)
    assert matrix.flatten(B3) == B3[0] + B3[1] + B3[2]


def test_mat_vec_ops():
    b = [1.0, -2.0, 0.5]
    assert matrix.mat_vec_add(A3, [0.0, 0.0, 0.0]) == A3
    assert_close([matrix.mat_vec_mult(matrix.identity(3), b)], [b])
    assert_close(
        [matrix.mat_vec_mult(A3, b)],
        matrix.transpose(matrix.matmult(A3, matrix.transpose([b]))),
    )


def test_format_and_print(capsys):
    M = [[1.0, 2.5], [3.0, 4.0]]
    text = matrix.format_matrix(M)
    lines = text.splitlines()
    assert len(lines) == 2
    assert [float(x) for x in lines[1].split()] == M[1]
    matrix.print_matrix(M)
    assert capsys.readouterr().out == text