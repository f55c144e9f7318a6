# linmath

Linear algebra and numerical calculus in plain Python, with no third-party
dependencies. Vectors are lists of floats, matrices are lists of rows and
tensors are lists of matrices. Functions return new lists and leave their
arguments untouched.

## Installing

```
pip install .
```

## Modules

- `linmath.vector`: element-wise arithmetic (`addition`, `subtraction`,
  `hadamard_product`, `element_wise_division`, `scalar_multiply`,
  `scalar_add`), element-wise maths (`log`, `log10`, `exp`, `erf`,
  `exponentiate`, `sqrt`, `cbrt`, `sin`, `cos`, `absolute`, `rounded`),
  `dot`, `cross` (3-D only), `norm_2`, `norm_sq`, `euclidean_distance`,
  `cosine_similarity`, `outer_product`, `zerovec`, `onevec`, `full`,
  `maximum`, `max_value`, `min_value`, `sum_elements`,
  `subtract_matrix_rows`, `format_vector` and `print_vector`.
  Mismatched lengths raise `ValueError`. `max_value` and `min_value`
  truncate their result toward zero to a whole number.
- `linmath.matrix`: `matmult`, `transpose`, `kronecker_product`,
  `gram_matrix`, `linear_independence_checker`, `det` (cofactor expansion
  of the leading `d x d` block), `trace`, `cofactor`, `adjoint`, `inverse`
  (raises `ValueError` for a singular matrix), `pinverse`, `matrix_power`,
  `rotate`, `identity`, `diag`, `zeromat`, `onemat`, `full`,
  `gaussian_noise`, `flatten`, `mat_vec_add`, `mat_vec_mult`, the same
  element-wise operations as `vector`, `format_matrix` and `print_matrix`.
- `linmath.decomposition`: Jacobi eigen-decomposition of a symmetric matrix
  (`eig`, eigenvalues in descending order on the diagonal), `svd`,
  `vector_projection`, `gram_schmidt_process`, `qrd`, Cholesky (`chol`,
  raises `ValueError` when the matrix is not positive definite), `solve`,
  and the checks `positive_definite_checker`, `negative_definite_checker`
  and `zero_eigenvalue`.
- `linmath.tensor`: element-wise operations on three-dimensional arrays,
  `tensor_vec_mult`, `vector_wise_tensor_product`, `resize`, `flatten`,
  `norm_2`, `format_tensor` and `print_tensor`.
- `linmath.numerical`: forward-difference derivatives (`num_diff`,
  `num_diff_2`, `num_diff_3`, `partial_diff`, `partial_diff_2`,
  `partial_diff_3`), `jacobian`, `hessian`, `third_order_tensor`,
  `laplacian`, Taylor approximations in one and several variables, root
  finding (`newton_raphson_method`, `halley_method`,
  `inv_quadratic_interpolation`), Euler's method (`eulerian_method`,
  `eulerian_method_multivariate`), `growth_method` and
  `second_partial_derivative_test`.

## Examples

```python
from linmath import matrix, decomposition, numerical

A = [[4.0, 1.0], [1.0, 3.0]]
print(matrix.det(A, 2))            # 11.0
print(matrix.inverse(A))
print(decomposition.solve(A, [1.0, 2.0]))

L, Lt = decomposition.chol(A)
print(matrix.matmult(L, Lt))       # A again, up to rounding

print(numerical.newton_raphson_method(lambda x: x * x - 2, 1.0, 20))

def bowl(v):
    return v[0] ** 2 + v[1] ** 2

print(numerical.second_partial_derivative_test(bowl, [0.0, 0.0]))  # "min"
```

## Limitations

- The cubic Taylor approximations (`cubic_approximation`,
  `cubic_approximation_multivariate`) give the third-order term zero
  weight, so they return the same value as the quadratic ones.
- `linear_approximation_multivariate` takes only the first axis of the
  gradient into account.
- `partial_diff_3` uses a very large step, so its results are rough.
- Everything runs on nested lists in pure Python; it is meant for small
  matrices, not for speed. There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```