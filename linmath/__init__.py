"""Linear algebra on nested lists: vectors, matrices, decompositions, tensors and numerical calculus."""

__version__ = "0.1.0"
__all__ = ["vector", "matrix", "decomposition", "tensor", "numerical"]