"""
Linear-algebra mixin defining the LU-based NDArray APIs.

This module declares :class:`NDArrayMixinLinalg`, which specifies the public
interface of the dense linear-algebra kernel: LU decomposition with partial
pivoting, triangular solves, inversion, determinant and trace.

The mixin itself does not implement numerical kernels. Implementations are
registered per element kind through `ndarray_control_path_manager` and
selected at runtime from ``self.kind``. Only FLOAT64 is registered; calling
any of these methods on another kind raises `UnsupportedOperationError`.
"""

from __future__ import annotations

from typing import Any, List, Tuple

from .....domain._errors import DimensionMismatchError


def require_square_matrix(a: Any, op: str) -> int:
    """
    Return `n` for a square `n x n` array.

    Raises
    ------
    DimensionMismatchError
        If `a` is not rank 2 or not square.
    """
    if a.rank != 2:
        raise DimensionMismatchError(op, f"expected a matrix, got rank {a.rank}")
    if a.shape[0] != a.shape[1]:
        raise DimensionMismatchError(op, f"expected a square matrix, got {a.shape}")
    return a.shape[0]


class NDArrayMixinLinalg:
    """
    Abstract mixin declaring the linear-algebra operations.

    Notes
    -----
    - Methods here are interface declarations; computation is performed by
      the kind-specific control paths.
    - Decomposition is destructive. Callers that need the original matrix
      must `clone()` first; a failed decomposition leaves the buffer
      partially modified.
    """

    def lu_decompose_in_place(self) -> Tuple[int, List[int]]:
        """
        Factor this square matrix in place as ``P A = L U``.

        After the call the strictly lower triangle holds the multipliers of
        `L` (whose unit diagonal is implicit) and the upper triangle holds
        `U`.

        Returns
        -------
        tuple[int, list[int]]
            ``(sign, permutation)``: `sign` is ``(-1)**swaps`` and
            ``permutation[r]`` is the original row now stored at row `r`.

        Raises
        ------
        DimensionMismatchError
            If the array is not a square matrix.
        SingularMatrixError
            If a pivot column has no non-zero candidate.
        """
        ...

    def lu_solve_in_place(self, permutation: List[int], x: Any) -> None:
        """
        Solve ``A x = b`` using this packed LU factorisation of ``A``.

        Parameters
        ----------
        permutation : list[int]
            Permutation returned by `lu_decompose_in_place`.
        x : NDArray
            Rank-1 array holding `b` in the original row order on entry and
            the solution on return. The permutation is applied here, so the
            caller passes `b` unpermuted.

        Raises
        ------
        DimensionMismatchError
            If the factorisation is not square or the lengths disagree.
        """
        ...

    def invert(self) -> Any:
        """
        Return the inverse of this square matrix as a new array.

        Raises
        ------
        SingularMatrixError
            If the matrix is singular.
        """
        ...

    def determinant(self) -> float:
        """
        Return the determinant, ``sign * prod(diag(U))``.

        A singular matrix has determinant ``0.0``.
        """
        ...

    def trace(self) -> float:
        """Return the sum of the main diagonal of a square matrix."""
        ...

    def solve(self, b: Any) -> Any:
        """
        Return `x` with ``self @ x == b`` for a rank-1 `b`; nothing is mutated.

        Raises
        ------
        SingularMatrixError
            If the matrix is singular.
        """
        ...
