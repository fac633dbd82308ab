"""The linear system behind natural cubic spline interpolation."""

import numpy as np
import scipy.sparse as sp


def spline_matrix(n: int) -> sp.csr_matrix:
    """
    Build the tridiagonal matrix with 4 on the diagonal and 1 next to it.

    Parameters
    ----------
    n : int
        The number of unknowns.

    Returns
    -------
    sp.csr_matrix
        Sparse (n, n) matrix.

    """
    return sp.diags([1.0, 4.0, 1.0], [-1, 0, 1], shape=(n, n), format="csr")


def tridiagonal_solve(rhs: np.ndarray) -> np.ndarray:
    """
    Solve the system `spline_matrix(n) @ x = rhs`.

    The matrix is strictly diagonally dominant so the elimination runs
    without pivoting. Solving several right-hand sides at once is possible
    by passing them as columns.

    Parameters
    ----------
    rhs : np.ndarray
        The right-hand side, of length at least 2.

    Returns
    -------
    np.ndarray
        The solution, same shape as `rhs`.

    """
    d = np.array(rhs, dtype=float)
    n = len(d)
    assert n >= 2, "tridiagonal system needs at least two unknowns"

    c = np.ones(n)
    c[0] /= 4.0
    d[0] /= 4.0

    # Forward sweep
    for i in range(1, n):
        pivot = 4.0 - c[i - 1]
        c[i] /= pivot
        d[i] = (d[i] - d[i - 1]) / pivot

    # Back substitution
    x = np.empty_like(d)
    x[-1] = d[-1]
    for i in range(n - 2, -1, -1):
        x[i] = d[i] - c[i] * x[i + 1]

    return x
