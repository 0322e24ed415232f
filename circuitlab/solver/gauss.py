from __future__ import annotations
import numpy as np

Array = np.ndarray


def gauss_solve(A: Array, b: Array, pivot_tol: float = 1e-18) -> Array:
    """
    Solve A x = b by Gaussian elimination with partial pivoting.

    Unlike ``np.linalg.solve`` this never raises on a singular system: a pivot
    whose magnitude is below ``pivot_tol`` is skipped during elimination and
    its unknown resolves to 0 during back substitution. Open or disconnected
    sub-networks therefore come back as zeros instead of an exception.

    Args:
        A: Square matrix (n, n). Not modified.
        b: Right-hand side (n,). Not modified.
        pivot_tol: Pivot magnitude treated as structurally zero.

    Returns:
        Solution vector of length n.

    Raises:
        ValueError: If A is not square or b does not match it.
    """
    m = np.array(A, dtype=float)
    rhs = np.array(b, dtype=float).reshape(-1)
    if m.ndim != 2 or m.shape[0] != m.shape[1]:
        raise ValueError(f"Matrix must be square, got shape {m.shape}.")
    n = m.shape[0]
    if rhs.shape[0] != n:
        raise ValueError(f"Right-hand side has length {rhs.shape[0]}, expected {n}.")

    for i in range(n):
        # first row with the largest magnitude wins ties
        p = i + int(np.argmax(np.abs(m[i:, i])))
        if p != i:
            m[[i, p]] = m[[p, i]]
            rhs[[i, p]] = rhs[[p, i]]

        pivot = m[i, i]
        if abs(pivot) < pivot_tol:
            continue

        factors = m[i + 1:, i] / pivot
        m[i + 1:, i:] -= np.outer(factors, m[i, i:])
        rhs[i + 1:] -= factors * rhs[i]

    x = np.zeros(n, dtype=float)
    for i in range(n - 1, -1, -1):
        pivot = m[i, i]
        if abs(pivot) < pivot_tol:
            x[i] = 0.0
            continue
        x[i] = (rhs[i] - m[i, i + 1:] @ x[i + 1:]) / pivot
    return x
