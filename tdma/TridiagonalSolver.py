import logging
from typing import Sequence, Union

import numpy as np

from tdma.Errors import TDMAFailure

logger = logging.getLogger(__name__)


def solve_tdma(matrix: 'TridiagonalMatrix', r: Union[Sequence[float], np.ndarray]) -> np.ndarray:
    """
    Solve the tridiagonal system M * x = r using TDMA (tridiagonal matrix algorithm, aka Thomas algorithm).

    Forward sweep eliminating the sub-diagonal, then back substitution, O(n) in time and memory:
        c_0 = u_0 / d_0,            c_i = u_i / (d_i - l_i c_{i-1})
        y_0 = r_0 / d_0,            y_i = (r_i - l_i y_{i-1}) / (d_i - l_i c_{i-1})
        x_{n-1} = y_{n-1},          x_i = y_i - c_i x_{i+1}

    No pivoting is done. A pivot which is exactly zero (d_0 == 0, or d_i == l_i c_{i-1}) raises TDMAFailure,
    pivots which are merely close to zero are not detected, and the result can then be inaccurate. Systems of
    that kind (which need row exchanges to be solved) are not supported.

    :param matrix: TridiagonalMatrix, the n x n matrix M
    :param r: sequence or np.ndarray, right hand side, must have exactly n elements
    :return: np.ndarray, the solution x, freshly allocated
    """
    n = matrix.n
    m = matrix.coefficients
    r = np.asarray(r, dtype=float)
    if r.ndim != 1 or len(r) != n:
        raise TDMAFailure(f"r must have exactly {n} elements, got {r.size}", expected=n, actual=r.size)

    logger.debug("solving %d x %d tridiagonal system", n, n)
    if m[0] == 0:
        raise TDMAFailure("zero pivot at row 0: m[0] is zero", row=0, value=float(m[0]))
    if n == 1:
        return np.array([r[0] / m[0]])

    # Forward elimination of the super-diagonal
    c = np.empty(shape=n - 1)
    c[0] = m[1] / m[0]
    for i in range(1, n - 1):
        i3 = 3 * i
        _check_pivot(m, c, i)
        c[i] = m[i3 + 1] / (m[i3] - m[i3 - 1] * c[i - 1])
    _check_pivot(m, c, n - 1)

    # Forward substitution
    d = np.empty(shape=n)
    d[0] = r[0] / m[0]
    for i in range(1, n):
        i3 = 3 * i
        d[i] = (r[i] - m[i3 - 1] * d[i - 1]) / (m[i3] - m[i3 - 1] * c[i - 1])

    # Back substitution
    x = np.empty(shape=n)
    x[n - 1] = d[n - 1]
    for i in reversed(range(n - 1)):
        x[i] = d[i] - c[i] * x[i + 1]

    return x


def _check_pivot(m: np.ndarray, c: np.ndarray, i: int):
    # Compared before subtracting, so an exact zero pivot never reaches the division
    i3 = 3 * i
    if m[i3] == m[i3 - 1] * c[i - 1]:
        logger.debug("zero pivot at row %d: m[%d] == m[%d] * c[%d] == %g", i, i3, i3 - 1, i - 1, m[i3])
        raise TDMAFailure(f"zero pivot at row {i}: m[{i3}] == m[{i3 - 1}] * c[{i - 1}] == {m[i3]}",
                          row=i, value=float(m[i3]))
