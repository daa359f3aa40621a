def determinant(matrix: 'TridiagonalMatrix') -> float:
    """
    Determinant of a tridiagonal matrix, by the three-term recurrence over its leading principal minors:
        f_0 = d_0
        f_1 = d_1 d_0 - l_1 u_0
        f_k = d_k f_{k-1} - l_k u_{k-1} f_{k-2}

    Evaluated bottom-up, keeping only the last two minors. There is no division, so this never fails, but the
    result can be zero, or overflow / underflow for large n. Compare against your own tolerance to detect
    singularity.

    :param matrix: TridiagonalMatrix, the n x n matrix
    :return: float, the determinant
    """
    m = matrix.coefficients
    f_prev = float(m[0])
    if matrix.n == 1:
        return f_prev

    f = float(m[3] * m[0] - m[2] * m[1])
    for k in range(2, matrix.n):
        k3 = 3 * k
        f, f_prev = float(m[k3] * f - m[k3 - 1] * m[k3 - 2] * f_prev), f

    return f
