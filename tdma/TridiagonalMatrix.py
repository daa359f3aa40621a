import logging
from typing import Sequence, Union

import numpy as np

from tdma.Errors import InvalidTridiagonalMatrix
from tdma.TridiagonalSolver import solve_tdma
from tdma.Determinant import determinant

logger = logging.getLogger(__name__)


class TridiagonalMatrix:
    def __init__(self, coefficients: Union[Sequence[float], np.ndarray]):
        """
        An n x n tridiagonal matrix, stored compactly as the flat sequence of its 3n - 2 nonzero entries,
        read row by row:

            (n=4)
            m_0  m_1   0    0
            m_2  m_3  m_4   0
             0   m_5  m_6  m_7
             0    0   m_8  m_9

        Row 0 holds (diag, upper), interior row i holds (lower, diag, upper) at m[3i-1], m[3i], m[3i+1], and the
        last row holds (lower, diag). The matrix keeps its own read-only copy of the coefficients, so it is
        immutable once created, whatever the caller later does with the sequence passed in.

        Only the shape is validated here. Zero or degenerate diagonal entries are accepted, they are detected
        when solving.

        :param coefficients: sequence or np.ndarray of float, the 3n - 2 entries in the layout above
        """
        m = np.array(coefficients, dtype=float)
        if m.ndim != 1:
            raise InvalidTridiagonalMatrix(f"coefficients must be one dimensional, got shape {m.shape}")
        if len(m) % 3 != 1:
            raise InvalidTridiagonalMatrix(f"length {len(m)} must be 3n-2 for an n x n matrix", length=len(m))

        self._m = m
        self._m.flags.writeable = False
        self._n = (len(m) - 1) // 3 + 1
        logger.debug("created %d x %d tridiagonal matrix", self._n, self._n)

    @staticmethod
    def from_diagonals(lower: np.ndarray, diag: np.ndarray, upper: np.ndarray) -> 'TridiagonalMatrix':
        """
        Create the matrix from its three diagonals
        :param lower: np.ndarray, the sub-diagonal, length n - 1
        :param diag: np.ndarray, the main diagonal, length n
        :param upper: np.ndarray, the super-diagonal, length n - 1
        :return: TridiagonalMatrix
        """
        if len(diag) < 1 or len(lower) != len(diag) - 1 or len(upper) != len(diag) - 1:
            raise InvalidTridiagonalMatrix(f"lengths of off-diagonals ({len(lower)}, {len(upper)}) must be one less "
                                           f"than the length of the diagonal ({len(diag)})")
        m = np.empty(shape=3 * len(diag) - 2)
        m[0::3] = diag
        m[1::3] = upper
        m[2::3] = lower
        return TridiagonalMatrix(m)

    @property
    def n(self) -> int:
        return self._n

    @property
    def coefficients(self) -> np.ndarray:
        """ The flat (read-only) array of 3n - 2 coefficients """
        return self._m

    @property
    def lower(self) -> np.ndarray:
        return self._m[2::3]

    @property
    def diag(self) -> np.ndarray:
        return self._m[0::3]

    @property
    def upper(self) -> np.ndarray:
        return self._m[1::3]

    def solve(self, r: Union[Sequence[float], np.ndarray]) -> np.ndarray:
        """
        Solve M * x = r with the Thomas algorithm, see solve_tdma
        :param r: sequence or np.ndarray, right hand side, exactly n elements
        :return: np.ndarray, the solution x
        """
        return solve_tdma(self, r)

    def determinant(self) -> float:
        """
        Determinant of the matrix, see tdma.Determinant.determinant
        :return: float, the determinant
        """
        return determinant(self)

    def dot(self, vector: Union[Sequence[float], np.ndarray]) -> np.ndarray:
        """
        Matrix-vector product M * v in O(n), without expanding the matrix:
            (M v)_i = l_i v_{i-1} + d_i v_i + u_i v_{i+1}
        with the missing neighbours of the first and last rows taken as zero.
        :param vector: sequence or np.ndarray, exactly n elements
        :return: np.ndarray, the product, freshly allocated
        """
        vector = np.asarray(vector, dtype=float)
        if len(vector) != self._n:
            raise ValueError(f"sizes of vector ({len(vector)}) and matrix ({self._n}) do not match")

        out = self.diag * vector
        out[1:] += self.lower * vector[:-1]
        out[:-1] += self.upper * vector[1:]
        return out

    def __mul__(self, vector: Union[Sequence[float], np.ndarray]) -> np.ndarray:
        return self.dot(vector)

    def to_dense(self) -> np.ndarray:
        """
        Expand into a full n x n array
        :return: np.ndarray, freshly allocated dense matrix
        """
        return np.diag(self.diag) + np.diag(self.lower, k=-1) + np.diag(self.upper, k=1)

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"TridiagonalMatrix(n={self._n})"
