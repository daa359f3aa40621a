import unittest
import numpy as np

from tdma.TridiagonalMatrix import TridiagonalMatrix
from tdma.Errors import InvalidTridiagonalMatrix, TDMAError


class Test_TridiagonalMatrix(unittest.TestCase):
    def test_valid_lengths(self):
        for n in range(1, 8):
            M = TridiagonalMatrix(np.arange(3 * n - 2, dtype=float))
            self.assertEqual(M.n, n)
            self.assertEqual(len(M), n)

    def test_invalid_lengths(self):
        for length in (0, 2, 3, 5, 6, 8, 9, 11):
            with self.assertRaises(InvalidTridiagonalMatrix) as ctx:
                TridiagonalMatrix([1.] * length)
            self.assertEqual(ctx.exception.length, length)
            self.assertIsInstance(ctx.exception, ValueError)
            self.assertIsInstance(ctx.exception, TDMAError)

    def test_not_one_dimensional(self):
        with self.assertRaises(InvalidTridiagonalMatrix):
            TridiagonalMatrix(np.ones(shape=(2, 2)))

    def test_zero_diagonal_accepted(self):
        M = TridiagonalMatrix([0., 1., 1., 0.])
        self.assertEqual(M.n, 2)

    def test_layout(self):
        M = TridiagonalMatrix([2, 1,
                               1, 2, 1,
                               1, 2, 1,
                               1, 2])
        self.assertTrue(np.array_equal(M.diag, [2, 2, 2, 2]))
        self.assertTrue(np.array_equal(M.upper, [1, 1, 1]))
        self.assertTrue(np.array_equal(M.lower, [1, 1, 1]))

        M = TridiagonalMatrix([1, 2,
                               3, 4, 5,
                               6, 7])
        expected = np.array([[1., 2., 0.],
                             [3., 4., 5.],
                             [0., 6., 7.]])
        self.assertTrue(np.array_equal(M.to_dense(), expected))

    def test_one_by_one(self):
        M = TridiagonalMatrix([5.])
        self.assertEqual(len(M.lower), 0)
        self.assertEqual(len(M.upper), 0)
        self.assertTrue(np.array_equal(M.to_dense(), [[5.]]))
        self.assertTrue(np.array_equal(M * [2.], [10.]))

    def test_from_diagonals(self):
        lower = np.array([1., 2.])
        diag = np.array([3., 4., 5.])
        upper = np.array([1., 2.])

        M = TridiagonalMatrix.from_diagonals(lower=lower, diag=diag, upper=upper)
        self.assertTrue(np.array_equal(M.coefficients, [3, 1, 1, 4, 2, 2, 5]))

        with self.assertRaises(InvalidTridiagonalMatrix):
            TridiagonalMatrix.from_diagonals(lower=lower, diag=diag[:2], upper=upper)
        with self.assertRaises(InvalidTridiagonalMatrix):
            TridiagonalMatrix.from_diagonals(lower=np.zeros(0), diag=np.zeros(0), upper=np.zeros(0))

    def test_immutable(self):
        coefs = np.array([2., 1., 1., 2.])
        M = TridiagonalMatrix(coefs)

        with self.assertRaises(ValueError):
            M.coefficients[0] = 7.
        with self.assertRaises(ValueError):
            M.diag[1] = 7.

        # the caller keeps a writeable array of its own
        self.assertTrue(coefs.flags.writeable)
        self.assertFalse(np.shares_memory(coefs, M.coefficients))

    def test_owns_coefficients(self):
        coefs = np.array([3., 1., 1., 4., 2., 2., 5.])
        M = TridiagonalMatrix(coefs)
        x1 = M.solve([5., 15., 19.])

        coefs[0] = 0.
        coefs[3] = 100.
        self.assertTrue(np.array_equal(M.coefficients, [3, 1, 1, 4, 2, 2, 5]))
        self.assertEqual(M.determinant(), 43.)
        self.assertTrue(np.array_equal(M.solve([5., 15., 19.]), x1))

    def test_owns_coefficients_from_list(self):
        coefs = [2., 1., 1., 2.]
        M = TridiagonalMatrix(coefs)
        coefs[0] = 0.
        self.assertEqual(M.coefficients[0], 2.)

    def test_identity_product(self):
        Id = TridiagonalMatrix.from_diagonals(lower=np.zeros(shape=5), diag=np.ones(shape=6), upper=np.zeros(shape=5))
        vec = np.array([0.4, -1.7, 3.2, 9.9, 0., 2.5])
        self.assertTrue(np.array_equal(Id * vec, vec))

    def test_second_difference_product(self):
        M = TridiagonalMatrix.from_diagonals(lower=np.ones(shape=4), diag=-2 * np.ones(shape=5), upper=np.ones(shape=4))

        # linear vectors are annihilated away from the boundary rows
        out = M * np.arange(5, dtype=float)
        self.assertTrue(np.allclose(out, [1., 0., 0., 0., -5.]))

        out = M.dot([1.1, 2.3, 8.5, 3.6, 4.9])
        self.assertTrue(np.allclose(out, [0.1, 5., -11.1, 6.2, -6.2], atol=1e-12))

    def test_product_matches_dense(self):
        rng = np.random.default_rng(7)
        M = TridiagonalMatrix(rng.uniform(-3, 3, size=3 * 20 - 2))
        vec = rng.uniform(-1, 1, size=20)
        self.assertTrue(np.allclose(M * vec, M.to_dense() @ vec, rtol=1e-12, atol=1e-12))

    def test_product_size_mismatch(self):
        M = TridiagonalMatrix([2., 1., 1., 2.])
        with self.assertRaises(ValueError):
            M * np.ones(shape=3)


if __name__ == '__main__':
    unittest.main()
