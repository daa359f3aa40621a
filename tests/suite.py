import unittest
from tests.Test_TridiagonalMatrix import Test_TridiagonalMatrix
from tests.Test_TridiagonalSolver import Test_TridiagonalSolver
from tests.Test_Determinant import Test_Determinant


def test_suite():
    suite = unittest.TestSuite()
    for test in (Test_TridiagonalMatrix, Test_TridiagonalSolver, Test_Determinant):
        suite.addTest(unittest.TestLoader().loadTestsFromTestCase(test))

    return suite


if __name__ == '__main__':
    unittest.TextTestRunner(verbosity=2).run(test_suite())
