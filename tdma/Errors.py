"""
Exceptions raised by the tdma package.

Every error derives from TDMAError, so callers can catch anything the library raises in one place.
Errors carry their diagnostics as attributes, the message states the actual vs expected values.
"""
from typing import Optional


class TDMAError(Exception):
    """Base exception for all tdma errors."""
    pass


class InvalidTridiagonalMatrix(TDMAError, ValueError):
    def __init__(self, message: str, length: Optional[int] = None):
        """
        The coefficients supplied do not describe a tridiagonal matrix.
        :param message: str, description of the problem
        :param length: int, the offending number of coefficients (if the problem is the length)
        """
        super().__init__(message)
        self.length = length


class TDMAFailure(TDMAError, ArithmeticError):
    def __init__(self,
                 message: str,
                 row: Optional[int] = None,
                 value: Optional[float] = None,
                 expected: Optional[int] = None,
                 actual: Optional[int] = None):
        """
        The Thomas algorithm could not be carried out.

        Raised either for a right hand side of the wrong length (row is None, expected/actual are set), or when
        the forward sweep hits an exact zero pivot (row is the failing row, value the colliding diagonal entry).
        :param message: str, description of the failure
        :param row: int, row of the zero pivot
        :param value: float, the diagonal entry which equals the eliminated term at that row
        :param expected: int, the expected length of the right hand side
        :param actual: int, the length of the right hand side supplied
        """
        super().__init__(message)
        self.row = row
        self.value = value
        self.expected = expected
        self.actual = actual
