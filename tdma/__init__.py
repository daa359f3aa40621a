import logging

from tdma.Errors import TDMAError, InvalidTridiagonalMatrix, TDMAFailure
from tdma.TridiagonalSolver import solve_tdma
from tdma.Determinant import determinant
from tdma.TridiagonalMatrix import TridiagonalMatrix

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "TridiagonalMatrix",
    "solve_tdma",
    "determinant",
    "TDMAError",
    "InvalidTridiagonalMatrix",
    "TDMAFailure",
]
