"""
This example shows how to solve tridiagonal systems with the Thomas algorithm (TDMA): an implicit step of the
heat equation, and the second derivatives of a natural cubic spline
"""
import numpy as np

from tdma import TridiagonalMatrix, TDMAFailure

# ============================
# Implicit (backward Euler) step of u_t = u_xx, u = 0 on the boundary
# ============================
N = 50  # Number of interior grid points
dx = 1. / (N + 1)
dt = 1e-3
lam = dt / dx ** 2

x = np.linspace(dx, 1 - dx, N)
u0 = np.sin(np.pi * x)

# (I - lam * D2) u1 = u0
A = TridiagonalMatrix.from_diagonals(lower=-lam * np.ones(N - 1),
                                     diag=(1 + 2 * lam) * np.ones(N),
                                     upper=-lam * np.ones(N - 1))
u1 = A.solve(u0)

exact = np.exp(-np.pi ** 2 * dt) * u0
print(f"heat step: max abs error vs exact decay = {np.max(np.abs(u1 - exact)):.2e}")
print(f"heat step: residual = {np.max(np.abs(A * u1 - u0)):.2e}")

# ============================
# Natural cubic spline through (t_i, y_i): solve for the second derivatives M_1 .. M_{K-1}
# ============================
t = np.array([0., 0.5, 1.2, 2., 2.6, 3.5])
y = np.sin(t)
h = np.diff(t)

rhs = 6 * ((y[2:] - y[1:-1]) / h[1:] - (y[1:-1] - y[:-2]) / h[:-1])
S = TridiagonalMatrix.from_diagonals(lower=h[1:-1], diag=2 * (h[:-1] + h[1:]), upper=h[1:-1])
M = np.concatenate(([0.], S.solve(rhs), [0.]))
print(f"spline second derivatives: {np.round(M, 4)}")
print(f"spline system determinant: {S.determinant():.4f}")

# ============================
# A system which needs pivoting is reported, not silently mis-solved
# ============================
B = TridiagonalMatrix([1, 1,
                       1, 1, 1,
                       1, 1])
try:
    B.solve([1., 2., 3.])
except TDMAFailure as e:
    print(f"TDMA failed at row {e.row}: {e}")
