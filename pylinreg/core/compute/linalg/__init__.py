"""
Linear algebra kernels for pylinreg.

All functions follow these conventions:
    - CPU functions use NumPy/SciPy (LAPACK under the hood)
    - Errors are raised immediately with clear messages

Submodules:
    qr: QR decomposition and numerical rank
    inverse: Checked inverse for the normal equation
"""

from pylinreg.core.compute.linalg.qr import QRResult, qr_cpu, numerical_rank
from pylinreg.core.compute.linalg.inverse import inv_cpu

__all__ = [
    "QRResult",
    "qr_cpu",
    "numerical_rank",
    "inv_cpu",
]
