"""
Shared compute infrastructure for pylinreg.

IMPORTANT: This is NOT where solver backends live. Those go in
regression/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    linalg: Linear algebra kernels (QR rank, checked inverse)
"""

from pylinreg.core.compute.timing import Timer

__all__ = [
    "Timer",
]
