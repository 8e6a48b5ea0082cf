"""torchriemann: Riemann-sum quadrature with visualization data in PyTorch."""

from . import (
    presets,
    quadrature,
)

__all__ = [
    "presets",
    "quadrature",
]

__version__ = "0.1.0"
