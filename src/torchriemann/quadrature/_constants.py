"""Subdivision limits, defaults and tolerances for Riemann-family quadrature."""

from typing import Literal, Tuple, get_args

QuadratureRule = Literal[
    "left",
    "right",
    "midpoint",
    "trapezoidal",
    "simpson",
]

QUADRATURE_RULES: Tuple[str, ...] = get_args(QuadratureRule)

# Upper bound keeps a single evaluation cheap enough for interactive callers.
MAX_N = 200

MIN_N = 1

DEFAULT_N = 10

DEFAULT_RULE: QuadratureRule = "midpoint"

TOLERANCE = 1e-10
