"""
Riemann-family numerical integration.

Rules (evaluate a callable on a uniform partition):
    left_riemann_sum, right_riemann_sum, midpoint_riemann_sum,
    trapezoidal_sum, simpsons_rule

Dispatch and error analysis:
    compute_quadrature, evaluate_integral, exact_integral

Bounds and subdivision checks:
    clamp_subdivisions, is_degenerate, validate_bounds, is_effectively_zero

Results:
    QuadratureResult, SamplePoints, SamplePoint, EvaluationResult

Warnings:
    QuadratureWarning
"""

from torchriemann.quadrature._compute_quadrature import compute_quadrature
from torchriemann.quadrature._constants import (
    DEFAULT_N,
    DEFAULT_RULE,
    MAX_N,
    MIN_N,
    QUADRATURE_RULES,
    TOLERANCE,
    QuadratureRule,
)
from torchriemann.quadrature._evaluate import evaluate_integral, exact_integral
from torchriemann.quadrature._exceptions import QuadratureWarning
from torchriemann.quadrature._result import (
    EvaluationResult,
    QuadratureResult,
    SamplePoint,
    SamplePoints,
)
from torchriemann.quadrature._riemann import (
    left_riemann_sum,
    midpoint_riemann_sum,
    right_riemann_sum,
)
from torchriemann.quadrature._simpson import simpsons_rule
from torchriemann.quadrature._trapezoid import trapezoidal_sum
from torchriemann.quadrature._validation import (
    clamp_subdivisions,
    is_degenerate,
    is_effectively_zero,
    validate_bounds,
)

__all__ = [
    # Rules
    "left_riemann_sum",
    "right_riemann_sum",
    "midpoint_riemann_sum",
    "trapezoidal_sum",
    "simpsons_rule",
    # Dispatch and error analysis
    "compute_quadrature",
    "evaluate_integral",
    "exact_integral",
    # Validation
    "clamp_subdivisions",
    "is_degenerate",
    "validate_bounds",
    "is_effectively_zero",
    # Results
    "QuadratureResult",
    "SamplePoints",
    "SamplePoint",
    "EvaluationResult",
    # Constants
    "QuadratureRule",
    "QUADRATURE_RULES",
    "MIN_N",
    "MAX_N",
    "DEFAULT_N",
    "DEFAULT_RULE",
    "TOLERANCE",
    # Warnings
    "QuadratureWarning",
]
