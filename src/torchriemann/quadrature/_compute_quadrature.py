"""Rule selection for Riemann-family quadrature."""

import warnings
from typing import Callable, Union

import torch
from torch import Tensor

from torchriemann.quadrature._constants import (
    DEFAULT_N,
    DEFAULT_RULE,
    QUADRATURE_RULES,
    QuadratureRule,
)
from torchriemann.quadrature._exceptions import QuadratureWarning
from torchriemann.quadrature._integrand import _as_bounds
from torchriemann.quadrature._result import QuadratureResult, SamplePoints
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
)

_RULES = {
    "left": left_riemann_sum,
    "right": right_riemann_sum,
    "midpoint": midpoint_riemann_sum,
    "trapezoidal": trapezoidal_sum,
    "simpson": simpsons_rule,
}


def _degenerate_result(
    a: Union[float, Tensor], b: Union[float, Tensor], n: int
) -> QuadratureResult:
    a, _ = _as_bounds(a, b)
    empty = torch.empty(0, dtype=a.dtype, device=a.device)
    zero = torch.zeros((), dtype=a.dtype, device=a.device)
    return QuadratureResult(
        approximation=zero,
        areas=empty,
        sample_points=SamplePoints(
            x=empty,
            y=empty,
            left_x=empty,
            width=empty,
        ),
        n=n,
        delta_x=zero,
    )


def compute_quadrature(
    f: Callable[[Tensor], Tensor],
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    n: Union[int, float] = DEFAULT_N,
    rule: QuadratureRule = DEFAULT_RULE,
) -> QuadratureResult:
    """
    Approximate the integral of ``f`` over ``[a, b]`` with a Riemann-family rule.

    Parameters
    ----------
    f : callable
        Integrand. Receives a tensor of sample points, returns a tensor of
        function values. Scalar outputs are broadcast.
    a, b : float or Tensor
        Integration bounds (scalars). ``b < a`` is allowed and negates the
        result.
    n : int
        Requested number of subintervals, clamped to ``[MIN_N, MAX_N]`` and
        floored.
    rule : str
        One of ``"left"``, ``"right"``, ``"midpoint"``, ``"trapezoidal"``,
        ``"simpson"``.

    Returns
    -------
    QuadratureResult
        Approximation and visualization data. ``result.n`` is the count
        actually used, which differs from ``n`` after clamping or when
        Simpson's rule rounds an odd count up.

    Raises
    ------
    ValueError
        If ``rule`` is not a known rule name.

    Warns
    -----
    QuadratureWarning
        If the approximation is not finite, e.g. when ``f`` is evaluated
        outside its domain. The non-finite value is still returned.

    Notes
    -----
    A degenerate interval (``|b - a| < TOLERANCE``) returns a zero
    approximation with empty ``areas`` and ``sample_points`` and
    ``delta_x == 0`` without evaluating ``f``.

    Differentiable with respect to parameters captured in ``f``'s closure
    and to tensor bounds.

    Examples
    --------
    >>> compute_quadrature(lambda x: x**2, 0, 2, 4, "midpoint").approximation
    tensor(2.6250, dtype=torch.float64)

    >>> compute_quadrature(lambda x: x**2, 0, 1, 5, "simpson").n
    6
    """
    if rule not in _RULES:
        raise ValueError(
            f"rule must be one of {', '.join(repr(r) for r in QUADRATURE_RULES)}, "
            f"got {rule!r}"
        )

    n = clamp_subdivisions(n)

    if is_degenerate(a, b):
        return _degenerate_result(a, b, n)

    result = _RULES[rule](f, a, b, n)

    if not torch.isfinite(result.approximation):
        warnings.warn(
            f"{rule} approximation is not finite ({result.approximation.item()}); "
            f"the integrand may be undefined somewhere on [{a}, {b}]",
            QuadratureWarning,
            stacklevel=2,
        )

    return result
