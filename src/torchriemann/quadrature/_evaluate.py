"""Approximation error against an exact integral."""

from typing import Callable, Optional, Union

import torch
from torch import Tensor

from torchriemann.quadrature._compute_quadrature import compute_quadrature
from torchriemann.quadrature._constants import (
    DEFAULT_N,
    DEFAULT_RULE,
    TOLERANCE,
    QuadratureRule,
)
from torchriemann.quadrature._integrand import _as_bounds
from torchriemann.quadrature._result import EvaluationResult


def exact_integral(
    antiderivative: Callable[[Tensor], Tensor],
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Tensor:
    """
    Exact integral ``F(b) - F(a)`` by the Fundamental Theorem of Calculus.

    Parameters
    ----------
    antiderivative : callable
        An antiderivative ``F`` of the integrand. Receives 0-d tensors.
    a, b : float or Tensor
        Integration bounds.

    Returns
    -------
    Tensor
        0-d tensor.

    Examples
    --------
    >>> exact_integral(lambda x: x**3 / 3, 0, 2)
    tensor(2.6667, dtype=torch.float64)
    """
    a, b = _as_bounds(a, b)
    return torch.as_tensor(
        antiderivative(b) - antiderivative(a),
        dtype=a.dtype,
        device=a.device,
    )


def evaluate_integral(
    f: Callable[[Tensor], Tensor],
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    n: Union[int, float] = DEFAULT_N,
    rule: QuadratureRule = DEFAULT_RULE,
    exact_integral_fn: Optional[
        Callable[[Tensor, Tensor], Union[float, Tensor]]
    ] = None,
) -> EvaluationResult:
    """
    Approximate an integral and, when possible, measure the approximation error.

    Parameters
    ----------
    f, a, b, n, rule
        Forwarded to :func:`compute_quadrature`.
    exact_integral_fn : callable, optional
        ``exact_integral_fn(a, b)`` returns the exact value of the integral,
        typically ``F(b) - F(a)``. Receives 0-d tensors.

    Returns
    -------
    EvaluationResult
        ``exact_value``, ``absolute_error`` and ``relative_error`` are
        ``None`` when ``exact_integral_fn`` is not given.

    Notes
    -----
    ``relative_error`` is ``absolute_error / |exact_value|``, or just
    ``absolute_error`` when ``|exact_value| <= TOLERANCE``.

    Examples
    --------
    >>> result = evaluate_integral(
    ...     lambda x: x**2, 0, 2, 4, "midpoint",
    ...     lambda a, b: b**3 / 3 - a**3 / 3,
    ... )
    >>> result.absolute_error
    tensor(0.0417, dtype=torch.float64)
    """
    quadrature = compute_quadrature(f, a, b, n, rule)

    if exact_integral_fn is None:
        return EvaluationResult(
            approximation=quadrature.approximation,
            method=rule,
            n=quadrature.n,
        )

    a, b = _as_bounds(a, b)
    exact_value = torch.as_tensor(
        exact_integral_fn(a, b),
        dtype=quadrature.approximation.dtype,
        device=quadrature.approximation.device,
    )
    absolute_error = torch.abs(quadrature.approximation - exact_value)

    if torch.abs(exact_value) > TOLERANCE:
        relative_error = absolute_error / torch.abs(exact_value)
    else:
        relative_error = absolute_error

    return EvaluationResult(
        approximation=quadrature.approximation,
        method=rule,
        n=quadrature.n,
        exact_value=exact_value,
        absolute_error=absolute_error,
        relative_error=relative_error,
    )
