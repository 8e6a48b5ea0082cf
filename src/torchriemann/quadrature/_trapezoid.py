"""Trapezoidal rule."""

from typing import Callable, Union

import torch
from torch import Tensor

from torchriemann.quadrature._integrand import _as_bounds, _evaluate
from torchriemann.quadrature._result import QuadratureResult, SamplePoints
from torchriemann.quadrature._riemann import _check_n


def trapezoidal_sum(
    f: Callable[[Tensor], Tensor],
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    n: int,
) -> QuadratureResult:
    r"""
    Composite trapezoidal rule.

    Each subinterval contributes :math:`\tfrac12 (f(x_i) + f(x_{i+1})) \Delta x`.

    Parameters
    ----------
    f : callable
        Integrand. Receives a tensor of sample points, returns a tensor of
        function values.
    a, b : float or Tensor
        Integration bounds (scalars).
    n : int
        Number of subintervals. Not clamped.

    Returns
    -------
    QuadratureResult
        Sample points sit on the left edges; ``sample_points.right_y`` holds
        the right-edge values so each piece can be drawn as a trapezoid.

    Raises
    ------
    ValueError
        If ``n < 1``.

    Notes
    -----
    Error is :math:`O(1/n^2)`. Exact for affine integrands at every ``n``.

    Examples
    --------
    >>> trapezoidal_sum(lambda x: 2 * x + 1, 0, 3, 3).approximation
    tensor(12., dtype=torch.float64)
    """
    _check_n(n)
    a, b = _as_bounds(a, b)

    delta_x = (b - a) / n
    i = torch.arange(n, dtype=a.dtype, device=a.device)
    left_x = a + i * delta_x
    right_x = a + (i + 1) * delta_x
    left_y = _evaluate(f, left_x)
    right_y = _evaluate(f, right_x)

    # (1/2)(h1 + h2) * base
    areas = (left_y + right_y) / 2 * delta_x
    approximation = areas.sum()

    return QuadratureResult(
        approximation=approximation,
        areas=areas,
        sample_points=SamplePoints(
            x=left_x,
            y=left_y,
            left_x=left_x,
            width=delta_x.expand(n),
            right_y=right_y,
        ),
        n=n,
        delta_x=delta_x,
    )
