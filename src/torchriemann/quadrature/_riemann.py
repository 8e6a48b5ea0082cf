"""Left, right and midpoint Riemann sums."""

from typing import Callable, Union

import torch
from torch import Tensor

from torchriemann.quadrature._integrand import _as_bounds, _evaluate
from torchriemann.quadrature._result import QuadratureResult, SamplePoints


def _check_n(n: int) -> None:
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")


def _rectangle_sum(
    f: Callable[[Tensor], Tensor],
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    n: int,
    offset: float,
) -> QuadratureResult:
    """Rectangles of height ``f(left_x + offset * delta_x)``."""
    _check_n(n)
    a, b = _as_bounds(a, b)

    delta_x = (b - a) / n
    i = torch.arange(n, dtype=a.dtype, device=a.device)
    left_x = a + i * delta_x
    x = a + (i + offset) * delta_x
    y = _evaluate(f, x)

    areas = y * delta_x
    approximation = areas.sum()

    return QuadratureResult(
        approximation=approximation,
        areas=areas,
        sample_points=SamplePoints(
            x=x,
            y=y,
            left_x=left_x,
            width=delta_x.expand(n),
        ),
        n=n,
        delta_x=delta_x,
    )


def left_riemann_sum(
    f: Callable[[Tensor], Tensor],
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    n: int,
) -> QuadratureResult:
    r"""
    Left Riemann sum :math:`\sum_{i=0}^{n-1} f(a + i \Delta x) \Delta x`.

    Parameters
    ----------
    f : callable
        Integrand. Receives a tensor of sample points, returns a tensor of
        function values.
    a, b : float or Tensor
        Integration bounds (scalars). ``b < a`` negates the result.
    n : int
        Number of subintervals. Not clamped.

    Returns
    -------
    QuadratureResult
        Approximation plus per-subinterval areas and sample points.

    Raises
    ------
    ValueError
        If ``n < 1``.

    Notes
    -----
    First order: error is :math:`O(1/n)`. Underestimates the integral of an
    increasing function.

    Examples
    --------
    >>> left_riemann_sum(lambda x: x, 0, 1, 4).approximation
    tensor(0.3750, dtype=torch.float64)
    """
    return _rectangle_sum(f, a, b, n, 0.0)


def right_riemann_sum(
    f: Callable[[Tensor], Tensor],
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    n: int,
) -> QuadratureResult:
    r"""
    Right Riemann sum :math:`\sum_{i=0}^{n-1} f(a + (i + 1) \Delta x) \Delta x`.

    Same parameters as :func:`left_riemann_sum`. Overestimates the integral
    of an increasing function; error is :math:`O(1/n)`.
    """
    return _rectangle_sum(f, a, b, n, 1.0)


def midpoint_riemann_sum(
    f: Callable[[Tensor], Tensor],
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    n: int,
) -> QuadratureResult:
    r"""
    Midpoint Riemann sum :math:`\sum_{i=0}^{n-1} f(a + (i + \tfrac12) \Delta x) \Delta x`.

    Same parameters as :func:`left_riemann_sum`. Second order: error is
    :math:`O(1/n^2)` for smooth integrands.

    Examples
    --------
    >>> result = midpoint_riemann_sum(lambda x: x**2, 0, 2, 4)
    >>> result.sample_points.x
    tensor([0.2500, 0.7500, 1.2500, 1.7500], dtype=torch.float64)
    >>> result.approximation
    tensor(2.6250, dtype=torch.float64)
    """
    return _rectangle_sum(f, a, b, n, 0.5)
