"""Simpson's rule."""

from typing import Callable, Union

import torch
from torch import Tensor

from torchriemann.quadrature._integrand import _as_bounds, _evaluate
from torchriemann.quadrature._result import QuadratureResult, SamplePoints
from torchriemann.quadrature._riemann import _check_n


def simpsons_rule(
    f: Callable[[Tensor], Tensor],
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    n: int,
) -> QuadratureResult:
    r"""
    Composite Simpson's 1/3 rule.

    .. math::

        \frac{\Delta x}{3} \left[ f(x_0) + 4 f(x_1) + 2 f(x_2) + \cdots
        + 4 f(x_{n-1}) + f(x_n) \right]

    Parameters
    ----------
    f : callable
        Integrand. Receives a tensor of sample points, returns a tensor of
        function values.
    a, b : float or Tensor
        Integration bounds (scalars).
    n : int
        Number of subintervals. An odd ``n`` is raised to ``n + 1``; read
        the effective count back from ``result.n``.

    Returns
    -------
    QuadratureResult
        ``approximation`` is the weighted Simpson sum. ``areas`` and
        ``sample_points`` are midpoint rectangles for display only, so
        ``areas.sum()`` is generally not equal to ``approximation``.

    Raises
    ------
    ValueError
        If ``n < 1``.

    Notes
    -----
    Error is :math:`O(1/n^4)`; exact for cubics.

    Examples
    --------
    >>> result = simpsons_rule(lambda x: x**3, 0, 1, 5)
    >>> result.n
    6
    >>> result.approximation
    tensor(0.2500, dtype=torch.float64)
    """
    _check_n(n)
    if n % 2 != 0:
        n = n + 1

    a, b = _as_bounds(a, b)

    delta_x = (b - a) / n
    i = torch.arange(n + 1, dtype=a.dtype, device=a.device)
    nodes = a + i * delta_x
    y = _evaluate(f, nodes)

    # 1, 4, 2, 4, ..., 2, 4, 1
    coefficients = torch.ones(n + 1, dtype=a.dtype, device=a.device)
    coefficients[1:-1:2] = 4
    coefficients[2:-1:2] = 2

    approximation = (coefficients * y).sum() * (delta_x / 3)

    # Parabolic segments are not drawn; display midpoint rectangles instead.
    left_x = nodes[:-1]
    mid_x = left_x + delta_x / 2
    mid_y = _evaluate(f, mid_x)

    return QuadratureResult(
        approximation=approximation,
        areas=mid_y * delta_x,
        sample_points=SamplePoints(
            x=mid_x,
            y=mid_y,
            left_x=left_x,
            width=delta_x.expand(n),
        ),
        n=n,
        delta_x=delta_x,
    )
