"""Plot sampling for preset integrands."""

import math
from typing import Callable, Optional, Tuple

import torch
from torch import Tensor

from torchriemann.quadrature._integrand import _evaluate


def curve_points(
    fn: Callable[[Tensor], Tensor],
    lower: float,
    upper: float,
    *,
    points_per_unit: int = 50,
    min_points: int = 100,
    jump_threshold: float = 10.0,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Sample ``fn`` over ``[lower, upper]`` for drawing its curve.

    Parameters
    ----------
    fn : callable
        Integrand. Receives a tensor of abscissae, returns a tensor.
    lower, upper : float
        Horizontal range, typically a preset's ``view_domain``.
    points_per_unit : int
        Sampling density.
    min_points : int
        Lower bound on the number of steps regardless of range width.
    jump_threshold : float
        Consecutive finite samples further apart than this in ``y`` are
        treated as a discontinuity.

    Returns
    -------
    x, y : Tensor
        Finite samples in increasing ``x``. At each discontinuity a point
        with ``y = nan`` is inserted halfway between the two samples, so a
        line renderer breaks the curve there. Non-finite samples are
        dropped.

    Examples
    --------
    >>> x, y = curve_points(lambda x: 20 * torch.floor(x), 0, 2)
    >>> bool(torch.isnan(y).any())
    True
    """
    if not upper > lower:
        raise ValueError(f"upper must be greater than lower, got [{lower}, {upper}]")

    steps = max(min_points, points_per_unit * (upper - lower))
    step = (upper - lower) / steps

    x = lower + step * torch.arange(
        int(math.floor(steps)) + 1, dtype=dtype, device=device
    )
    y = _evaluate(fn, x)

    finite = torch.isfinite(y)
    jump = torch.zeros_like(finite)
    jump[1:] = (
        finite[1:]
        & finite[:-1]
        & (torch.abs(y[1:] - y[:-1]) > jump_threshold)
    )

    break_x = x - step / 2
    break_y = torch.full_like(y, math.nan)

    # Interleave (break, sample) pairs and keep only the ones that apply.
    xs = torch.stack([break_x, x], dim=1).reshape(-1)
    ys = torch.stack([break_y, y], dim=1).reshape(-1)
    keep = torch.stack([jump, finite], dim=1).reshape(-1)

    return xs[keep], ys[keep]
