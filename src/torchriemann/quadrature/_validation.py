"""Subdivision-count clamping and interval checks."""

import math
from typing import Union

from torch import Tensor

from torchriemann.quadrature._constants import MAX_N, MIN_N, TOLERANCE


def _to_float(value: Union[float, Tensor]) -> float:
    if isinstance(value, Tensor):
        return value.detach().item()
    return float(value)


def clamp_subdivisions(n: Union[int, float]) -> int:
    """
    Clamp a subdivision count into ``[MIN_N, MAX_N]`` and floor it.

    Parameters
    ----------
    n : int or float
        Requested number of subintervals.

    Returns
    -------
    int
        Usable subdivision count.

    Notes
    -----
    NaN maps to ``MIN_N`` rather than propagating through the clamp.

    Examples
    --------
    >>> clamp_subdivisions(0)
    1
    >>> clamp_subdivisions(10000)
    200
    >>> clamp_subdivisions(7.9)
    7
    """
    if math.isnan(n):
        return MIN_N
    n = max(MIN_N, min(MAX_N, n))
    return int(math.floor(n))


def is_degenerate(a: Union[float, Tensor], b: Union[float, Tensor]) -> bool:
    """Whether ``[a, b]`` has (numerically) zero width."""
    return abs(_to_float(b) - _to_float(a)) < TOLERANCE


def validate_bounds(a: Union[float, Tensor], b: Union[float, Tensor]) -> bool:
    """
    Whether ``a`` and ``b`` are finite with ``a < b``.

    The quadrature routines accept reversed intervals (the result changes
    sign), so this check is only meant for callers that want to present
    bounds as a well-ordered range.
    """
    a_val = _to_float(a)
    b_val = _to_float(b)
    return math.isfinite(a_val) and math.isfinite(b_val) and a_val < b_val


def is_effectively_zero(value: Union[float, Tensor]) -> bool:
    return abs(_to_float(value)) < TOLERANCE
