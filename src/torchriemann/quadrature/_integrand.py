"""Bound conversion and integrand evaluation shared by the rules."""

from typing import Callable, Tuple, Union

import torch
from torch import Tensor


def _as_bounds(
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Tuple[Tensor, Tensor]:
    """Convert integration bounds to 0-d tensors of a common dtype/device."""
    # Infer dtype and device
    if isinstance(a, Tensor):
        dtype = a.dtype
        device = a.device
    elif isinstance(b, Tensor):
        dtype = b.dtype
        device = b.device
    else:
        dtype = torch.float64
        device = torch.device("cpu")

    if not dtype.is_floating_point:
        dtype = torch.float64

    if isinstance(a, Tensor):
        a = a.to(dtype=dtype, device=device)
    else:
        a = torch.tensor(a, dtype=dtype, device=device)
    if isinstance(b, Tensor):
        b = b.to(dtype=dtype, device=device)
    else:
        b = torch.tensor(b, dtype=dtype, device=device)

    return a, b


def _evaluate(f: Callable[[Tensor], Tensor], x: Tensor) -> Tensor:
    """Evaluate ``f`` at ``x``, broadcasting scalar outputs to ``x.shape``."""
    y = f(x)
    if not isinstance(y, Tensor):
        y = torch.tensor(y, dtype=x.dtype, device=x.device)
    return torch.broadcast_to(y.to(dtype=x.dtype), x.shape)
