from typing import Callable, NamedTuple, Tuple

from torch import Tensor


class Interval(NamedTuple):
    a: float
    b: float


class InterestingPoint(NamedTuple):
    x: float
    description: str


class FunctionPreset(NamedTuple):
    """A catalog integrand paired with its exact antiderivative.

    Parameters
    ----------
    id : str
        Catalog key.
    name : str
        Display label.
    description : str
        One-line explanation shown alongside the label.
    fn : callable
        Integrand. Receives and returns tensors.
    antiderivative : callable
        A function ``F`` with ``F' = fn``. Receives and returns tensors.
    latex : str
        LaTeX for ``fn``.
    antiderivative_latex : str
        LaTeX for ``antiderivative``.
    default_bounds : Interval
        Integration bounds selected when the preset is chosen.
    view_domain : Interval
        Horizontal plotting range.
    exact_value_display : str
        Human-readable exact value over ``default_bounds``.
    interesting_points : tuple of InterestingPoint
        Annotated abscissae worth highlighting.
    """

    id: str
    name: str
    description: str
    fn: Callable[[Tensor], Tensor]
    antiderivative: Callable[[Tensor], Tensor]
    latex: str
    antiderivative_latex: str
    default_bounds: Interval
    view_domain: Interval
    exact_value_display: str
    interesting_points: Tuple[InterestingPoint, ...] = ()
