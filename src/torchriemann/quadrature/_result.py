from typing import Iterator, NamedTuple, Optional

from torch import Tensor


class SamplePoint(NamedTuple):
    """A single subinterval's sample, as Python floats.

    Parameters
    ----------
    x, y : float
        Point at which the integrand was evaluated and its value.
    left_x : float
        Left edge of the subinterval.
    width : float
        Signed subinterval width (negative for reversed bounds).
    right_y : float, optional
        Integrand value at the right edge. Trapezoidal rule only.
    """

    x: float
    y: float
    left_x: float
    width: float
    right_y: Optional[float] = None


class SamplePoints(NamedTuple):
    """Per-subinterval sample data for drawing an approximation.

    Every field is a 1-d tensor of length ``n`` (empty for a degenerate
    interval).

    Parameters
    ----------
    x : Tensor
        Abscissae at which the integrand was evaluated.
    y : Tensor
        Integrand values at ``x``.
    left_x : Tensor
        Left edge of each subinterval.
    width : Tensor
        Signed width of each subinterval.
    right_y : Tensor, optional
        Integrand values at the right edges. Only set by the trapezoidal
        rule, so a renderer can draw trapezoids instead of rectangles.
    """

    x: Tensor
    y: Tensor
    left_x: Tensor
    width: Tensor
    right_y: Optional[Tensor] = None

    def point(self, index: int) -> SamplePoint:
        right_y = None
        if self.right_y is not None:
            right_y = self.right_y[index].item()
        return SamplePoint(
            x=self.x[index].item(),
            y=self.y[index].item(),
            left_x=self.left_x[index].item(),
            width=self.width[index].item(),
            right_y=right_y,
        )

    def points(self) -> Iterator[SamplePoint]:
        for index in range(self.x.shape[0]):
            yield self.point(index)


class QuadratureResult(NamedTuple):
    """Result of a Riemann-family quadrature rule.

    Parameters
    ----------
    approximation : Tensor
        Approximate value of the integral. 0-d.
    areas : Tensor
        Signed area contributed by each subinterval, shape ``(n,)``. Sums to
        ``approximation`` for every rule except Simpson's, whose areas are a
        midpoint-style display proxy.
    sample_points : SamplePoints
        Sample data for each subinterval.
    n : int
        Number of subintervals actually used. May differ from the requested
        count after clamping or Simpson's even-count adjustment.
    delta_x : Tensor
        Signed subinterval width ``(b - a) / n``. 0-d.
    """

    approximation: Tensor
    areas: Tensor
    sample_points: SamplePoints
    n: int
    delta_x: Tensor


class EvaluationResult(NamedTuple):
    """Quadrature approximation with optional error against an exact value.

    The error fields are ``None`` when no exact integral was supplied.
    """

    approximation: Tensor
    method: str
    n: int
    exact_value: Optional[Tensor] = None
    absolute_error: Optional[Tensor] = None
    relative_error: Optional[Tensor] = None
