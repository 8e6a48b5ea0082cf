"""Hard-coded integrands with known antiderivatives."""

import math

import torch

from torchriemann.presets._preset import (
    FunctionPreset,
    InterestingPoint,
    Interval,
)

DEFAULT_PRESET = "quadratic"


def _semicircle_antiderivative(x):
    return (x * torch.sqrt(1 - x * x) + torch.asin(x)) / 2


INTEGRATION_PRESETS = (
    FunctionPreset(
        id="linear",
        name="Linear",
        description="Simplest case, the area of a trapezoid",
        fn=lambda x: 2 * x + 1,
        antiderivative=lambda x: x * x + x,
        latex="f(x) = 2x + 1",
        antiderivative_latex="F(x) = x^2 + x",
        default_bounds=Interval(0.0, 3.0),
        view_domain=Interval(-1.0, 4.0),
        exact_value_display="12",
        interesting_points=(
            InterestingPoint(0.0, "Lower bound: f(0) = 1"),
            InterestingPoint(3.0, "Upper bound: f(3) = 7"),
        ),
    ),
    FunctionPreset(
        id="quadratic",
        name="Quadratic",
        description="Classic parabola, basic polynomial integration",
        fn=lambda x: x * x,
        antiderivative=lambda x: x * x * x / 3,
        latex="f(x) = x^2",
        antiderivative_latex="F(x) = \\frac{x^3}{3}",
        default_bounds=Interval(0.0, 2.0),
        view_domain=Interval(-0.5, 2.5),
        exact_value_display="8/3 ≈ 2.667",
        interesting_points=(
            InterestingPoint(0.0, "Minimum of parabola"),
            InterestingPoint(1.0, "f(1) = 1"),
            InterestingPoint(2.0, "Upper bound: f(2) = 4"),
        ),
    ),
    FunctionPreset(
        id="sine",
        name="Sine",
        description="Trigonometric function with a clean exact value",
        fn=torch.sin,
        antiderivative=lambda x: -torch.cos(x),
        latex="f(x) = \\sin(x)",
        antiderivative_latex="F(x) = -\\cos(x)",
        default_bounds=Interval(0.0, math.pi),
        view_domain=Interval(-0.5, math.pi + 0.5),
        exact_value_display="2",
        interesting_points=(
            InterestingPoint(0.0, "sin(0) = 0"),
            InterestingPoint(math.pi / 2, "Maximum: sin(π/2) = 1"),
            InterestingPoint(math.pi, "sin(π) = 0"),
        ),
    ),
    FunctionPreset(
        id="exponential",
        name="Exponential",
        description="e^x is its own antiderivative",
        fn=torch.exp,
        antiderivative=torch.exp,
        latex="f(x) = e^x",
        antiderivative_latex="F(x) = e^x",
        default_bounds=Interval(0.0, 1.0),
        view_domain=Interval(-0.5, 1.5),
        exact_value_display="e - 1 ≈ 1.718",
        interesting_points=(
            InterestingPoint(0.0, "e⁰ = 1"),
            InterestingPoint(1.0, "e¹ ≈ 2.718"),
        ),
    ),
    FunctionPreset(
        id="reciprocal",
        name="Reciprocal",
        description="Integral is the natural logarithm",
        fn=lambda x: 1 / x,
        antiderivative=torch.log,
        latex="f(x) = \\frac{1}{x}",
        antiderivative_latex="F(x) = \\ln(x)",
        default_bounds=Interval(1.0, math.e),
        view_domain=Interval(0.5, math.e + 0.5),
        exact_value_display="1",
        interesting_points=(
            InterestingPoint(1.0, "f(1) = 1, ln(1) = 0"),
            InterestingPoint(math.e, "f(e) ≈ 0.368, ln(e) = 1"),
        ),
    ),
    FunctionPreset(
        id="cubic-signed",
        name="Cubic (signed area)",
        description="Positive and negative area regions",
        fn=lambda x: x * x * x - x,
        antiderivative=lambda x: x * x * x * x / 4 - x * x / 2,
        latex="f(x) = x^3 - x",
        antiderivative_latex="F(x) = \\frac{x^4}{4} - \\frac{x^2}{2}",
        default_bounds=Interval(-1.0, 2.0),
        view_domain=Interval(-1.5, 2.5),
        exact_value_display="2.25",
        interesting_points=(
            InterestingPoint(-1.0, "f(-1) = 0, root"),
            InterestingPoint(0.0, "f(0) = 0, root"),
            InterestingPoint(1.0, "f(1) = 0, root"),
            InterestingPoint(2.0, "f(2) = 6"),
        ),
    ),
    FunctionPreset(
        id="semicircle",
        name="Semicircle",
        description="Geometric area πr²/2",
        fn=lambda x: torch.sqrt(1 - x * x),
        antiderivative=_semicircle_antiderivative,
        latex="f(x) = \\sqrt{1 - x^2}",
        antiderivative_latex="F(x) = \\frac{1}{2}(x\\sqrt{1-x^2} + \\arcsin(x))",
        default_bounds=Interval(-1.0, 1.0),
        view_domain=Interval(-1.5, 1.5),
        exact_value_display="π/2 ≈ 1.571",
        interesting_points=(
            InterestingPoint(-1.0, "Left edge of semicircle"),
            InterestingPoint(0.0, "Maximum: f(0) = 1"),
            InterestingPoint(1.0, "Right edge of semicircle"),
        ),
    ),
    FunctionPreset(
        id="constant",
        name="Constant",
        description="Trivial case, just a rectangle",
        fn=lambda x: torch.full_like(x, 3.0),
        antiderivative=lambda x: 3 * x,
        latex="f(x) = 3",
        antiderivative_latex="F(x) = 3x",
        default_bounds=Interval(0.0, 4.0),
        view_domain=Interval(-1.0, 5.0),
        exact_value_display="12",
        interesting_points=(InterestingPoint(2.0, "Constant height = 3"),),
    ),
)
