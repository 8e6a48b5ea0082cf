"""
Catalog of integrands with known antiderivatives.

Presets:
    INTEGRATION_PRESETS, DEFAULT_PRESET, FunctionPreset, Interval,
    InterestingPoint

Lookup:
    lookup_preset, preset_ids, exact_integral_for_preset

Plotting:
    curve_points
"""

from torchriemann.presets._catalog import DEFAULT_PRESET, INTEGRATION_PRESETS
from torchriemann.presets._curve import curve_points
from torchriemann.presets._lookup import (
    exact_integral_for_preset,
    lookup_preset,
    preset_ids,
)
from torchriemann.presets._preset import (
    FunctionPreset,
    InterestingPoint,
    Interval,
)

__all__ = [
    "INTEGRATION_PRESETS",
    "DEFAULT_PRESET",
    "FunctionPreset",
    "Interval",
    "InterestingPoint",
    "lookup_preset",
    "preset_ids",
    "exact_integral_for_preset",
    "curve_points",
]
