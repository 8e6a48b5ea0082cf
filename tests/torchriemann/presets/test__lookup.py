import math

import pytest
import torch

from torchriemann.presets import (
    INTEGRATION_PRESETS,
    exact_integral_for_preset,
    lookup_preset,
    preset_ids,
)
from torchriemann.quadrature import evaluate_integral


class TestLookupPreset:
    def test_returns_preset(self):
        preset = lookup_preset("quadratic")

        assert preset is not None
        assert preset.id == "quadratic"
        assert preset.name == "Quadratic"

    def test_unknown_returns_none(self):
        assert lookup_preset("nonexistent") is None

    def test_every_catalog_entry_is_reachable(self):
        for preset in INTEGRATION_PRESETS:
            assert lookup_preset(preset.id) is preset


class TestPresetIds:
    def test_returns_all_ids_in_order(self):
        assert preset_ids() == [
            "linear",
            "quadratic",
            "sine",
            "exponential",
            "reciprocal",
            "cubic-signed",
            "semicircle",
            "constant",
        ]

    def test_returns_fresh_list(self):
        ids = preset_ids()
        ids.clear()

        assert len(preset_ids()) == 8


class TestExactIntegralForPreset:
    def test_quadratic(self):
        result = exact_integral_for_preset("quadratic", 0, 2)

        assert result.item() == pytest.approx(8 / 3)

    def test_custom_bounds(self):
        result = exact_integral_for_preset("sine", 0, math.pi / 2)

        assert result.item() == pytest.approx(1.0)

    def test_reversed_bounds(self):
        result = exact_integral_for_preset("exponential", 1, 0)

        assert result.item() == pytest.approx(1 - math.e)

    def test_unknown_returns_none(self):
        assert exact_integral_for_preset("nonexistent", 0, 1) is None

    def test_reciprocal_outside_domain_is_nan(self):
        result = exact_integral_for_preset("reciprocal", -1, 1)

        assert torch.isnan(result)


class TestPresetEvaluation:
    def test_error_against_preset(self):
        preset = lookup_preset("sine")

        result = evaluate_integral(
            preset.fn,
            0,
            math.pi,
            50,
            "simpson",
            lambda a, b: exact_integral_for_preset("sine", a, b),
        )

        assert result.exact_value.item() == pytest.approx(2.0)
        assert result.absolute_error.item() < 1e-6
        assert result.relative_error.item() == pytest.approx(
            result.absolute_error.item() / 2.0
        )
