import pytest
import torch

from torchriemann.quadrature import (
    left_riemann_sum,
    midpoint_riemann_sum,
    right_riemann_sum,
)


class TestLeftRiemannSum:
    def test_constant_function(self):
        result = left_riemann_sum(lambda x: torch.full_like(x, 3.0), 0, 4, 10)

        assert torch.allclose(
            result.approximation, torch.tensor(12.0, dtype=torch.float64)
        )

    def test_identity_function(self):
        """Left endpoints 0, 0.25, 0.5, 0.75 give 0.375"""
        result = left_riemann_sum(lambda x: x, 0, 1, 4)

        assert result.approximation.item() == pytest.approx(0.375)

    def test_sample_points_use_left_endpoints(self):
        result = left_riemann_sum(lambda x: x**2, 0, 1, 4)

        expected = torch.tensor([0.0, 0.25, 0.5, 0.75], dtype=torch.float64)
        assert torch.allclose(result.sample_points.x, expected)
        assert torch.allclose(result.sample_points.left_x, expected)
        assert torch.allclose(result.sample_points.y, expected**2)
        assert result.sample_points.right_y is None

    def test_lengths_match_n(self):
        result = left_riemann_sum(torch.sin, 0, 1, 7)

        assert result.n == 7
        assert result.areas.shape == (7,)
        assert result.sample_points.x.shape == (7,)
        assert result.sample_points.width.shape == (7,)

    def test_negative_function_values(self):
        result = left_riemann_sum(lambda x: torch.full_like(x, -2.0), 0, 3, 5)

        assert result.approximation.item() == pytest.approx(-6.0)
        assert bool((result.areas < 0).all())

    def test_single_subdivision(self):
        result = left_riemann_sum(lambda x: x + 1, 0, 2, 1)

        assert result.n == 1
        assert result.approximation.item() == pytest.approx(2.0)
        assert result.delta_x.item() == pytest.approx(2.0)

    def test_underestimates_increasing_function(self):
        result = left_riemann_sum(lambda x: x**2, 0, 2, 10)

        assert result.approximation.item() < 8 / 3

    def test_rejects_zero_n(self):
        with pytest.raises(ValueError, match="at least 1"):
            left_riemann_sum(lambda x: x, 0, 1, 0)


class TestRightRiemannSum:
    def test_constant_function(self):
        result = right_riemann_sum(lambda x: torch.full_like(x, 3.0), 0, 4, 10)

        assert result.approximation.item() == pytest.approx(12.0)

    def test_overestimates_increasing_function(self):
        result = right_riemann_sum(lambda x: x**2, 0, 2, 10)

        assert result.approximation.item() > 8 / 3

    def test_sample_points_use_right_endpoints(self):
        result = right_riemann_sum(lambda x: x, 0, 1, 4)

        assert torch.allclose(
            result.sample_points.x,
            torch.tensor([0.25, 0.5, 0.75, 1.0], dtype=torch.float64),
        )
        assert torch.allclose(
            result.sample_points.left_x,
            torch.tensor([0.0, 0.25, 0.5, 0.75], dtype=torch.float64),
        )

    def test_single_subdivision(self):
        result = right_riemann_sum(lambda x: x + 1, 0, 2, 1)

        assert result.approximation.item() == pytest.approx(6.0)


class TestMidpointRiemannSum:
    def test_x_squared_scenario(self):
        """x^2 on [0, 2] with n=4 samples at quarter points and gives 2.625"""
        result = midpoint_riemann_sum(lambda x: x**2, 0, 2, 4)

        assert torch.allclose(
            result.sample_points.x,
            torch.tensor([0.25, 0.75, 1.25, 1.75], dtype=torch.float64),
        )
        assert result.approximation.item() == pytest.approx(2.625)
        assert result.delta_x.item() == pytest.approx(0.5)

    def test_more_accurate_than_left_and_right(self):
        exact = 8 / 3
        f = lambda x: x**2  # noqa: E731

        left_error = abs(left_riemann_sum(f, 0, 2, 10).approximation.item() - exact)
        right_error = abs(
            right_riemann_sum(f, 0, 2, 10).approximation.item() - exact
        )
        mid_error = abs(
            midpoint_riemann_sum(f, 0, 2, 10).approximation.item() - exact
        )

        assert mid_error < left_error
        assert mid_error < right_error

    def test_second_order_convergence(self):
        """Doubling n quarters the error"""
        exact = torch.e - 1

        error_10 = abs(
            midpoint_riemann_sum(torch.exp, 0, 1, 10).approximation.item() - exact
        )
        error_20 = abs(
            midpoint_riemann_sum(torch.exp, 0, 1, 20).approximation.item() - exact
        )

        assert 3.5 < error_10 / error_20 < 4.5

    def test_width_is_delta_x(self):
        result = midpoint_riemann_sum(torch.sin, 0, 1, 5)

        assert torch.allclose(
            result.sample_points.width,
            torch.full((5,), 0.2, dtype=torch.float64),
        )


class TestRectangleSumsShared:
    @pytest.mark.parametrize(
        "rule", [left_riemann_sum, right_riemann_sum, midpoint_riemann_sum]
    )
    def test_areas_sum_to_approximation(self, rule):
        result = rule(lambda x: torch.sin(x) + x**3, -1.3, 2.7, 37)

        assert torch.allclose(
            result.areas.sum(), result.approximation, rtol=0, atol=1e-9
        )

    @pytest.mark.parametrize(
        "rule", [left_riemann_sum, right_riemann_sum, midpoint_riemann_sum]
    )
    def test_areas_are_height_times_width(self, rule):
        result = rule(torch.exp, 0, 1, 6)

        assert torch.allclose(
            result.areas, result.sample_points.y * result.sample_points.width
        )

    def test_bracketing_for_increasing_function(self):
        """left <= exact <= right for strictly increasing f"""
        for n in (1, 3, 10, 50):
            left = left_riemann_sum(torch.exp, 0, 2, n).approximation.item()
            right = right_riemann_sum(torch.exp, 0, 2, n).approximation.item()
            exact = torch.e**2 - 1

            assert left <= exact <= right

    def test_scalar_integrand_output_is_broadcast(self):
        result = left_riemann_sum(lambda x: 3.0, 0, 4, 8)

        assert result.areas.shape == (8,)
        assert result.approximation.item() == pytest.approx(12.0)

    def test_float32_bounds_keep_dtype(self):
        a = torch.tensor(0.0, dtype=torch.float32)

        result = midpoint_riemann_sum(lambda x: x, a, 1.0, 4)

        assert result.approximation.dtype == torch.float32
        assert result.sample_points.x.dtype == torch.float32

    def test_default_dtype_is_float64(self):
        result = left_riemann_sum(lambda x: x, 0, 1, 2)

        assert result.approximation.dtype == torch.float64
