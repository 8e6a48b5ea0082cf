"""Warnings for Riemann-family quadrature."""


class QuadratureWarning(UserWarning):
    """Warning for quadrature issues (e.g., integrand evaluated off its domain)."""

    pass
