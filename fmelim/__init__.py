"""Fourier-Motzkin elimination for real and integer systems of linear inequalities."""

__version__ = "0.1.0"
__all__ = ["systems", "reader", "real", "integer", "cli"]