"""Constraint-checked Goldilocks field, quadratic extension, algebra and FRI query arithmetic."""

__version__ = "0.1.0"
__all__ = ["field", "conversions", "extension", "algebra", "fri_info", "fri"]