"""
Complex value type (production package)

Public API re-export:
	Complex  — immutable float64 complex number with arithmetic and polar-form functions
	Float64  — IEEE-754 scalar kernel used for divisions and transcendentals
"""

from .complex import Complex, isclose, ZERO, ONE, I
from .ieee import Float64

__all__ = ["Complex", "isclose", "ZERO", "ONE", "I", "Float64"]
