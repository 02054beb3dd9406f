"""
Top-level re-exports for the complex number library.

	from xcomplex import Complex
	c = Complex(1.0, 2.0)
	d = Complex(3.0, 4.0)
	c * d == Complex(-5.0, 10.0)
"""

from .number import Complex, Float64, isclose, ZERO, ONE, I
from .probe import IdentityProbe, ProbeConfig, ProbeReport, SympyReference

__all__ = [
	"Complex", "Float64", "isclose", "ZERO", "ONE", "I",
	"IdentityProbe", "ProbeConfig", "ProbeReport", "SympyReference",
]
