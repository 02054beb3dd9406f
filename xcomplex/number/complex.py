"""
Class Complex models a complex number re + im·i as an immutable pair of float64
fields. Every operation returns a new value:

  • z1 + z2, z1 - z2, z1 * z2, z1 / z2   → field formulas, never raise
  • z.norm(), z.arg()                    → magnitude and phase in (-π, π]
  • z.conj(), z.exp(), z.ln(), z.sqrt()  → principal-branch unary maps
  • z.powf(x), z.powi(n), z.powc(w)      → polar-form powers
  • z1 == z2                             → exact field-wise float equality

Exceptional cases (zero divisors, log of zero, overflow) are not errors: the
fields come out as ±Inf or NaN and propagate through later operations.

The module also exposes the constants ZERO, ONE, I and an approximate
comparison helper isclose().
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import math
import numbers
import operator

from .ieee import Float64

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


@dataclass(frozen=True, eq=False)
class Complex:
	"""Immutable complex number with float64 real and imaginary parts."""
	re: float = 0.0
	im: float = 0.0

	def __post_init__(self) -> None:
		if not isinstance(self.re, numbers.Real) or not isinstance(self.im, numbers.Real):
			raise TypeError("Complex fields must be real numbers")
		object.__setattr__(self, "re", float(self.re))
		object.__setattr__(self, "im", float(self.im))

	@classmethod
	def from_complex(cls, c: complex) -> "Complex":
		c = complex(c)
		return cls(c.real, c.imag)

	@classmethod
	def from_polar(cls, r: float, theta: float) -> "Complex":
		return cls(r * Float64.cos(theta), r * Float64.sin(theta))

	def add(self, other: "Complex") -> "Complex":
		return Complex(self.re + other.re, self.im + other.im)

	def sub(self, other: "Complex") -> "Complex":
		return Complex(self.re - other.re, self.im - other.im)

	def mul(self, other: "Complex") -> "Complex":
		return Complex(
			self.re * other.re - self.im * other.im,
			self.re * other.im + self.im * other.re,
		)

	def div(self, other: "Complex") -> "Complex":
		d = other.re * other.re + other.im * other.im
		return Complex(
			Float64.div(self.re * other.re + self.im * other.im, d),
			Float64.div(self.im * other.re - self.re * other.im, d),
		)

	def norm(self) -> float:
		"""Euclidean magnitude sqrt(re² + im²), without hypot rescaling."""
		return Float64.sqrt(self.re * self.re + self.im * self.im)

	def arg(self) -> float:
		"""Phase atan2(im, re); 0.0 at the origin."""
		return Float64.atan2(self.im, self.re)

	def conj(self) -> "Complex":
		return Complex(self.re, -self.im)

	def exp(self) -> "Complex":
		"""e^(x+iy) = e^x (cos y + i sin y)."""
		e = Float64.exp(self.re)
		return Complex(e * Float64.cos(self.im), e * Float64.sin(self.im))

	def ln(self) -> "Complex":
		"""Principal natural logarithm (ln|z|, arg z); real part -Inf at the origin."""
		return Complex(Float64.log(self.norm()), self.arg())

	def powf(self, n: float) -> "Complex":
		r = self.norm()
		theta = self.arg()
		e = Float64.powf(r, n)
		return Complex(e * Float64.cos(theta * n), e * Float64.sin(theta * n))

	def powi(self, n: int) -> "Complex":
		"""
		Integer power in polar form. The magnitude uses the integer-power routine,
		which can round differently from powf(float(n)). The exponent must lie in
		the 32-bit signed range; ValueError otherwise.
		"""
		k = operator.index(n)
		if not INT32_MIN <= k <= INT32_MAX:
			raise ValueError(f"powi exponent {k} is outside the 32-bit integer range")
		r = self.norm()
		theta = self.arg()
		e = Float64.powi(r, k)
		x = float(k)
		return Complex(e * Float64.cos(theta * x), e * Float64.sin(theta * x))

	def powc(self, n: "Complex") -> "Complex":
		"""
		Complex power, defined as ln(self) * exp(n).

		Both factors are computed independently and then multiplied; the grouping
		is part of the contract since regrouping changes the last bits.
		"""
		return self.ln() * n.exp()

	def sqrt(self) -> "Complex":
		"""Principal square root via polar form."""
		r = self.norm()
		theta = self.arg()
		s = Float64.sqrt(r)
		return Complex(s * Float64.cos(theta / 2.0), s * Float64.sin(theta / 2.0))

	def same(self, other: "Complex") -> bool:
		return self.re == other.re and self.im == other.im

	def to_tuple(self) -> Tuple[float, float]:
		return (self.re, self.im)

	def __add__(self, other: "Complex") -> "Complex":
		if not isinstance(other, Complex):
			return NotImplemented
		return self.add(other)

	def __sub__(self, other: "Complex") -> "Complex":
		if not isinstance(other, Complex):
			return NotImplemented
		return self.sub(other)

	def __mul__(self, other: "Complex") -> "Complex":
		if not isinstance(other, Complex):
			return NotImplemented
		return self.mul(other)

	def __truediv__(self, other: "Complex") -> "Complex":
		if not isinstance(other, Complex):
			return NotImplemented
		return self.div(other)

	def __pow__(self, n) -> "Complex":
		if isinstance(n, numbers.Integral):
			return self.powi(n)
		if isinstance(n, numbers.Real):
			return self.powf(n)
		return NotImplemented

	def __neg__(self) -> "Complex":
		return Complex(-self.re, -self.im)

	def __abs__(self) -> float:
		return self.norm()

	def __complex__(self) -> complex:
		return complex(self.re, self.im)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Complex):
			return NotImplemented
		return self.same(other)

	def __ne__(self, other: object) -> bool:
		if not isinstance(other, Complex):
			return NotImplemented
		return self.re != other.re or self.im != other.im

	def __hash__(self) -> int:
		return hash((self.re, self.im))



def isclose(a: Complex, b: Complex, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
	"""Field-wise math.isclose; NaN fields never compare close."""
	return (math.isclose(a.re, b.re, rel_tol=rel_tol, abs_tol=abs_tol) and
			math.isclose(a.im, b.im, rel_tol=rel_tol, abs_tol=abs_tol))


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
I = Complex(0.0, 1.0)
