"""
IEEE-754 float64 scalar kernel

Python floats raise on several exceptional cases (1.0/0.0, log(0.0), cos(inf),
exp(1000.0)). The complex operations must instead let Infinity and NaN
propagate, so every division and transcendental primitive is evaluated here on
numpy.float64 scalars with floating-point warnings silenced:

  • Binary: div, atan2, powf, powi
  • Unary:  sqrt, exp, log, sin, cos

All functions accept anything float() accepts and return a plain Python float.

Public API:
  • class Float64: static methods implementing all primitives
  • top-level proxies with the same names for ergonomic imports
"""

from __future__ import annotations
import operator
import numpy as np


class Float64:
	"""Unguarded float64 primitives with IEEE-754 exceptional-value semantics."""

	@staticmethod
	def _as_scalar(x) -> np.float64:
		"""Convert input to an np.float64 scalar."""
		return np.float64(x)

	@staticmethod
	def div(x, y) -> float:
		"""x / y; a zero divisor yields ±Inf or NaN."""
		with np.errstate(all="ignore"):
			return float(Float64._as_scalar(x) / Float64._as_scalar(y))

	@staticmethod
	def sqrt(x) -> float:
		"""Square root; NaN for negative input."""
		with np.errstate(all="ignore"):
			return float(np.sqrt(Float64._as_scalar(x)))

	@staticmethod
	def exp(x) -> float:
		"""Exponential; overflows to +Inf."""
		with np.errstate(all="ignore"):
			return float(np.exp(Float64._as_scalar(x)))

	@staticmethod
	def log(x) -> float:
		"""Natural logarithm; -Inf at zero, NaN below zero."""
		with np.errstate(all="ignore"):
			return float(np.log(Float64._as_scalar(x)))

	@staticmethod
	def sin(x) -> float:
		"""Sine; NaN for infinite input."""
		with np.errstate(all="ignore"):
			return float(np.sin(Float64._as_scalar(x)))

	@staticmethod
	def cos(x) -> float:
		"""Cosine; NaN for infinite input."""
		with np.errstate(all="ignore"):
			return float(np.cos(Float64._as_scalar(x)))

	@staticmethod
	def atan2(y, x) -> float:
		"""Two-argument arctangent in (-π, π]; atan2(0, 0) is 0.0."""
		with np.errstate(all="ignore"):
			return float(np.arctan2(Float64._as_scalar(y), Float64._as_scalar(x)))

	@staticmethod
	def powf(x, p) -> float:
		"""General real power x**p."""
		with np.errstate(all="ignore"):
			return float(np.power(Float64._as_scalar(x), Float64._as_scalar(p)))

	@staticmethod
	def powi(x, n) -> float:
		"""
		Integer power by binary exponentiation.

		Squares and multiplies in float64, taking a single reciprocal at the end
		for negative exponents. Rounding may differ from powf for the same
		mathematical result.
		"""
		k = operator.index(n)
		base = Float64._as_scalar(x)
		acc = np.float64(1.0)
		recip = k < 0
		if recip:
			k = -k
		with np.errstate(all="ignore"):
			while k:
				if k & 1:
					acc = acc * base
				k >>= 1
				if k:
					base = base * base
			if recip:
				acc = np.float64(1.0) / acc
		return float(acc)



def div(x, y): return Float64.div(x, y)
def sqrt(x): return Float64.sqrt(x)
def exp(x): return Float64.exp(x)
def log(x): return Float64.log(x)
def sin(x): return Float64.sin(x)
def cos(x): return Float64.cos(x)
def atan2(y, x): return Float64.atan2(y, x)
def powf(x, p): return Float64.powf(x, p)
def powi(x, n): return Float64.powi(x, n)
