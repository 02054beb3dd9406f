"""High-precision reference values for the Complex operations.

Provides:
  • SympyReference.to_sympy(z): exact SymPy image of a Complex (binary float values preserved).
  • SympyReference.evaluate(op, z, arg): evaluate one operation at `dps` digits, rounded back to float64.

The reference formulas are the textbook ones (principal branch) except for powc,
which keeps the library's definition ln(z) * exp(w).

Module-level functions proxy to a default-precision SympyReference.
"""

from __future__ import annotations
from typing import Callable, Dict, Optional, Union
import sympy as sp

from xcomplex.number.complex import Complex

RefValue = Union[Complex, float, None]

OPS = ("add", "sub", "mul", "div", "norm", "arg", "conj", "exp", "ln", "powf", "powi", "powc", "sqrt")
_BINARY = ("add", "sub", "mul", "div", "powc")
_SCALAR_ARG = ("powf", "powi")
_NEEDS_PHASE = ("arg", "ln", "powf", "powi", "powc")


class SympyReference:
	"""Evaluates Complex operations symbolically, then numerically at high precision."""

	def __init__(self, dps: int = 30) -> None:
		self.dps = int(dps)

	def to_sympy(self, z: Complex) -> sp.Expr:
		"""Return re + I*im with each float converted exactly."""
		return sp.Float(z.re, self.dps) + sp.I * sp.Float(z.im, self.dps)

	def _round(self, e: sp.Expr) -> Complex:
		v = sp.N(e, self.dps)
		re, im = v.as_real_imag()
		return Complex(float(re), float(im))

	def _table(self) -> Dict[str, Callable]:
		tab: Dict[str, Callable] = {}
		tab["add"] = lambda a, b: a + b
		tab["sub"] = lambda a, b: a - b
		tab["mul"] = lambda a, b: a * b
		tab["div"] = lambda a, b: a / b
		tab["conj"] = lambda a: sp.conjugate(a)
		tab["exp"] = lambda a: sp.exp(a)
		tab["ln"] = lambda a: sp.log(a)
		tab["sqrt"] = lambda a: sp.sqrt(a)
		tab["powf"] = lambda a, n: sp.exp(n * sp.log(a))
		tab["powi"] = lambda a, n: sp.exp(n * sp.log(a))
		tab["powc"] = lambda a, b: sp.log(a) * sp.exp(b)
		return tab

	def evaluate(self, op: str, z: Complex, arg: Union[Complex, float, int, None] = None) -> RefValue:
		"""
		Return the reference value of `op` at `z` (and `arg` for binary ops and
		powers). Real-valued ops (norm, arg) return a float. Phase-dependent ops
		return None at the origin, where SymPy leaves atan2(0, 0) undefined.
		"""
		if op not in OPS:
			raise ValueError(f"Unknown operation: {op}")
		if op in _BINARY and not isinstance(arg, Complex):
			raise TypeError(f"{op} expects a Complex second operand")
		if op in _SCALAR_ARG and arg is None:
			raise TypeError(f"{op} expects an exponent")

		if op in _NEEDS_PHASE and z.re == 0.0 and z.im == 0.0:
			return None

		a = self.to_sympy(z)
		if op == "norm":
			return float(sp.N(sp.sqrt(sp.re(a) ** 2 + sp.im(a) ** 2), self.dps))
		if op == "arg":
			return float(sp.N(sp.atan2(sp.Float(z.im, self.dps), sp.Float(z.re, self.dps)), self.dps))

		f = self._table()[op]
		if op in _BINARY:
			return self._round(f(a, self.to_sympy(arg)))
		if op in _SCALAR_ARG:
			return self._round(f(a, sp.Float(float(arg), self.dps)))
		return self._round(f(a))



_DEFAULT = SympyReference()

def to_sympy(z: Complex) -> sp.Expr:
	"""Proxy to SympyReference.to_sympy."""
	return _DEFAULT.to_sympy(z)

def evaluate(op: str, z: Complex, arg: Union[Complex, float, int, None] = None) -> RefValue:
	"""Proxy to SympyReference.evaluate."""
	return _DEFAULT.evaluate(op, z, arg)
