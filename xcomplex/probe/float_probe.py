from __future__ import annotations
from typing import Callable, List, Tuple
import math
import numpy as np

from xcomplex.number.complex import Complex
from xcomplex.probe.config import IdentityResult, ProbeConfig, ProbeEvent, ProbeReport
from xcomplex.probe.reference import SympyReference

Pair = Tuple[Complex, Complex]


class IdentityProbe:
	"""
	Deterministic float probe for the algebraic identities of Complex.

	Samples are drawn uniformly from the square [-span, span]^2 with the disc of
	radius min_norm around the origin excluded, so every sample is a valid
	divisor and has a defined logarithm. Each identity is scored with the
	scaled error |x - y| / max(1, |y|).
	"""

	_REF_UNARY = ("norm", "arg", "conj", "exp", "ln", "sqrt")
	_REF_BINARY = ("add", "sub", "mul", "div", "powc")

	def __init__(self, config: ProbeConfig | None = None) -> None:
		"""Validate the configuration and prepare the reference evaluator."""
		if config is None:
			config = ProbeConfig()
		self.cfg = config.validate()
		self.ref = SympyReference(dps=self.cfg.dps)

	def grid(self) -> List[Complex]:
		"""
		Return cfg.n samples from a seeded generator; samples inside the excluded
		disc are redrawn.
		"""
		rng = np.random.default_rng(self.cfg.seed)
		out: List[Complex] = []
		n = int(self.cfg.n)
		while len(out) < n:
			xs = rng.uniform(-self.cfg.span, self.cfg.span, size=(n - len(out), 2)).astype(np.float64)
			for x, y in xs:
				z = Complex(x, y)
				if z.norm() >= self.cfg.min_norm:
					out.append(z)
		return out

	def pairs(self) -> List[Pair]:
		"""Pair each sample with its successor (cyclically)."""
		g = self.grid()
		out: List[Pair] = []
		for k in range(len(g)):
			out.append((g[k], g[(k + 1) % len(g)]))
		return out

	@staticmethod
	def scaled_error(x: Complex, y: Complex) -> float:
		"""
		Field-wise max-abs difference scaled by max(1, |y|). Fields that compare
		equal (matching infinities included) contribute 0; a NaN on either side
		counts as infinite. When |y| overflows, the largest finite field of y is
		the scale instead.
		"""
		d = max(IdentityProbe._field_diff(x.re, y.re), IdentityProbe._field_diff(x.im, y.im))
		scale = y.norm()
		if not math.isfinite(scale):
			scale = 0.0
			for v in (y.re, y.im):
				if math.isfinite(v):
					scale = max(scale, abs(v))
		return d / max(1.0, scale)

	@staticmethod
	def _field_diff(a: float, b: float) -> float:
		if a == b:
			return 0.0
		d = abs(a - b)
		if math.isnan(d):
			return math.inf
		return d

	def _score(self, name: str, cases: List[Tuple[Complex, Complex]]) -> IdentityResult:
		max_err = 0.0
		over = 0
		for got, want in cases:
			err = self.scaled_error(got, want)
			if err > max_err:
				max_err = err
			if err > self.cfg.tol:
				over += 1
		return self._result(name, float(max_err), over, len(cases))

	def _result(self, name: str, max_err: float, over: int, total: int) -> IdentityResult:
		delta_upper, p_miss = self.prob_bound(over, total, alpha=self.cfg.alpha)
		return IdentityResult(name=name, max_err=max_err, over=over, total=total, delta_upper=delta_upper, p_miss=p_miss)

	def check_identities(self, pairs: List[Pair]) -> List[IdentityResult]:
		"""Score the algebraic identities on the given operand pairs."""
		checks: List[Tuple[str, Callable[[Complex, Complex], Tuple[Complex, Complex]]]] = [
			("add_sub", lambda a, b: (a + b - b, a)),
			("div_mul", lambda a, b: ((a / b) * b, a)),
			("conj_involution", lambda a, b: (a.conj().conj(), a)),
			("exp_ln", lambda a, b: (a.ln().exp(), a)),
			("powi_square", lambda a, b: (a.powi(2), a * a)),
		]
		out: List[IdentityResult] = []
		for name, fn in checks:
			cases = []
			for a, b in pairs:
				cases.append(fn(a, b))
			out.append(self._score(name, cases))

		negative = 0
		for a, _ in pairs:
			if not a.norm() >= 0.0:
				negative += 1
		out.append(self._result("norm_nonnegative", 0.0, negative, len(pairs)))
		return out

	def check_reference(self, pairs: List[Pair]) -> List[IdentityResult]:
		"""Score every operation against the high-precision reference."""
		out: List[IdentityResult] = []
		for op in self._REF_UNARY:
			cases = []
			for a, _ in pairs:
				want = self.ref.evaluate(op, a)
				if want is None:
					continue
				got = getattr(a, op)()
				if isinstance(want, float):
					cases.append((Complex(got, 0.0), Complex(want, 0.0)))
				else:
					cases.append((got, want))
			out.append(self._score(f"reference:{op}", cases))

		for op in self._REF_BINARY:
			cases = []
			for a, b in pairs:
				want = self.ref.evaluate(op, a, b)
				if want is None:
					continue
				cases.append((getattr(a, op)(b), want))
			out.append(self._score(f"reference:{op}", cases))

		for op, n in (("powf", math.pi), ("powi", 3)):
			cases = []
			for a, _ in pairs:
				want = self.ref.evaluate(op, a, n)
				if want is None:
					continue
				cases.append((getattr(a, op)(n), want))
			out.append(self._score(f"reference:{op}", cases))
		return out

	def run(self, with_reference: bool = True) -> ProbeReport:
		"""
		Run every check over the configured grid and return the report. Events
		record the grid size and each identity that exceeded the tolerance.
		"""
		report = ProbeReport()
		pairs = self.pairs()
		report.events.append(ProbeEvent(kind="grid", payload={"n": len(pairs), "seed": int(self.cfg.seed), "span": float(self.cfg.span)}))

		results = self.check_identities(pairs)
		if with_reference:
			results.extend(self.check_reference(pairs))

		for r in results:
			report.results.append(r)
			if not r.ok:
				report.events.append(ProbeEvent(kind="identity_failed", payload={"name": r.name, "max_err": r.max_err, "over": r.over, "total": r.total, "delta_upper": r.delta_upper}))
		worst = 0.0
		for r in report.results:
			worst = max(worst, r.delta_upper)
		report.events.append(ProbeEvent(kind="done", payload={"ok": report.ok, "checks": len(report.results), "max_delta_upper": worst}))
		return report

	@staticmethod
	def prob_bound(over: int, m: int, alpha: float = 0.05) -> Tuple[float, float]:
		"""
		One-sided (1−α) upper bound on disagreement fraction δ and miss probability:
		  P_miss ≤ exp(−δ · m)
		"""
		m = max(0, int(m))
		over = max(0, int(over))
		alpha = float(alpha)
		if m == 0:
			return 1.0, 1.0
		if over == 0:
			delta_upper = 1.0 - (alpha ** (1.0 / float(m)))
		else:
			delta_upper = float(over) / float(m)
		p_upper = math.exp(-delta_upper * float(m))
		return float(delta_upper), float(p_upper)
