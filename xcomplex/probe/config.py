"""
Probe configuration and typed containers for the identity probe.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import math



@dataclass(frozen=True)
class ProbeConfig:
	"""
	Sampling grid and acceptance budget.
	"""
	n: int = 256
	span: float = 10.0
	min_norm: float = 1e-6
	tol: float = 1e-12
	seed: int = 1729
	dps: int = 30
	alpha: float = 0.05

	def validate(self) -> "ProbeConfig":
		"""Return self, or raise ValueError on an unusable setting."""
		if int(self.n) < 0:
			raise ValueError("Sample count n must be non-negative.")
		if not math.isfinite(self.span) or self.span <= 0.0:
			raise ValueError("span must be a positive finite half-width.")
		if not self.min_norm >= 0.0:
			raise ValueError("min_norm must be non-negative.")
		if self.min_norm >= self.span:
			raise ValueError("min_norm must be smaller than span.")
		if not self.tol >= 0.0:
			raise ValueError("tol must be non-negative.")
		if int(self.dps) < 17:
			raise ValueError("Reference precision dps must be at least 17 digits.")
		if not 0.0 < self.alpha < 1.0:
			raise ValueError("alpha must lie strictly between 0 and 1.")
		return self


@dataclass
class ProbeEvent:
	"""
	Structured event recorded while probing.
	"""
	kind: str
	payload: Dict[str, object]


@dataclass(frozen=True)
class IdentityResult:
	"""
	Outcome of one identity over the grid.

	Attributes
	----------
	name : str
		Identity name, e.g. "exp_ln" or "reference:sqrt".
	max_err : float
		Largest scaled error |x - y| / max(1, |y|) seen.
	over : int
		Number of samples whose error exceeded the tolerance.
	total : int
		Number of samples evaluated.
	delta_upper : float
		One-sided upper bound on the fraction of inputs that break the identity.
	p_miss : float
		Upper bound on the chance that a grid of this size misses such inputs.
	"""
	name: str
	max_err: float
	over: int
	total: int
	delta_upper: float = 1.0
	p_miss: float = 1.0

	@property
	def ok(self) -> bool:
		return self.over == 0


@dataclass
class ProbeReport:
	"""
	Results of a probe run, in check order, plus the recorded events.
	"""
	results: List[IdentityResult] = field(default_factory=list)
	events: List[ProbeEvent] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		for r in self.results:
			if not r.ok:
				return False
		return True

	def by_name(self, name: str) -> Optional[IdentityResult]:
		for r in self.results:
			if r.name == name:
				return r
		return None

	def failures(self) -> List[IdentityResult]:
		out: List[IdentityResult] = []
		for r in self.results:
			if not r.ok:
				out.append(r)
		return out
