"""
Identity probe & reference evaluation

Public API re-export:
	IdentityProbe   — deterministic grid checks of the Complex identities
	SympyReference  — high-precision reference values via SymPy
	ProbeConfig, ProbeReport, IdentityResult, ProbeEvent — typed containers
"""

from .config import ProbeConfig, ProbeEvent, IdentityResult, ProbeReport
from .reference import SympyReference
from .float_probe import IdentityProbe

__all__ = ["ProbeConfig", "ProbeEvent", "IdentityResult", "ProbeReport", "SympyReference", "IdentityProbe"]
