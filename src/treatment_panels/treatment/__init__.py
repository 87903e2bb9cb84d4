"""Treatment specification parsing and classification."""

from .classify import classify_pattern
from .normalize import TreatmentEntry, normalize_treatment

__all__ = ["TreatmentEntry", "normalize_treatment", "classify_pattern"]
