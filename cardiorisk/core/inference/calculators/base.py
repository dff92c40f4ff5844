"""
Shared helpers for survival-model risk calculators.
"""
from typing import List, Optional
import numpy as np

# Floors applied before taking logarithms
MIN_CHOLESTEROL = 1.0
MIN_SBP = 90

MAX_RISK_PERCENT = 99.0
MAX_TEN_YEAR_SCORE = 0.9


def survival_risk(baseline_survival: float, linear_predictor_delta: float) -> float:
    """10-year event probability: 1 - S0 ** exp(LP - mean LP)."""
    return float(1.0 - np.power(baseline_survival, np.exp(linear_predictor_delta)))


def clamp_percent(risk_fraction: float) -> float:
    """Fraction -> percent, clamped to [0, 99]."""
    return float(np.clip(risk_fraction * 100.0, 0.0, MAX_RISK_PERCENT))


def ten_year_score(risk_percent: float) -> float:
    """Cross-model urgency score for a 10-year risk percentage."""
    return min(risk_percent / 30.0, MAX_TEN_YEAR_SCORE)


def round1(value: float) -> float:
    return round(value, 1)


def optional_list(items: List[str]) -> Optional[List[str]]:
    """None for an empty list, so candidates omit empty warnings/actions."""
    return items if items else None
