"""
Inference Module

Computes cardiovascular risk candidates from a normalized patient record.
"""
from .types import RiskCandidate, RiskLevel
from .coefficients import DEFAULT_WHO_REGION, WhoRegion
from .risk_engine import RiskEngine, evaluate_risks, rank_top, rank_top3

__all__ = [
    "RiskCandidate",
    "RiskLevel",
    "DEFAULT_WHO_REGION",
    "WhoRegion",
    "RiskEngine",
    "evaluate_risks",
    "rank_top",
    "rank_top3",
]
