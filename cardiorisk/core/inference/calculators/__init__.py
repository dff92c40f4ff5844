"""
Risk Model Calculators

One pure function per model. Each takes a NormalizedPatient and returns a
RiskCandidate, or None when the model does not apply to the patient.
"""
from .bp_risk import calculate_bp_risk
from .diabetes_risk import calculate_diabetes_risk
from .obesity_risk import calculate_obesity_risk
from .relative_risk import calculate_relative_risk, RELATIVE_RISK_WARNING
from .ascvd import calculate_ascvd_risk
from .framingham import calculate_framingham_risk
from .who import calculate_who_cvd_risk

__all__ = [
    "calculate_bp_risk",
    "calculate_diabetes_risk",
    "calculate_obesity_risk",
    "calculate_relative_risk",
    "RELATIVE_RISK_WARNING",
    "calculate_ascvd_risk",
    "calculate_framingham_risk",
    "calculate_who_cvd_risk",
]
