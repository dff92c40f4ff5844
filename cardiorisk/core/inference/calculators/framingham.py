"""
Framingham 10-year CHD risk (D'Agostino 2008).

Applicable for ages 30-74 with a lipid panel.
"""
from typing import Optional
import numpy as np

from cardiorisk.core.inference.calculators.base import (
    MIN_CHOLESTEROL, MIN_SBP, clamp_percent, round1, survival_risk, ten_year_score,
)
from cardiorisk.core.inference.coefficients import FRAMINGHAM_COEFFICIENTS
from cardiorisk.core.inference.types import RiskCandidate, RiskLevel
from cardiorisk.core.patient import NormalizedPatient

FRAMINGHAM_MIN_AGE = 30
FRAMINGHAM_MAX_AGE = 74
FRAMINGHAM_INTERMEDIATE_PERCENT = 10.0


def calculate_framingham_risk(patient: NormalizedPatient) -> Optional[RiskCandidate]:
    if patient.age < FRAMINGHAM_MIN_AGE or patient.age > FRAMINGHAM_MAX_AGE:
        return None
    if not patient.has_lipid_panel:
        return None

    sex = patient.sex_at_birth.value
    c = FRAMINGHAM_COEFFICIENTS[sex]

    total_chol = max(patient.total_cholesterol, MIN_CHOLESTEROL)
    hdl_chol = max(patient.hdl_cholesterol, MIN_CHOLESTEROL)
    sbp = max(patient.systolic_bp, MIN_SBP)

    sum_bx = float(
        c.ln_age * np.log(patient.age)
        + c.ln_tc * np.log(total_chol)
        + c.ln_hdl * np.log(hdl_chol)
        + (c.ln_sbp_treated if patient.is_on_bp_meds else c.ln_sbp_untreated) * np.log(sbp)
        + (c.smoker if patient.is_current_smoker else 0.0)
        + (c.diabetes if patient.is_diabetic else 0.0)
    )
    risk_percent = clamp_percent(survival_risk(c.baseline_survival, sum_bx - c.mean_linear_predictor))
    level = RiskLevel.from_percent(risk_percent, FRAMINGHAM_INTERMEDIATE_PERCENT)

    why = []
    if patient.is_diabetic:
        why.append("Diabetes present")
    if patient.is_current_smoker:
        why.append("Current smoker")
    if patient.systolic_bp >= 140:
        why.append(f"Elevated BP ({patient.systolic_bp} mmHg)")
    ratio = patient.total_cholesterol / patient.hdl_cholesterol if patient.hdl_cholesterol else 0.0
    if ratio > 4:
        why.append(f"Unfavorable cholesterol ratio ({ratio:.1f})")
    if patient.age >= 60:
        why.append("Age ≥60")

    if level == RiskLevel.HIGH:
        actions = [
            "Statin and BP therapy per guidelines",
            "Lifestyle modifications",
            "Regular monitoring",
        ]
    elif level == RiskLevel.INTERMEDIATE:
        actions = ["Moderate-intensity statin consideration", "BP control", "Reassess in 5-10 years"]
    else:
        actions = None

    return RiskCandidate(
        id="framingham_10yr_chd",
        title="10-Year Framingham CHD Risk",
        level=level,
        score=ten_year_score(risk_percent),
        value={
            "riskPercent": round1(risk_percent),
            "age": patient.age,
            "sex": sex,
            "note": "Framingham Heart Study 10-year CHD (D'Agostino 2008), 1 - S0^exp(sum(bX) - mean)",
        },
        why=why,
        actions=actions,
    )
