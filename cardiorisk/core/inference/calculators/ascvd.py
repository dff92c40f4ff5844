"""
ASCVD 10-year risk: Pooled Cohort Equations (2013 ACC/AHA).

Applicable for ages 40-79 with a lipid panel (total and HDL cholesterol in mg/dL).
"""
from typing import Optional
import numpy as np

from cardiorisk.core.inference.calculators.base import (
    MIN_CHOLESTEROL, MIN_SBP, clamp_percent, round1, survival_risk, ten_year_score,
)
from cardiorisk.core.inference.coefficients import PCE_COEFFICIENTS, PceCoefficients, PceGroup
from cardiorisk.core.inference.types import RiskCandidate, RiskLevel
from cardiorisk.core.patient import NormalizedPatient, RaceEthnicity, SexAtBirth

ASCVD_MIN_AGE = 40
ASCVD_MAX_AGE = 79
ASCVD_INTERMEDIATE_PERCENT = 7.5


def get_pce_group(sex: SexAtBirth, race: Optional[RaceEthnicity]) -> PceGroup:
    """Coefficient group; every race other than black uses the white equations."""
    is_black = race == RaceEthnicity.BLACK
    if sex == SexAtBirth.MALE:
        return PceGroup.BLACK_MALE if is_black else PceGroup.WHITE_MALE
    return PceGroup.BLACK_FEMALE if is_black else PceGroup.WHITE_FEMALE


def pce_linear_predictor(
    c: PceCoefficients,
    age: float,
    total_chol: float,
    hdl_chol: float,
    sbp: float,
    on_meds: bool,
    smoker: bool,
    diabetes: bool
) -> float:
    """Sum of weighted, log-transformed risk factors for one PCE group."""
    ln_age = np.log(age)
    ln_tc = np.log(total_chol)
    ln_hdl = np.log(hdl_chol)
    ln_sbp = np.log(sbp)

    lp = (
        c.ln_age * ln_age
        + c.ln_age_sq * ln_age * ln_age
        + c.ln_tc * ln_tc
        + c.ln_age_ln_tc * ln_age * ln_tc
        + c.ln_hdl * ln_hdl
        + c.ln_age_ln_hdl * ln_age * ln_hdl
        + (c.ln_sbp_treated if on_meds else c.ln_sbp_untreated) * ln_sbp
        + (c.smoker if smoker else 0.0)
        + (c.diabetes if diabetes else 0.0)
    )

    if c.has_age_sbp_interaction:
        interaction = c.ln_age_ln_sbp_treated if on_meds else c.ln_age_ln_sbp_untreated
        lp += interaction * ln_age * ln_sbp

    return float(lp)


def calculate_ascvd_risk(patient: NormalizedPatient) -> Optional[RiskCandidate]:
    if patient.age < ASCVD_MIN_AGE or patient.age > ASCVD_MAX_AGE:
        return None
    if not patient.has_lipid_panel:
        return None

    age = patient.age
    total_chol = max(patient.total_cholesterol, MIN_CHOLESTEROL)
    hdl_chol = max(patient.hdl_cholesterol, MIN_CHOLESTEROL)
    sbp = max(patient.systolic_bp, MIN_SBP)
    diabetes = patient.is_diabetic
    smoker = patient.is_current_smoker

    group = get_pce_group(patient.sex_at_birth, patient.race_ethnicity)
    c = PCE_COEFFICIENTS[group]

    lp = pce_linear_predictor(
        c, age, total_chol, hdl_chol, sbp, patient.is_on_bp_meds, smoker, diabetes
    )
    risk_percent = clamp_percent(survival_risk(c.baseline_survival, lp - c.mean_linear_predictor))
    level = RiskLevel.from_percent(risk_percent, ASCVD_INTERMEDIATE_PERCENT)

    why = []
    if diabetes:
        why.append("Diabetes present")
    if smoker:
        why.append("Current smoker")
    if sbp >= 140:
        why.append(f"Elevated BP ({sbp} mmHg)")
    chol_ratio = total_chol / hdl_chol
    if chol_ratio > 4:
        why.append(f"Unfavorable cholesterol ratio ({chol_ratio:.1f})")
    if age >= 65:
        why.append("Age ≥65")

    if level == RiskLevel.HIGH:
        actions = [
            "High-intensity statin therapy (if appropriate)",
            "BP management to <130/80",
            "Lifestyle modifications",
            "Regular monitoring",
        ]
    elif level == RiskLevel.INTERMEDIATE:
        actions = [
            "Moderate-intensity statin consideration",
            "BP control",
            "Lifestyle modifications",
            "Reassess in 5-10 years",
        ]
    else:
        actions = None

    return RiskCandidate(
        id="ascvd_10yr",
        title="10-Year ASCVD Risk",
        level=level,
        score=ten_year_score(risk_percent),
        value={
            "riskPercent": round1(risk_percent),
            "age": age,
            "sex": patient.sex_at_birth.value,
            "raceEthnicity": patient.race_ethnicity.value if patient.race_ethnicity else None,
            "group": group.value,
            "validated": True,
            "note": "Pooled Cohort Equations (ACC/AHA 2013), formula 1 - S10^exp(sum(bX) - mean)",
        },
        why=why,
        actions=actions,
    )
