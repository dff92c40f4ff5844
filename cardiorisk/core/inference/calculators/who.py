"""
WHO CVD 10-year risk: lab-based and non-lab models, region calibrated.

Lab model: age, SBP, total cholesterol (mmol/L), smoking, diabetes.
Non-lab model: age, SBP, BMI (25 when unknown), smoking.
The lab model is preferred whenever a usable cholesterol value exists.
"""
from typing import Optional, Tuple, Union
import numpy as np

from cardiorisk.core.inference.calculators.base import (
    MIN_SBP, round1, survival_risk, ten_year_score,
)
from cardiorisk.core.inference.coefficients import (
    DEFAULT_WHO_REGION, WHO_AGE_CENTER, WHO_AGE_SCALE, WHO_BASELINE_SURVIVAL, WHO_BMI_CENTER,
    WHO_LAB_MODELS, WHO_NON_LAB_MODELS, WHO_REGION_CALIBRATION, WHO_SBP_CENTER, WHO_SBP_SCALE,
    WHO_TC_CENTER_MMOLL, WhoModel, WhoRegion,
)
from cardiorisk.core.inference.types import RiskCandidate, RiskLevel
from cardiorisk.core.patient import NormalizedPatient
from cardiorisk.core.units import mgdl_to_mmoll

WHO_MIN_AGE = 40
WHO_MAX_AGE = 80
WHO_INTERMEDIATE_PERCENT = 10.0
WHO_LAB_TC_RANGE_MMOLL = (2.6, 10.3)
MAX_CALIBRATED_RISK = 0.99


def _linear_predictors(
    model: WhoModel,
    age: float,
    sbp: float,
    smoker: bool,
    diabetes: bool = False,
    tc_mmoll: Optional[float] = None,
    bmi: Optional[float] = None
) -> Tuple[float, float]:
    """(CHD, stroke) linear predictors around the chart centering profile."""
    age_c = (age - WHO_AGE_CENTER) / WHO_AGE_SCALE
    sbp_c = (sbp - WHO_SBP_CENTER) / WHO_SBP_SCALE
    tc_c = tc_mmoll - WHO_TC_CENTER_MMOLL if tc_mmoll is not None else 0.0
    bmi_c = bmi - WHO_BMI_CENTER if bmi is not None else 0.0
    smoke = 1.0 if smoker else 0.0
    diab = 1.0 if diabetes else 0.0

    def lp(coef) -> float:
        return (
            coef.age * age_c
            + coef.smoker * smoke
            + coef.sbp * sbp_c
            + coef.diabetes * diab
            + coef.cholesterol * tc_c
            + coef.bmi * bmi_c
        )

    return lp(model.chd), lp(model.stroke)


def calculate_who_cvd_risk(
    patient: NormalizedPatient,
    region: Union[WhoRegion, str] = DEFAULT_WHO_REGION
) -> Optional[RiskCandidate]:
    """
    WHO 10-year CVD risk.

    Args:
        patient: Normalized patient
        region: Calibration region (enum or its string value)

    Raises:
        ValueError: unknown region name
    """
    region = WhoRegion(region)
    if patient.age < WHO_MIN_AGE or patient.age > WHO_MAX_AGE:
        return None

    age = patient.age
    sex = patient.sex_at_birth.value
    sbp = max(patient.systolic_bp, MIN_SBP)
    smoker = patient.is_current_smoker
    diabetes = patient.is_diabetic
    tc_mmoll = mgdl_to_mmoll(patient.total_cholesterol) if patient.total_cholesterol is not None else None
    use_lab = (
        patient.has_lab_results
        and tc_mmoll is not None
        and WHO_LAB_TC_RANGE_MMOLL[0] <= tc_mmoll <= WHO_LAB_TC_RANGE_MMOLL[1]
    )

    if use_lab:
        lp_chd, lp_stroke = _linear_predictors(
            WHO_LAB_MODELS[sex], age, sbp, smoker, diabetes=diabetes, tc_mmoll=tc_mmoll
        )
    else:
        bmi = patient.bmi if patient.bmi is not None else WHO_BMI_CENTER
        lp_chd, lp_stroke = _linear_predictors(WHO_NON_LAB_MODELS[sex], age, sbp, smoker, bmi=bmi)

    baseline = WHO_BASELINE_SURVIVAL[sex]
    risk_chd = survival_risk(baseline["chd"], lp_chd)
    risk_stroke = survival_risk(baseline["stroke"], lp_stroke)
    risk10 = 1 - (1 - risk_chd) * (1 - risk_stroke)

    calibrated = float(np.clip(risk10 * WHO_REGION_CALIBRATION[region], 0.0, MAX_CALIBRATED_RISK))
    risk_percent = calibrated * 100
    level = RiskLevel.from_percent(risk_percent, WHO_INTERMEDIATE_PERCENT)

    why = []
    if diabetes:
        why.append("Diabetes present")
    if smoker:
        why.append("Current smoker")
    if sbp >= 140:
        why.append(f"Elevated BP ({sbp} mmHg)")
    if use_lab and tc_mmoll > 5:
        why.append("Elevated total cholesterol")
    if age >= 60:
        why.append("Age ≥60")

    if level == RiskLevel.HIGH:
        actions = [
            "Lifestyle and pharmacological intervention per WHO guidance",
            "BP and lipid management",
            "Regular monitoring",
        ]
    elif level == RiskLevel.INTERMEDIATE:
        actions = ["Lifestyle modifications", "Consider BP/lipid targets", "Reassess in 5-10 years"]
    else:
        actions = None

    return RiskCandidate(
        id="who_cvd_10yr",
        title="10-Year WHO CVD Risk",
        level=level,
        score=ten_year_score(risk_percent),
        value={
            "riskPercent": round1(risk_percent),
            "age": age,
            "sex": sex,
            "model": "lab" if use_lab else "non_lab",
            "region": region.value,
            "note": "WHO CVD risk charts (21 regions), lab and non-lab models",
        },
        why=why,
        actions=actions,
    )
