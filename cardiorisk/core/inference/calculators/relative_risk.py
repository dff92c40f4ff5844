"""
Relative / lifetime risk indicator for patients under 40.

Stands in for the 10-year equations, which are not validated at these ages,
by summarizing the major modifiable risk factors.
"""
from cardiorisk.core.inference.types import RiskCandidate, RiskLevel
from cardiorisk.core.patient import NormalizedPatient

RELATIVE_RISK_WARNING = (
    "10-year ASCVD risk equations are not validated for ages <40. Showing risk factor "
    "summary and lifetime/relative risk indicators instead."
)
MAX_RELATIVE_RISK_SCORE = 0.8


def calculate_relative_risk(patient: NormalizedPatient) -> RiskCandidate:
    risk_factors = []
    score = 0.2

    if patient.is_diabetic:
        risk_factors.append("Diabetes")
        score += 0.3
    if patient.is_current_smoker:
        risk_factors.append("Current smoker")
        score += 0.25
    if patient.systolic_bp >= 140:
        risk_factors.append(f"Elevated BP ({patient.systolic_bp} mmHg)")
        score += 0.2
    if patient.bmi is not None and patient.bmi >= 30:
        risk_factors.append(f"Obesity (BMI {patient.bmi:g})")
        score += 0.15
    if patient.has_family_history:
        risk_factors.append("Family history of premature CVD")
        score += 0.1

    score = round(score, 4)
    if score >= 0.6:
        level = RiskLevel.HIGH
    elif score >= 0.4:
        level = RiskLevel.INTERMEDIATE
    else:
        level = RiskLevel.LOW

    return RiskCandidate(
        id="relative_risk",
        title="Cardiovascular Risk Factors Summary",
        level=level,
        score=min(score, MAX_RELATIVE_RISK_SCORE),
        value={"age": patient.age, "note": "Lifetime/relative risk indicator (proxy)"},
        why=risk_factors or ["No major risk factors identified"],
        warnings=[RELATIVE_RISK_WARNING],
        actions=[
            "Focus on modifiable risk factors",
            "Regular health screenings",
            "Lifestyle modifications",
            "Consider 10-year ASCVD risk assessment at age 40+",
        ] if level != RiskLevel.LOW else None,
    )
