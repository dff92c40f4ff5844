"""
Diabetes as a cardiovascular risk factor, or type 2 diabetes risk when absent.
"""
from cardiorisk.core.inference.types import RiskCandidate, RiskLevel
from cardiorisk.core.patient import ActivityLevel, NormalizedPatient

MAX_DIABETES_RISK_SCORE = 0.7


def calculate_diabetes_risk(patient: NormalizedPatient) -> RiskCandidate:
    if patient.is_diabetic:
        return RiskCandidate(
            id="diabetes",
            title="Diabetes as Cardiovascular Risk Factor",
            level=RiskLevel.HIGH,
            score=0.8,
            why=["Diabetes = Yes"],
            actions=[
                "Diabetes is a major CV risk factor",
                "A1c monitoring and glycemic control",
                "Regular cardiovascular screening",
                "Lifestyle + medication adherence",
                "Annual lipid panel and kidney function tests",
            ],
        )

    score = 0.2
    risk_factors = []
    bmi = patient.bmi

    if bmi and bmi >= 30:
        score += 0.2
        risk_factors.append(f"BMI {bmi:g} (obese)")
    elif bmi and bmi >= 25:
        score += 0.1
        risk_factors.append(f"BMI {bmi:g} (overweight)")
    if patient.age >= 45:
        score += 0.15
        risk_factors.append("Age ≥45")
    if patient.has_family_history:
        score += 0.1
        risk_factors.append("Family history of CVD")
    if patient.physical_activity == ActivityLevel.LESS_THAN_ONE:
        score += 0.1
        risk_factors.append("Low physical activity")

    # Rounded so accumulated float error cannot move a threshold
    score = round(score, 4)
    if score >= 0.5:
        level = RiskLevel.INTERMEDIATE
    elif score >= 0.3:
        level = RiskLevel.BORDERLINE
    else:
        level = RiskLevel.LOW

    return RiskCandidate(
        id="diabetes_risk",
        title="Type 2 Diabetes Risk",
        level=level,
        score=min(score, MAX_DIABETES_RISK_SCORE),
        why=risk_factors or ["No major risk factors identified"],
        actions=[
            "Regular glucose screening",
            "Weight management if overweight",
            "Increase physical activity",
            "Healthy diet (Mediterranean or DASH)",
        ] if level != RiskLevel.LOW else None,
    )
