"""
BMI-based cardiometabolic risk. Emits nothing below BMI 30.
"""
from typing import Optional

from cardiorisk.core.inference.types import RiskCandidate, RiskLevel
from cardiorisk.core.patient import NormalizedPatient


def calculate_obesity_risk(patient: NormalizedPatient) -> Optional[RiskCandidate]:
    bmi = patient.bmi
    if bmi is None:
        return None

    if bmi >= 35:
        return RiskCandidate(
            id="severe_obesity",
            title="Severe Obesity / Cardiometabolic Risk",
            level=RiskLevel.HIGH,
            score=0.75,
            value={"bmi": bmi},
            why=[f"BMI {bmi:g} (≥35 - severe obesity)"],
            actions=[
                "Weight management plan with healthcare provider",
                "Nutrition counseling",
                "Physical activity program",
                "Consider bariatric evaluation if BMI ≥40",
                "Metabolic screening",
            ],
        )

    if bmi >= 30:
        return RiskCandidate(
            id="obesity",
            title="Obesity Risk",
            level=RiskLevel.INTERMEDIATE,
            score=0.5,
            value={"bmi": bmi},
            why=[f"BMI {bmi:g} (obese)"],
            actions=[
                "Weight management",
                "Calorie reduction",
                "Regular physical activity",
                "Metabolic monitoring",
            ],
        )

    return None
