"""
Blood pressure risk category (ACC/AHA).

Always applicable. Categories are checked in ascending SBP order and the
first match wins; a DBP reading can only pull a reading into a lower
category through the "or" conditions of Stage 1 and Stage 2.
"""
from cardiorisk.core.inference.calculators.base import optional_list
from cardiorisk.core.inference.types import RiskCandidate, RiskLevel
from cardiorisk.core.patient import NormalizedPatient


def calculate_bp_risk(patient: NormalizedPatient) -> RiskCandidate:
    sbp = patient.systolic_bp
    dbp = patient.diastolic_bp or None
    why = []
    warnings = []

    if sbp < 90 or (dbp is not None and dbp < 60):
        category, level, score = "Hypotension", RiskLevel.LOW, 0.15
        why.append(f"SBP {sbp} mmHg (very low)")
        warnings.append("Very low BP may indicate measurement error or underlying condition")
    elif sbp < 120 and (dbp is None or dbp < 80):
        category, level, score = "Normal", RiskLevel.LOW, 0.2
        why.append(f"SBP {sbp} mmHg (normal range)")
    elif sbp < 130 and (dbp is None or dbp < 80):
        category, level, score = "Elevated", RiskLevel.BORDERLINE, 0.35
        why.append(f"SBP {sbp} mmHg (elevated)")
    elif sbp < 140 or (dbp is not None and dbp < 90):
        category, level, score = "Stage 1 Hypertension", RiskLevel.INTERMEDIATE, 0.55
        why.append(f"SBP {sbp} mmHg (Stage 1)")
        if patient.is_on_bp_meds:
            why.append("Currently on BP medication")
    elif sbp < 180 or (dbp is not None and dbp < 120):
        category, level, score = "Stage 2 Hypertension", RiskLevel.HIGH, 0.75
        why.append(f"SBP {sbp} mmHg (Stage 2)")
        if patient.is_on_bp_meds:
            warnings.append("BP remains elevated despite medication - may need adjustment")
    else:
        category, level, score = "Hypertensive Crisis", RiskLevel.CRITICAL, 0.95
        why.append(f"SBP {sbp} mmHg (crisis level)")
        warnings.append("Immediate medical evaluation recommended")

    actions = None
    if level in (RiskLevel.HIGH, RiskLevel.CRITICAL):
        actions = [
            "Regular BP monitoring",
            "Medication adherence review",
            "Lifestyle modifications (DASH diet, exercise)",
            "Consider immediate medical evaluation" if level == RiskLevel.CRITICAL else "Follow-up with clinician",
        ]

    return RiskCandidate(
        id="bp_category",
        title="Blood Pressure Status",
        level=level,
        score=score,
        value={"systolic": sbp, "diastolic": dbp, "category": category},
        why=why,
        warnings=optional_list(warnings),
        actions=actions,
    )
