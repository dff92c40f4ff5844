"""
Clinical Warning Detection Module

Scans a normalized patient for red flags, independent of risk scoring.
Checks run in a fixed order (age, blood pressure, body composition, lipids)
and the output preserves that order.
"""
from dataclasses import dataclass
from typing import Any, Dict, List
from enum import Enum

from cardiorisk.core.patient import NormalizedPatient
from cardiorisk.utils import get_logger

logger = get_logger(__name__)


class WarningSeverity(str, Enum):
    """Severity of a clinical warning."""
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class WarningCategory(str, Enum):
    """Clinical area a warning belongs to."""
    AGE = "age"
    BLOOD_PRESSURE = "blood_pressure"
    BODY_COMPOSITION = "body_composition"
    LIPIDS = "lipids"


@dataclass(frozen=True)
class ClinicalWarning:
    """A single clinical red flag."""
    severity: WarningSeverity
    message: str
    category: WarningCategory

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity.value,
            "message": self.message,
            "category": self.category.value,
        }


class WarningDetector:
    """
    Detects clinical warnings from a normalized patient.

    Thresholds are in canonical units (mmHg, kg/m2, mg/dL); each rule is
    evaluated independently, so several may fire for the same patient.
    """

    def detect_warnings(self, patient: NormalizedPatient) -> List[ClinicalWarning]:
        """
        Detect all clinical warnings for a patient.

        Args:
            patient: Normalized patient record

        Returns:
            Warnings in check order; empty when nothing triggers
        """
        warnings: List[ClinicalWarning] = []
        warnings.extend(self._check_age(patient))
        warnings.extend(self._check_blood_pressure(patient))
        warnings.extend(self._check_body_composition(patient))
        warnings.extend(self._check_lipids(patient))

        if warnings:
            logger.debug(f"Detected {len(warnings)} clinical warning(s): {[w.category.value for w in warnings]}")
        return warnings

    def get_critical_warnings(self, patient: NormalizedPatient) -> List[ClinicalWarning]:
        """Only the critical warnings for a patient."""
        return [w for w in self.detect_warnings(patient) if w.severity == WarningSeverity.CRITICAL]

    def _check_age(self, patient: NormalizedPatient) -> List[ClinicalWarning]:
        if patient.age < 20:
            return [ClinicalWarning(
                WarningSeverity.WARNING,
                "Age is below validated range (20-79). ASCVD equations are not validated for this age.",
                WarningCategory.AGE,
            )]
        if patient.age >= 75:
            return [ClinicalWarning(
                WarningSeverity.INFO,
                "Age exceeds validated range (20-79). Results may be less reliable.",
                WarningCategory.AGE,
            )]
        return []

    def _check_blood_pressure(self, patient: NormalizedPatient) -> List[ClinicalWarning]:
        warnings = []
        sbp = patient.systolic_bp
        dbp = patient.diastolic_bp

        if sbp < 90:
            warnings.append(ClinicalWarning(
                WarningSeverity.CRITICAL,
                f"Systolic BP of {sbp} mmHg is very low (<90 mmHg). Please verify measurement accuracy.",
                WarningCategory.BLOOD_PRESSURE,
            ))
            if patient.is_on_bp_meds:
                warnings.append(ClinicalWarning(
                    WarningSeverity.CRITICAL,
                    "Possible data entry error: Low BP with BP medications marked 'yes'. "
                    "Please re-check measurements.",
                    WarningCategory.BLOOD_PRESSURE,
                ))
            if sbp < 70:
                warnings.append(ClinicalWarning(
                    WarningSeverity.CRITICAL,
                    f"Systolic BP of {sbp} mmHg is extremely low (<70 mmHg). "
                    "Seek urgent evaluation if this reading is accurate.",
                    WarningCategory.BLOOD_PRESSURE,
                ))

        if sbp > 180:
            warnings.append(ClinicalWarning(
                WarningSeverity.CRITICAL,
                f"Systolic BP of {sbp} mmHg is very high (>180 mmHg). Consider immediate medical evaluation.",
                WarningCategory.BLOOD_PRESSURE,
            ))

        if dbp and dbp > 120:
            warnings.append(ClinicalWarning(
                WarningSeverity.CRITICAL,
                f"Diastolic BP of {dbp} mmHg is very high (>120 mmHg). Consider immediate medical evaluation.",
                WarningCategory.BLOOD_PRESSURE,
            ))

        return warnings

    def _check_body_composition(self, patient: NormalizedPatient) -> List[ClinicalWarning]:
        bmi = patient.bmi
        if not bmi:
            return []
        if bmi > 40:
            return [ClinicalWarning(
                WarningSeverity.CRITICAL,
                "BMI >40 indicates severe obesity (Class III), a major cardiometabolic risk factor "
                "requiring immediate attention.",
                WarningCategory.BODY_COMPOSITION,
            )]
        if bmi > 35:
            return [ClinicalWarning(
                WarningSeverity.WARNING,
                "BMI ≥35 indicates severe obesity, a major cardiometabolic risk factor.",
                WarningCategory.BODY_COMPOSITION,
            )]
        return []

    def _check_lipids(self, patient: NormalizedPatient) -> List[ClinicalWarning]:
        if not patient.has_lab_results:
            return []

        warnings = []
        total = patient.total_cholesterol
        hdl = patient.hdl_cholesterol

        if total and total > 240:
            warnings.append(ClinicalWarning(
                WarningSeverity.WARNING,
                f"Total cholesterol of {total:g} mg/dL is elevated. This increases cardiovascular risk.",
                WarningCategory.LIPIDS,
            ))

        if hdl and hdl < 40:
            warnings.append(ClinicalWarning(
                WarningSeverity.WARNING,
                f"HDL cholesterol of {hdl:g} mg/dL is low, which increases risk. "
                "Aim for ≥40 mg/dL (men) or ≥50 mg/dL (women).",
                WarningCategory.LIPIDS,
            ))

        return warnings
