"""
Patient Input Validation Module

Structural and range validation of a raw form submission.
Every rule is evaluated independently and ALL failures are reported;
a failed validation is an expected outcome, returned as data.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from cardiorisk.core.errors import ValidationError
from cardiorisk.core.patient import PatientFormData
from cardiorisk.core.units import CholesterolUnit, parse_float, parse_int
from cardiorisk.utils import get_logger

logger = get_logger(__name__)


# (attribute, wire field, display name)
REQUIRED_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    ("age", "age", "Age"),
    ("sex_at_birth", "sexAtBirth", "Sex assigned at birth"),
    ("systolic_bp", "systolicBp", "Systolic blood pressure"),
    ("on_bp_meds", "onBpMeds", "BP medication status"),
    ("has_diabetes", "hasDiabetes", "Diabetes status"),
    ("smoking_status", "smokingStatus", "Smoking status"),
)

AGE_RANGE = (20, 79)
SYSTOLIC_RANGE = (50, 300)
DIASTOLIC_RANGE = (30, 200)

# Lipid limits per declared unit: (low, high)
TOTAL_CHOLESTEROL_RANGE = {
    CholesterolUnit.MGDL: (100.0, 400.0),
    CholesterolUnit.MMOLL: (2.6, 10.3),
}
HDL_CHOLESTEROL_RANGE = {
    CholesterolUnit.MGDL: (10.0, 100.0),
    CholesterolUnit.MMOLL: (0.26, 2.6),
}


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


@dataclass
class ValidationResult:
    """Result of patient input validation."""
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> List[str]:
        """Plain error messages, in rule order."""
        return [e.message for e in self.errors]

    def field_errors(self) -> Dict[str, str]:
        """First error message per field."""
        result: Dict[str, str] = {}
        for error in self.errors:
            if error.field is not None and error.field not in result:
                result[error.field] = error.message
        return result

    def to_dict(self) -> Dict[str, object]:
        return {
            "is_valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
        }


class PatientValidator:
    """
    Validates raw patient input before normalization.

    Pure: no state is kept between calls and nothing is raised for a
    well-formed PatientFormData.
    """

    def validate(self, data: PatientFormData) -> ValidationResult:
        """
        Run every validation rule against the submission.

        Args:
            data: Raw form submission

        Returns:
            ValidationResult listing every failed rule
        """
        errors = self.validate_required_fields(data) + self.validate_numeric_ranges(data)
        result = ValidationResult(errors=errors)
        if not result.is_valid:
            logger.debug(f"Validation failed on fields: {[e.field for e in errors]}")
        return result

    def validate_required_fields(self, data: PatientFormData) -> List[ValidationError]:
        """Required and conditionally-required presence checks."""
        errors = []

        for attr, wire, name in REQUIRED_FIELDS:
            if _is_blank(getattr(data, attr)):
                errors.append(ValidationError(f"{name} is required", wire))

        if data.has_lab_results:
            if _is_blank(data.total_cholesterol):
                errors.append(ValidationError(
                    "Total cholesterol is required when lab results are available",
                    "totalCholesterol"
                ))
            if _is_blank(data.hdl_cholesterol):
                errors.append(ValidationError(
                    "HDL cholesterol is required when lab results are available",
                    "hdlCholesterol"
                ))

        return errors

    def validate_numeric_ranges(self, data: PatientFormData) -> List[ValidationError]:
        """Range checks for fields that are present."""
        errors = []

        if not _is_blank(data.age):
            age = parse_int(data.age)
            if age is None or not AGE_RANGE[0] <= age <= AGE_RANGE[1]:
                errors.append(ValidationError("Age must be between 20 and 79 years", "age"))

        if not _is_blank(data.systolic_bp):
            sbp = parse_int(data.systolic_bp)
            if sbp is None or not SYSTOLIC_RANGE[0] <= sbp <= SYSTOLIC_RANGE[1]:
                errors.append(ValidationError(
                    "Systolic BP must be between 50 and 300 mmHg", "systolicBp"
                ))

        if not _is_blank(data.diastolic_bp):
            dbp = parse_int(data.diastolic_bp)
            if dbp is None or not DIASTOLIC_RANGE[0] <= dbp <= DIASTOLIC_RANGE[1]:
                errors.append(ValidationError(
                    "Diastolic BP must be between 30 and 200 mmHg", "diastolicBp"
                ))

        if data.has_lab_results:
            unit = self._declared_unit(data)
            label = "mmol/L" if unit == CholesterolUnit.MMOLL else "mg/dL"

            total = parse_float(data.total_cholesterol)
            if total is not None:
                low, high = TOTAL_CHOLESTEROL_RANGE[unit]
                if not low <= total <= high:
                    errors.append(ValidationError(
                        f"Total cholesterol must be between {low:g} and {high:g} {label}",
                        "totalCholesterol"
                    ))

            hdl = parse_float(data.hdl_cholesterol)
            if hdl is not None:
                low, high = HDL_CHOLESTEROL_RANGE[unit]
                if not low <= hdl <= high:
                    errors.append(ValidationError(
                        f"HDL cholesterol must be between {low:g} and {high:g} {label}",
                        "hdlCholesterol"
                    ))

        return errors

    @staticmethod
    def _declared_unit(data: PatientFormData) -> CholesterolUnit:
        """Declared lipid unit; anything other than mmol/L means mg/dL."""
        if data.cholesterol_unit == CholesterolUnit.MMOLL.value:
            return CholesterolUnit.MMOLL
        return CholesterolUnit.MGDL


_default_validator = PatientValidator()


def validate_patient_data(data: PatientFormData) -> ValidationResult:
    """Validate with the shared stateless validator."""
    return _default_validator.validate(data)
