"""
Validation Module

Input validation before normalization and clinical red-flag detection after it.
"""
from .patient_validator import PatientValidator, ValidationResult, validate_patient_data
from .warning_detection import ClinicalWarning, WarningCategory, WarningDetector, WarningSeverity

__all__ = [
    "PatientValidator",
    "ValidationResult",
    "validate_patient_data",
    "ClinicalWarning",
    "WarningCategory",
    "WarningDetector",
    "WarningSeverity",
]
