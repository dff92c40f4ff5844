"""
Patient Normalization Module

Converts a validated raw submission into a NormalizedPatient.
This is the single place where lipid units are canonicalized to mg/dL;
no risk model performs unit conversion.
"""
from enum import Enum
from typing import Optional, Type, TypeVar

from cardiorisk.core.errors import DataNormalizationError
from cardiorisk.core.patient import (
    ActivityLevel, AlcoholIntake, FamilyHistory, NormalizedPatient, PatientFormData,
    RaceEthnicity, SexAtBirth, SmokingStatus, YesNo,
)
from cardiorisk.core.units import (
    CholesterolUnit, has_numeric_prefix, mmoll_to_mgdl, parse_float, parse_int, round_half_up,
)
from cardiorisk.utils import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


def calculate_bmi(height_cm: Optional[float], weight_kg: Optional[float]) -> Optional[float]:
    """
    BMI = weight / height(m)^2, rounded to 1 decimal.

    Missing, zero or negative inputs mean "insufficient data" and return None.
    """
    if not height_cm or not weight_kg or height_cm <= 0 or weight_kg <= 0:
        return None
    height_m = height_cm / 100
    return round_half_up(weight_kg / (height_m * height_m), 1)


class PatientNormalizer:
    """
    Builds the canonical patient record from raw form input.

    Assumes the input already passed PatientValidator. A DataNormalizationError
    here means the two components disagree about the input contract.
    """

    def normalize(self, data: PatientFormData) -> NormalizedPatient:
        """
        Normalize patient data from form input to the internal format.

        Raises:
            DataNormalizationError: a guaranteed field could not be parsed
        """
        try:
            return self._normalize(data)
        except DataNormalizationError:
            raise
        except Exception as e:
            raise DataNormalizationError(f"Failed to normalize patient data: {e}") from e

    def _normalize(self, data: PatientFormData) -> NormalizedPatient:
        age = parse_int(data.age)
        if age is None:
            raise DataNormalizationError("Age must be a valid number", "age")

        systolic_bp = parse_int(data.systolic_bp)
        if systolic_bp is None:
            raise DataNormalizationError("Systolic BP must be a valid number", "systolicBp")

        diastolic_bp = None
        if data.diastolic_bp and data.diastolic_bp.strip():
            diastolic_bp = parse_int(data.diastolic_bp)
            if diastolic_bp is None:
                raise DataNormalizationError("Diastolic BP must be a valid number", "diastolicBp")

        unit = CholesterolUnit.MMOLL if data.cholesterol_unit == CholesterolUnit.MMOLL.value else CholesterolUnit.MGDL

        height_cm = self._parse_number(data.height_cm, "heightCm")
        weight_kg = self._parse_number(data.weight_kg, "weightKg")
        bmi = data.bmi if data.bmi else calculate_bmi(height_cm, weight_kg)

        patient = NormalizedPatient(
            age=age,
            sex_at_birth=self._parse_enum(SexAtBirth, data.sex_at_birth, "sexAtBirth", required=True),
            race_ethnicity=self._parse_enum(RaceEthnicity, data.race_ethnicity, "raceEthnicity"),
            systolic_bp=systolic_bp,
            diastolic_bp=diastolic_bp,
            on_bp_meds=self._parse_enum(YesNo, data.on_bp_meds, "onBpMeds", required=True),
            has_lab_results=data.has_lab_results is True,
            total_cholesterol=self._normalize_cholesterol(data.total_cholesterol, unit),
            hdl_cholesterol=self._normalize_cholesterol(data.hdl_cholesterol, unit),
            ldl_cholesterol=self._normalize_cholesterol(data.ldl_cholesterol, unit),
            triglycerides=self._normalize_cholesterol(data.triglycerides, unit),
            has_diabetes=self._parse_enum(YesNo, data.has_diabetes, "hasDiabetes", required=True),
            glucose_or_a1c=data.glucose_or_a1c or None,
            smoking_status=self._parse_enum(SmokingStatus, data.smoking_status, "smokingStatus", required=True),
            height_cm=height_cm,
            weight_kg=weight_kg,
            bmi=float(bmi) if bmi is not None else None,
            family_history_premature_cvd=self._parse_enum(
                FamilyHistory, data.family_history_premature_cvd, "familyHistoryPrematureCvd"
            ),
            physical_activity=self._parse_enum(ActivityLevel, data.physical_activity, "physicalActivity"),
            alcohol_intake=self._parse_enum(AlcoholIntake, data.alcohol_intake, "alcoholIntake"),
        )

        logger.debug(f"Normalized patient: age={patient.age}, sex={patient.sex_at_birth.value}")
        return patient

    @staticmethod
    def _normalize_cholesterol(value: Optional[str], unit: CholesterolUnit) -> Optional[float]:
        """Lipid value in mg/dL (whole number), or None when absent/unparseable."""
        if not value or not value.strip():
            return None
        numeric = parse_float(value)
        if numeric is None:
            return None
        if unit == CholesterolUnit.MMOLL:
            return mmoll_to_mgdl(numeric)
        return round_half_up(numeric, 0)

    @staticmethod
    def _parse_number(value: Optional[str], field_name: str) -> Optional[float]:
        if not value or not value.strip():
            return None
        parsed = parse_float(value)
        if parsed is None and not has_numeric_prefix(value):
            raise DataNormalizationError(f"Invalid numeric value for {field_name}", field_name)
        # Overflowing input ("1e999") counts as absent
        return parsed

    @staticmethod
    def _parse_enum(
        enum_cls: Type[E],
        value: Optional[str],
        field_name: str,
        required: bool = False
    ) -> Optional[E]:
        if not value or not value.strip():
            if required:
                raise DataNormalizationError(f"Missing value for {field_name}", field_name)
            return None
        try:
            return enum_cls(value.strip())
        except ValueError:
            raise DataNormalizationError(
                f"Invalid value for {field_name}: {value!r}", field_name
            ) from None
