"""
Patient Data Structures

PatientFormData is the raw, string-typed form submission.
NormalizedPatient is the canonical record every risk model consumes:
typed, immutable, and with all lipid values stored in mg/dL.
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional
from enum import Enum


class SexAtBirth(str, Enum):
    """Sex assigned at birth."""
    MALE = "male"
    FEMALE = "female"


class RaceEthnicity(str, Enum):
    """Self-reported race/ethnicity (only BLACK changes model selection)."""
    WHITE = "white"
    BLACK = "black"
    HISPANIC = "hispanic"
    ASIAN = "asian"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class YesNo(str, Enum):
    YES = "yes"
    NO = "no"


class SmokingStatus(str, Enum):
    NEVER = "never"
    FORMER = "former"
    CURRENT = "current"


class FamilyHistory(str, Enum):
    """Family history of premature CVD."""
    YES = "yes"
    NO = "no"
    NOT_SURE = "not_sure"


class ActivityLevel(str, Enum):
    """Exercise sessions per week."""
    LESS_THAN_ONE = "<1"
    ONE_TO_THREE = "1-3"
    FOUR_PLUS = "4plus"


class AlcoholIntake(str, Enum):
    NONE = "none"
    MODERATE = "moderate"
    HEAVY = "heavy"


# Wire (camelCase) name -> attribute name
_FORM_ALIASES = {
    "age": "age",
    "sexAtBirth": "sex_at_birth",
    "raceEthnicity": "race_ethnicity",
    "systolicBp": "systolic_bp",
    "diastolicBp": "diastolic_bp",
    "onBpMeds": "on_bp_meds",
    "hasLabResults": "has_lab_results",
    "cholesterolUnit": "cholesterol_unit",
    "totalCholesterol": "total_cholesterol",
    "hdlCholesterol": "hdl_cholesterol",
    "ldlCholesterol": "ldl_cholesterol",
    "triglycerides": "triglycerides",
    "hasDiabetes": "has_diabetes",
    "glucoseOrA1c": "glucose_or_a1c",
    "smokingStatus": "smoking_status",
    "heightCm": "height_cm",
    "weightKg": "weight_kg",
    "bmi": "bmi",
    "familyHistoryPrematureCvd": "family_history_premature_cvd",
    "physicalActivity": "physical_activity",
    "alcoholIntake": "alcohol_intake",
}


@dataclass
class PatientFormData:
    """
    Raw patient submission, as collected by the assessment form.

    All scalar fields are strings (possibly empty) except has_lab_results
    and the optional client-computed bmi. Never mutated by the engine.
    """
    # Demographics
    age: str = ""
    sex_at_birth: str = ""
    race_ethnicity: str = ""

    # Vital signs
    systolic_bp: str = ""
    diastolic_bp: str = ""
    on_bp_meds: str = ""

    # Lipids
    has_lab_results: bool = True
    cholesterol_unit: str = "mgdL"
    total_cholesterol: str = ""
    hdl_cholesterol: str = ""
    ldl_cholesterol: str = ""
    triglycerides: str = ""

    # Metabolic
    has_diabetes: str = ""
    glucose_or_a1c: str = ""

    # Smoking
    smoking_status: str = ""

    # Body composition
    height_cm: str = ""
    weight_kg: str = ""
    bmi: Optional[float] = None

    # Family history / lifestyle
    family_history_premature_cvd: str = ""
    physical_activity: str = ""
    alcohol_intake: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PatientFormData":
        """Build from a camelCase (wire) or snake_case mapping; unknown keys are ignored."""
        attr_names = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            attr = _FORM_ALIASES.get(key, key)
            if attr not in attr_names or value is None and attr != "bmi":
                continue
            if attr == "has_lab_results":
                kwargs[attr] = value is True
            elif attr == "bmi":
                kwargs[attr] = value
            else:
                kwargs[attr] = value if isinstance(value, str) else str(value)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with wire (camelCase) keys."""
        return {wire: getattr(self, attr) for wire, attr in _FORM_ALIASES.items()}


@dataclass(frozen=True)
class NormalizedPatient:
    """
    Canonical patient record.

    Invariant: every numeric clinical value is in its canonical unit
    (lipids in mg/dL, BP in mmHg, height in cm, weight in kg).
    """
    age: int
    sex_at_birth: SexAtBirth
    systolic_bp: int
    on_bp_meds: YesNo
    has_diabetes: YesNo
    smoking_status: SmokingStatus
    has_lab_results: bool = False
    race_ethnicity: Optional[RaceEthnicity] = None
    diastolic_bp: Optional[int] = None
    total_cholesterol: Optional[float] = None
    hdl_cholesterol: Optional[float] = None
    ldl_cholesterol: Optional[float] = None
    triglycerides: Optional[float] = None
    glucose_or_a1c: Optional[str] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    bmi: Optional[float] = None
    family_history_premature_cvd: Optional[FamilyHistory] = None
    physical_activity: Optional[ActivityLevel] = None
    alcohol_intake: Optional[AlcoholIntake] = None

    @property
    def is_on_bp_meds(self) -> bool:
        return self.on_bp_meds == YesNo.YES

    @property
    def is_diabetic(self) -> bool:
        return self.has_diabetes == YesNo.YES

    @property
    def is_current_smoker(self) -> bool:
        return self.smoking_status == SmokingStatus.CURRENT

    @property
    def has_family_history(self) -> bool:
        return self.family_history_premature_cvd == FamilyHistory.YES

    @property
    def has_lipid_panel(self) -> bool:
        """Lab results flagged and both total and HDL cholesterol present."""
        return (
            self.has_lab_results
            and self.total_cholesterol is not None
            and self.hdl_cholesterol is not None
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a camelCase dictionary (enums as their string values)."""
        result: Dict[str, Any] = {}
        for wire, attr in _FORM_ALIASES.items():
            if attr == "cholesterol_unit":
                continue
            value = getattr(self, attr)
            result[wire] = value.value if isinstance(value, Enum) else value
        return result
