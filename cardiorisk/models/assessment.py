"""
Assessment API Models
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class PredictionRequest(BaseModel):
    """
    Patient assessment form submission.

    Values arrive as form strings; numbers are accepted and coerced to strings
    so the validator sees the same shape either way.
    """
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, extra="ignore")

    # Demographics
    age: Optional[str] = None
    sex_at_birth: Optional[str] = Field(default=None, alias="sexAtBirth")
    race_ethnicity: Optional[str] = Field(default=None, alias="raceEthnicity")

    # Vitals
    systolic_bp: Optional[str] = Field(default=None, alias="systolicBp")
    diastolic_bp: Optional[str] = Field(default=None, alias="diastolicBp")
    on_bp_meds: Optional[str] = Field(default=None, alias="onBpMeds")

    # Lipids
    has_lab_results: bool = Field(default=True, alias="hasLabResults")
    cholesterol_unit: str = Field(default="mgdL", alias="cholesterolUnit", description="'mgdL' or 'mmolL'")
    total_cholesterol: Optional[str] = Field(default=None, alias="totalCholesterol")
    hdl_cholesterol: Optional[str] = Field(default=None, alias="hdlCholesterol")
    ldl_cholesterol: Optional[str] = Field(default=None, alias="ldlCholesterol")
    triglycerides: Optional[str] = None

    # Metabolic
    has_diabetes: Optional[str] = Field(default=None, alias="hasDiabetes")
    glucose_or_a1c: Optional[str] = Field(default=None, alias="glucoseOrA1c")

    # Smoking
    smoking_status: Optional[str] = Field(default=None, alias="smokingStatus")

    # Body composition
    height_cm: Optional[str] = Field(default=None, alias="heightCm")
    weight_kg: Optional[str] = Field(default=None, alias="weightKg")
    bmi: Optional[float] = None

    # Family history / lifestyle
    family_history_premature_cvd: Optional[str] = Field(default=None, alias="familyHistoryPrematureCvd")
    physical_activity: Optional[str] = Field(default=None, alias="physicalActivity")
    alcohol_intake: Optional[str] = Field(default=None, alias="alcoholIntake")


class RiskCandidateResponse(BaseModel):
    """One ranked risk model result."""
    id: str
    title: str
    level: str
    score: float
    value: Dict[str, Any] = {}
    why: List[str] = []
    warnings: Optional[List[str]] = None
    actions: Optional[List[str]] = None


class PredictionResponse(BaseModel):
    """Top risks, all risks, validation errors and merged warnings."""
    model_config = ConfigDict(populate_by_name=True)

    top3: List[RiskCandidateResponse]
    all_risks: List[RiskCandidateResponse] = Field(alias="allRisks")
    errors: List[str] = []
    warnings: List[str] = []


class PredictionEnvelope(BaseModel):
    success: bool = True
    data: PredictionResponse


class ErrorDetail(BaseModel):
    code: str
    message: str
    field: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error body shared by all failure responses."""
    success: bool = False
    error: ErrorDetail


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    timestamp: str
    components: Dict[str, str]
