"""
Shared fixtures for the CardioRisk test suite.
"""
import pytest
from typing import Any, Callable, Dict

from cardiorisk.core.patient import (
    NormalizedPatient, PatientFormData, RaceEthnicity, SexAtBirth, SmokingStatus, YesNo,
)


def _base_patient_kwargs() -> Dict[str, Any]:
    return dict(
        age=55,
        sex_at_birth=SexAtBirth.MALE,
        race_ethnicity=RaceEthnicity.WHITE,
        systolic_bp=118,
        diastolic_bp=None,
        on_bp_meds=YesNo.NO,
        has_diabetes=YesNo.NO,
        smoking_status=SmokingStatus.NEVER,
        has_lab_results=True,
        total_cholesterol=180.0,
        hdl_cholesterol=55.0,
        bmi=24.0,
    )


@pytest.fixture
def make_patient() -> Callable[..., NormalizedPatient]:
    """Factory for NormalizedPatient with healthy defaults; keyword overrides."""
    def _make(**overrides: Any) -> NormalizedPatient:
        kwargs = _base_patient_kwargs()
        kwargs.update(overrides)
        return NormalizedPatient(**kwargs)
    return _make


@pytest.fixture
def smoker_55m(make_patient) -> NormalizedPatient:
    """55-year-old white male smoker, SBP 150 untreated, TC 240 / HDL 45 mg/dL."""
    return make_patient(
        systolic_bp=150,
        total_cholesterol=240.0,
        hdl_cholesterol=45.0,
        smoking_status=SmokingStatus.CURRENT,
        bmi=None,
    )


@pytest.fixture
def valid_form_dict() -> Dict[str, Any]:
    """Wire-format (camelCase) submission matching smoker_55m."""
    return {
        "age": "55",
        "sexAtBirth": "male",
        "raceEthnicity": "white",
        "systolicBp": "150",
        "diastolicBp": "",
        "onBpMeds": "no",
        "hasLabResults": True,
        "cholesterolUnit": "mgdL",
        "totalCholesterol": "240",
        "hdlCholesterol": "45",
        "hasDiabetes": "no",
        "smokingStatus": "current",
    }


@pytest.fixture
def valid_form(valid_form_dict) -> PatientFormData:
    return PatientFormData.from_dict(valid_form_dict)
