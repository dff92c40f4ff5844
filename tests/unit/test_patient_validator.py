"""
Unit Tests for Patient Input Validation

Every failing rule must be reported, not just the first one.
"""
import pytest

from cardiorisk.core.errors import ValidationError
from cardiorisk.core.patient import PatientFormData
from cardiorisk.core.validation import PatientValidator, ValidationResult, validate_patient_data


@pytest.fixture
def validator() -> PatientValidator:
    return PatientValidator()


def _form(valid_form_dict, **overrides) -> PatientFormData:
    data = dict(valid_form_dict)
    data.update(overrides)
    return PatientFormData.from_dict(data)


class TestRequiredFields:
    """Tests for presence checks."""

    def test_valid_form_passes(self, validator, valid_form):
        result = validator.validate(valid_form)
        assert result.is_valid
        assert result.errors == []

    def test_missing_age_only(self, validator, valid_form_dict):
        result = validator.validate(_form(valid_form_dict, age=""))
        assert not result.is_valid
        assert result.messages == ["Age is required"]
        assert result.errors[0].field == "age"

    def test_all_missing_reports_everything(self, validator):
        """Empty form: six required fields plus two lab-conditional fields."""
        result = validator.validate(PatientFormData())
        assert len(result.errors) == 8
        assert result.messages[:6] == [
            "Age is required",
            "Sex assigned at birth is required",
            "Systolic blood pressure is required",
            "BP medication status is required",
            "Diabetes status is required",
            "Smoking status is required",
        ]
        assert "Total cholesterol is required when lab results are available" in result.messages
        assert "HDL cholesterol is required when lab results are available" in result.messages

    def test_lipids_optional_without_labs(self, validator, valid_form_dict):
        form = _form(valid_form_dict, hasLabResults=False, totalCholesterol="", hdlCholesterol="")
        assert validator.validate(form).is_valid

    def test_whitespace_counts_as_missing(self, validator, valid_form_dict):
        result = validator.validate(_form(valid_form_dict, smokingStatus="   "))
        assert result.messages == ["Smoking status is required"]


class TestRanges:
    """Tests for numeric range checks."""

    @pytest.mark.parametrize("age", ["19", "80", "abc"])
    def test_age_out_of_range(self, validator, valid_form_dict, age):
        result = validator.validate(_form(valid_form_dict, age=age))
        assert result.messages == ["Age must be between 20 and 79 years"]

    @pytest.mark.parametrize("age", ["20", "79"])
    def test_age_bounds_inclusive(self, validator, valid_form_dict, age):
        assert validator.validate(_form(valid_form_dict, age=age)).is_valid

    def test_systolic_out_of_range(self, validator, valid_form_dict):
        result = validator.validate(_form(valid_form_dict, systolicBp="301"))
        assert result.field_errors() == {"systolicBp": "Systolic BP must be between 50 and 300 mmHg"}

    def test_diastolic_checked_only_when_present(self, validator, valid_form_dict):
        assert validator.validate(_form(valid_form_dict, diastolicBp="")).is_valid
        result = validator.validate(_form(valid_form_dict, diastolicBp="25"))
        assert result.messages == ["Diastolic BP must be between 30 and 200 mmHg"]

    def test_mmol_range_uses_declared_unit(self, validator, valid_form_dict):
        form = _form(valid_form_dict, cholesterolUnit="mmolL", totalCholesterol="5.2", hdlCholesterol="1.2")
        assert validator.validate(form).is_valid

        form = _form(valid_form_dict, cholesterolUnit="mmolL", totalCholesterol="240", hdlCholesterol="1.2")
        assert validator.validate(form).messages == [
            "Total cholesterol must be between 2.6 and 10.3 mmol/L"
        ]

    def test_hdl_range_mgdl(self, validator, valid_form_dict):
        result = validator.validate(_form(valid_form_dict, hdlCholesterol="5"))
        assert result.messages == ["HDL cholesterol must be between 10 and 100 mg/dL"]

    def test_lipid_ranges_skipped_without_labs(self, validator, valid_form_dict):
        form = _form(valid_form_dict, hasLabResults=False, totalCholesterol="9999")
        assert validator.validate(form).is_valid


class TestValidationResult:
    """Tests for the result container."""

    def test_field_errors_first_message_wins(self):
        result = ValidationResult(errors=[
            ValidationError("first", "age"),
            ValidationError("second", "age"),
            ValidationError("other", "systolicBp"),
        ])
        assert result.field_errors() == {"age": "first", "systolicBp": "other"}

    def test_to_dict(self):
        result = ValidationResult(errors=[ValidationError("Age is required", "age")])
        assert result.to_dict() == {
            "is_valid": False,
            "errors": [{"code": "VALIDATION_ERROR", "message": "Age is required", "field": "age"}],
        }

    def test_module_level_helper(self, valid_form):
        assert validate_patient_data(valid_form).is_valid
