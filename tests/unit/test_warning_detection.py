"""
Unit Tests for Clinical Warning Detection
"""
import pytest

from cardiorisk.core.patient import YesNo
from cardiorisk.core.validation import WarningCategory, WarningDetector, WarningSeverity


@pytest.fixture
def detector() -> WarningDetector:
    return WarningDetector()


class TestAgeWarnings:

    def test_no_warnings_for_healthy_patient(self, detector, make_patient):
        assert detector.detect_warnings(make_patient()) == []

    def test_young_age(self, detector, make_patient):
        warnings = detector.detect_warnings(make_patient(age=18))
        assert [(w.severity, w.category) for w in warnings] == [
            (WarningSeverity.WARNING, WarningCategory.AGE)
        ]

    def test_older_age_is_info(self, detector, make_patient):
        warnings = detector.detect_warnings(make_patient(age=75))
        assert warnings[0].severity == WarningSeverity.INFO


class TestBloodPressureWarnings:

    def test_low_bp(self, detector, make_patient):
        warnings = detector.detect_warnings(make_patient(systolic_bp=85))
        assert len(warnings) == 1
        assert warnings[0].severity == WarningSeverity.CRITICAL
        assert "85 mmHg" in warnings[0].message

    def test_low_bp_on_medication(self, detector, make_patient):
        warnings = detector.detect_warnings(make_patient(systolic_bp=85, on_bp_meds=YesNo.YES))
        assert len(warnings) == 2
        assert "Possible data entry error" in warnings[1].message

    def test_extremely_low_bp_adds_warning(self, detector, make_patient):
        warnings = detector.detect_warnings(make_patient(systolic_bp=65))
        assert len(warnings) == 2
        assert "extremely low" in warnings[1].message

    def test_very_high_systolic_and_diastolic(self, detector, make_patient):
        warnings = detector.detect_warnings(make_patient(systolic_bp=190, diastolic_bp=125))
        assert [w.severity for w in warnings] == [WarningSeverity.CRITICAL, WarningSeverity.CRITICAL]

    def test_threshold_is_exclusive(self, detector, make_patient):
        assert detector.detect_warnings(make_patient(systolic_bp=180, diastolic_bp=120)) == []


class TestBodyCompositionWarnings:

    def test_class_three_obesity_is_critical(self, detector, make_patient):
        warnings = detector.detect_warnings(make_patient(bmi=42.0))
        assert len(warnings) == 1
        assert warnings[0].severity == WarningSeverity.CRITICAL

    def test_severe_obesity_is_warning(self, detector, make_patient):
        warnings = detector.detect_warnings(make_patient(bmi=36.0))
        assert len(warnings) == 1
        assert warnings[0].severity == WarningSeverity.WARNING

    def test_bmi_35_no_warning(self, detector, make_patient):
        assert detector.detect_warnings(make_patient(bmi=35.0)) == []


class TestLipidWarnings:

    def test_high_total_and_low_hdl(self, detector, make_patient):
        warnings = detector.detect_warnings(make_patient(total_cholesterol=250.0, hdl_cholesterol=35.0))
        assert [w.category for w in warnings] == [WarningCategory.LIPIDS, WarningCategory.LIPIDS]
        assert warnings[0].message.startswith("Total cholesterol of 250 mg/dL")
        assert warnings[1].message.startswith("HDL cholesterol of 35 mg/dL")

    def test_skipped_without_labs(self, detector, make_patient):
        patient = make_patient(has_lab_results=False, total_cholesterol=250.0, hdl_cholesterol=35.0)
        assert detector.detect_warnings(patient) == []


class TestOrderingAndFiltering:

    def test_check_order_preserved(self, detector, make_patient):
        patient = make_patient(age=76, systolic_bp=190, bmi=42.0, total_cholesterol=250.0)
        categories = [w.category for w in detector.detect_warnings(patient)]
        assert categories == [
            WarningCategory.AGE,
            WarningCategory.BLOOD_PRESSURE,
            WarningCategory.BODY_COMPOSITION,
            WarningCategory.LIPIDS,
        ]

    def test_critical_only(self, detector, make_patient):
        patient = make_patient(age=76, systolic_bp=190, total_cholesterol=250.0)
        critical = detector.get_critical_warnings(patient)
        assert len(critical) == 1
        assert critical[0].category == WarningCategory.BLOOD_PRESSURE

    def test_to_dict(self, detector, make_patient):
        warning = detector.detect_warnings(make_patient(bmi=36.0))[0]
        assert warning.to_dict()["severity"] == "warning"
        assert warning.to_dict()["category"] == "body_composition"
