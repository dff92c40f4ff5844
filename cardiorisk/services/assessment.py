"""
Assessment Service - Centralized Cardiovascular Risk Logic

Composes the pipeline stages into single calls:

    raw input -> PatientValidator -> PatientNormalizer
              -> [WarningDetector, RiskEngine] -> merged result

Decouples the pipeline from the FastAPI endpoints so it can be driven
directly from Python.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from cardiorisk.config import settings
from cardiorisk.core.errors import RiskCalculationError
from cardiorisk.core.inference.risk_engine import RiskEngine
from cardiorisk.core.inference.types import RiskCandidate
from cardiorisk.core.normalization import PatientNormalizer
from cardiorisk.core.patient import NormalizedPatient, PatientFormData
from cardiorisk.core.validation import PatientValidator, WarningDetector
from cardiorisk.utils import get_logger

logger = get_logger(__name__)


@dataclass
class AssessmentResult:
    """Ranked risks for one normalized patient."""
    top3: List[RiskCandidate]
    all_risks: List[RiskCandidate]
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "top3": [c.to_dict() for c in self.top3],
            "allRisks": [c.to_dict() for c in self.all_risks],
            "warnings": list(self.warnings),
        }


@dataclass
class PredictionResult:
    """
    Outcome of the full prediction pipeline.

    When validation fails, errors holds the validation messages and every
    other list is empty.
    """
    top3: List[RiskCandidate] = field(default_factory=list)
    all_risks: List[RiskCandidate] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "top3": [c.to_dict() for c in self.top3],
            "allRisks": [c.to_dict() for c in self.all_risks],
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


class AssessmentService:
    """
    Service class for cardiovascular risk assessment.

    Every collaborator is stateless, so a single instance can serve all
    requests concurrently.
    """

    def __init__(
        self,
        risk_engine: Optional[RiskEngine] = None,
        validator: Optional[PatientValidator] = None,
        normalizer: Optional[PatientNormalizer] = None,
        warning_detector: Optional[WarningDetector] = None,
        top_risk_count: Optional[int] = None
    ):
        self.risk_engine = risk_engine or RiskEngine(region=settings.who_region)
        self.validator = validator or PatientValidator()
        self.normalizer = normalizer or PatientNormalizer()
        self.warning_detector = warning_detector or WarningDetector()
        self.top_risk_count = top_risk_count or settings.top_risk_count
        logger.info(f"AssessmentService initialized (top risks: {self.top_risk_count})")

    def assess(self, patient: NormalizedPatient) -> AssessmentResult:
        """
        Evaluate and rank all applicable risk models.

        Warnings are the per-candidate caveats, flattened in evaluation
        order; clinical warnings are not included here.

        Raises:
            RiskCalculationError: no model produced a result, or a model failed
        """
        try:
            all_risks = self.risk_engine.evaluate(patient)
            if not all_risks:
                raise RiskCalculationError("No risk factors could be calculated")

            top3 = self.risk_engine.rank(all_risks, self.top_risk_count)
            warnings = [w for risk in all_risks for w in (risk.warnings or [])]
        except RiskCalculationError:
            raise
        except Exception as e:
            raise RiskCalculationError(f"Risk assessment failed: {e}") from e

        logger.debug(f"Assessment complete: top={[c.id for c in top3]}, warnings={len(warnings)}")
        return AssessmentResult(top3=top3, all_risks=all_risks, warnings=warnings)

    def get_risk_by_id(self, patient: NormalizedPatient, risk_id: str) -> Optional[RiskCandidate]:
        """Single model result from a fresh evaluation, or None if it does not apply."""
        return self.risk_engine.find(self.risk_engine.evaluate(patient), risk_id)

    def predict(self, raw: Union[PatientFormData, Mapping[str, Any]]) -> PredictionResult:
        """
        Run the full pipeline on a raw submission.

        Args:
            raw: PatientFormData or its camelCase dictionary form

        Returns:
            PredictionResult; validation failures are reported in errors

        Raises:
            DataNormalizationError: validated input could not be normalized
            RiskCalculationError: risk evaluation failed
        """
        data = raw if isinstance(raw, PatientFormData) else PatientFormData.from_dict(dict(raw))

        validation = self.validator.validate(data)
        if not validation.is_valid:
            logger.warning(f"Prediction rejected by validation: {list(validation.field_errors())}")
            return PredictionResult(errors=validation.messages)

        patient = self.normalizer.normalize(data)
        clinical_warnings = self.warning_detector.detect_warnings(patient)
        assessment = self.assess(patient)

        logger.info(
            f"Prediction for age={patient.age}, sex={patient.sex_at_birth.value}: "
            f"{len(assessment.all_risks)} risk(s), {len(clinical_warnings)} clinical warning(s)"
        )
        return PredictionResult(
            top3=assessment.top3,
            all_risks=assessment.all_risks,
            errors=[],
            warnings=assessment.warnings + [w.message for w in clinical_warnings],
        )
