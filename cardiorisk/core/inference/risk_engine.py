"""
Risk Engine Module

Runs every applicable cardiovascular risk model against a normalized
patient and ranks the resulting candidates by urgency.

Evaluation order:
1. Blood pressure category (always)
2. Diabetes (always)
3. ASCVD 10-year, or relative risk when ASCVD does not apply and age < 40
4. Framingham 10-year CHD
5. WHO 10-year CVD
6. Obesity

Ranking is a stable sort on score, so ties keep this order.
"""
from typing import List, Optional, Sequence, Union

from cardiorisk.core.inference.calculators import (
    calculate_ascvd_risk,
    calculate_bp_risk,
    calculate_diabetes_risk,
    calculate_framingham_risk,
    calculate_obesity_risk,
    calculate_relative_risk,
    calculate_who_cvd_risk,
)
from cardiorisk.core.inference.coefficients import DEFAULT_WHO_REGION, WhoRegion
from cardiorisk.core.inference.types import RiskCandidate
from cardiorisk.core.patient import NormalizedPatient
from cardiorisk.utils import get_logger

logger = get_logger(__name__)

TOP_RISK_COUNT = 3
RELATIVE_RISK_MAX_AGE = 40


def evaluate_risks(
    patient: NormalizedPatient,
    region: Union[WhoRegion, str] = DEFAULT_WHO_REGION
) -> List[RiskCandidate]:
    """
    Evaluate all applicable risk models for a patient.

    ASCVD and relative risk are mutually exclusive: relative risk only runs
    when ASCVD returned nothing and the patient is under 40.
    """
    candidates: List[RiskCandidate] = [
        calculate_bp_risk(patient),
        calculate_diabetes_risk(patient),
    ]

    ascvd = calculate_ascvd_risk(patient)
    if ascvd is not None:
        candidates.append(ascvd)
    elif patient.age < RELATIVE_RISK_MAX_AGE:
        candidates.append(calculate_relative_risk(patient))

    for candidate in (
        calculate_framingham_risk(patient),
        calculate_who_cvd_risk(patient, region),
        calculate_obesity_risk(patient),
    ):
        if candidate is not None:
            candidates.append(candidate)

    return candidates


def rank_top(candidates: Sequence[RiskCandidate], limit: int) -> List[RiskCandidate]:
    """Highest-scoring candidates first; equal scores keep their input order."""
    return sorted(candidates, key=lambda c: -c.score)[:limit]


def rank_top3(candidates: Sequence[RiskCandidate]) -> List[RiskCandidate]:
    return rank_top(candidates, TOP_RISK_COUNT)


class RiskEngine:
    """
    Evaluates and ranks cardiovascular risk models.

    Holds only immutable configuration (WHO calibration region), so one
    instance can be shared across requests.
    """

    def __init__(self, region: Union[WhoRegion, str] = DEFAULT_WHO_REGION):
        self.region = WhoRegion(region)
        logger.info(f"RiskEngine initialized (WHO region: {self.region.value})")

    def evaluate(self, patient: NormalizedPatient) -> List[RiskCandidate]:
        candidates = evaluate_risks(patient, self.region)
        logger.debug(f"Evaluated {len(candidates)} risk model(s): {[c.id for c in candidates]}")
        return candidates

    def rank(self, candidates: Sequence[RiskCandidate], limit: int = TOP_RISK_COUNT) -> List[RiskCandidate]:
        return rank_top(candidates, limit)

    def find(self, candidates: Sequence[RiskCandidate], risk_id: str) -> Optional[RiskCandidate]:
        """First candidate with the given id, or None."""
        return next((c for c in candidates if c.id == risk_id), None)
