"""
Shared types for cardiovascular risk models.

Every calculator consumes a NormalizedPatient and produces a RiskCandidate,
or None when the model does not apply to the patient.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from enum import Enum


class RiskLevel(str, Enum):
    """Ordinal risk level categories."""
    LOW = "Low"
    BORDERLINE = "Borderline"
    INTERMEDIATE = "Intermediate"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self)

    def __lt__(self, other: "RiskLevel") -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "RiskLevel") -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "RiskLevel") -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "RiskLevel") -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def from_percent(cls, risk_percent: float, intermediate_at: float) -> "RiskLevel":
        """
        Level for a 10-year risk percentage.

        All 10-year models share the High (>=20) and Borderline (>=5) cut-offs;
        the Intermediate cut-off is model specific (7.5 for PCE, 10 otherwise).
        """
        if risk_percent >= 20:
            return cls.HIGH
        if risk_percent >= intermediate_at:
            return cls.INTERMEDIATE
        if risk_percent >= 5:
            return cls.BORDERLINE
        return cls.LOW


_LEVEL_ORDER = [
    RiskLevel.LOW,
    RiskLevel.BORDERLINE,
    RiskLevel.INTERMEDIATE,
    RiskLevel.HIGH,
    RiskLevel.CRITICAL,
]


@dataclass
class RiskCandidate:
    """
    Output of one risk model.

    score is a cross-model urgency measure in [0, 1] used for ranking;
    value["riskPercent"] is the model's own 10-year estimate where it has one.
    """
    id: str
    title: str
    level: RiskLevel
    score: float
    value: Dict[str, Any] = field(default_factory=dict)
    why: List[str] = field(default_factory=list)
    warnings: Optional[List[str]] = None
    actions: Optional[List[str]] = None

    @property
    def risk_percent(self) -> Optional[float]:
        return self.value.get("riskPercent")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary; empty warnings/actions are omitted."""
        result: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "level": self.level.value,
            "score": round(self.score, 4),
            "value": dict(self.value),
            "why": list(self.why),
        }
        if self.warnings:
            result["warnings"] = list(self.warnings)
        if self.actions:
            result["actions"] = list(self.actions)
        return result
