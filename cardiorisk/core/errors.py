"""
Error Taxonomy

ValidationError       - user-correctable, field-tagged, returned as data.
DataNormalizationError - validated input could not be normalized (contract violation).
RiskCalculationError  - integrity failure inside risk evaluation.
"""
from typing import Any, Dict, Optional


class CardioRiskError(Exception):
    """Base class for all engine errors."""

    code = "CARDIORISK_ERROR"

    def __init__(self, message: str, field: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
        if code is not None:
            self.code = code

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for an error response body."""
        result: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.field is not None:
            result["field"] = self.field
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, field={self.field!r})"


class ValidationError(CardioRiskError):
    """A single failed validation rule, tagged with the offending field."""

    code = "VALIDATION_ERROR"


class DataNormalizationError(CardioRiskError):
    """Raised when validated input cannot be converted to a NormalizedPatient."""

    code = "DATA_NORMALIZATION_ERROR"


class RiskCalculationError(CardioRiskError):
    """Raised when risk evaluation cannot produce a result."""

    code = "RISK_CALCULATION_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message, field=None, code=code)
