"""Location-based fraud rules."""

from ..models import Indicator, IndicatorType, Severity, Transaction
from .base import EvaluationContext, FraudRule

UNKNOWN_LOCATION = "Unknown"


class HighRiskLocationRule(FraudRule):
    """Triggers when the declared location names a high-risk region."""

    rule_id = "high_risk_location"
    category = "geo"
    indicator_type = IndicatorType.HIGH_RISK_LOCATION
    severity = Severity.HIGH
    score = 25

    def evaluate(self, transaction: Transaction, context: EvaluationContext) -> Indicator | None:
        location = transaction.location
        if not location or not context.catalog.is_high_risk_location(location):
            return None

        return self._triggered(f"Transaction originated from high-risk location: {location}")


class UnknownLocationRule(FraudRule):
    rule_id = "unknown_location"
    category = "geo"
    indicator_type = IndicatorType.UNKNOWN_LOCATION
    severity = Severity.MEDIUM
    score = 15

    def evaluate(self, transaction: Transaction, context: EvaluationContext) -> Indicator | None:
        if transaction.location and transaction.location != UNKNOWN_LOCATION:
            return None

        return self._triggered("Transaction location could not be determined")
