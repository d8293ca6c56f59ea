"""Amount-based fraud rules."""

from ..models import Indicator, IndicatorType, Severity, Transaction
from .base import EvaluationContext, FraudRule


class HighAmountRule(FraudRule):
    """Triggers above the high-amount threshold; critical above the critical one."""

    rule_id = "high_amount"
    category = "amount"
    indicator_type = IndicatorType.HIGH_TRANSACTION_AMOUNT
    severity = Severity.HIGH
    score = 20
    critical_score = 30

    def evaluate(self, transaction: Transaction, context: EvaluationContext) -> Indicator | None:
        thresholds = context.config.amount
        amount = transaction.amount
        if amount <= thresholds.high_amount_min:
            return None

        details = f"Transaction amount ${amount} exceeds normal spending patterns"
        if amount > thresholds.critical_amount_min:
            return self._triggered(details, severity=Severity.CRITICAL, score=self.critical_score)
        return self._triggered(details)


class HighValueCardRule(FraudRule):
    """Triggers for large credit card payments, a common card-testing follow-up."""

    rule_id = "high_value_card"
    category = "amount"
    indicator_type = IndicatorType.HIGH_VALUE_CARD
    severity = Severity.MEDIUM
    score = 10

    def evaluate(self, transaction: Transaction, context: EvaluationContext) -> Indicator | None:
        thresholds = context.config.amount
        if transaction.payment_method != thresholds.card_payment_method:
            return None
        if transaction.amount <= thresholds.card_high_value_min:
            return None

        return self._triggered(
            f"High-value credit card transaction (${transaction.amount}) "
            "requires additional verification"
        )
