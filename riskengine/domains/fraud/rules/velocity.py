"""Behavioral rules: transaction velocity and time of day."""

from datetime import datetime, timedelta, tzinfo

from ..models import Indicator, IndicatorType, Severity, Transaction
from .base import EvaluationContext, FraudRule


def local_hour(moment: datetime, zone: tzinfo | None = None) -> int:
    """Hour of day in ``zone`` (process local time when None).

    Naive datetimes are taken to already be local wall-clock time.
    """
    if moment.tzinfo is None:
        return moment.hour
    return moment.astimezone(zone).hour


def describe_window(window: timedelta) -> str:
    """Human wording for a velocity window: "hour", "10 minutes", "90 seconds"."""
    seconds = int(window.total_seconds())
    for unit, size in (("hour", 3600), ("minute", 60)):
        if seconds % size == 0:
            count = seconds // size
            return unit if count == 1 else f"{count} {unit}s"
    return "second" if seconds == 1 else f"{seconds} seconds"


class TransactionVelocityRule(FraudRule):
    """Triggers when the customer already made too many attempts in the window.

    Evaluating this rule records the current attempt in the velocity tracker,
    so it must run exactly once per scored transaction.
    """

    rule_id = "transaction_velocity"
    category = "behavior"
    indicator_type = IndicatorType.HIGH_VELOCITY
    severity = Severity.HIGH
    score = 25

    def evaluate(self, transaction: Transaction, context: EvaluationContext) -> Indicator | None:
        key = transaction.velocity_key
        if context.velocity is None or not key:
            return None

        count = context.velocity.record_and_count(key, context.now, transaction.amount)
        if count <= context.config.velocity.max_recent_count:
            return None

        window = describe_window(context.config.velocity.window)
        return self._triggered(f"{count} transactions in the last {window}")


class UnusualHourRule(FraudRule):
    """Triggers for transactions in the early morning (02:00-05:59 local)."""

    rule_id = "unusual_hour"
    category = "behavior"
    indicator_type = IndicatorType.UNUSUAL_TIME
    severity = Severity.MEDIUM
    score = 15

    def evaluate(self, transaction: Transaction, context: EvaluationContext) -> Indicator | None:
        timing = context.config.timing
        hour = local_hour(transaction.timestamp or context.now, timing.zone())
        if not (timing.unusual_hour_start <= hour <= timing.unusual_hour_end):
            return None

        return self._triggered(f"Transaction occurred during unusual hours ({hour}:00)")
