"""Fraud indicator rules package.

Exports ALL_RULES (rule instances in evaluation order) and individual rule
classes for direct use.
"""

from .amount import HighAmountRule, HighValueCardRule
from .base import EvaluationContext, FraudRule
from .geo import HighRiskLocationRule, UnknownLocationRule
from .identity import BlacklistedIPRule, SuspiciousDeviceRule, SuspiciousEmailDomainRule
from .velocity import TransactionVelocityRule, UnusualHourRule, local_hour

# All rule instances in evaluation order; indicators are reported in this order
ALL_RULES: list[FraudRule] = [
    SuspiciousEmailDomainRule(),
    HighAmountRule(),
    HighRiskLocationRule(),
    BlacklistedIPRule(),
    SuspiciousDeviceRule(),
    TransactionVelocityRule(),
    UnusualHourRule(),
    HighValueCardRule(),
    UnknownLocationRule(),
]

__all__ = [
    "ALL_RULES",
    "EvaluationContext",
    "FraudRule",
    "local_hour",
    # Identity
    "SuspiciousEmailDomainRule",
    "BlacklistedIPRule",
    "SuspiciousDeviceRule",
    # Amount
    "HighAmountRule",
    "HighValueCardRule",
    # Geo
    "HighRiskLocationRule",
    "UnknownLocationRule",
    # Behavior
    "TransactionVelocityRule",
    "UnusualHourRule",
]
