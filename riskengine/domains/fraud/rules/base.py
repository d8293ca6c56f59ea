"""Abstract base class for fraud indicator rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from ..catalog import DEFAULT_CATALOG, RuleCatalog
from ..config import FraudConfig, default_config
from ..models import Indicator, IndicatorType, Severity, Transaction
from ..velocity import VelocityTracker


@dataclass(frozen=True)
class EvaluationContext:
    """Everything a rule may consult besides the transaction itself."""

    now: datetime
    catalog: RuleCatalog = DEFAULT_CATALOG
    config: FraudConfig = field(default_factory=lambda: default_config)
    velocity: VelocityTracker | None = None


class FraudRule(ABC):
    """Base class for all fraud rules.

    A rule inspects one transaction and returns an Indicator when its
    condition holds, or None otherwise. Rules hold no state of their own.
    """

    rule_id: str
    category: str  # "identity" | "amount" | "geo" | "behavior"
    indicator_type: IndicatorType
    severity: Severity
    score: int

    @abstractmethod
    def evaluate(self, transaction: Transaction, context: EvaluationContext) -> Indicator | None:
        """Evaluate this rule and return an Indicator if it fired."""
        ...

    def _triggered(
        self,
        description: str,
        severity: Severity | None = None,
        score: int | None = None,
    ) -> Indicator:
        """Convenience: build this rule's indicator, defaulting to its class severity and score."""
        return Indicator(
            type=self.indicator_type,
            severity=severity or self.severity,
            description=description,
            score=self.score if score is None else score,
        )

    def describe(self) -> dict:
        return {
            "rule_id": self.rule_id,
            "indicator_type": self.indicator_type.value,
            "category": self.category,
            "severity": self.severity.value,
            "score": self.score,
        }
