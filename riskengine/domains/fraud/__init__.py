"""Fraud risk scoring domain."""

from .catalog import DEFAULT_CATALOG, CatalogError, RuleCatalog, load_catalog
from .config import FraudConfig
from .models import (
    FraudAnalysis,
    Indicator,
    IndicatorType,
    RiskLevel,
    Severity,
    Transaction,
    TrendSummary,
)
from .rules import ALL_RULES
from .rules_engine import RulesEngine, aggregate, classify_risk_level
from .scorer import FraudScorer
from .trends import summarize_trends
from .velocity import VelocityTracker

__all__ = [
    "ALL_RULES",
    "CatalogError",
    "DEFAULT_CATALOG",
    "FraudAnalysis",
    "FraudConfig",
    "FraudScorer",
    "Indicator",
    "IndicatorType",
    "RiskLevel",
    "RuleCatalog",
    "RulesEngine",
    "Severity",
    "Transaction",
    "TrendSummary",
    "VelocityTracker",
    "aggregate",
    "classify_risk_level",
    "load_catalog",
    "summarize_trends",
]
