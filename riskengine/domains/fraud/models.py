"""Pydantic models for the fraud domain."""

from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Severity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class IndicatorType(StrEnum):
    SUSPICIOUS_EMAIL_DOMAIN = "Suspicious Email Domain"
    HIGH_TRANSACTION_AMOUNT = "High Transaction Amount"
    HIGH_RISK_LOCATION = "High-Risk Geographic Location"
    BLACKLISTED_IP = "Blacklisted IP Address"
    SUSPICIOUS_DEVICE = "Suspicious Device"
    HIGH_VELOCITY = "High Transaction Velocity"
    UNUSUAL_TIME = "Unusual Transaction Time"
    HIGH_VALUE_CARD = "High-Value Card Transaction"
    UNKNOWN_LOCATION = "Unknown Location"


class Transaction(BaseModel):
    """A payment transaction as supplied by the transaction store.

    Every field is optional. A missing value never matches the rule that
    reads it, except location, where a missing value counts as unknown.
    Field names are accepted in snake_case or camelCase (``customerEmail``).
    """

    id: str = ""
    order_id: str = ""
    customer_email: str | None = None
    customer_name: str | None = None
    amount: Decimal = Field(default=Decimal("0"), ge=0)
    currency: str = "USD"
    payment_method: str | None = None
    ip_address: str | None = None
    device_fingerprint: str | None = None
    timestamp: datetime | None = None
    location: str | None = None
    merchant_id: str | None = None

    model_config = {"extra": "ignore", "alias_generator": to_camel, "populate_by_name": True}

    @property
    def velocity_key(self) -> str | None:
        return self.customer_email or self.customer_name or None


class Indicator(BaseModel):
    type: IndicatorType
    severity: Severity
    description: str
    score: int = Field(ge=0)

    model_config = {"frozen": True}


class FraudAnalysis(BaseModel):
    risk_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    is_fraud: bool
    indicators: tuple[Indicator, ...] = ()
    recommendation: str
    confidence: int = Field(ge=0, le=100)

    model_config = {"frozen": True}


class VelocityRecord(BaseModel):
    timestamp: datetime
    amount: Decimal

    model_config = {"frozen": True}


class IndicatorCount(BaseModel):
    type: str
    count: int

    model_config = {"frozen": True}


class RiskBucket(BaseModel):
    level: RiskLevel
    count: int
    percentage: float

    model_config = {"frozen": True}


class TrendSummary(BaseModel):
    transaction_count: int
    fraud_count: int
    fraud_rate: float
    total_fraud_amount: Decimal
    common_indicators: list[IndicatorCount] = []
    risk_distribution: list[RiskBucket] = []

    model_config = {"frozen": True}


class TrendRequest(BaseModel):
    transactions: list[Transaction] = []


class FraudScoreResponse(BaseModel):
    transaction_id: str
    risk_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    is_fraud: bool
    indicators: list[Indicator] = []
    recommendation: str
    confidence: int = Field(ge=0, le=100)
    model_version: str = "rules-v1"
    computed_at: datetime
