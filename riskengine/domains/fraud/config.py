"""Fraud engine configuration with sensible defaults."""

import os
from dataclasses import dataclass, field
from datetime import timedelta, tzinfo
from zoneinfo import ZoneInfo


@dataclass
class VelocityThresholds:
    window_seconds: int = 3600
    history_capacity: int = 10
    max_recent_count: int = 3

    @property
    def window(self) -> timedelta:
        return timedelta(seconds=self.window_seconds)


@dataclass
class AmountThresholds:
    high_amount_min: float = 2_000.0
    critical_amount_min: float = 5_000.0
    card_high_value_min: float = 1_000.0
    card_payment_method: str = "Credit Card"


@dataclass
class TimingThresholds:
    unusual_hour_start: int = 2
    unusual_hour_end: int = 5  # inclusive
    timezone: str | None = None  # None: process local time

    def zone(self) -> tzinfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None


@dataclass
class ClassificationThresholds:
    critical_min: int = 80
    high_min: int = 60
    medium_min: int = 30


@dataclass
class FraudConfig:
    velocity: VelocityThresholds = field(default_factory=VelocityThresholds)
    amount: AmountThresholds = field(default_factory=AmountThresholds)
    timing: TimingThresholds = field(default_factory=TimingThresholds)
    classification: ClassificationThresholds = field(default_factory=ClassificationThresholds)
    catalog_path: str | None = None

    @classmethod
    def from_env(cls) -> "FraudConfig":
        """Load config with env var overrides. Env vars use FRAUD_ prefix."""
        config = cls()

        # Velocity overrides
        if v := os.getenv("FRAUD_VELOCITY_WINDOW_SECONDS"):
            config.velocity.window_seconds = int(v)
        if v := os.getenv("FRAUD_VELOCITY_HISTORY_CAPACITY"):
            config.velocity.history_capacity = int(v)
        if v := os.getenv("FRAUD_VELOCITY_MAX_RECENT"):
            config.velocity.max_recent_count = int(v)

        # Amount overrides
        if v := os.getenv("FRAUD_HIGH_AMOUNT_MIN"):
            config.amount.high_amount_min = float(v)
        if v := os.getenv("FRAUD_CRITICAL_AMOUNT_MIN"):
            config.amount.critical_amount_min = float(v)
        if v := os.getenv("FRAUD_CARD_HIGH_VALUE_MIN"):
            config.amount.card_high_value_min = float(v)

        # Timing overrides
        if v := os.getenv("FRAUD_LOCAL_TIMEZONE"):
            config.timing.timezone = v

        # Classification overrides
        if v := os.getenv("FRAUD_CRITICAL_THRESHOLD"):
            config.classification.critical_min = int(v)
        if v := os.getenv("FRAUD_HIGH_THRESHOLD"):
            config.classification.high_min = int(v)
        if v := os.getenv("FRAUD_MEDIUM_THRESHOLD"):
            config.classification.medium_min = int(v)

        if v := os.getenv("FRAUD_CATALOG_PATH"):
            config.catalog_path = v

        return config


# Module-level default instance
default_config = FraudConfig()
