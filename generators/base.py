"""Base generator class with seeded RNG and shared helpers."""

import random
import uuid
from datetime import datetime, timedelta
from typing import Any


class BaseGenerator:
    def __init__(self, config: dict[str, Any], seed: int = 42):
        self.config = config
        self.seed = seed
        random.seed(seed)

    def _uuid(self) -> str:
        """Generate a deterministic UUID from the seeded RNG."""
        return str(uuid.UUID(int=random.getrandbits(128), version=4))

    def _random_datetime(self, start: datetime, end: datetime) -> datetime:
        """Generate a random datetime between start and end."""
        delta = end - start
        random_seconds = random.randint(0, max(1, int(delta.total_seconds())))
        return start + timedelta(seconds=random_seconds)

    def _decimal_str(self, value: float) -> str:
        """Format a float as a decimal string with 2 decimal places."""
        return f"{value:.2f}"

    def _weighted_choice(self, options: dict[str, float]) -> str:
        """Choose from weighted options."""
        items = list(options.keys())
        weights = list(options.values())
        return random.choices(items, weights=weights, k=1)[0]

    def _chance(self, key: str) -> bool:
        """Roll against the configured injection rate ``key`` (default 0)."""
        return random.random() < self.config.get(key, 0.0)
