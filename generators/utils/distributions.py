"""Statistical distribution helpers for realistic data generation."""

import random
import uuid


def log_normal_sample(
    mean: float, std: float, min_val: float = 0.01, max_val: float | None = None
) -> float:
    value = random.lognormvariate(mean, std)
    value = max(value, min_val)
    if max_val is not None:
        value = min(value, max_val)
    return value


def generate_ip_address() -> str:
    # 10.0.0.0/8 never collides with the documentation ranges used by blacklists
    octets = [10, random.randint(0, 255), random.randint(0, 255), random.randint(1, 254)]
    return ".".join(str(o) for o in octets)


def generate_device_fingerprint() -> str:
    return f"fp_{uuid.UUID(int=random.getrandbits(128), version=4).hex[:9]}"
