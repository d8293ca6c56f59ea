"""Declared-location strings for synthetic transactions."""

import random

UNKNOWN_LOCATION = "Unknown"

# Ordinary customer locations, formatted the way checkout forms report them
LOW_RISK_LOCATIONS = [
    "Mumbai, INDIA",
    "Bangalore, INDIA",
    "Pune, INDIA",
    "California, USA",
    "New York, USA",
    "Texas, USA",
    "London, UK",
    "Toronto, Canada",
    "Berlin, Germany",
    "Sydney, Australia",
]

HIGH_RISK_LOCATIONS = [
    "Lagos, Nigeria",
    "Bucharest, Romania",
    "Accra, Ghana",
    "Jakarta, Indonesia",
    "Manila, Philippines",
]


def random_low_risk_location() -> str:
    return random.choice(LOW_RISK_LOCATIONS)


def random_high_risk_location() -> str:
    return random.choice(HIGH_RISK_LOCATIONS)
