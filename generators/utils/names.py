"""Customer name and email generation for synthetic transactions."""

import random

FIRST_NAMES = [
    "Aarav", "Priya", "Rohan", "Ananya", "Vikram", "Sneha", "Arjun", "Kavya",
    "Emily", "James", "Sofia", "Lucas", "Amara", "Kwame", "Mei", "Hiroshi",
    "Fatima", "Omar", "Elena", "Mateo",
]

LAST_NAMES = [
    "Sharma", "Patel", "Iyer", "Reddy", "Gupta", "Nair", "Smith", "Johnson",
    "Garcia", "Rossi", "Okafor", "Mensah", "Chen", "Tanaka", "Haddad", "Silva",
]

EMAIL_DOMAINS = ["gmail.com", "yahoo.com", "outlook.com", "hotmail.com", "icloud.com"]


def random_name() -> tuple[str, str]:
    return random.choice(FIRST_NAMES), random.choice(LAST_NAMES)


def random_email(first_name: str, last_name: str, domain: str | None = None) -> str:
    separator = random.choice([".", "_", ""])
    number = str(random.randint(1, 999)) if random.random() < 0.4 else ""
    domain = domain or random.choice(EMAIL_DOMAINS)
    return f"{first_name.lower()}{separator}{last_name.lower()}{number}@{domain}"
