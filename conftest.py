"""Repository-level pytest setup.

Keeps the repository root importable and routes structlog output through the
console renderer at WARNING so test output stays readable.
"""

from riskengine.shared.logging import setup_logging

setup_logging("WARNING", json_logs=False)
