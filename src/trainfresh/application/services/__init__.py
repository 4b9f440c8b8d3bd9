"""Application services."""

from trainfresh.application.services.access_gate import AccessGate, parse_cookies
from trainfresh.application.services.status_simulator import (
    StatusSimulator,
    validate_train_number,
)

__all__ = ["AccessGate", "StatusSimulator", "parse_cookies", "validate_train_number"]
