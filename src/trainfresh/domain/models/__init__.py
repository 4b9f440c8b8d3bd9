"""Domain models for TrainFresh."""

from trainfresh.domain.models.access_token import AccessToken
from trainfresh.domain.models.coach import Coach
from trainfresh.domain.models.countdown import DEFAULT_REFRESH_SECONDS, Countdown
from trainfresh.domain.models.gate_result import (
    SESSION_COOKIE_NAME,
    AuthorizationResult,
    SessionCookie,
    SessionResult,
)
from trainfresh.domain.models.simulator_state import Screen, SimulatorState
from trainfresh.domain.models.toilet import Toilet, ToiletStatus, ToiletType
from trainfresh.domain.models.train import Train

__all__ = [
    "DEFAULT_REFRESH_SECONDS",
    "SESSION_COOKIE_NAME",
    "AccessToken",
    "AuthorizationResult",
    "Coach",
    "Countdown",
    "Screen",
    "SessionCookie",
    "SessionResult",
    "SimulatorState",
    "Toilet",
    "ToiletStatus",
    "ToiletType",
    "Train",
]
