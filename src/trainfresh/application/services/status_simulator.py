"""Toilet status simulator.

Drives the two-screen passenger app (train entry and live status board).
All randomness goes through an injectable ``random.Random`` so that datasets
and refreshes are reproducible under a seed.
"""

from __future__ import annotations

import logging
import random
import re

from trainfresh.domain.catalog import COACHES, TOILET_TYPES, TRAIN_CATALOG
from trainfresh.domain.errors import EmptyInputError, InvalidFormatError, TrainNumberError
from trainfresh.domain.models import (
    Coach,
    Countdown,
    Screen,
    SimulatorState,
    Toilet,
    ToiletStatus,
    Train,
)

logger = logging.getLogger(__name__)

TRAIN_NUMBER_PATTERN = re.compile(r"^[0-9]{4,5}$")
VACANT_PROBABILITY = 0.6
FLIP_PROBABILITY = 0.2
STAFF_NUMBER_PREFIXES = (9, 8, 7)


def validate_train_number(raw_value: str | None) -> str:
    """Return the trimmed train number or raise a ``TrainNumberError``."""
    value = (raw_value or "").strip()
    if not value:
        raise EmptyInputError(value)
    if not TRAIN_NUMBER_PATTERN.match(value):
        raise InvalidFormatError(value)
    return value


class StatusSimulator:
    """State transitions of the passenger app.

    The simulator never holds state of its own; every operation receives the
    connection's ``SimulatorState`` and mutates it.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        coaches: tuple[Coach, ...] = COACHES,
        trains: dict[str, Train] | None = None,
        refresh_seconds: int = 30,
    ) -> None:
        self.rng = rng or random.Random()
        self.coaches = coaches
        self.trains = trains if trains is not None else TRAIN_CATALOG
        self.refresh_seconds = refresh_seconds

    def new_state(self) -> SimulatorState:
        """Fresh state on the entry screen."""
        return SimulatorState(countdown=Countdown(self.refresh_seconds, self.refresh_seconds))

    def lookup_train(self, number: str) -> Train:
        """Find a train in the catalog, or synthesize a placeholder."""
        train = self.trains.get(number)
        if train is None:
            return Train(number=number, name=f"Train {number}", route="")
        return train

    def generate_toilets(self) -> dict[str, list[Toilet]]:
        """Create a fresh dataset for every coach in layout order."""
        data: dict[str, list[Toilet]] = {}
        for coach in self.coaches:
            data[coach.id] = [
                Toilet(
                    id=f"{coach.id}-T{position + 1}",
                    type=TOILET_TYPES[position % len(TOILET_TYPES)],
                    status=(
                        ToiletStatus.VACANT
                        if self.rng.random() < VACANT_PROBABILITY
                        else ToiletStatus.OCCUPIED
                    ),
                )
                for position in range(coach.toilet_count)
            ]
        return data

    def submit(self, state: SimulatorState, raw_value: str | None) -> bool:
        """Validate the entry field and open the status screen.

        Returns:
            True if the state moved to the status screen. On a validation
            failure the hint is set and the input is kept for correction.
        """
        state.input_value = raw_value or ""
        try:
            number = validate_train_number(raw_value)
        except TrainNumberError as e:
            state.input_hint = e.hint
            return False
        state.input_hint = ""
        self.enter_status(state, number)
        return True

    def select_preset(self, state: SimulatorState, number: str | None) -> bool:
        """Preset chip: fill the field and jump straight to the board.

        Returns:
            True if the state moved to the status screen. Values that are not
            valid train numbers are ignored and leave the state untouched.
        """
        try:
            number = validate_train_number(number)
        except TrainNumberError:
            logger.warning(f"Ignoring invalid preset train number: {number!r}")
            return False
        state.input_value = number
        state.input_hint = ""
        self.enter_status(state, number)
        return True

    def clear_hint(self, state: SimulatorState) -> None:
        """Typing in the field clears the validation hint."""
        state.input_hint = ""

    def enter_status(self, state: SimulatorState, number: str) -> None:
        """Load a train and show its freshly generated board."""
        state.train = self.lookup_train(number)
        state.toilets = self.generate_toilets()
        state.countdown.reset()
        state.screen = Screen.STATUS
        self.notify(state, f"✅ Loaded live status for Train {number}")
        logger.info(f"Entered status screen for train {number}")

    def tick(self, state: SimulatorState) -> None:
        """Simulated sensor refresh: flip each toilet with a fixed probability."""
        for toilet in state.all_toilets():
            if self.rng.random() < FLIP_PROBABILITY:
                toilet.status = toilet.status.flipped()
        state.countdown.reset()
        self.notify(state, "📡 Status updated from sensors")

    def advance_countdown(self, state: SimulatorState) -> bool:
        """Count one second; refresh the board when the cycle expires."""
        if state.screen is not Screen.STATUS:
            return False
        if state.countdown.step():
            self.tick(state)
            return True
        return False

    def exit_status(self, state: SimulatorState) -> None:
        """Back to the entry screen, discarding the dataset."""
        state.screen = Screen.ENTRY
        state.train = None
        state.toilets = {}
        state.input_value = ""
        state.input_hint = ""
        state.countdown.reset()

    def report_issue(self, state: SimulatorState) -> str:
        """Stub for the "call staff" button; there is no backend behind it."""
        prefix = self.rng.choice(STAFF_NUMBER_PREFIXES)
        staff_number = f"{prefix}{self.rng.randint(100000000, 999999999)}"
        self.notify(state, f"🔔 Staff alerted! Contact: {staff_number}")
        return staff_number

    def notify(self, state: SimulatorState, message: str) -> None:
        """Show a transient notification."""
        state.notification = message
        state.notification_id += 1

    def clear_notification(self, state: SimulatorState, notification_id: int | None = None) -> None:
        """Hide the notification unless a newer one replaced it."""
        if notification_id is None or notification_id == state.notification_id:
            state.notification = ""
