"""Per-connection state of the toilet status simulator."""

from dataclasses import dataclass, field
from enum import Enum

from trainfresh.domain.models.countdown import Countdown
from trainfresh.domain.models.toilet import Toilet
from trainfresh.domain.models.train import Train


class Screen(str, Enum):
    """Screens of the passenger app."""

    ENTRY = "entry"
    STATUS = "status"


@dataclass
class SimulatorState:
    """State owned by a single browser connection.

    Nothing in here is shared between connections. Selecting a different
    train or going back discards ``toilets``.
    """

    screen: Screen = Screen.ENTRY
    input_value: str = ""
    input_hint: str = ""
    train: Train | None = None
    toilets: dict[str, list[Toilet]] = field(default_factory=dict)  # coach id -> toilets
    countdown: Countdown = field(default_factory=Countdown)
    clock_text: str = ""
    notification: str = ""
    notification_id: int = 0

    @property
    def has_input_error(self) -> bool:
        """True while a validation hint is shown."""
        return bool(self.input_hint)

    def all_toilets(self) -> list[Toilet]:
        """Flatten the dataset in coach order."""
        return [toilet for toilets in self.toilets.values() for toilet in toilets]
