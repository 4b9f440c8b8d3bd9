"""Toilet domain model."""

from dataclasses import dataclass
from enum import Enum


class ToiletStatus(str, Enum):
    """Occupancy state reported by a (simulated) door sensor."""

    VACANT = "vacant"
    OCCUPIED = "occupied"

    def flipped(self) -> "ToiletStatus":
        """Return the opposite status."""
        return ToiletStatus.OCCUPIED if self is ToiletStatus.VACANT else ToiletStatus.VACANT


class ToiletType(str, Enum):
    """Kind of toilet fitted in the compartment."""

    WESTERN = "Western"
    INDIAN = "Indian"


@dataclass
class Toilet:
    """A single toilet compartment. Status is mutated in place by refreshes."""

    id: str
    type: ToiletType
    status: ToiletStatus

    @property
    def is_vacant(self) -> bool:
        """True when nobody is inside."""
        return self.status is ToiletStatus.VACANT
