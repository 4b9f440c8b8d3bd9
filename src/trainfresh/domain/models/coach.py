"""Coach domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coach:
    """A train car in the fixed coach layout."""

    id: str
    label: str
    toilet_count: int = 2
