"""Train domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Train:
    """A train the passenger can look up by number."""

    number: str
    name: str
    route: str = ""

    @property
    def header_text(self) -> str:
        """Header line shown on the status screen."""
        return f"{self.number} · {self.name}"
