"""Builds template data for the passenger app from simulator state."""

from __future__ import annotations

from typing import Any

from trainfresh.domain.catalog import COACHES, TRAIN_CATALOG
from trainfresh.domain.models import Coach, Screen, SimulatorState, Toilet, ToiletType

TOILET_ICONS = {
    ToiletType.WESTERN: "🚽",
    ToiletType.INDIAN: "🪣",
}


class BoardViewBuilder:
    """Pure ``state -> view`` mapping; the template does no logic of its own."""

    def __init__(
        self,
        coaches: tuple[Coach, ...] = COACHES,
        preset_numbers: list[str] | None = None,
    ) -> None:
        self.coaches = coaches
        self.preset_numbers = (
            preset_numbers if preset_numbers is not None else list(TRAIN_CATALOG.keys())
        )

    def build_tile(self, toilet: Toilet) -> dict[str, str]:
        """Template data for one toilet tile."""
        return {
            "id": toilet.id,
            "type": toilet.type.value,
            "icon": TOILET_ICONS.get(toilet.type, "🚻"),
            "status": toilet.status.value,
            "badge": "Vacant" if toilet.is_vacant else "Occupied",
        }

    def build_coach_sections(self, state: SimulatorState) -> list[dict[str, Any]]:
        """Coach sections in layout order; coaches without toilets are skipped."""
        sections = []
        for coach in self.coaches:
            toilets = state.toilets.get(coach.id) or []
            if not toilets:
                continue
            sections.append(
                {
                    "id": coach.id,
                    "label": coach.label,
                    "tiles": [self.build_tile(toilet) for toilet in toilets],
                }
            )
        return sections

    def summary_counts(self, state: SimulatorState) -> tuple[int, int]:
        """Vacant and occupied totals over every coach."""
        vacant = occupied = 0
        for coach in self.coaches:
            for toilet in state.toilets.get(coach.id) or []:
                if toilet.is_vacant:
                    vacant += 1
                else:
                    occupied += 1
        return vacant, occupied

    def build(self, state: SimulatorState) -> dict[str, Any]:
        """Template assigns for the whole app."""
        vacant, occupied = self.summary_counts(state)
        train = state.train
        return {
            "show_status": state.screen is Screen.STATUS,
            "input_value": state.input_value,
            "input_hint": state.input_hint,
            "input_class": "error" if state.has_input_error else "",
            "presets": [{"number": number} for number in self.preset_numbers],
            "header_train": train.header_text if train else "",
            "train_route": train.route if train else "",
            "clock": state.clock_text,
            "countdown": str(state.countdown.remaining),
            "summary_vacant": str(vacant),
            "summary_occupied": str(occupied),
            "coaches": self.build_coach_sections(state),
            "notification": state.notification,
            "toast_class": "show" if state.notification else "",
        }
