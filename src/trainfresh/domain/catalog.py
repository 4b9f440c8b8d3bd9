"""Static train and coach catalogs.

The train list stands in for a live timetable lookup. Unknown numbers are
not an error, see ``StatusSimulator.lookup_train``.
"""

from trainfresh.domain.models.coach import Coach
from trainfresh.domain.models.toilet import ToiletType
from trainfresh.domain.models.train import Train

TRAIN_CATALOG: dict[str, Train] = {
    train.number: train
    for train in (
        Train("12301", "Howrah Rajdhani", "Howrah → New Delhi"),
        Train("12951", "Mumbai Rajdhani", "Mumbai Central → New Delhi"),
        Train("12628", "Karnataka Exp", "Bengaluru → New Delhi"),
        Train("12345", "Rajdhani Express", "Patna → New Delhi"),
        Train("11057", "Devagiri Express", "Mumbai CST → Manmad"),
        Train("22691", "Rajdhani Express", "Bengaluru → Hazrat Nizamuddin"),
    )
}

PANTRY_COACH_ID = "PAN"

COACHES: tuple[Coach, ...] = (
    Coach("H1", "H1 · AC 1st Class"),
    Coach("A1", "A1 · AC 2 Tier"),
    Coach("A2", "A2 · AC 2 Tier"),
    Coach("B1", "B1 · AC 3 Tier"),
    Coach("B2", "B2 · AC 3 Tier"),
    Coach("B3", "B3 · AC 3 Tier"),
    Coach("S1", "S1 · Sleeper"),
    Coach("S2", "S2 · Sleeper"),
    Coach("S3", "S3 · Sleeper"),
    Coach(PANTRY_COACH_ID, "Pantry Car", toilet_count=1),
)

# Assigned by position within a coach: T1 Western, T2 Indian, ...
TOILET_TYPES: tuple[ToiletType, ...] = (ToiletType.WESTERN, ToiletType.INDIAN)
