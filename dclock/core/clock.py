from dataclasses import dataclass
from datetime import datetime


# The four strings the clock page shows for one instant.
@dataclass(frozen=True)
class ClockFace:
    hour: str
    minute: str
    weekday: str
    day_month: str


# Renders the clock fields for `now` (defaults to the host's local time). The hour is 12-hour with no AM/PM marker,
# so 01:00 and 13:00 both read "01".
def clock_face(now: datetime | None = None) -> ClockFace:
    now = now or datetime.now()
    return ClockFace(
        hour=now.strftime("%I"),
        minute=now.strftime("%M"),
        weekday=now.strftime("%a"),
        day_month=f"{now.day} {now:%b}",
    )
