"""
iCalendar encoding of timetable events.
"""

from datetime import datetime, timedelta, timezone

from icalendar import Calendar
from icalendar import Event as IcsEvent
from icalendar import vDuration, vText

from core.config import (
    CALENDAR_PRODID,
    CALENDAR_VERSION,
    CATEGORY_EXERCISE,
    CATEGORY_HOLIDAY,
    CATEGORY_LECTURE,
    ICS_DATE_FORMAT,
    UID_DOMAIN,
)
from models.events import Event, render_lecturer, render_location

ALL_DAY_DURATION = timedelta(hours=24)


class vExactDuration(vDuration):
    """DURATION in whole hours (PT24H), an exact span rather than a nominal day (P1D)."""

    def to_ical(self) -> bytes:
        return f"PT{int(self.td.total_seconds()) // 3600}H".encode()


def event_uid(event: Event) -> str:
    """
    Stable identifier built from start time and name.

    Two events with the same start and name are the same occurrence.
    """
    name = event.name.lower().replace(" ", "_")
    return f"{event.start.strftime(ICS_DATE_FORMAT)}-{name}@{UID_DOMAIN}"


def event_category(event: Event) -> str | None:
    """Single category, lecture before exercise before holiday."""
    if event.is_lecture:
        return CATEGORY_LECTURE
    if event.is_exercise:
        return CATEGORY_EXERCISE
    if event.is_holiday:
        return CATEGORY_HOLIDAY
    return None


def to_ical_event(event: Event, stamp: datetime) -> IcsEvent:
    """Convert one event into a VEVENT component."""
    component = IcsEvent()
    component.add("uid", event_uid(event))
    component.add("dtstamp", stamp)
    component.add("dtstart", event.start)
    if event.is_all_day:
        component.add("duration", vExactDuration(ALL_DAY_DURATION))
    else:
        component.add("dtend", event.end)
    component.add("summary", event.name)

    if event.information is not None:
        information = event.information.replace("<br />", "\n")
        if information:
            component.add("description", information)

    if event.location.contains_information():
        component.add("location", render_location(event.location))

    if event.lecturer.contains_information():
        # Kept as plain TEXT so commas and semicolons in names get escaped
        component.add("organizer", vText(render_lecturer(event.lecturer)))

    category = event_category(event)
    if category is not None:
        component.add("categories", category)

    return component


def build_calendar(events: list[Event], stamp: datetime | None = None) -> bytes:
    """Serialize events into one iCalendar document."""
    if stamp is None:
        stamp = datetime.now(timezone.utc).replace(microsecond=0)

    calendar = Calendar()
    calendar.add("version", CALENDAR_VERSION)
    calendar.add("prodid", CALENDAR_PRODID)
    for event in events:
        calendar.add_component(to_ical_event(event, stamp))
    return calendar.to_ical()
