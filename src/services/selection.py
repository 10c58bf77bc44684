"""
Event selection across all tracks of a semester.
"""

import asyncio
from collections.abc import Iterable

from core.config import TRACK_LABELS, TRACKS
from models.events import Event, EventCategories
from models.semester import Semester
from services.schedule import ScheduleFetcher


async def fetch_all_tracks(fetcher: ScheduleFetcher, semester: Semester) -> list[list[Event]]:
    """Fetch every track concurrently; results come back in track order."""
    return list(await asyncio.gather(*(fetcher.fetch(semester, track) for track in TRACKS)))


async def select_events(
    fetcher: ScheduleFetcher, semester: Semester, course_names: Iterable[str]
) -> list[Event]:
    """
    Collect the events of the requested courses from all tracks.

    No course names means no events.
    """
    wanted = set(course_names)
    if not wanted:
        return []

    selected = []
    for events in await fetch_all_tracks(fetcher, semester):
        selected.extend(event for event in events if event.name in wanted)
    return selected


async def collect_categories(
    fetcher: ScheduleFetcher, semester: Semester
) -> list[EventCategories]:
    """Distinct non-holiday course names per track, in track order."""
    per_track = await fetch_all_tracks(fetcher, semester)
    return [
        EventCategories(
            track_label=TRACK_LABELS[track],
            course_names=frozenset(event.name for event in events if not event.is_holiday),
        )
        for track, events in zip(TRACKS, per_track)
    ]
