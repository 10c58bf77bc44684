"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Keep test runs out of the request log database
os.environ.setdefault("REQUEST_LOG_ENABLED", "false")

from models.semester import Semester  # noqa: E402
from services.cache import TTLCache  # noqa: E402
from services.schedule import ScheduleFetcher  # noqa: E402

UPSTREAM_URL = "https://upstream.test/eventFeed/"


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class UpstreamStub:
    """Serves canned per-track payloads and records every request."""

    def __init__(self):
        self.payloads: dict[int, object] = {}
        self.status_code = 200
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        track = int(request.url.path.rstrip("/").rsplit("/", 1)[-1])
        return httpx.Response(self.status_code, json=self.payloads.get(track, []))

    def calls_for(self, track: int) -> int:
        return sum(1 for r in self.requests if r.url.path.endswith(f"/{track}"))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def fetcher(upstream, clock):
    """Fetcher wired to the stub upstream and the fake clock."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    return ScheduleFetcher(client=client, base_url=UPSTREAM_URL, cache=TTLCache(clock=clock))


@pytest.fixture
def summer_2024():
    return Semester(year=2024, is_winter=False)


@pytest.fixture
def raw_event():
    """Raw upstream record for a summer lecture."""
    return {
        "name": "Analysis I",
        "start": "2024-06-01T10:00:00",
        "end": "2024-06-01T11:30:00",
        "location": {"name": "Room 1", "street": "Templergraben", "nr": "55", "desc": "2nd floor"},
        "lecturer": {"name": "Dr. Smith", "mail": "smith@example.org"},
        "information": "Bring notes<br />and a pen",
        "isHoliday": "0",
        "isExercise": "0",
        "allDay": False,
        "isLecture": "1",
    }


@pytest.fixture
def raw_exercise(raw_event):
    return {
        **raw_event,
        "name": "Analysis I Exercise",
        "start": "2024-06-03T14:00:00",
        "end": "2024-06-03T15:30:00",
        "isExercise": "1",
        "isLecture": "0",
    }


@pytest.fixture
def raw_holiday():
    return {
        "name": "Pentecost",
        "start": "2024-05-20T00:00:00",
        "end": "2024-05-21T00:00:00",
        "allDay": True,
        "isHoliday": "1",
        "isExercise": "0",
        "isLecture": "0",
    }
