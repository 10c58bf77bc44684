"""
Event fetching from the upstream timetable API.
"""

import httpx
from pydantic import TypeAdapter, ValidationError

from core.config import CACHE_TTL_SECONDS, UPSTREAM_BASE_URL, UPSTREAM_TIMEOUT_SECONDS
from models.events import Event
from models.semester import Semester
from services.cache import TTLCache

EVENT_LIST = TypeAdapter(list[Event])


class ScheduleFetchError(Exception):
    """Upstream could not deliver a usable event list for one track."""


class ScheduleFetcher:
    """
    Fetches the events of one track for one semester.

    Results are cached per (semester, track). Any failure yields an empty
    list so that callers never see upstream problems.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str = UPSTREAM_BASE_URL,
        cache: TTLCache | None = None,
        ttl: float = CACHE_TTL_SECONDS,
    ):
        self._client = client
        self.base_url = base_url
        self.cache = cache if cache is not None else TTLCache()
        self.ttl = ttl

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=UPSTREAM_TIMEOUT_SECONDS)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, semester: Semester, track: int) -> list[Event]:
        """Return all events of a track within the semester window."""
        start = semester.start_date()
        end = semester.end_date()
        if start is None or end is None:
            return []

        async def populate() -> list[Event]:
            return await self._request_events(track, start.isoformat(), end.isoformat())

        try:
            return await self.cache.get_or_populate((semester, track), self.ttl, populate)
        except ScheduleFetchError as e:
            print(f"  Error fetching track {track} for {semester}: {e}")
            return []

    async def _request_events(self, track: int, start: str, end: str) -> list[Event]:
        url = f"{self.base_url}{track}"
        try:
            response = await self.client.get(url, params={"start": start, "end": end})
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise ScheduleFetchError(f"request to {url} failed: {e}") from e
        except ValueError as e:
            raise ScheduleFetchError(f"invalid JSON from {url}: {e}") from e

        try:
            events = EVENT_LIST.validate_python(payload)
        except ValidationError as e:
            raise ScheduleFetchError(
                f"unexpected payload from {url}: {e.error_count()} validation error(s)"
            ) from e
        except Exception as e:
            raise ScheduleFetchError(f"could not decode events from {url}: {e!r}") from e

        print(f"Fetched {len(events)} events for track {track} ({start} - {end})")
        return events


_fetcher: ScheduleFetcher | None = None


def get_schedule_fetcher() -> ScheduleFetcher:
    """Get or create the process-wide fetcher (lazy initialization)."""
    global _fetcher
    if _fetcher is None:
        _fetcher = ScheduleFetcher()
    return _fetcher
