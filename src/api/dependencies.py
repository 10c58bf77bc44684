"""FastAPI dependencies for shared resources."""

from services.schedule import ScheduleFetcher, get_schedule_fetcher


async def get_fetcher() -> ScheduleFetcher:
    """Process-wide schedule fetcher, shared so its cache is shared too."""
    return get_schedule_fetcher()
