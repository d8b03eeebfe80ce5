"""
Calendar providers supplying busy blocks to the scheduler.

Modes:
- manual: the user keeps no calendar; nothing is busy.
- mock: deterministic recurring blocks for demos and tests. Day index
  ``i`` from the start date gets a "Work Meeting" 09:00-10:00 when ``i`` is
  even and "Lunch" 12:00-13:00 when ``i`` is divisible by 3.
- google: events from the Google Calendar API for the same window.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional

import httpx

from ..exceptions import CalendarAuthError, CalendarProviderError
from ..models.schedule import CalendarEvent, CalendarIntegration, CalendarProviderType

logger = logging.getLogger(__name__)

GOOGLE_CALENDAR_API_URL = "https://www.googleapis.com/calendar/v3"


def mock_calendar_events(start_date: date, days_ahead: int = 7) -> List[CalendarEvent]:
    """Synthesize recurring work and lunch blocks."""
    events: List[CalendarEvent] = []
    for i in range(days_ahead):
        day = start_date + timedelta(days=i)

        if i % 2 == 0:
            events.append(CalendarEvent(
                id=f"work-{i}",
                title="Work Meeting",
                start_time=datetime.combine(day, time(9, 0)),
                end_time=datetime.combine(day, time(10, 0)),
            ))

        if i % 3 == 0:
            events.append(CalendarEvent(
                id=f"lunch-{i}",
                title="Lunch",
                start_time=datetime.combine(day, time(12, 0)),
                end_time=datetime.combine(day, time(13, 0)),
            ))

    return events


def _event_time(value: Dict[str, Any]) -> str:
    # All-day events carry only a date
    return value.get("dateTime") or f"{value['date']}T00:00:00"


def map_google_event(item: Dict[str, Any]) -> CalendarEvent:
    """Map one Google Calendar API event into a CalendarEvent."""
    start = item.get("start", {})
    end = item.get("end", {})
    return CalendarEvent(
        id=item["id"],
        title=item.get("summary") or "Untitled Event",
        start_time=_event_time(start),
        end_time=_event_time(end),
        all_day="dateTime" not in start,
    )


class CalendarProvider:
    """
    Fetches calendar busy blocks for a user's integration.

    Example usage:
        provider = CalendarProvider()
        events = await provider.get_calendar_events(integration, days_ahead=7)
    """

    provider_name = "google"

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        api_url: str = GOOGLE_CALENDAR_API_URL,
        timeout: float = 30.0,
    ) -> None:
        self._http_client = http_client
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "CalendarProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def get_calendar_events(
        self,
        integration: Optional[CalendarIntegration],
        days_ahead: int = 7,
        start_date: Optional[date] = None,
    ) -> List[CalendarEvent]:
        """
        Busy blocks from ``start_date`` (default today) for ``days_ahead`` days.

        Live-provider failures are logged and yield an empty list, so a
        calendar outage degrades to "no busy blocks" rather than no
        suggestions.
        """
        integration = integration or CalendarIntegration()
        start_date = start_date or date.today()

        if integration.provider == CalendarProviderType.MANUAL:
            return []

        if integration.provider == CalendarProviderType.MOCK:
            return mock_calendar_events(start_date, days_ahead)

        if integration.provider == CalendarProviderType.GOOGLE and integration.access_token:
            try:
                return await self.fetch_google_events(integration, start_date, days_ahead)
            except CalendarProviderError as e:
                logger.warning("Error fetching Google calendar events: %s", e.message)
                return []

        return []

    async def fetch_google_events(
        self,
        integration: CalendarIntegration,
        start_date: date,
        days_ahead: int,
    ) -> List[CalendarEvent]:
        """
        Fetch events from the Google Calendar API.

        Raises:
            CalendarAuthError: If the access token is rejected.
            CalendarProviderError: On any other HTTP or payload failure.
        """
        time_min = datetime.combine(start_date, time.min).astimezone()
        time_max = time_min + timedelta(days=days_ahead)

        client = await self._get_client()
        try:
            response = await client.get(
                f"{self._api_url}/calendars/{integration.calendar_id}/events",
                params={
                    "timeMin": time_min.isoformat(),
                    "timeMax": time_max.isoformat(),
                    "singleEvents": "true",
                    "orderBy": "startTime",
                },
                headers={
                    "Authorization": f"Bearer {integration.access_token}",
                    "Content-Type": "application/json",
                },
            )
        except httpx.HTTPError as e:
            raise CalendarProviderError(
                f"Google Calendar request failed: {e}", provider=self.provider_name
            ) from e

        if response.status_code in (401, 403):
            raise CalendarAuthError(self.provider_name, response.status_code)
        if not response.is_success:
            raise CalendarProviderError(
                f"Google Calendar API error: {response.status_code}",
                provider=self.provider_name,
                details={"status": response.status_code},
            )

        try:
            items = response.json().get("items", [])
            return [map_google_event(item) for item in items]
        except (ValueError, KeyError, TypeError) as e:
            raise CalendarProviderError(
                f"Unexpected Google Calendar payload: {e}", provider=self.provider_name
            ) from e
