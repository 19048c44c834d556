"""Unit tests for the Google Calendar client."""

import pytest
from unittest.mock import MagicMock, patch

from google.oauth2.credentials import Credentials
from googleapiclient.errors import HttpError

from notecal.calendars.google_calendar import GoogleCalendarClient
from notecal.interfaces.calendar_interface import CalendarInterface

def _http_error(status, content=b'{"error": {"message": "boom"}}'):
    mock_resp = MagicMock()
    mock_resp.status = status
    mock_resp.reason = "Error"
    return HttpError(resp=mock_resp, content=content)

@pytest.fixture
def mock_service():
    return MagicMock()

@pytest.fixture
def client(mock_service):
    return GoogleCalendarClient(service=mock_service)

def test_client_builds_calendar_service_from_credentials():
    credentials = MagicMock(spec=Credentials)
    with patch('notecal.calendars.google_calendar.build') as mock_build:
        client = GoogleCalendarClient(credentials=credentials)

    mock_build.assert_called_once_with('calendar', 'v3', credentials=credentials, cache_discovery=False)
    assert client.service is mock_build.return_value

def test_client_needs_credentials_or_service():
    with pytest.raises(ValueError):
        GoogleCalendarClient()

def test_client_satisfies_calendar_interface(client):
    assert isinstance(client, CalendarInterface)

@pytest.mark.asyncio
async def test_get_event_success(client, mock_service):
    mock_service.events().get().execute.return_value = {'id': 'abc'}

    result = await client.get_event('work', 'abc')

    assert result == {'id': 'abc'}
    mock_service.events().get.assert_called_with(calendarId='work', eventId='abc')

@pytest.mark.asyncio
@pytest.mark.parametrize("status", [404, 410])
async def test_get_event_not_found_returns_none(client, mock_service, status):
    mock_service.events().get().execute.side_effect = _http_error(status)

    assert await client.get_event('work', 'missing') is None

@pytest.mark.asyncio
async def test_get_event_other_errors_propagate(client, mock_service):
    error = _http_error(500)
    mock_service.events().get().execute.side_effect = error

    with pytest.raises(HttpError) as exc_info:
        await client.get_event('work', 'abc')
    assert exc_info.value is error

@pytest.mark.asyncio
async def test_insert_event(client, mock_service):
    body = {'summary': 'Lunch', 'start': {'date': '2025-06-18', 'timeZone': 'Etc/UTC'}}
    mock_service.events().insert().execute.return_value = {'id': 'new', 'htmlLink': 'link'}

    result = await client.insert_event('work', body)

    assert result == {'id': 'new', 'htmlLink': 'link'}
    mock_service.events().insert.assert_called_with(calendarId='work', body=body)

@pytest.mark.asyncio
async def test_insert_event_errors_propagate(client, mock_service):
    mock_service.events().insert().execute.side_effect = _http_error(400)

    with pytest.raises(HttpError):
        await client.insert_event('work', {})

@pytest.mark.asyncio
async def test_update_event(client, mock_service):
    body = {'id': 'abc', 'summary': 'New'}
    mock_service.events().update().execute.return_value = body

    result = await client.update_event('work', 'abc', body)

    assert result == body
    mock_service.events().update.assert_called_with(calendarId='work', eventId='abc', body=body)

@pytest.mark.asyncio
async def test_move_event(client, mock_service):
    mock_service.events().move().execute.return_value = {'id': 'abc'}

    result = await client.move_event('work', 'abc', 'home')

    assert result == {'id': 'abc'}
    mock_service.events().move.assert_called_with(calendarId='work', eventId='abc', destination='home')

@pytest.mark.asyncio
async def test_delete_event_success(client, mock_service):
    mock_service.events().delete().execute.return_value = ''

    assert await client.delete_event('work', 'abc') is True
    mock_service.events().delete.assert_called_with(calendarId='work', eventId='abc')

@pytest.mark.asyncio
async def test_delete_event_already_gone_returns_false(client, mock_service):
    mock_service.events().delete().execute.side_effect = _http_error(410)

    assert await client.delete_event('work', 'abc') is False

@pytest.mark.asyncio
async def test_delete_event_other_errors_propagate(client, mock_service):
    mock_service.events().delete().execute.side_effect = _http_error(403)

    with pytest.raises(HttpError):
        await client.delete_event('work', 'abc')
