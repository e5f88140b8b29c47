"""
Pytest configuration and shared fixtures.
"""
import json
from unittest.mock import Mock

import pytest
from django.core.cache import caches

from apps.core.http import ApiClient, set_api_client
from apps.core.routing import get_navigator, reset_routing_state
from apps.core.signals import session_redirected, toast_shown
from apps.core.storage import get_storage


@pytest.fixture(autouse=True)
def reset_console_state():
    """Start every test with empty storage, a fresh navigator and no shared client."""
    caches['default'].clear()
    reset_routing_state()
    set_api_client(None)
    yield
    set_api_client(None)
    reset_routing_state()


@pytest.fixture
def storage():
    """Return the persisted storage."""
    return get_storage()


@pytest.fixture
def navigator():
    """Return the shared navigator."""
    return get_navigator()


@pytest.fixture
def toasts():
    """Record every toast as a (level, message) tuple."""
    shown = []

    def _record(sender, level, message, **kwargs):
        shown.append((level, message))

    toast_shown.connect(_record, weak=False)
    yield shown
    toast_shown.disconnect(_record)


@pytest.fixture
def redirects():
    """Record every session redirect as a (role, path) tuple."""
    seen = []

    def _record(sender, role, path, **kwargs):
        seen.append((role, path))

    session_redirected.connect(_record, weak=False)
    yield seen
    session_redirected.disconnect(_record)


@pytest.fixture
def make_response():
    """Factory fixture to create fake ``requests`` responses."""
    def _make_response(status_code=200, body=None, reason='OK'):
        response = Mock()
        response.status_code = status_code
        response.ok = status_code < 400
        response.reason = reason
        response.content = json.dumps(body).encode() if body is not None else b''
        response.json.return_value = body
        return response
    return _make_response


@pytest.fixture
def http_session(make_response):
    """A fake ``requests.Session`` answering 200 with an empty envelope."""
    session = Mock()
    session.headers = {}
    session.request.return_value = make_response(body={'success': True, 'data': None})
    return session


@pytest.fixture
def http_client(http_session):
    """Install an API client bound to the fake session as the shared client."""
    client = ApiClient('http://testserver/api', session=http_session)
    set_api_client(client)
    return client


@pytest.fixture
def envelope():
    """Factory fixture to wrap a payload in the backend response envelope."""
    def _envelope(data=None, message='', success=True):
        return {'success': success, 'message': message, 'data': data}
    return _envelope


@pytest.fixture
def paginated(envelope):
    """
    Factory fixture serving one page of ``records`` the way list endpoints do.
    ``flat`` moves the pagination fields next to the list.
    """
    def _paginated(records, page=1, limit=10, list_key='items', flat=False):
        total = len(records)
        pages = -(-total // limit) if limit else 1
        start = (page - 1) * limit
        data = {list_key: records[start:start + limit]}
        block = {'total': total, 'page': page, 'limit': limit, 'pages': pages}
        if flat:
            data.update(block)
        else:
            data['pagination'] = block
        return envelope(data)
    return _paginated


@pytest.fixture
def make_records():
    """Factory fixture to create server records with Mongo-style ids."""
    def _make_records(count, prefix='item', **fields):
        return [
            {'_id': f'{prefix}{index:03d}', 'name': f'{prefix.title()} {index}', **fields}
            for index in range(1, count + 1)
        ]
    return _make_records
