"""
Shared HTTP client for every console.

All API calls (admin, vendor, delivery, customer) go through one client which:
  - attaches ``Authorization: Bearer <token>`` using the token of the role
    that owns the request path
  - shows an error toast on any failure
  - clears the role's session and redirects to its login page on 401
"""
import logging
from typing import Optional

import requests
from django.conf import settings
from rest_framework import status

from .exceptions import ApiError, AuthenticationError
from .notifications import notify_error
from .routing import Navigator, Role, get_navigator, role_for_path
from .storage import PersistedStorage, get_storage

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = 'Something went wrong'
SESSION_EXPIRED_MESSAGE = 'Session expired. Please login again.'


class ApiClient:
    """REST client bound to one backend base URL."""

    def __init__(
        self,
        base_url: str,
        storage: Optional[PersistedStorage] = None,
        navigator: Optional[Navigator] = None,
        timeout=None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.storage = storage or get_storage()
        self.navigator = navigator or get_navigator()
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Accept': 'application/json'})

    def build_url(self, url):
        return f'{self.base_url}/{url.lstrip("/")}'

    def auth_headers(self, role: Role):
        token = self.storage.get_item(role.token_key)
        if token:
            return {'Authorization': f'Bearer {token}'}
        return {}

    def request(self, method, url, params=None, json=None, data=None, files=None, headers=None):
        """
        Send a request and return the decoded JSON body.
        Raises ApiError (AuthenticationError on 401) after notifying the user.
        """
        role = role_for_path(url)
        headers = {**self.auth_headers(role), **(headers or {})}
        if files is None and data is None:
            headers['Content-Type'] = 'application/json'

        logger.debug(f"{method} {url} params={params}")
        try:
            response = self.session.request(
                method,
                self.build_url(url),
                params=params,
                json=json,
                data=data,
                files=files,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            message = str(e) or DEFAULT_ERROR_MESSAGE
            logger.error(f"{method} {url} failed: {message}")
            notify_error(message)
            raise ApiError(message) from e

        body = self._decode(response)
        if response.ok:
            return body

        self._handle_error(method, url, role, response, body)

    def get(self, url, params=None):
        return self.request('GET', url, params=params)

    def post(self, url, json=None, data=None, files=None, headers=None):
        return self.request('POST', url, json=json, data=data, files=files, headers=headers)

    def put(self, url, json=None):
        return self.request('PUT', url, json=json)

    def patch(self, url, json=None):
        return self.request('PATCH', url, json=json)

    def delete(self, url, params=None):
        return self.request('DELETE', url, params=params)

    @staticmethod
    def _decode(response):
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def error_message(response, body):
        if isinstance(body, dict) and body.get('message'):
            return str(body['message'])
        return response.reason or DEFAULT_ERROR_MESSAGE

    def _handle_error(self, method, url, role, response, body):
        message = self.error_message(response, body)
        errors = body.get('errors', []) if isinstance(body, dict) else []
        logger.warning(f"{method} {url} -> {response.status_code}: {message}")
        notify_error(message)

        if response.status_code == status.HTTP_401_UNAUTHORIZED:
            self.expire_session(role)
            raise AuthenticationError(message, role=role.name, errors=errors, payload=body)

        raise ApiError(message, response.status_code, errors, body)

    def expire_session(self, role: Role):
        """Clear the role's persisted session and send the user to its login page."""
        self.storage.remove_item(role.token_key)
        self.storage.remove_item(role.refresh_token_key)
        self.storage.remove_item(role.auth_storage_key)

        if not self.navigator.should_redirect_to_login(role):
            return
        if role.path_prefix:
            notify_error(SESSION_EXPIRED_MESSAGE)
        self.navigator.redirect(role.login_route, role=role.name)


_client: Optional[ApiClient] = None


def api_client() -> ApiClient:
    """Return the shared client, built from ``settings.CONSOLE_API`` on first use."""
    global _client
    if _client is None:
        options = settings.CONSOLE_API
        _client = ApiClient(options['BASE_URL'], timeout=options.get('TIMEOUT'))
    return _client


def set_api_client(client: Optional[ApiClient]):
    """Replace the shared client (None rebuilds it from settings on next use)."""
    global _client
    _client = client
