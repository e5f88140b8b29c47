"""
Exceptions raised by the console client.
"""
from rest_framework import status


class ClientException(Exception):
    """Base exception for console client errors."""
    def __init__(self, message, code='CLIENT_ERROR'):
        self.message = message
        self.code = code
        super().__init__(message)


class ApiError(ClientException):
    """Exception raised when the backend answers with a non-2xx status or is unreachable."""
    def __init__(self, message, status_code=None, errors=None, payload=None):
        self.status_code = status_code
        self.errors = errors or []
        self.payload = payload
        super().__init__(message, 'API_ERROR')

    @property
    def is_unauthorized(self):
        return self.status_code == status.HTTP_401_UNAUTHORIZED


class AuthenticationError(ApiError):
    """Exception raised when the backend rejects the role's token (HTTP 401)."""
    def __init__(self, message, role=None, errors=None, payload=None):
        self.role = role
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, errors, payload)
        self.code = 'AUTHENTICATION_ERROR'


class ValidationError(ClientException):
    """Exception raised when form data fails client-side validation."""
    def __init__(self, message, field=None, errors=None):
        self.field = field
        self.errors = errors or {}
        super().__init__(message, 'VALIDATION_ERROR')


class InvalidResponseError(ClientException):
    """Exception raised when a successful response is missing expected fields."""
    def __init__(self, message):
        super().__init__(message, 'INVALID_RESPONSE')
