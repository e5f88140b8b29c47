"""
Client-side form validation with DRF serializers.
"""
from .exceptions import ValidationError
from .notifications import notify_error


def first_error(errors):
    """Return ``(field, message)`` for the first serializer error."""
    field, messages = next(iter(errors.items()))
    if isinstance(messages, list):
        # Nested list serializers report one entry per item; empty ones passed
        messages = next((m for m in messages if m), messages)
    if isinstance(messages, dict):
        return first_error(messages)
    message = messages[0] if isinstance(messages, list) and messages else messages
    return field, str(message)


def validate_form(serializer_class, data, partial=False):
    """
    Validate form data before it is sent.
    Invalid data shows an error toast and raises ValidationError.
    """
    serializer = serializer_class(data=data, partial=partial)
    if serializer.is_valid():
        return serializer.validated_data

    field, message = first_error(serializer.errors)
    if field != 'non_field_errors':
        message = f'{field}: {message}'
    notify_error(message)
    raise ValidationError(message, field=field, errors=serializer.errors)
