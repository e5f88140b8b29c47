"""
Utility functions for the console client.
"""
import re


def normalize_id(item, id_field='_id', alias='id'):
    """
    Alias the server identifier to the client display field.
    Existing ``alias`` values win over the server field.
    """
    if not isinstance(item, dict):
        return item
    identifier = item.get(alias) or item.get(id_field)
    normalized = dict(item)
    if identifier is not None:
        normalized[alias] = str(identifier)
        normalized.setdefault(id_field, str(identifier))
    return normalized


def same_id(left, right):
    """Compare identifiers the way the consoles do: as strings."""
    if left is None or right is None:
        return False
    return str(left) == str(right)


def unwrap(body):
    """Return the ``data`` payload of a response envelope."""
    if isinstance(body, dict) and 'data' in body:
        return body['data']
    return body


def normalize_email(email):
    return str(email or '').strip().lower()


def normalize_phone(phone):
    """
    Keep the last 10 digits of a phone number.
    Returns an empty string if the number has no digits.
    """
    digits = re.sub(r'\D', '', str(phone or ''))
    return digits[-10:]


def slugify(name):
    """
    Build a URL slug from a display name.
    Example: 'Summer Sale 2024!' -> 'summer-sale-2024'
    """
    if not name:
        return ''
    slug = name.lower()
    slug = re.sub(r'[^\w\s-]', '', slug)
    slug = re.sub(r'\s+', '-', slug)
    slug = re.sub(r'-{2,}', '-', slug)
    return slug.strip('-')


def generate_unique_slug(name, existing_slugs):
    """Slugify ``name`` and add a counter suffix until it is unused."""
    slug = slugify(name)
    if not slug:
        return ''
    existing = set(existing_slugs)
    candidate = slug
    counter = 1
    while candidate in existing:
        candidate = f'{slug}-{counter}'
        counter += 1
    return candidate


OBJECT_ID_PATTERN = re.compile(r'^[0-9a-fA-F]{24}$')


def is_object_id(value):
    """Return True for 24-character hex backend identifiers."""
    return bool(OBJECT_ID_PATTERN.match(str(value or '')))
