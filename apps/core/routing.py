"""
Role descriptors and navigation.

The route tree of every role lives in the Django URLconf (``config.urls``),
one namespace per role. This module answers which role owns a path, where a
role logs in, and keeps track of the page the user is on.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from django.conf import settings
from django.http import JsonResponse
from django.urls import Resolver404, resolve, reverse

from .signals import session_redirected

logger = logging.getLogger(__name__)

CUSTOMER = 'customer'
ADMIN = 'admin'
VENDOR = 'vendor'
DELIVERY = 'delivery'


@dataclass(frozen=True)
class Role:
    """A console role with its own token and route subtree."""
    name: str
    path_prefix: str
    token_key: str
    refresh_token_key: str
    auth_storage_key: str
    auth_pages: List[str] = field(default_factory=list)

    def owns(self, path):
        """Return True if ``path`` belongs to this role's area."""
        if not self.path_prefix:
            return role_for_path(path) is self
        return path == self.path_prefix or path.startswith(f'{self.path_prefix}/')

    @property
    def login_route(self):
        return reverse(f'{self.name}:login')

    def is_auth_page(self, path):
        try:
            match = resolve(path)
        except Resolver404:
            return False
        return match.namespace == self.name and match.url_name in self.auth_pages


_roles = None


def get_roles():
    """Return every configured role, keyed by name."""
    global _roles
    if _roles is None:
        _roles = {
            name: Role(name=name, **options)
            for name, options in settings.CONSOLE_ROLES.items()
        }
    return _roles


def get_role(name):
    try:
        return get_roles()[name]
    except KeyError:
        raise ValueError(f'Unknown role: {name}')


def role_for_path(path):
    """
    Resolve the role that owns an API or page path.
    Paths outside every prefixed area belong to the customer role.
    """
    path = path or ''
    for role in get_roles().values():
        if role.path_prefix and (
            path == role.path_prefix or path.startswith(f'{role.path_prefix}/')
        ):
            return role
    return get_role(CUSTOMER)


def page(name):
    """Build the view for a named page of the route tree."""
    def view(request, **kwargs):
        match = request.resolver_match
        return JsonResponse({
            'role': match.namespace if match else None,
            'page': name,
            'params': kwargs,
        })
    view.page_name = name
    return view


class Navigator:
    """Tracks the current page and performs redirects."""

    def __init__(self, current_path='/'):
        self.current_path = current_path
        self.history = []

    def redirect(self, path, role=None):
        logger.info(f"Redirecting from {self.current_path} to {path}")
        self.history.append(path)
        self.current_path = path
        session_redirected.send(sender=self.__class__, role=role, path=path)

    def should_redirect_to_login(self, role: Role) -> bool:
        """
        Decide if an expired session of ``role`` sends the user to its login page.
        Prefixed roles redirect only from inside their own area.
        """
        current = self.current_path
        if role.path_prefix and not role.owns(current):
            return False
        return not role.is_auth_page(current)


_navigator: Optional[Navigator] = None


def get_navigator():
    """Return the shared navigator instance."""
    global _navigator
    if _navigator is None:
        _navigator = Navigator()
    return _navigator


def reset_routing_state():
    """Forget cached roles and the shared navigator."""
    global _roles, _navigator
    _roles = None
    _navigator = None
