"""
Default signal receivers.
"""
import logging

from django.dispatch import receiver

from .signals import session_redirected

logger = logging.getLogger(__name__)


@receiver(session_redirected)
def log_session_redirect(sender, role, path, **kwargs):
    logger.info(f"Session for role '{role}' expired, redirected to {path}")
