"""
User-visible notifications (toasts).
"""
import logging

from .signals import toast_shown

logger = logging.getLogger(__name__)

SUCCESS = 'success'
ERROR = 'error'


def notify(level, message):
    """Send a toast to every connected receiver."""
    toast_shown.send(sender=notify, level=level, message=message)


def notify_success(message):
    logger.info(message)
    notify(SUCCESS, message)


def notify_error(message):
    logger.warning(message)
    notify(ERROR, message)
