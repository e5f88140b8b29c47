"""
Notification stores.
"""
import logging

from apps.core.exceptions import ClientException
from apps.core.notifications import notify_error, notify_success
from apps.core.pagination import _as_int
from apps.core.routing import ADMIN
from apps.core.stores import ResourceStore
from apps.core.utils import same_id
from apps.core.validation import validate_form

from .serializers import CustomMessageSerializer, PushNotificationSerializer
from .services import BroadcastService, NotificationService, notifications_endpoint

logger = logging.getLogger(__name__)

PAGE_SIZE = 10


class NotificationStore(ResourceStore):
    """
    Paged inbox of one console.

    Page 1 replaces the list, later pages are appended. ``unread_count``
    comes from the server and follows local read/delete actions.
    """
    label = 'Notification'
    plural_label = 'notifications'
    list_key = 'notifications'
    alias_ids = False
    notify_on_success = False

    def __init__(self, role=ADMIN, **kwargs):
        notifications_endpoint(role)
        self.role = role
        self.unread_count = 0
        self.page = 1
        self.has_more = True
        super().__init__(**kwargs)

    def extract_items(self, payload):
        if isinstance(payload, list):
            return payload
        return super().extract_items(payload)

    def list_request(self, params):
        return NotificationService.list(self.role, params)

    def delete_request(self, item_id):
        return NotificationService.delete(self.role, item_id)

    def after_fetch(self, payload):
        if isinstance(payload, list):
            self.unread_count = sum(1 for n in payload if not n.get('isRead'))
        elif isinstance(payload, dict):
            self.unread_count = _as_int(payload.get('unreadCount'), 0)

    def fetch_page(self, page=1):
        page = _as_int(page, 1)
        items = self.fetch({'page': page, 'limit': PAGE_SIZE}, append=page > 1)
        if items is None:
            return None
        self.page = page
        self.has_more = page < self.pagination.pages
        return items

    def load_more(self):
        if not self.has_more or self.is_loading:
            return None
        return self.fetch_page(self.page + 1)

    def mark_as_read(self, notification_id):
        try:
            NotificationService.mark_as_read(self.role, notification_id)
        except ClientException as e:
            logger.info(f"Marking notification {notification_id} as read failed: {e.message}")
            return False

        existing = self.get_by_id(notification_id)
        if existing is not None and not existing.get('isRead'):
            self.unread_count = max(0, self.unread_count - 1)
        self.items = [
            {**n, 'isRead': True} if same_id(self.item_id(n), notification_id) else n
            for n in self.items
        ]
        return True

    def mark_all_as_read(self):
        try:
            NotificationService.mark_all_as_read(self.role)
        except ClientException as e:
            logger.info(f"Marking all notifications as read failed: {e.message}")
            notify_error('Failed to mark all notifications as read')
            return False

        self.items = [{**n, 'isRead': True} for n in self.items]
        self.unread_count = 0
        notify_success('All notifications marked as read')
        return True

    def delete(self, item_id, raise_errors=None):
        """Remove one notification; the admin inbox has no delete endpoint."""
        if self.role == ADMIN:
            raise ValueError('Admin notifications cannot be deleted')

        existing = self.get_by_id(item_id)
        if not super().delete(item_id, raise_errors):
            notify_error('Failed to delete notification')
            return False

        if existing is not None and not existing.get('isRead'):
            self.unread_count = max(0, self.unread_count - 1)
        notify_success('Notification deleted')
        return True

    def reset(self):
        self.items = []
        self.unread_count = 0
        self.page = 1
        self.has_more = True


def push_notification(data):
    """
    Broadcast a push notification.
    Returns True once the server accepted it; invalid data raises ValidationError.
    """
    payload = dict(validate_form(PushNotificationSerializer, data))
    try:
        BroadcastService.push(payload)
    except ClientException as e:
        logger.info(f"Push notification failed: {e.message}")
        return False
    notify_success('Notification sent successfully')
    return True


def send_custom_message(data):
    """Send a message to a single recipient."""
    payload = dict(validate_form(CustomMessageSerializer, data))
    try:
        BroadcastService.send_message(payload)
    except ClientException as e:
        logger.info(f"Custom message failed: {e.message}")
        return False
    notify_success('Message sent successfully')
    return True
