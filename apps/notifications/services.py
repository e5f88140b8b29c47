"""
Notification services.
"""
from apps.core.http import api_client
from apps.core.routing import ADMIN, CUSTOMER, DELIVERY, VENDOR

NOTIFICATION_ENDPOINTS = {
    ADMIN: '/admin/notifications',
    VENDOR: '/vendor/notifications',
    DELIVERY: '/delivery/notifications',
    CUSTOMER: '/user/notifications',
}


def notifications_endpoint(role):
    try:
        return NOTIFICATION_ENDPOINTS[role]
    except KeyError:
        raise ValueError(f'Unknown role: {role}')


class NotificationService:
    """Inbox endpoints of the signed-in user of each console."""

    @staticmethod
    def list(role, params=None):
        return api_client().get(notifications_endpoint(role), params=params or {})

    @staticmethod
    def mark_as_read(role, notification_id):
        return api_client().put(f'{notifications_endpoint(role)}/{notification_id}/read')

    @staticmethod
    def mark_all_as_read(role):
        return api_client().put(f'{notifications_endpoint(role)}/read-all')

    @staticmethod
    def delete(role, notification_id):
        return api_client().delete(f'{notifications_endpoint(role)}/{notification_id}')


class BroadcastService:
    """Admin messages sent to users."""

    @staticmethod
    def push(data):
        return api_client().post('/admin/notifications/push', json=data)

    @staticmethod
    def send_message(data):
        return api_client().post('/admin/notifications/message', json=data)
