"""
Tests for notification stores.
"""
from unittest.mock import patch

import pytest

from apps.core.exceptions import ApiError, ValidationError
from apps.core.routing import ADMIN, CUSTOMER, DELIVERY, VENDOR
from apps.notifications.services import NotificationService
from apps.notifications.stores import NotificationStore, push_notification, send_custom_message


def inbox_page(envelope, ids, page=1, pages=2, unread=3):
    return envelope({
        'notifications': [{'_id': i, 'title': f'Notice {i}', 'isRead': i.endswith('r')} for i in ids],
        'total': 12,
        'unreadCount': unread,
        'page': page,
        'pages': pages,
    })


@pytest.fixture
def inbox(envelope):
    with patch('apps.notifications.stores.NotificationService.list') as mock_list:
        mock_list.return_value = inbox_page(envelope, ['n1', 'n2r', 'n3'])
        store = NotificationStore(VENDOR)
        store.fetch_page(1)
    return store


class TestNotificationStore:
    """Tests for NotificationStore."""

    def test_unknown_role(self):
        with pytest.raises(ValueError):
            NotificationStore('supplier')

    def test_first_page(self, inbox):
        """Test that page 1 fills the inbox with unread count and paging flags."""
        assert [n['_id'] for n in inbox.items] == ['n1', 'n2r', 'n3']
        assert inbox.unread_count == 3
        assert inbox.page == 1
        assert inbox.has_more is True

    @patch('apps.notifications.stores.NotificationService.list')
    def test_load_more_appends(self, mock_list, inbox, envelope):
        mock_list.return_value = inbox_page(envelope, ['n4'], page=2, unread=4)

        inbox.load_more()

        mock_list.assert_called_once_with(VENDOR, {'page': 2, 'limit': 10})
        assert [n['_id'] for n in inbox.items] == ['n1', 'n2r', 'n3', 'n4']
        assert inbox.unread_count == 4
        assert inbox.has_more is False
        assert inbox.load_more() is None

    @patch('apps.notifications.stores.NotificationService.list')
    def test_page_one_replaces(self, mock_list, inbox, envelope):
        mock_list.return_value = inbox_page(envelope, ['n9'], pages=1, unread=1)

        inbox.fetch_page(1)

        assert [n['_id'] for n in inbox.items] == ['n9']

    @patch('apps.notifications.stores.NotificationService.list')
    def test_plain_list_counts_unread(self, mock_list, envelope):
        mock_list.return_value = envelope([{'_id': 'a', 'isRead': False}, {'_id': 'b', 'isRead': True}])
        store = NotificationStore(CUSTOMER)

        store.fetch_page(1)

        assert store.unread_count == 1
        assert store.has_more is False

    @patch('apps.notifications.stores.NotificationService.mark_as_read')
    def test_mark_as_read(self, mock_read, inbox):
        assert inbox.mark_as_read('n1')

        mock_read.assert_called_once_with(VENDOR, 'n1')
        assert inbox.get_by_id('n1')['isRead'] is True
        assert inbox.unread_count == 2

    @patch('apps.notifications.stores.NotificationService.mark_as_read')
    def test_mark_read_twice_counts_once(self, mock_read, inbox):
        inbox.mark_as_read('n2r')
        assert inbox.unread_count == 3

    @patch('apps.notifications.stores.NotificationService.mark_as_read')
    def test_unread_count_floor(self, mock_read, inbox):
        inbox.unread_count = 0
        inbox.mark_as_read('n1')
        assert inbox.unread_count == 0

    @patch('apps.notifications.stores.NotificationService.mark_all_as_read')
    def test_mark_all_as_read(self, mock_all, inbox, toasts):
        assert inbox.mark_all_as_read()

        assert all(n['isRead'] for n in inbox.items)
        assert inbox.unread_count == 0
        assert toasts == [('success', 'All notifications marked as read')]

    @patch('apps.notifications.stores.NotificationService.mark_all_as_read')
    def test_mark_all_failure(self, mock_all, inbox, toasts):
        mock_all.side_effect = ApiError('Server error', 500)

        assert inbox.mark_all_as_read() is False
        assert inbox.unread_count == 3
        assert toasts == [('error', 'Failed to mark all notifications as read')]

    @patch('apps.notifications.stores.NotificationService.delete')
    def test_delete_unread(self, mock_delete, inbox, toasts):
        assert inbox.delete('n3')

        mock_delete.assert_called_once_with(VENDOR, 'n3')
        assert inbox.get_by_id('n3') is None
        assert inbox.unread_count == 2
        assert toasts == [('success', 'Notification deleted')]

    def test_admin_cannot_delete(self):
        with pytest.raises(ValueError):
            NotificationStore(ADMIN).delete('n1')


class TestNotificationService:
    """Tests for inbox endpoints per role."""

    @pytest.mark.parametrize('role, url', [
        (ADMIN, '/admin/notifications/n1/read'),
        (VENDOR, '/vendor/notifications/n1/read'),
        (DELIVERY, '/delivery/notifications/n1/read'),
        (CUSTOMER, '/user/notifications/n1/read'),
    ])
    @patch('apps.notifications.services.api_client')
    def test_mark_as_read_url(self, mock_client, role, url):
        NotificationService.mark_as_read(role, 'n1')
        mock_client.return_value.put.assert_called_once_with(url)


class TestBroadcasts:
    """Tests for admin push and custom messages."""

    @patch('apps.notifications.stores.BroadcastService.push')
    def test_push(self, mock_push, toasts):
        assert push_notification({'title': 'Sale', 'message': 'Up to 50% off', 'audience': 'customers'})

        mock_push.assert_called_once_with({'title': 'Sale', 'message': 'Up to 50% off', 'audience': 'customers'})
        assert toasts == [('success', 'Notification sent successfully')]

    @patch('apps.notifications.stores.BroadcastService.push')
    def test_push_invalid(self, mock_push):
        with pytest.raises(ValidationError):
            push_notification({'title': 'Sale'})
        mock_push.assert_not_called()

    @patch('apps.notifications.stores.BroadcastService.send_message')
    def test_custom_message_failure(self, mock_send):
        mock_send.side_effect = ApiError('Recipient not found', 404)

        assert send_custom_message({'recipientId': 'u1', 'title': 'Hi', 'message': 'Hello'}) is False
