"""
Tests for return request stores.
"""
from unittest.mock import patch

import pytest

from apps.core.exceptions import ApiError
from apps.core.routing import DELIVERY, VENDOR
from apps.returns.services import ReturnRequestService
from apps.returns.stores import ReturnRequestStore


@pytest.fixture
def returns(envelope):
    with patch('apps.returns.stores.ReturnRequestService.list') as mock_list:
        mock_list.return_value = envelope({
            'returnRequests': [
                {'_id': 'rr1', 'orderId': 'o1', 'reason': 'Damaged', 'status': 'pending'},
                {'_id': 'rr2', 'orderId': 'o2', 'reason': 'Wrong size', 'status': 'pending'},
            ],
            'pagination': {'total': 2, 'page': 1, 'limit': 10, 'pages': 1},
        })
        store = ReturnRequestStore()
        store.fetch()
    return store


class TestReturnRequestStore:
    """Tests for ReturnRequestStore."""

    def test_delivery_role_rejected(self):
        with pytest.raises(ValueError):
            ReturnRequestStore(DELIVERY)

    @patch('apps.returns.stores.ReturnRequestService.update_status')
    def test_update_status_merges(self, mock_status, returns, envelope, toasts):
        """Test that the status change keeps the cached request fields."""
        mock_status.return_value = envelope({'_id': 'rr1', 'status': 'approved', 'refundAmount': 499})

        assert returns.update_status('rr1', 'approved', admin_note='Refund approved', refundAmount=499)

        mock_status.assert_called_once_with('rr1', {
            'status': 'approved', 'adminNote': 'Refund approved', 'refundAmount': 499,
        })
        request = returns.get_by_id('rr1')
        assert request['status'] == 'approved'
        assert request['reason'] == 'Damaged'
        assert returns.get_by_id('rr2')['status'] == 'pending'
        assert toasts == [('success', 'Return request updated successfully')]

    @patch('apps.returns.stores.ReturnRequestService.update_status')
    def test_update_status_failure(self, mock_status, returns):
        mock_status.side_effect = ApiError('Invalid transition', 400)

        assert returns.update_status('rr2', 'completed') is False
        assert returns.get_by_id('rr2')['status'] == 'pending'

    def test_unknown_status(self, returns):
        with pytest.raises(ValueError):
            returns.update_status('rr1', 'lost')

    @patch('apps.returns.stores.VendorReturnRequestService.get')
    def test_vendor_detail(self, mock_get, envelope):
        mock_get.return_value = envelope({'_id': 'rr9', 'status': 'processing'})

        request = ReturnRequestStore(VENDOR).fetch_by_id('rr9')

        assert request['id'] == 'rr9'


class TestReturnRequestService:
    """Tests for return request endpoints."""

    @patch('apps.returns.services.api_client')
    def test_status_with_note(self, mock_client):
        ReturnRequestService.update_status('rr1', 'rejected', 'Outside return window')

        mock_client.return_value.patch.assert_called_once_with(
            '/admin/return-requests/rr1/status',
            json={'status': 'rejected', 'adminNote': 'Outside return window'},
        )
