"""
Tests for the admin order store.
"""
from unittest.mock import patch

import pytest

from apps.core.exceptions import ApiError
from apps.orders.services import OrderService
from apps.orders.stores import OrderStore


@pytest.fixture
def orders(envelope):
    with patch('apps.orders.stores.OrderService.list') as mock_list:
        mock_list.return_value = envelope({
            'orders': [
                {'_id': 'o1', 'orderId': 'ORD-1', 'status': 'pending', 'total': 100},
                {'_id': 'o2', 'orderId': 'ORD-2', 'status': 'processing', 'total': 250},
            ],
            'pagination': {'total': 2, 'page': 1, 'limit': 10, 'pages': 1},
        })
        store = OrderStore()
        store.fetch()
    return store


class TestOrderStore:
    """Tests for OrderStore."""

    @patch('apps.orders.stores.OrderService.update_status')
    def test_update_status(self, mock_status, orders, envelope, toasts):
        mock_status.return_value = envelope({'_id': 'o1', 'status': 'shipped'})

        order = orders.update_status('o1', 'shipped')

        mock_status.assert_called_once_with('o1', 'shipped')
        assert order['status'] == 'shipped'
        assert order['total'] == 100
        assert orders.get_by_id('o2')['status'] == 'processing'
        assert toasts == [('success', 'Order status updated')]

    def test_unknown_status(self, orders):
        with pytest.raises(ValueError):
            orders.update_status('o1', 'teleported')

    @patch('apps.orders.stores.OrderService.assign_delivery_boy')
    def test_assign_delivery_boy(self, mock_assign, orders, envelope):
        mock_assign.return_value = envelope(None)

        orders.assign_delivery_boy('o2', 'd1')

        assert orders.get_by_id('o2')['deliveryBoy'] == 'd1'

    @patch('apps.orders.stores.OrderService.assign_delivery_boy')
    def test_assign_failure(self, mock_assign, orders):
        mock_assign.side_effect = ApiError('Delivery boy unavailable', 409)

        assert orders.assign_delivery_boy('o2', 'd1') is None
        assert 'deliveryBoy' not in orders.get_by_id('o2')


class TestOrderService:
    """Tests for order endpoints."""

    @patch('apps.orders.services.api_client')
    def test_assign_delivery_boy(self, mock_client):
        OrderService.assign_delivery_boy('o2', 'd1')

        mock_client.return_value.patch.assert_called_once_with(
            '/admin/orders/o2/assign-delivery', json={'deliveryBoyId': 'd1'}
        )
