"""
Tests for customer services.
"""
from unittest.mock import patch

from apps.customers.services import CustomerService


class TestCustomerService:
    """Tests for CustomerService endpoints."""

    @patch('apps.customers.services.api_client')
    def test_list(self, mock_client):
        CustomerService.list({'search': 'asha'})
        mock_client.return_value.get.assert_called_once_with('/admin/customers', params={'search': 'asha'})

    @patch('apps.customers.services.api_client')
    def test_update_status(self, mock_client):
        CustomerService.update_status('u1', False)
        mock_client.return_value.patch.assert_called_once_with(
            '/admin/customers/u1/status', json={'isActive': False}
        )

    @patch('apps.customers.services.api_client')
    def test_delete_address(self, mock_client):
        CustomerService.delete_address('u1', 'a1')
        mock_client.return_value.delete.assert_called_once_with('/admin/customers/u1/addresses/a1')
