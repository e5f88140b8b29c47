"""
Tests for the vendor store.
"""
from unittest.mock import patch

import pytest

from apps.core.exceptions import ApiError, ValidationError
from apps.vendors.stores import VendorStore


def vendor_page(envelope, ids, page, pages):
    return envelope({
        'vendors': [{'_id': i, 'storeName': f'Store {i}', 'status': 'approved', 'commissionRate': 10} for i in ids],
        'total': 3,
        'page': page,
        'pages': pages,
    })


@pytest.fixture
def vendors(envelope):
    with patch('apps.vendors.stores.VendorService.list') as mock_list:
        mock_list.side_effect = [
            vendor_page(envelope, ['v1', 'v2'], 1, 2),
            vendor_page(envelope, ['v3'], 2, 2),
        ]
        store = VendorStore()
        store.initialize()
    return store


class TestVendorStore:
    """Tests for VendorStore."""

    @patch('apps.vendors.stores.VendorService.list')
    def test_initialize_walks_pages(self, mock_list, envelope):
        """Test that every page of the flat-paginated list is loaded."""
        mock_list.side_effect = [
            vendor_page(envelope, ['v1', 'v2'], 1, 2),
            vendor_page(envelope, ['v3'], 2, 2),
        ]

        vendors = VendorStore().initialize()

        assert [v['id'] for v in vendors] == ['v1', 'v2', 'v3']
        assert [c.args[0] for c in mock_list.call_args_list] == [
            {'page': 1, 'limit': 200}, {'page': 2, 'limit': 200},
        ]

    @patch('apps.vendors.stores.VendorService.list')
    def test_initialize_failure(self, mock_list):
        mock_list.side_effect = ApiError('Server error', 500)

        assert VendorStore().initialize() == []

    @patch('apps.vendors.stores.VendorService.get')
    def test_get_vendor_from_cache(self, mock_get, vendors):
        vendor = vendors.get_vendor('v2')

        mock_get.assert_not_called()
        assert vendors.selected is vendor

    @patch('apps.vendors.stores.VendorService.get')
    def test_get_vendor_from_server(self, mock_get, vendors, envelope):
        mock_get.return_value = envelope({'_id': 'v4', 'storeName': 'Store v4'})

        vendor = vendors.get_vendor('v4')

        assert vendor['id'] == 'v4'
        assert vendors.get_by_id('v4') is not None

    @patch('apps.vendors.stores.VendorService.update_status')
    def test_suspend(self, mock_status, vendors, envelope, toasts):
        """Test that the confirmed vendor is merged; no success toast is shown."""
        mock_status.return_value = envelope({'_id': 'v1', 'status': 'suspended'})

        assert vendors.update_status('v1', 'suspended', reason='Policy violation')

        mock_status.assert_called_once_with('v1', 'suspended', 'Policy violation')
        vendor = vendors.get_by_id('v1')
        assert vendor['status'] == 'suspended'
        assert vendor['storeName'] == 'Store v1'
        assert toasts == []

    def test_unknown_status(self, vendors):
        with pytest.raises(ValueError):
            vendors.update_status('v1', 'pending')

    @patch('apps.vendors.stores.VendorService.update_status')
    def test_status_without_record(self, mock_status, vendors, envelope):
        mock_status.return_value = envelope(None)

        assert vendors.update_status('v1', 'rejected') is False
        assert vendors.get_by_id('v1')['status'] == 'approved'

    @patch('apps.vendors.stores.VendorService.update_commission_rate')
    def test_commission_rate(self, mock_rate, vendors, envelope):
        mock_rate.return_value = envelope({'_id': 'v3', 'commissionRate': 12.5})

        assert vendors.update_commission_rate('v3', '12.5')

        mock_rate.assert_called_once_with('v3', 12.5)
        assert vendors.get_by_id('v3')['commissionRate'] == 12.5

    @pytest.mark.parametrize('rate', [-1, 101, 'abc'])
    @patch('apps.vendors.stores.VendorService.update_commission_rate')
    def test_commission_rate_out_of_range(self, mock_rate, vendors, rate):
        with pytest.raises(ValidationError):
            vendors.update_commission_rate('v3', rate)
        mock_rate.assert_not_called()

    @patch('apps.vendors.stores.VendorService.list_commissions')
    def test_fetch_commissions(self, mock_commissions, vendors, envelope):
        mock_commissions.return_value = envelope({'commissions': [], 'summary': {'total': 0}})

        assert vendors.fetch_commissions('v1') == {'commissions': [], 'summary': {'total': 0}}
        mock_commissions.assert_called_once_with('v1', None)

    @pytest.mark.parametrize('rate', ['nan', 'inf', '-Infinity'])
    @patch('apps.vendors.stores.VendorService.update_commission_rate')
    def test_commission_rate_not_finite(self, mock_rate, vendors, toasts, rate):
        """Test that non-finite rates are rejected like any other bad value."""
        with pytest.raises(ValidationError):
            vendors.update_commission_rate('v3', rate)

        mock_rate.assert_not_called()
        assert toasts == [('error', 'Commission rate must be between 0 and 100')]

    @patch('apps.vendors.stores.VendorService.update_status')
    def test_loading_while_in_flight(self, mock_status, vendors, envelope):
        """Test that is_loading is set during the request and cleared after it."""
        seen = []

        def _answer(*args):
            seen.append(vendors.is_loading)
            return envelope({'_id': 'v1', 'status': 'approved'})
        mock_status.side_effect = _answer

        vendors.update_status('v1', 'approved')

        assert seen == [True]
        assert vendors.is_loading is False
