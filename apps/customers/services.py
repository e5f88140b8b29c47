"""
Customer services.
The admin console manages customers; the storefront manages its own
address book and wishlist.
"""
from apps.core.http import api_client


class CustomerService:
    """Customer endpoints."""

    @staticmethod
    def list(params=None):
        return api_client().get('/admin/customers', params=params or {})

    @staticmethod
    def get(customer_id):
        return api_client().get(f'/admin/customers/{customer_id}')

    @staticmethod
    def update(customer_id, data):
        return api_client().put(f'/admin/customers/{customer_id}', json=data)

    @staticmethod
    def update_status(customer_id, is_active):
        return api_client().patch(f'/admin/customers/{customer_id}/status', json={'isActive': is_active})

    @staticmethod
    def delete_address(customer_id, address_id):
        return api_client().delete(f'/admin/customers/{customer_id}/addresses/{address_id}')

    @staticmethod
    def list_orders(customer_id, params=None):
        return api_client().get(f'/admin/customers/{customer_id}/orders', params=params or {})

    @staticmethod
    def list_transactions(params=None):
        return api_client().get('/admin/customers/transactions', params=params or {})

    @staticmethod
    def list_addresses(params=None):
        return api_client().get('/admin/customers/addresses', params=params or {})


class AddressService:
    """Storefront address book endpoints."""

    @staticmethod
    def list():
        return api_client().get('/user/addresses')

    @staticmethod
    def create(data):
        return api_client().post('/user/addresses', json=data)

    @staticmethod
    def update(address_id, data):
        return api_client().put(f'/user/addresses/{address_id}', json=data)

    @staticmethod
    def delete(address_id):
        return api_client().delete(f'/user/addresses/{address_id}')

    @staticmethod
    def set_default(address_id):
        return api_client().patch(f'/user/addresses/{address_id}/default')


class WishlistService:
    """Storefront wishlist endpoints."""

    @staticmethod
    def list():
        return api_client().get('/user/wishlist')

    @staticmethod
    def add(product_id):
        return api_client().post('/user/wishlist', json={'productId': product_id})

    @staticmethod
    def remove(product_id):
        return api_client().delete(f'/user/wishlist/{product_id}')
