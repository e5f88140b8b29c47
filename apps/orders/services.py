"""
Order services (admin console).
"""
from apps.core.http import api_client


class OrderService:
    """Order endpoints."""

    @staticmethod
    def list(params=None):
        return api_client().get('/admin/orders', params=params or {})

    @staticmethod
    def get(order_id):
        return api_client().get(f'/admin/orders/{order_id}')

    @staticmethod
    def update_status(order_id, status):
        return api_client().patch(f'/admin/orders/{order_id}/status', json={'status': status})

    @staticmethod
    def assign_delivery_boy(order_id, delivery_boy_id):
        return api_client().patch(
            f'/admin/orders/{order_id}/assign-delivery',
            json={'deliveryBoyId': delivery_boy_id},
        )

    @staticmethod
    def delete(order_id):
        return api_client().delete(f'/admin/orders/{order_id}')


class CustomerOrderService:
    """Storefront order endpoints."""

    @staticmethod
    def list(params=None):
        return api_client().get('/user/orders', params=params or {})

    @staticmethod
    def get(order_id):
        return api_client().get(f'/user/orders/{order_id}')

    @staticmethod
    def create(data, idempotency_key):
        return api_client().post('/user/orders', json=data, headers={'x-idempotency-key': idempotency_key})

    @staticmethod
    def track(order_id):
        return api_client().get(f'/orders/track/{order_id}')

    @staticmethod
    def cancel(order_id, reason):
        return api_client().patch(f'/user/orders/{order_id}/cancel', json={'reason': reason})
