"""
Delivery services.
"""
from apps.core.http import api_client


class DeliveryBoyService:
    """Admin endpoints for delivery staff."""

    @staticmethod
    def list(params=None):
        return api_client().get('/admin/delivery-boys', params=params or {})

    @staticmethod
    def get(boy_id):
        return api_client().get(f'/admin/delivery-boys/{boy_id}')

    @staticmethod
    def create(data):
        return api_client().post('/admin/delivery-boys', json=data)

    @staticmethod
    def update(boy_id, data):
        return api_client().put(f'/admin/delivery-boys/{boy_id}', json=data)

    @staticmethod
    def update_status(boy_id, is_active):
        return api_client().patch(f'/admin/delivery-boys/{boy_id}/status', json={'isActive': is_active})

    @staticmethod
    def update_application_status(boy_id, application_status, reason=''):
        return api_client().patch(
            f'/admin/delivery-boys/{boy_id}/application-status',
            json={'applicationStatus': application_status, 'reason': reason},
        )

    @staticmethod
    def settle_cash(boy_id, amount):
        return api_client().post(f'/admin/delivery-boys/{boy_id}/settle-cash', json={'amount': amount})

    @staticmethod
    def delete(boy_id):
        return api_client().delete(f'/admin/delivery-boys/{boy_id}')


class DeliveryOrderService:
    """Delivery console order endpoints."""

    @staticmethod
    def list(params=None):
        return api_client().get('/delivery/orders', params=params or {})

    @staticmethod
    def get(order_id):
        return api_client().get(f'/delivery/orders/{order_id}')

    @staticmethod
    def update_status(order_id, status, otp=None):
        payload = {'status': status}
        if otp:
            payload['otp'] = str(otp).strip()
        return api_client().patch(f'/delivery/orders/{order_id}/status', json=payload)

    @staticmethod
    def resend_delivery_otp(order_id):
        return api_client().post(f'/delivery/orders/{order_id}/resend-delivery-otp')
