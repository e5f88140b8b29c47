"""
Delivery stores.
"""
import logging

from apps.core.exceptions import ClientException
from apps.core.stores import ResourceStore
from apps.core.utils import same_id, unwrap

from .serializers import DeliveryBoySerializer
from .services import DeliveryBoyService, DeliveryOrderService

logger = logging.getLogger(__name__)

APPLICATION_STATUSES = ('pending', 'approved', 'rejected')


def _counter(boy, key):
    value = boy.get(key)
    if value is None:
        value = (boy.get('stats') or {}).get(key)
    return value or 0


class DeliveryBoyStore(ResourceStore):
    """Delivery staff managed from the admin console."""
    label = 'Delivery boy'
    plural_label = 'delivery boys'
    list_key = 'deliveryBoys'
    insert_position = 'prepend'
    merge_updates = True
    serializer_class = DeliveryBoySerializer

    def normalize(self, item):
        boy = super().normalize(item)
        if not isinstance(boy, dict):
            return boy
        boy.setdefault('status', 'active' if boy.get('isActive') else 'inactive')
        boy.setdefault('applicationStatus', 'approved')
        boy.setdefault('documentUrls', {})
        for key in ('totalDeliveries', 'pendingDeliveries', 'cashInHand'):
            boy[key] = _counter(boy, key)
        return boy

    def list_request(self, params):
        return DeliveryBoyService.list(params)

    def detail_request(self, item_id):
        return DeliveryBoyService.get(item_id)

    def create_request(self, data):
        return DeliveryBoyService.create(data)

    def update_request(self, item_id, data):
        return DeliveryBoyService.update(item_id, data)

    def delete_request(self, item_id):
        return DeliveryBoyService.delete(item_id)

    def update_status(self, boy_id, is_active):
        with self.loading():
            try:
                DeliveryBoyService.update_status(boy_id, is_active)
            except ClientException as e:
                self._fail('update_status', e)
                return False

        self.apply_update(boy_id, None, {
            'isActive': is_active,
            'status': 'active' if is_active else 'inactive',
        })
        self._success('Status updated successfully')
        return True

    def update_application_status(self, boy_id, application_status, reason=''):
        """Approve or reject a delivery registration."""
        if application_status not in APPLICATION_STATUSES:
            raise ValueError(f'Unknown application status: {application_status}')

        with self.loading():
            try:
                body = DeliveryBoyService.update_application_status(boy_id, application_status, reason)
            except ClientException as e:
                self._fail('update_application_status', e)
                return False

        payload = unwrap(body)
        confirmed = dict(payload) if isinstance(payload, dict) else {}
        confirmed.setdefault('applicationStatus', application_status)
        if 'isActive' in confirmed:
            confirmed['status'] = 'active' if confirmed['isActive'] else 'inactive'
        confirmed.setdefault('_id', str(boy_id))
        self.apply_update(boy_id, confirmed)
        self._success(f'Application {application_status} successfully')
        return True

    def settle_cash(self, boy_id, amount):
        """Record a cash settlement, then reload the list for the new balances."""
        with self.loading():
            try:
                DeliveryBoyService.settle_cash(boy_id, amount)
            except ClientException as e:
                self._fail('settle_cash', e)
                return False

        self._success('Cash settled successfully')
        self.fetch({'page': self.pagination.page, 'limit': self.pagination.limit})
        return True


def ui_status(status):
    """Map a backend order status to the delivery console's wording."""
    if status == 'shipped':
        return 'in-transit'
    if status == 'delivered':
        return 'completed'
    if status in ('pending', 'processing'):
        return 'pending'
    return status or 'pending'


def address_line(shipping_address):
    parts = [
        shipping_address.get('address'),
        shipping_address.get('city'),
        shipping_address.get('state'),
        shipping_address.get('zipCode'),
    ]
    return ', '.join(part for part in parts if part)


class DeliveryOrderStore(ResourceStore):
    """Orders assigned to the signed-in delivery boy."""
    label = 'Order'
    plural_label = 'orders'
    list_key = 'orders'
    notify_on_success = False

    def extract_items(self, payload):
        if isinstance(payload, list):
            return payload
        return super().extract_items(payload)

    def normalize(self, item):
        if not isinstance(item, dict):
            return item
        shipping = item.get('shippingAddress') or {}
        guest = item.get('guestInfo') or {}
        backend_status = item.get('status') or 'pending'
        items = item.get('items')
        order_id = item.get('orderId') or item.get('_id') or item.get('id')
        total = float(item.get('total', item.get('subtotal')) or 0)
        return {
            **item,
            'id': order_id,
            'orderId': order_id,
            'customer': shipping.get('name') or guest.get('name') or 'Customer',
            'phone': shipping.get('phone') or guest.get('phone') or '',
            'address': address_line(shipping),
            'amount': total,
            'total': total,
            'deliveryFee': float(item.get('shipping') or 0),
            'status': ui_status(backend_status),
            'rawStatus': backend_status,
            'items': items if isinstance(items, list) else [],
            'itemCount': len(items) if isinstance(items, list) else (items if isinstance(items, int) else 0),
        }

    def item_id(self, item):
        return item.get('id') if isinstance(item, dict) else None

    def list_request(self, params):
        return DeliveryOrderService.list(params)

    def detail_request(self, item_id):
        return DeliveryOrderService.get(item_id)

    def _current(self, order_id):
        order = self.get_by_id(order_id)
        if order is None and self.selected is not None and same_id(self.selected.get('id'), order_id):
            order = self.selected
        return order

    def update_status(self, order_id, status, otp=None):
        with self.loading():
            try:
                body = DeliveryOrderService.update_status(order_id, status, otp=otp)
            except ClientException as e:
                return self._fail('update_status', e)

        payload = unwrap(body)
        if not isinstance(payload, dict):
            return self.apply_update(order_id, None, {'rawStatus': status, 'status': ui_status(status)})
        return self.apply_update(order_id, payload)

    def accept(self, order_id):
        """Pick up a pending order (moves it to shipped)."""
        current = self._current(order_id)
        if current is not None and current['status'] != 'pending':
            return current
        return self.update_status(order_id, 'shipped')

    def complete(self, order_id, otp):
        """Deliver an in-transit order with the customer's OTP."""
        current = self._current(order_id)
        if current is not None and current['status'] != 'in-transit':
            return current
        return self.update_status(order_id, 'delivered', otp=otp)

    def resend_otp(self, order_id):
        try:
            DeliveryOrderService.resend_delivery_otp(order_id)
        except ClientException as e:
            logger.info(f"Resending delivery OTP for {order_id} failed: {e.message}")
            return False
        return True
