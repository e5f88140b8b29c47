"""
Order stores.

The admin console manages every order; the storefront places, lists, tracks
and cancels the signed-in customer's own orders.
"""
import hashlib
import json
import logging

from django.utils import timezone

from apps.core.exceptions import ClientException, InvalidResponseError, ValidationError
from apps.core.notifications import notify_error
from apps.core.stores import ResourceStore
from apps.core.utils import is_object_id, same_id, unwrap
from apps.core.validation import validate_form

from .serializers import CheckoutSerializer
from .services import CustomerOrderService, OrderService

logger = logging.getLogger(__name__)

ORDER_STATUSES = ('pending', 'processing', 'shipped', 'delivered', 'cancelled', 'returned')


class OrderStore(ResourceStore):
    """Admin order list."""
    label = 'Order'
    plural_label = 'orders'
    list_key = 'orders'
    merge_updates = True

    def list_request(self, params):
        return OrderService.list(params)

    def detail_request(self, item_id):
        return OrderService.get(item_id)

    def delete_request(self, item_id):
        return OrderService.delete(item_id)

    def update_status(self, order_id, status):
        if status not in ORDER_STATUSES:
            raise ValueError(f'Unknown order status: {status}')
        return self._patch(order_id, OrderService.update_status, status, {'status': status},
                           'Order status updated')

    def assign_delivery_boy(self, order_id, delivery_boy_id):
        return self._patch(order_id, OrderService.assign_delivery_boy, delivery_boy_id,
                           {'deliveryBoy': delivery_boy_id}, 'Delivery boy assigned')

    def _patch(self, order_id, request, value, sent, message):
        with self.loading():
            try:
                body = request(order_id, value)
            except ClientException as e:
                return self._fail('patch', e)

        updated = self.apply_update(order_id, unwrap(body), sent)
        self._success(message)
        return updated


def idempotency_key(payload, user_id=None):
    """
    Key the backend uses to drop duplicate submissions of the same checkout.
    Identical carts of the same customer always map to the same key.
    """
    base = json.dumps({
        'userId': user_id,
        'items': payload.get('items', []),
        'shippingAddress': payload.get('shippingAddress', {}),
        'paymentMethod': payload.get('paymentMethod', ''),
        'couponCode': payload.get('couponCode', ''),
        'shippingOption': payload.get('shippingOption', 'standard'),
    }, sort_keys=True, default=str)
    digest = hashlib.sha256(base.encode()).hexdigest()[:16]
    return f"ord-{digest}-{len(payload.get('items', []))}"


def _normalize_order_item(item):
    if not isinstance(item, dict):
        return item
    return {**item, 'id': item.get('id') or item.get('productId') or item.get('_id')}


def _items(value):
    return [_normalize_order_item(i) for i in value] if isinstance(value, list) else []


class CustomerOrderStore(ResourceStore):
    """
    The signed-in customer's orders.
    Placing and cancelling an order re-raise failures so checkout can stay open.
    """
    label = 'Order'
    plural_label = 'orders'
    list_key = 'orders'
    persist_key = 'order-storage'
    notify_on_success = False
    page_size = 20

    def list_request(self, params):
        return CustomerOrderService.list(params)

    def detail_request(self, item_id):
        return CustomerOrderService.get(item_id)

    def normalize(self, item):
        order_id = item.get('id') or item.get('orderId') or item.get('_id')
        vendor_items = item.get('vendorItems')
        return {
            **item,
            'id': str(order_id) if order_id is not None else None,
            'date': item.get('date') or item.get('createdAt') or timezone.now().isoformat(),
            'userId': item.get('userId'),
            'items': _items(item.get('items')),
            'vendorItems': [
                {**group, 'vendorId': str(group.get('vendorId') or ''), 'items': _items(group.get('items'))}
                for group in vendor_items if isinstance(group, dict)
            ] if isinstance(vendor_items, list) else [],
        }

    def item_id(self, item):
        return item.get('id') if isinstance(item, dict) else None

    def fetch_orders(self, page=1, limit=None):
        """Load a page of orders; later pages are appended."""
        return self.fetch({'page': page, 'limit': limit or self.page_size}, append=page > 1)

    def for_user(self, user_id=None):
        """Orders of one customer; None selects guest orders."""
        if user_id is None:
            return [order for order in self.items if order.get('userId') is None]
        return [order for order in self.items if same_id(order.get('userId'), user_id)]

    def for_vendor(self, vendor_id):
        return [
            order for order in self.items
            if any(same_id(group['vendorId'], vendor_id) for group in order['vendorItems'])
        ]

    def vendor_items(self, order_id, vendor_id):
        """The part of an order sold by one vendor, or None."""
        order = self.get_by_id(order_id)
        if order is None:
            return None
        for group in order['vendorItems']:
            if same_id(group['vendorId'], vendor_id):
                return group
        return None

    def place_order(self, data, user_id=None):
        """
        Submit the checkout and return the created order as stored by the backend.
        Raises ValidationError, ApiError or InvalidResponseError.
        """
        items = data.get('items') or []
        if not items:
            self._reject('Your cart is empty.', 'items')
        if not all(is_object_id(item.get('id')) for item in items):
            self._reject('Some cart items are outdated. Please refresh your cart and try again.', 'items')

        payload = {
            'items': [
                {
                    'productId': item['id'],
                    'quantity': int(item.get('quantity') or 1),
                    'price': float(item.get('price') or 0),
                    **({'variant': item['variant']} if item.get('variant') else {}),
                }
                for item in items
            ],
            'shippingAddress': data.get('shippingAddress'),
            'paymentMethod': data.get('paymentMethod'),
            'shippingOption': data.get('shippingOption') or 'standard',
        }
        if data.get('couponCode'):
            payload['couponCode'] = data['couponCode']
        validate_form(CheckoutSerializer, payload)

        with self.loading():
            body = CustomerOrderService.create(payload, idempotency_key(payload, user_id))

        created = unwrap(body)
        order_id = created.get('orderId') if isinstance(created, dict) else None
        if not order_id:
            self._invalid('Invalid order creation response from server.')

        order = self.get_order(order_id)
        if order is None:
            self._invalid('Order created but could not be fetched. Please check your orders.')
        logger.info(f"Placed order {order_id}")
        return order

    def get_order(self, order_id):
        """Cached order, or the backend's copy put at the top of the list; None on failure."""
        return self._load('get_order', order_id, CustomerOrderService.get, self.normalize)

    def track(self, order_id):
        """Public tracking view of an order; item lists are not disclosed."""
        def _normalize(payload):
            return self.normalize({
                **payload,
                'id': payload.get('orderId') or payload.get('_id'),
                'date': payload.get('createdAt') or payload.get('date'),
                'items': [],
                'vendorItems': [],
            })
        return self._load('track', order_id, CustomerOrderService.track, _normalize)

    def cancel(self, order_id, reason='Cancelled by customer'):
        """Cancel a cached order; returns False if the order is unknown."""
        if self.get_by_id(order_id) is None:
            return False

        with self.loading():
            CustomerOrderService.cancel(order_id, reason)

        self.apply_update(order_id, None, {
            'status': 'cancelled',
            'cancelledAt': timezone.now().isoformat(),
        })
        return True

    def _load(self, action, order_id, request, normalize):
        cached = self.get_by_id(order_id)
        if cached is not None:
            return cached

        try:
            body = request(order_id)
        except ClientException as e:
            return self._fail(action, e, raise_errors=False)

        payload = unwrap(body)
        if not isinstance(payload, dict):
            return None
        order = normalize(payload)
        self.items = [order] + [o for o in self.items if not same_id(o['id'], order['id'])]
        self.persist()
        return order

    def _reject(self, message, field):
        notify_error(message)
        raise ValidationError(message, field=field)

    def _invalid(self, message):
        notify_error(message)
        raise InvalidResponseError(message)
