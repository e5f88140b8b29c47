"""
Customer stores.
"""
import logging

from apps.core.exceptions import ClientException
from apps.core.routing import CUSTOMER, get_role
from apps.core.stores import ResourceStore
from apps.core.utils import is_object_id, normalize_phone, same_id, unwrap

from .serializers import AddressSerializer, CustomerSerializer
from .services import AddressService, CustomerService, WishlistService

logger = logging.getLogger(__name__)


def customer_status(is_active):
    return 'active' if is_active else 'blocked'


class CustomerStore(ResourceStore):
    """Admin customer list; ``status`` mirrors ``isActive`` for display."""
    label = 'Customer'
    plural_label = 'customers'
    list_key = 'customers'
    merge_updates = True
    persist_key = 'admin-customer-storage'
    serializer_class = CustomerSerializer

    def normalize(self, item):
        item = super().normalize(item)
        if isinstance(item, dict) and 'isActive' in item:
            item['status'] = customer_status(item['isActive'])
        return item

    def list_request(self, params):
        return CustomerService.list(params)

    def detail_request(self, item_id):
        return CustomerService.get(item_id)

    def update_request(self, item_id, data):
        return CustomerService.update(item_id, data)

    def toggle_status(self, item_id, field='isActive'):
        """Block or activate a customer through the status endpoint."""
        customer = self.get_by_id(item_id)
        if customer is None:
            return None
        is_active = customer.get('status') != 'active'

        with self.loading():
            try:
                body = CustomerService.update_status(item_id, is_active)
            except ClientException as e:
                return self._fail('toggle_status', e)

        payload = unwrap(body)
        confirmed = payload.get('isActive', is_active) if isinstance(payload, dict) else is_active
        updated = self.apply_update(item_id, {'_id': str(item_id), 'isActive': confirmed})
        self._success(f"Customer {'activated' if confirmed else 'blocked'} successfully")
        return updated

    def delete_address(self, customer_id, address_id):
        """Remove one address; the cached customer follows once confirmed."""
        with self.loading():
            try:
                CustomerService.delete_address(customer_id, address_id)
            except ClientException as e:
                self._fail('delete_address', e)
                return False

        for target in (self.get_by_id(customer_id), self.selected):
            if target is None or not same_id(self.item_id(target), customer_id):
                continue
            addresses = [
                address for address in target.get('addresses', [])
                if not same_id(address.get('_id') or address.get('id'), address_id)
            ]
            self.apply_update(customer_id, {'_id': str(customer_id), 'addresses': addresses})
            break
        self._success('Address deleted successfully')
        return True

    def fetch_orders(self, customer_id, params=None):
        """Orders of one customer; not cached."""
        try:
            return unwrap(CustomerService.list_orders(customer_id, params))
        except ClientException as e:
            logger.info(f"Loading orders of customer {customer_id} failed: {e.message}")
            return None


class CustomerTransactionStore(ResourceStore):
    """Read-only list of customer payment transactions."""
    label = 'Transaction'
    plural_label = 'transactions'
    list_key = 'transactions'

    def list_request(self, params):
        return CustomerService.list_transactions(params)


class CustomerAddressStore(ResourceStore):
    """Addresses of every customer; deletion goes through the owning customer."""
    label = 'Address'
    plural_label = 'addresses'
    list_key = 'addresses'

    def list_request(self, params):
        return CustomerService.list_addresses(params)

    def delete_request(self, item_id):
        address = self.get_by_id(item_id) or {}
        owner = address.get('userId') or address.get('customerId')
        if isinstance(owner, dict):
            owner = owner.get('_id') or owner.get('id')
        if not owner:
            raise ValueError(f'Owning customer of address {item_id} is unknown')
        return CustomerService.delete_address(owner, item_id)


ADDRESS_TEXT_FIELDS = ('name', 'fullName', 'address', 'city', 'state', 'zipCode', 'country')


def clean_address(data, partial=False):
    """Trim text fields and keep the last 10 digits of the phone number."""
    cleaned = dict(data)
    for field in ADDRESS_TEXT_FIELDS:
        if field in data or not partial:
            cleaned[field] = str(data.get(field) or '').strip()
    if 'phone' in data or not partial:
        cleaned['phone'] = normalize_phone(data.get('phone'))
    return cleaned


class AddressStore(ResourceStore):
    """
    The signed-in customer's address book.
    Exactly one address is the default once any exists.
    """
    label = 'Address'
    plural_label = 'addresses'
    persist_key = 'address-storage'
    serializer_class = AddressSerializer
    raise_errors = True

    def list_request(self, params):
        return AddressService.list()

    def create_request(self, data):
        return AddressService.create(data)

    def update_request(self, item_id, data):
        return AddressService.update(item_id, data)

    def delete_request(self, item_id):
        return AddressService.delete(item_id)

    def create(self, data, raise_errors=None):
        """Add an address; the first one becomes the default."""
        payload = clean_address(data)
        payload['isDefault'] = not self.items or bool(data.get('isDefault'))
        created = super().create(payload, raise_errors=raise_errors)
        if isinstance(created, dict) and payload['isDefault']:
            self._mark_default(self.item_id(created))
        return created

    def update(self, item_id, data, raise_errors=None):
        updated = super().update(item_id, clean_address(data, partial=True), raise_errors=raise_errors)
        if isinstance(updated, dict) and updated.get('isDefault'):
            self._mark_default(item_id)
        return updated

    def delete(self, item_id, raise_errors=None):
        """Remove an address; the newest remaining one inherits the default."""
        removed = self.get_by_id(item_id)
        if not super().delete(item_id, raise_errors=raise_errors):
            return False
        if removed and removed.get('isDefault') and self.items:
            newest = max(self.items, key=lambda address: address.get('createdAt') or '')
            self._mark_default(self.item_id(newest))
        return True

    def set_default(self, item_id):
        with self.loading():
            try:
                body = AddressService.set_default(item_id)
            except ClientException as e:
                return self._fail('set_default', e)

        payload = unwrap(body)
        default_id = self.item_id(self.normalize(payload)) if isinstance(payload, dict) else item_id
        self._mark_default(default_id or item_id)
        return self.get_by_id(default_id or item_id)

    def default_address(self):
        for address in self.items:
            if address.get('isDefault'):
                return address
        return self.items[0] if self.items else None

    def _mark_default(self, default_id):
        self.items = [
            {**address, 'isDefault': same_id(self.item_id(address), default_id)}
            for address in self.items
        ]
        self.persist()


def normalize_wishlist_item(item):
    """Flatten a wishlist entry whose ``productId`` may be a populated product."""
    populated = isinstance(item.get('productId'), dict)
    product = item['productId'] if populated else item
    if populated:
        product_id = product.get('id') or product.get('_id')
    else:
        product_id = item.get('productId') or item.get('id') or item.get('_id')
    product_id = str(product_id or '').strip()
    entry = {
        'id': product_id,
        'productId': product_id,
        'name': product.get('name') or item.get('name') or 'Product',
        'price': float(product.get('price', item.get('price')) or 0),
        'image': product.get('image') or item.get('image') or '',
        'stock': product.get('stock', item.get('stock')),
        'unit': product.get('unit', item.get('unit')),
        'rating': float(product.get('rating', item.get('rating')) or 0),
    }
    original_price = product.get('originalPrice', item.get('originalPrice'))
    if original_price is not None:
        entry['originalPrice'] = float(original_price)
    return entry


class WishlistStore(ResourceStore):
    """
    The customer's wishlist.
    Guests keep it locally; signed-in customers sync it with the backend.
    """
    label = 'Wishlist item'
    plural_label = 'wishlist items'
    persist_key = 'wishlist-storage'
    alias_ids = False
    notify_on_success = False

    def list_request(self, params):
        return WishlistService.list()

    def normalize(self, item):
        return normalize_wishlist_item(item)

    def item_id(self, item):
        return item.get('id') if isinstance(item, dict) else None

    def after_fetch(self, payload):
        self.items = [item for item in self.items if item['id']]

    @property
    def is_synced(self):
        return bool(self.storage.get_item(get_role(CUSTOMER).token_key))

    @property
    def count(self):
        return len(self.items)

    def load(self):
        """Refresh from the backend when signed in; the cached list otherwise."""
        if not self.is_synced:
            return self.items
        items = self.fetch()
        return items if items is not None else self.items

    def contains(self, product_id):
        return self.get_by_id(product_id) is not None

    def add(self, product):
        """Add a product once; returns False if nothing was added."""
        entry = normalize_wishlist_item(product)
        if not entry['id'] or self.contains(entry['id']):
            return False

        if self.is_synced and is_object_id(entry['id']):
            with self.loading():
                try:
                    WishlistService.add(entry['id'])
                except ClientException as e:
                    self._fail('add', e)
                    return False

        self._upsert(entry)
        self.persist()
        return True

    def remove(self, product_id):
        if not self.contains(product_id):
            return False

        if self.is_synced and is_object_id(product_id):
            with self.loading():
                try:
                    WishlistService.remove(product_id)
                except ClientException as e:
                    self._fail('remove', e)
                    return False

        self._remove([product_id])
        return True

    def clear(self):
        """Remove every item; items the backend refused stay listed."""
        for item in list(self.items):
            self.remove(item['id'])
        return self.items == []

    def move_to_cart(self, product_id):
        """Take an item off the wishlist and return it for the cart."""
        item = self.get_by_id(product_id)
        if item is None or not self.remove(product_id):
            return None
        return item
