"""
Vendor stores.
"""
import logging
from decimal import Decimal, InvalidOperation

from apps.core.exceptions import ClientException, ValidationError
from apps.core.notifications import notify_error
from apps.core.stores import ResourceStore
from apps.core.utils import unwrap

from .services import VendorService

logger = logging.getLogger(__name__)

VENDOR_STATUSES = ('approved', 'suspended', 'rejected')


class VendorStore(ResourceStore):
    """All vendors, loaded in one pass over every page."""
    label = 'Vendor'
    plural_label = 'vendors'
    list_key = 'vendors'
    merge_updates = True
    notify_on_success = False

    def list_request(self, params):
        return VendorService.list(params)

    def detail_request(self, item_id):
        return VendorService.get(item_id)

    def initialize(self):
        """Load every vendor; an unreachable backend leaves an empty list."""
        vendors = self.fetch_all(limit=200)
        return vendors if vendors is not None else []

    def get_vendor(self, vendor_id):
        return self.fetch_by_id(vendor_id, prefer_cache=True)

    def _patch(self, action, vendor_id, request):
        with self.loading():
            try:
                body = request()
            except ClientException as e:
                self._fail(action, e)
                return False

        payload = unwrap(body)
        if not isinstance(payload, dict):
            return False
        self.apply_update(vendor_id, payload)
        return True

    def update_status(self, vendor_id, status, reason=''):
        if status not in VENDOR_STATUSES:
            raise ValueError(f'Unknown vendor status: {status}')
        return self._patch(
            'update_status', vendor_id,
            lambda: VendorService.update_status(vendor_id, status, reason),
        )

    def update_commission_rate(self, vendor_id, commission_rate):
        """Set the vendor's commission percentage (0-100)."""
        try:
            rate = Decimal(str(commission_rate))
        except InvalidOperation:
            rate = None
        if rate is None or not rate.is_finite() or not 0 <= rate <= 100:
            message = 'Commission rate must be between 0 and 100'
            notify_error(message)
            raise ValidationError(message, field='commissionRate')

        return self._patch(
            'update_commission_rate', vendor_id,
            lambda: VendorService.update_commission_rate(vendor_id, float(rate)),
        )

    def fetch_commissions(self, vendor_id, params=None):
        """Commission history of one vendor; not cached."""
        try:
            return unwrap(VendorService.list_commissions(vendor_id, params))
        except ClientException as e:
            logger.info(f"Loading commissions of vendor {vendor_id} failed: {e.message}")
            return None
