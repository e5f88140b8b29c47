"""
Return request stores.
"""
from apps.core.routing import ADMIN, VENDOR
from apps.core.stores import ResourceStore

from .services import ReturnRequestService, VendorReturnRequestService

RETURN_STATUSES = ('pending', 'approved', 'processing', 'rejected', 'completed')


class ReturnRequestStore(ResourceStore):
    """Return requests of the admin or vendor console."""
    label = 'Return request'
    plural_label = 'return requests'
    list_key = 'returnRequests'
    merge_updates = True

    def __init__(self, role=ADMIN, **kwargs):
        super().__init__(**kwargs)
        if role not in (ADMIN, VENDOR):
            raise ValueError(f'Return requests are not handled by role {role}')
        self.service = ReturnRequestService if role == ADMIN else VendorReturnRequestService

    def list_request(self, params):
        return self.service.list(params)

    def detail_request(self, item_id):
        return self.service.get(item_id)

    def update_request(self, item_id, data):
        return self.service.update_status(item_id, data)

    def update_status(self, request_id, status, admin_note='', **extra):
        """Move a request to ``status``; extra fields (refundAmount...) go along."""
        if status not in RETURN_STATUSES:
            raise ValueError(f'Unknown return status: {status}')
        payload = {'status': status, 'adminNote': admin_note, **extra}
        updated = self.update(request_id, payload)
        return updated is not None
