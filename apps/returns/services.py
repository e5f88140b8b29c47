"""
Return request services.
"""
from apps.core.http import api_client


def _status_payload(status_or_payload, admin_note=''):
    if isinstance(status_or_payload, dict):
        return status_or_payload
    return {'status': status_or_payload, 'adminNote': admin_note}


class ReturnRequestService:
    """Admin return request endpoints."""

    @staticmethod
    def list(params=None):
        return api_client().get('/admin/return-requests', params=params or {})

    @staticmethod
    def get(request_id):
        return api_client().get(f'/admin/return-requests/{request_id}')

    @staticmethod
    def update_status(request_id, status_or_payload, admin_note=''):
        return api_client().patch(
            f'/admin/return-requests/{request_id}/status',
            json=_status_payload(status_or_payload, admin_note),
        )


class VendorReturnRequestService:
    """Vendor return request endpoints."""

    @staticmethod
    def list(params=None):
        return api_client().get('/vendor/return-requests', params=params or {})

    @staticmethod
    def get(request_id):
        return api_client().get(f'/vendor/return-requests/{request_id}')

    @staticmethod
    def update_status(request_id, status_or_payload, admin_note=''):
        return api_client().patch(
            f'/vendor/return-requests/{request_id}/status',
            json=_status_payload(status_or_payload, admin_note),
        )
