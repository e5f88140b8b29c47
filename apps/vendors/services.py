"""
Vendor management services.
"""
from apps.core.http import api_client


class VendorService:

    @staticmethod
    def list(params=None):
        return api_client().get('/admin/vendors', params=params or {})

    @staticmethod
    def get(vendor_id):
        return api_client().get(f'/admin/vendors/{vendor_id}')

    @staticmethod
    def update_status(vendor_id, status, reason=''):
        return api_client().patch(f'/admin/vendors/{vendor_id}/status', json={'status': status, 'reason': reason})

    @staticmethod
    def update_commission_rate(vendor_id, commission_rate):
        return api_client().patch(
            f'/admin/vendors/{vendor_id}/commission',
            json={'commissionRate': commission_rate},
        )

    @staticmethod
    def list_commissions(vendor_id, params=None):
        return api_client().get(f'/admin/vendors/{vendor_id}/commissions', params=params or {})
