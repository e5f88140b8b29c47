"""
Marketing services: coupons, banners and campaigns.
"""
from apps.core.http import api_client


class CouponService:
    """Coupon endpoints."""

    @staticmethod
    def list(params=None):
        return api_client().get('/admin/marketing/coupons', params=params or {})

    @staticmethod
    def create(data):
        return api_client().post('/admin/marketing/coupons', json=data)

    @staticmethod
    def update(coupon_id, data):
        return api_client().put(f'/admin/marketing/coupons/{coupon_id}', json=data)

    @staticmethod
    def delete(coupon_id):
        return api_client().delete(f'/admin/marketing/coupons/{coupon_id}')


class BannerService:
    """Banner (home slider) endpoints."""

    @staticmethod
    def list():
        return api_client().get('/admin/marketing/banners')

    @staticmethod
    def create(data):
        return api_client().post('/admin/marketing/banners', json=data)

    @staticmethod
    def update(banner_id, data):
        return api_client().put(f'/admin/marketing/banners/{banner_id}', json=data)

    @staticmethod
    def delete(banner_id):
        return api_client().delete(f'/admin/marketing/banners/{banner_id}')

    @staticmethod
    def reorder(items):
        return api_client().patch('/admin/marketing/banners/reorder', json={'items': items})


class CampaignService:
    """Campaign endpoints."""

    @staticmethod
    def list(params=None):
        return api_client().get('/admin/marketing/campaigns', params=params or {})

    @staticmethod
    def create(data):
        return api_client().post('/admin/marketing/campaigns', json=data)

    @staticmethod
    def update(campaign_id, data):
        return api_client().put(f'/admin/marketing/campaigns/{campaign_id}', json=data)

    @staticmethod
    def delete(campaign_id):
        return api_client().delete(f'/admin/marketing/campaigns/{campaign_id}')
