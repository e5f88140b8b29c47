"""
Review services.
Admins and vendors moderate reviews; storefront customers write and rate them.
"""
from apps.core.http import api_client


class ReviewService:
    """Admin review endpoints."""

    @staticmethod
    def list(params=None):
        return api_client().get('/admin/reviews', params=params or {})

    @staticmethod
    def update_status(review_id, status):
        return api_client().patch(f'/admin/reviews/{review_id}/status', json={'status': status})

    @staticmethod
    def delete(review_id):
        return api_client().delete(f'/admin/reviews/{review_id}')


class VendorReviewService:
    """Vendor review endpoints."""

    @staticmethod
    def list(params=None):
        return api_client().get('/vendor/reviews', params=params or {})

    @staticmethod
    def update_status(review_id, status):
        return api_client().patch(f'/vendor/reviews/{review_id}/status', json={'status': status})

    @staticmethod
    def add_response(review_id, response):
        return api_client().patch(f'/vendor/reviews/{review_id}/response', json={'response': response})


class ProductReviewService:
    """Storefront review endpoints."""

    @staticmethod
    def list_for_product(product_id, params=None):
        return api_client().get(f'/user/reviews/product/{product_id}', params=params or {})

    @staticmethod
    def create(data):
        return api_client().post('/user/reviews', json=data)

    @staticmethod
    def mark_helpful(review_id):
        return api_client().post(f'/user/reviews/{review_id}/helpful')
