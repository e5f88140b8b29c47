"""
Catalog services: categories, brands and products.
"""
from apps.core.http import api_client


class CategoryService:
    """Category endpoints."""

    @staticmethod
    def list():
        return api_client().get('/admin/categories')

    @staticmethod
    def list_public():
        return api_client().get('/categories/all')

    @staticmethod
    def create(data):
        return api_client().post('/admin/categories', json=data)

    @staticmethod
    def update(category_id, data):
        return api_client().put(f'/admin/categories/{category_id}', json=data)

    @staticmethod
    def delete(category_id):
        return api_client().delete(f'/admin/categories/{category_id}')

    @staticmethod
    def reorder(category_ids):
        return api_client().patch('/admin/categories/reorder', json={'categoryIds': category_ids})


class BrandService:
    """Brand endpoints."""

    @staticmethod
    def list():
        return api_client().get('/admin/brands')

    @staticmethod
    def list_public():
        return api_client().get('/brands/all')

    @staticmethod
    def create(data):
        return api_client().post('/admin/brands', json=data)

    @staticmethod
    def update(brand_id, data):
        return api_client().put(f'/admin/brands/{brand_id}', json=data)

    @staticmethod
    def delete(brand_id):
        return api_client().delete(f'/admin/brands/{brand_id}')


class ProductService:
    """Admin product endpoints."""

    @staticmethod
    def list(params=None):
        return api_client().get('/admin/products', params=params or {})

    @staticmethod
    def get(product_id):
        return api_client().get(f'/admin/products/{product_id}')

    @staticmethod
    def create(data):
        return api_client().post('/admin/products', json=data)

    @staticmethod
    def update(product_id, data):
        return api_client().put(f'/admin/products/{product_id}', json=data)

    @staticmethod
    def delete(product_id):
        return api_client().delete(f'/admin/products/{product_id}')

    @staticmethod
    def get_tax_pricing_rules():
        return api_client().get('/admin/products/tax-pricing-rules')

    @staticmethod
    def update_tax_pricing_rules(data):
        return api_client().put('/admin/products/tax-pricing-rules', json=data)
