"""
Catalog stores.
"""
import logging

from apps.core.exceptions import ClientException
from apps.core.notifications import notify_success
from apps.core.utils import same_id, unwrap
from apps.core.stores import ResourceStore

from .serializers import BrandSerializer, CategorySerializer, ProductSerializer
from .services import BrandService, CategoryService, ProductService

logger = logging.getLogger(__name__)


def _ref_id(value):
    """Identifier of a reference that may be populated into an object."""
    if isinstance(value, dict):
        value = value.get('_id') or value.get('id')
    return str(value) if value else None


def _parent_id(category):
    return _ref_id(category.get('parentId'))


class CategoryStore(ResourceStore):
    """
    Categories, cached for the whole catalog tree.
    The storefront reads the public list, the admin console the full one.
    """
    label = 'Category'
    plural_label = 'categories'
    persist_key = 'category-storage'
    serializer_class = CategorySerializer

    def __init__(self, public=False, **kwargs):
        super().__init__(**kwargs)
        self.public = public

    def list_request(self, params):
        if self.public:
            return CategoryService.list_public()
        return CategoryService.list()

    def create_request(self, data):
        return CategoryService.create(data)

    def update_request(self, item_id, data):
        return CategoryService.update(item_id, data)

    def delete_request(self, item_id):
        return CategoryService.delete(item_id)

    def get_categories(self):
        """Return the cached categories, loading them on first use."""
        if not self.items:
            self.fetch()
        return self.items

    def by_parent(self, parent_id):
        target = str(parent_id) if parent_id else None
        return [cat for cat in self.items if _parent_id(cat) == target]

    def roots(self):
        return [cat for cat in self.items if not _parent_id(cat)]

    def reorder(self, category_ids):
        """Send a new ordering; cached ``order`` fields follow once confirmed."""
        with self.loading():
            try:
                CategoryService.reorder(category_ids)
            except ClientException as e:
                self._fail('reorder', e)
                return False

        positions = {str(cat_id): index + 1 for index, cat_id in enumerate(category_ids)}
        self.items = [
            {**cat, 'order': positions[str(cat['id'])]} if str(cat.get('id')) in positions else cat
            for cat in self.items
        ]
        self.persist()
        self._success('Category order updated')
        return True


class BrandStore(ResourceStore):
    """Brands. The vendor console reads the public list."""
    label = 'Brand'
    plural_label = 'brands'
    persist_key = 'brand-storage'
    serializer_class = BrandSerializer

    def __init__(self, public=False, **kwargs):
        super().__init__(**kwargs)
        self.public = public

    def list_request(self, params):
        if self.public:
            return BrandService.list_public()
        return BrandService.list()

    def create_request(self, data):
        return BrandService.create(data)

    def update_request(self, item_id, data):
        return BrandService.update(item_id, data)

    def delete_request(self, item_id):
        return BrandService.delete(item_id)

    def get_brands(self):
        if not self.items:
            self.fetch()
        return self.items


class ProductStore(ResourceStore):
    """Admin product list with server-side pagination and filters."""
    label = 'Product'
    plural_label = 'products'
    list_key = 'products'
    serializer_class = ProductSerializer

    def list_request(self, params):
        return ProductService.list(params)

    def detail_request(self, item_id):
        return ProductService.get(item_id)

    def create_request(self, data):
        return ProductService.create(data)

    def update_request(self, item_id, data):
        return ProductService.update(item_id, data)

    def delete_request(self, item_id):
        return ProductService.delete(item_id)

    def by_category(self, category_id):
        return [
            product for product in self.items
            if same_id(_ref_id(product.get('categoryId')), category_id)
        ]


class TaxPricingRules:
    """Global tax and pricing rules edited from the product console."""

    def __init__(self):
        self.rules = None
        self.is_loading = False

    def fetch(self):
        self.is_loading = True
        try:
            self.rules = unwrap(ProductService.get_tax_pricing_rules())
        except ClientException as e:
            logger.info(f"Loading tax pricing rules failed: {e.message}")
            return None
        finally:
            self.is_loading = False
        return self.rules

    def save(self, data):
        self.is_loading = True
        try:
            self.rules = unwrap(ProductService.update_tax_pricing_rules(data))
        except ClientException as e:
            logger.info(f"Saving tax pricing rules failed: {e.message}")
            return None
        finally:
            self.is_loading = False
        notify_success('Tax and pricing rules updated')
        return self.rules
