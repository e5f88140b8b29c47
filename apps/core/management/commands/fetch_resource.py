"""
Management command to print one page of a console resource.
"""
import json

from django.core.management.base import BaseCommand, CommandError

from apps.catalog.stores import BrandStore, CategoryStore, ProductStore
from apps.customers.stores import CustomerStore, WishlistStore
from apps.delivery.stores import DeliveryBoyStore
from apps.notifications.stores import NotificationStore
from apps.orders.stores import CustomerOrderStore, OrderStore
from apps.promotions.stores import BannerStore, CampaignStore, CouponStore
from apps.returns.stores import ReturnRequestStore
from apps.reviews.stores import ReviewStore
from apps.vendors.stores import VendorStore

RESOURCES = {
    'categories': CategoryStore,
    'brands': BrandStore,
    'products': ProductStore,
    'customers': CustomerStore,
    'coupons': CouponStore,
    'banners': BannerStore,
    'campaigns': CampaignStore,
    'reviews': ReviewStore,
    'return-requests': ReturnRequestStore,
    'delivery-boys': DeliveryBoyStore,
    'notifications': NotificationStore,
    'vendors': VendorStore,
    'orders': OrderStore,
    'my-orders': CustomerOrderStore,
    'wishlist': WishlistStore,
}


class Command(BaseCommand):
    help = 'Fetch one page of a console resource and print it as JSON'

    def add_arguments(self, parser):
        parser.add_argument('resource', choices=sorted(RESOURCES), help='Resource to fetch')
        parser.add_argument('--page', type=int, default=1, help='Page number (default: 1)')
        parser.add_argument('--limit', type=int, default=10, help='Page size (default: 10)')
        parser.add_argument('--search', default='', help='Search term')

    def handle(self, *args, **options):
        store = RESOURCES[options['resource']]()
        params = {'page': options['page'], 'limit': options['limit']}
        if options['search']:
            params['search'] = options['search']

        items = store.fetch(params)
        if items is None:
            raise CommandError(f'Could not fetch {options["resource"]}')

        pagination = store.pagination
        self.stdout.write(json.dumps(items, indent=2, ensure_ascii=False, default=str))
        self.stdout.write(self.style.SUCCESS(
            f'Page {pagination.page}/{pagination.pages} '
            f'({len(items)} of {pagination.total} {options["resource"]})'
        ))
