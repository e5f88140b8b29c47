"""
Admin console routes.
"""
from django.urls import path

from apps.core.routing import page

app_name = 'admin'

urlpatterns = [
    path('login', page('login'), name='login'),
    path('', page('dashboard'), name='dashboard'),
    path('dashboard', page('dashboard'), name='dashboard-page'),
    path('analytics', page('analytics'), name='analytics'),

    # Catalog
    path('products', page('products'), name='products'),
    path('products/add', page('product-form'), name='product-add'),
    path('products/ratings', page('product-ratings'), name='product-ratings'),
    path('products/<str:id>', page('product-form'), name='product-edit'),
    path('categories', page('categories'), name='categories'),
    path('brands', page('brands'), name='brands'),

    # Orders & returns
    path('orders', page('orders'), name='orders'),
    path('orders/<str:id>', page('order-detail'), name='order-detail'),
    path('return-requests', page('return-requests'), name='return-requests'),
    path('reviews', page('reviews'), name='reviews'),

    # Customers
    path('customers', page('customers'), name='customers'),
    path('customers/addresses', page('customer-addresses'), name='customer-addresses'),
    path('customers/transactions', page('customer-transactions'), name='customer-transactions'),

    # Vendors
    path('vendors', page('vendors'), name='vendors'),
    path('vendors/<str:id>', page('vendor-detail'), name='vendor-detail'),

    # Delivery
    path('delivery/boys', page('delivery-boys'), name='delivery-boys'),
    path('delivery/assign', page('assign-delivery'), name='assign-delivery'),
    path('delivery/cash-collection', page('cash-collection'), name='cash-collection'),

    # Marketing
    path('offers/coupons', page('promo-codes'), name='promo-codes'),
    path('offers/sliders', page('home-sliders'), name='home-sliders'),
    path('offers/campaigns', page('campaigns'), name='campaigns'),

    # Notifications
    path('notifications', page('notifications'), name='notifications'),
    path('notifications/push', page('push-notifications'), name='push-notifications'),
]
