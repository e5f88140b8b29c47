"""
Vendor console routes.
"""
from django.urls import path

from apps.core.routing import page

app_name = 'vendor'

urlpatterns = [
    path('login', page('login'), name='login'),
    path('register', page('register'), name='register'),
    path('verification', page('verification'), name='verification'),
    path('forgot-password', page('forgot-password'), name='forgot-password'),
    path('reset-password', page('reset-password'), name='reset-password'),
    path('dashboard', page('dashboard'), name='dashboard'),
    path('products', page('products'), name='products'),
    path('products/add', page('add-product'), name='add-product'),
    path('stock', page('stock-management'), name='stock-management'),
    path('orders', page('orders'), name='orders'),
    path('orders/<str:id>', page('order-detail'), name='order-detail'),
    path('customers', page('customers'), name='customers'),
    path('customers/<str:id>', page('customer-detail'), name='customer-detail'),
    path('return-requests', page('return-requests'), name='return-requests'),
    path('reviews', page('reviews'), name='reviews'),
    path('notifications', page('notifications'), name='notifications'),
    path('shipping', page('shipping-management'), name='shipping-management'),
    path('documents', page('documents'), name='documents'),
    path('chat', page('chat'), name='chat'),
]
