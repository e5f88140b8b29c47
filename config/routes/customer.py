"""
Customer storefront routes.
"""
from django.urls import path

from apps.core.routing import page

app_name = 'customer'

urlpatterns = [
    path('', page('home'), name='home'),
    path('login', page('login'), name='login'),
    path('register', page('register'), name='register'),
    path('verification', page('verification'), name='verification'),
    path('forgot-password', page('forgot-password'), name='forgot-password'),
    path('reset-password', page('reset-password'), name='reset-password'),
    path('search', page('search'), name='search'),
    path('categories', page('categories'), name='categories'),
    path('category/<str:id>', page('category'), name='category'),
    path('brand/<str:id>', page('brand'), name='brand'),
    path('product/<str:id>', page('product-detail'), name='product-detail'),
    path('seller/<str:id>', page('seller'), name='seller'),
    path('sale/<slug:slug>', page('campaign-sale'), name='campaign-sale'),
    path('offers', page('offers'), name='offers'),
    path('wishlist', page('wishlist'), name='wishlist'),
    path('checkout', page('checkout'), name='checkout'),
    path('orders', page('orders'), name='orders'),
    path('orders/<str:id>', page('order-detail'), name='order-detail'),
    path('track-order/<str:id>', page('track-order'), name='track-order'),
    path('addresses', page('addresses'), name='addresses'),
    path('profile', page('profile'), name='profile'),
]
