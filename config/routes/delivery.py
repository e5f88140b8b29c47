"""
Delivery console routes.
"""
from django.urls import path

from apps.core.routing import page

app_name = 'delivery'

urlpatterns = [
    path('login', page('login'), name='login'),
    path('register', page('register'), name='register'),
    path('forgot-password', page('forgot-password'), name='forgot-password'),
    path('reset-password', page('reset-password'), name='reset-password'),
    path('dashboard', page('dashboard'), name='dashboard'),
    path('orders', page('orders'), name='orders'),
    path('orders/<str:id>', page('order-detail'), name='order-detail'),
    path('notifications', page('notifications'), name='notifications'),
    path('profile', page('profile'), name='profile'),
]
