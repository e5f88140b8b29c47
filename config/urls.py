"""
Route tree of the console client.
One namespace per role; every role owns a ``login`` route.
"""
from django.urls import include, path

urlpatterns = [
    # Admin console
    path('admin/', include('config.routes.admin')),

    # Vendor console
    path('vendor/', include('config.routes.vendor')),

    # Delivery console
    path('delivery/', include('config.routes.delivery')),

    # Customer storefront
    path('', include('config.routes.customer')),
]
