"""
Tests for roles, routes and navigation.
"""
import pytest
from django.urls import resolve, reverse

from apps.core.routing import (
    ADMIN, CUSTOMER, DELIVERY, VENDOR, Navigator, get_role, role_for_path,
)


class TestRoleForPath:
    """Tests for role_for_path function."""

    @pytest.mark.parametrize('path, role', [
        ('/admin/categories', ADMIN),
        ('/admin', ADMIN),
        ('/vendor/orders/1', VENDOR),
        ('/delivery/auth/login', DELIVERY),
        ('/user/auth/login', CUSTOMER),
        ('/categories/all', CUSTOMER),
        ('/administrator', CUSTOMER),
        ('', CUSTOMER),
    ])
    def test_prefix_match(self, path, role):
        """Test resolving the owning role from the path prefix."""
        assert role_for_path(path).name == role

    def test_unknown_role(self):
        """Test that unknown roles are rejected."""
        with pytest.raises(ValueError):
            get_role('supplier')


class TestRole:
    """Tests for Role descriptors."""

    @pytest.mark.parametrize('role, login', [
        (ADMIN, '/admin/login'),
        (VENDOR, '/vendor/login'),
        (DELIVERY, '/delivery/login'),
        (CUSTOMER, '/login'),
    ])
    def test_login_route(self, role, login):
        """Test that every role has its own login route."""
        assert get_role(role).login_route == login

    def test_storage_keys(self):
        """Test the persisted keys of each role."""
        assert get_role(ADMIN).token_key == 'adminToken'
        assert get_role(VENDOR).token_key == 'vendor-token'
        assert get_role(DELIVERY).refresh_token_key == 'delivery-refresh-token'
        assert get_role(CUSTOMER).auth_storage_key == 'auth-storage'

    @pytest.mark.parametrize('role, path, expected', [
        (VENDOR, '/vendor/register', True),
        (VENDOR, '/vendor/verification', True),
        (VENDOR, '/vendor/products', False),
        (DELIVERY, '/delivery/forgot-password', True),
        (ADMIN, '/admin/login', True),
        (ADMIN, '/admin/orders', False),
        (CUSTOMER, '/verification', True),
        (CUSTOMER, '/checkout', False),
        (CUSTOMER, '/vendor/login', False),
        (ADMIN, '/no/such/page', False),
    ])
    def test_is_auth_page(self, role, path, expected):
        """Test auth page detection per role."""
        assert get_role(role).is_auth_page(path) is expected

    def test_customer_owns_unprefixed_paths(self):
        """Test that the storefront owns everything outside the consoles."""
        customer = get_role(CUSTOMER)

        assert customer.owns('/orders')
        assert not customer.owns('/admin/orders')


class TestRouteTree:
    """Tests for the route tree."""

    def test_namespaces(self):
        """Test that each area resolves in its own namespace."""
        assert resolve('/admin/orders/42').namespace == ADMIN
        assert resolve('/vendor/products').namespace == VENDOR
        assert resolve('/delivery/orders').namespace == DELIVERY
        assert resolve('/product/42').namespace == CUSTOMER

    def test_static_route_before_parameter(self):
        """Test that product ratings are not read as a product id."""
        assert resolve('/admin/products/ratings').url_name == 'product-ratings'

    def test_page_view(self, client):
        """Test the page view of a route."""
        response = client.get(reverse('customer:product-detail', kwargs={'id': 'abc'}))

        assert response.status_code == 200
        assert response.json() == {
            'role': CUSTOMER,
            'page': 'product-detail',
            'params': {'id': 'abc'},
        }


class TestNavigator:
    """Tests for Navigator."""

    def test_redirect(self, redirects):
        """Test that a redirect moves the navigator and is announced."""
        navigator = Navigator('/admin/orders')

        navigator.redirect('/admin/login', role=ADMIN)

        assert navigator.current_path == '/admin/login'
        assert navigator.history == ['/admin/login']
        assert redirects == [(ADMIN, '/admin/login')]

    def test_should_redirect_to_login(self):
        """Test the redirect decision for a prefixed role."""
        vendor = get_role(VENDOR)

        assert Navigator('/vendor/orders').should_redirect_to_login(vendor)
        assert not Navigator('/vendor/login').should_redirect_to_login(vendor)
        assert not Navigator('/admin/orders').should_redirect_to_login(vendor)
