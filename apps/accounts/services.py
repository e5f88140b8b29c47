"""
Authentication services.

Each console authenticates against its own ``/<area>/auth`` endpoints; the
customer storefront uses ``/user/auth``.
"""
from apps.core.http import api_client
from apps.core.routing import ADMIN, CUSTOMER, DELIVERY, VENDOR

AUTH_ENDPOINTS = {
    ADMIN: '/admin/auth',
    VENDOR: '/vendor/auth',
    DELIVERY: '/delivery/auth',
    CUSTOMER: '/user/auth',
}


def auth_endpoint(role, action):
    try:
        base = AUTH_ENDPOINTS[role]
    except KeyError:
        raise ValueError(f'Unknown role: {role}')
    return f'{base}/{action}'


class AuthService:

    @staticmethod
    def login(role, email, password):
        return api_client().post(auth_endpoint(role, 'login'), json={'email': email, 'password': password})

    @staticmethod
    def logout(role, refresh_token):
        return api_client().post(auth_endpoint(role, 'logout'), json={'refreshToken': refresh_token})

    @staticmethod
    def get_profile(role):
        return api_client().get(auth_endpoint(role, 'profile'))

    @staticmethod
    def update_profile(role, data):
        return api_client().put(auth_endpoint(role, 'profile'), json=data)

    @staticmethod
    def register(role, data, files=None):
        if files:
            return api_client().post(auth_endpoint(role, 'register'), data=data, files=files)
        return api_client().post(auth_endpoint(role, 'register'), json=data)

    @staticmethod
    def verify_otp(role, email, otp):
        return api_client().post(auth_endpoint(role, 'verify-otp'), json={'email': email, 'otp': otp})

    @staticmethod
    def resend_otp(role, email):
        return api_client().post(auth_endpoint(role, 'resend-otp'), json={'email': email})

    @staticmethod
    def forgot_password(role, email):
        return api_client().post(auth_endpoint(role, 'forgot-password'), json={'email': email})

    @staticmethod
    def verify_reset_otp(role, email, otp):
        return api_client().post(auth_endpoint(role, 'verify-reset-otp'), json={'email': email, 'otp': otp})

    @staticmethod
    def reset_password(role, email, password, confirm_password):
        return api_client().post(
            auth_endpoint(role, 'reset-password'),
            json={'email': email, 'password': password, 'confirmPassword': confirm_password},
        )

    @staticmethod
    def change_password(role, current_password, new_password):
        return api_client().post(
            auth_endpoint(role, 'change-password'),
            json={'currentPassword': current_password, 'newPassword': new_password},
        )
