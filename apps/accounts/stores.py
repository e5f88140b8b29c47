"""
Authentication state per console.

A session keeps the signed-in account of one role. Tokens are written to the
role's storage keys, which the shared HTTP client reads; the account snapshot
goes to the role's auth-state key so a new process can resume the session.
"""
import logging

from apps.core.exceptions import ApiError, ClientException, InvalidResponseError
from apps.core.notifications import notify_error
from apps.core.routing import ADMIN, CUSTOMER, DELIVERY, VENDOR, get_role
from apps.core.storage import get_storage
from apps.core.utils import normalize_email, normalize_id, normalize_phone, unwrap
from apps.core.validation import validate_form

from .serializers import (
    ChangePasswordSerializer, DeliveryRegisterSerializer, LoginSerializer,
    OtpSerializer, RegisterSerializer, ResetPasswordSerializer,
    VendorRegisterSerializer,
)
from .services import AuthService

logger = logging.getLogger(__name__)

# Key of the account object in login responses
ACCOUNT_FIELDS = {
    ADMIN: 'admin',
    VENDOR: 'vendor',
    DELIVERY: 'deliveryBoy',
    CUSTOMER: 'user',
}

REGISTER_SERIALIZERS = {
    CUSTOMER: RegisterSerializer,
    VENDOR: VendorRegisterSerializer,
    DELIVERY: DeliveryRegisterSerializer,
}

# Roles whose registration is confirmed with an emailed OTP
OTP_ROLES = (CUSTOMER, VENDOR)

AVAILABILITY_STATUSES = ('available', 'busy', 'offline')

UNVERIFIED_MARKERS = ('email not verified', 'verify your email')


def normalize_delivery_boy(account):
    account = normalize_id(account)
    if isinstance(account, dict) and not account.get('status'):
        account['status'] = 'offline' if account.get('isAvailable') is False else 'available'
    return account


class AuthSession:
    """Signed-in state of one console role."""

    def __init__(self, role=CUSTOMER, storage=None):
        self.role = get_role(role)
        self.storage = storage or get_storage()
        self.account = None
        self.token = None
        self.refresh_token = None
        self.pending_email = None
        self.is_loading = False

    @property
    def is_authenticated(self):
        return bool(self.token and self.account)

    @property
    def account_field(self):
        return ACCOUNT_FIELDS[self.role.name]

    def normalize_account(self, account):
        if self.role.name == DELIVERY:
            return normalize_delivery_boy(account)
        return account

    # =========================================================================
    # Persistence
    # =========================================================================

    def initialize(self):
        """Resume a persisted session; returns True if one was found."""
        token = self.storage.get_item(self.role.token_key)
        snapshot = self.storage.get_item(self.role.auth_storage_key) or {}
        account = snapshot.get('account')
        if not token or not account:
            return False
        self.token = token
        self.refresh_token = self.storage.get_item(self.role.refresh_token_key)
        self.account = self.normalize_account(account)
        return True

    def _save(self):
        self.storage.set_item(self.role.token_key, self.token)
        if self.refresh_token:
            self.storage.set_item(self.role.refresh_token_key, self.refresh_token)
        self.storage.set_item(self.role.auth_storage_key, {
            'account': self.account,
            'isAuthenticated': True,
        })

    def _clear(self):
        self.account = None
        self.token = None
        self.refresh_token = None
        for key in (self.role.token_key, self.role.refresh_token_key, self.role.auth_storage_key):
            self.storage.remove_item(key)

    def _call(self, request):
        self.is_loading = True
        try:
            return unwrap(request())
        finally:
            self.is_loading = False

    # =========================================================================
    # Sign in / out
    # =========================================================================

    def login(self, email, password):
        """
        Sign in and store the role's tokens.
        Errors are re-raised after they were notified.
        """
        email = normalize_email(email)
        validate_form(LoginSerializer, {'email': email, 'password': password})
        try:
            payload = self._call(lambda: AuthService.login(self.role.name, email, password))
        except ApiError as e:
            if any(marker in e.message.lower() for marker in UNVERIFIED_MARKERS):
                self.pending_email = email
            raise

        self._authenticate(payload, 'Invalid login response from server.')
        if self.role.name == DELIVERY:
            self._enrich_from_profile()
        self._save()
        logger.info(f"Signed in to the {self.role.name} console as {email}")
        return self.account

    def _authenticate(self, payload, error_message):
        payload = payload if isinstance(payload, dict) else {}
        access_token = payload.get('accessToken')
        refresh_token = payload.get('refreshToken')
        account = payload.get(self.account_field)
        # Admin sessions are issued without a refresh token
        refresh_required = self.role.name != ADMIN

        if not access_token or not account or (refresh_required and not refresh_token):
            notify_error(error_message)
            raise InvalidResponseError(error_message)

        self.token = access_token
        self.refresh_token = refresh_token
        self.account = self.normalize_account(account)
        self.pending_email = None

    def _enrich_from_profile(self):
        self.storage.set_item(self.role.token_key, self.token)
        try:
            profile = unwrap(AuthService.get_profile(self.role.name))
        except ClientException as e:
            logger.info(f"Keeping login payload, profile unavailable: {e.message}")
            return
        if isinstance(profile, dict):
            self.account = self.normalize_account({**self.account, **profile})

    def logout(self):
        """Revoke the refresh token and forget the session."""
        refresh_token = self.refresh_token or self.storage.get_item(self.role.refresh_token_key)
        if refresh_token:
            try:
                AuthService.logout(self.role.name, refresh_token)
            except ClientException as e:
                logger.info(f"Logout request for {self.role.name} failed: {e.message}")
        self._clear()
        self.pending_email = None

    # =========================================================================
    # Profile
    # =========================================================================

    def fetch_profile(self):
        payload = self._call(lambda: AuthService.get_profile(self.role.name))
        if isinstance(payload, dict):
            self.account = self.normalize_account(payload)
            self._save()
        return self.account

    def update_profile(self, data):
        data = dict(data)
        if 'phone' in data and self.role.name == CUSTOMER:
            data['phone'] = normalize_phone(data['phone'])
        payload = self._call(lambda: AuthService.update_profile(self.role.name, data))

        current = self.account or {}
        updates = payload if isinstance(payload, dict) else data
        if self.role.name == VENDOR and isinstance(payload, dict) and 'vendor' in payload:
            updates = payload['vendor']
        account = {**current, **updates}
        if current.get('email'):
            account['email'] = current['email']
        self.account = self.normalize_account(account)
        if self.token:
            self._save()
        return self.account

    def update_availability(self, status):
        """Set the delivery partner's availability (available, busy or offline)."""
        if self.role.name != DELIVERY:
            raise ValueError('Availability only applies to delivery partners')
        if status not in AVAILABILITY_STATUSES:
            raise ValueError(f'Unknown availability status: {status}')
        if self.account is None:
            return False

        is_available = status in ('available', 'busy')
        payload = self._call(lambda: AuthService.update_profile(
            self.role.name, {'isAvailable': is_available, 'status': status},
        ))
        merged = {**self.account, **(payload if isinstance(payload, dict) else {}), 'status': status}
        self.account = self.normalize_account(merged)
        if self.token:
            self._save()
        return True

    def change_password(self, current_password, new_password):
        validate_form(ChangePasswordSerializer, {
            'currentPassword': current_password,
            'newPassword': new_password,
        })
        self._call(lambda: AuthService.change_password(self.role.name, current_password, new_password))
        return True

    # =========================================================================
    # Registration & OTP
    # =========================================================================

    def register(self, data, files=None):
        """
        Submit a registration form.
        Failures are always re-raised so the form can show field errors.
        """
        try:
            serializer_class = REGISTER_SERIALIZERS[self.role.name]
        except KeyError:
            raise ValueError(f'{self.role.name} accounts cannot register')

        data = dict(data)
        data['email'] = normalize_email(data.get('email'))
        if self.role.name == CUSTOMER:
            phone = normalize_phone(data.pop('phone', ''))
            if phone:
                data['phone'] = phone
        validate_form(serializer_class, data)

        payload = self._call(lambda: AuthService.register(self.role.name, data, files=files))
        if self.role.name in OTP_ROLES:
            self.pending_email = data['email']
        if self.role.name == CUSTOMER:
            self._clear()

        message = payload.get('message') if isinstance(payload, dict) else None
        return message or 'Registration submitted.'

    def verify_otp(self, email, otp):
        """Confirm a registration; customers are signed in by the answer."""
        if self.role.name not in OTP_ROLES:
            raise ValueError(f'{self.role.name} accounts have no OTP verification')

        email = normalize_email(email)
        validate_form(OtpSerializer, {'email': email, 'otp': otp})
        payload = self._call(lambda: AuthService.verify_otp(self.role.name, email, otp))
        self.pending_email = None
        if self.role.name == CUSTOMER:
            self._authenticate(payload, 'Invalid OTP verification response from server.')
            self._save()
        return True

    def resend_otp(self, email):
        if self.role.name not in OTP_ROLES:
            raise ValueError(f'{self.role.name} accounts have no OTP verification')
        self._call(lambda: AuthService.resend_otp(self.role.name, normalize_email(email)))
        return True

    def forgot_password(self, email):
        payload = self._call(lambda: AuthService.forgot_password(self.role.name, normalize_email(email)))
        return payload.get('message') if isinstance(payload, dict) else None

    def verify_reset_otp(self, email, otp):
        email = normalize_email(email)
        validate_form(OtpSerializer, {'email': email, 'otp': otp})
        self._call(lambda: AuthService.verify_reset_otp(self.role.name, email, otp))
        return True

    def reset_password(self, email, password, confirm_password):
        email = normalize_email(email)
        validate_form(ResetPasswordSerializer, {
            'email': email,
            'password': password,
            'confirmPassword': confirm_password,
        })
        self._call(lambda: AuthService.reset_password(self.role.name, email, password, confirm_password))
        return True
