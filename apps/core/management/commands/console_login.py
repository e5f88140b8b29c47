"""
Management command to sign in to a console and keep the session in storage.
"""
import getpass
import logging

from django.core.management.base import BaseCommand, CommandError

from apps.accounts.stores import AuthSession
from apps.core.exceptions import ClientException
from apps.core.routing import get_roles

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Sign in to a console role and store its tokens'

    def add_arguments(self, parser):
        parser.add_argument('role', choices=sorted(get_roles()), help='Console role')
        parser.add_argument('email', help='Account email')
        parser.add_argument(
            '--password',
            help='Account password (prompted when omitted)',
        )

    def handle(self, *args, **options):
        password = options['password'] or getpass.getpass('Password: ')
        session = AuthSession(options['role'])

        try:
            account = session.login(options['email'], password)
        except ClientException as e:
            raise CommandError(f'Login failed: {e.message}')

        name = account.get('name') or account.get('email') or options['email']
        self.stdout.write(self.style.SUCCESS(
            f'Signed in to the {options["role"]} console as {name}'
        ))
