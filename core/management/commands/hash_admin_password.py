from getpass import getpass

from django.conf import settings
from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand, CommandError

from core.admin_account import authenticate_admin


class Command(BaseCommand):
    help = "Hash a password for ADMIN_PASSWORD_HASH, or check the configured admin login"

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            help="Password to hash (prompted for when omitted)",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Check the password against the configured admin account instead of hashing it",
        )

    def handle(self, *args, **options):
        password = options["password"]
        if password is None:
            password = getpass("Admin password: ")
        if not password:
            raise CommandError("Password must not be empty")

        if options["check"]:
            if authenticate_admin(settings.ADMIN_USERNAME, password):
                self.stdout.write(
                    self.style.SUCCESS(f"Admin '{settings.ADMIN_USERNAME}' can log in")
                )
            else:
                raise CommandError(
                    f"Password does not match the configured admin '{settings.ADMIN_USERNAME}'"
                )
            return

        self.stdout.write(f"ADMIN_PASSWORD_HASH={make_password(password)}")
