"""
The single admin principal.

The account is not a database row: its username and salted password hash are
configuration values (``ADMIN_USERNAME`` / ``ADMIN_PASSWORD_HASH``) read at
call time so they can be rotated without a migration.
"""

import logging

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from django.utils.crypto import constant_time_compare

logger = logging.getLogger(__name__)


def admin_username():
    return settings.ADMIN_USERNAME


def authenticate_admin(username, password):
    """Return the admin username when the credentials match, otherwise None."""
    encoded = settings.ADMIN_PASSWORD_HASH
    if not encoded:
        logger.warning("ADMIN_PASSWORD_HASH is not configured; admin login is disabled.")
        # keep the timing of a failed login similar to a real hash check
        make_password(password)
        return None

    username_ok = constant_time_compare(username or "", admin_username())
    password_ok = check_password(password, encoded)
    if username_ok and password_ok:
        return admin_username()
    return None
