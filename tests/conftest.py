import pytest
from django.contrib.auth.hashers import make_password

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "pAssw0rd!"


@pytest.fixture(autouse=True)
def admin_account(settings):
    settings.ADMIN_USERNAME = ADMIN_USERNAME
    settings.ADMIN_PASSWORD_HASH = make_password(ADMIN_PASSWORD)
    settings.ENQUIRY_NOTIFY_TO = []
