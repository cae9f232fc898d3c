from rest_framework.test import APITestCase, RequestsClient

from webclient.api import ApiClient, ApiError
from webclient.guard import RouteGuard
from webclient.session import LoginPage, logout
from webclient.storage import MemoryStorage

PASSWORD = "pAssw0rd!"


class LoginPageTests(APITestCase):
    def setUp(self):
        self.storage = MemoryStorage()
        self.api = ApiClient("http://testserver", session=RequestsClient(), storage=self.storage)
        self.page = LoginPage(self.api)

    def test_login_stores_token_and_profile(self):
        self.assertFalse(self.page.already_logged_in())
        self.assertTrue(self.page.login("admin", PASSWORD))

        self.assertTrue(self.storage.get("token"))
        self.assertEqual(self.storage.get("user"), {"username": "admin"})
        self.assertEqual(self.page.notifier.last.message, "Welcome back, admin!")
        self.assertTrue(self.page.already_logged_in())
        self.assertFalse(self.page.loading)

    def test_wrong_credentials(self):
        self.assertFalse(self.page.login("admin", "wrong"))
        self.assertIsNone(self.storage.get("token"))
        self.assertEqual(self.page.notifier.last.level, "error")
        self.assertEqual(self.page.notifier.last.message, "Invalid credentials")

        # without a token the admin API stays closed
        with self.assertRaises(ApiError) as ctx:
            self.api.list_enquiries()
        self.assertEqual(ctx.exception.status_code, 401)

    def test_empty_fields_make_no_request(self):
        self.assertFalse(self.page.login("", PASSWORD))
        self.assertFalse(self.page.login("admin", ""))
        self.assertEqual(
            self.page.notifier.last.message, "Please enter both username and password"
        )

    def test_logout(self):
        self.page.login("admin", PASSWORD)
        logout(self.storage)
        self.assertIsNone(self.storage.get("token"))
        self.assertIsNone(self.storage.get("user"))
        self.assertFalse(self.page.already_logged_in())


def test_guard_redirects_without_token():
    guard = RouteGuard(MemoryStorage())
    assert guard.resolve("/dashboard") == "/login"
    assert guard.resolve("/dashboard/") == "/login"
    assert guard.resolve("/contact") == "/contact"
    assert guard.resolve("/") == "/"
    assert guard.resolve("/login") == "/login"


def test_guard_trusts_token_presence_only():
    guard = RouteGuard(MemoryStorage({"token": "forged-but-present"}))
    assert guard.is_authenticated()
    assert guard.resolve("/dashboard") == "/dashboard"


def test_guard_treats_empty_token_as_logged_out():
    guard = RouteGuard(MemoryStorage({"token": ""}))
    assert guard.resolve("/dashboard") == "/login"


def test_guard_does_not_protect_lookalike_routes():
    guard = RouteGuard(MemoryStorage())
    assert guard.resolve("/dashboards-public") == "/dashboards-public"
