"""
Client-side counterpart of the portfolio site: the contact form, the admin
login page, the route guard and the enquiry dashboard, driven against the
REST API with ``requests``.
"""

from .api import ApiClient, ApiError
from .contact import ContactForm
from .dashboard import Dashboard
from .guard import RouteGuard
from .notifications import Notifier
from .session import LoginPage, logout
from .storage import LocalStorage, MemoryStorage

__all__ = (
    "ApiClient",
    "ApiError",
    "ContactForm",
    "Dashboard",
    "LocalStorage",
    "LoginPage",
    "MemoryStorage",
    "Notifier",
    "RouteGuard",
    "logout",
)
