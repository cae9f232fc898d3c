import logging

import requests

from .storage import MemoryStorage

logger = logging.getLogger(__name__)

ENQUIRIES_PATH = "/api/enquiries/"
LOGIN_PATH = "/api/auth/login/"


class ApiError(Exception):
    """A non-2xx answer (or no answer at all) from the API."""

    def __init__(self, status_code, message, errors=None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors or []

    @property
    def first_message(self):
        """The first field-level message, falling back to the general one."""
        if self.errors:
            return self.errors[0].get("msg") or self.message
        return self.message

    @classmethod
    def from_response(cls, response):
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        return cls(
            response.status_code,
            body.get("message") or response.reason or "Request failed",
            body.get("errors"),
        )


class ApiClient:
    def __init__(self, base_url, session=None, storage=None, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.storage = storage if storage is not None else MemoryStorage()
        self.timeout = timeout

    def _request(self, method, path, **kwargs):
        headers = kwargs.pop("headers", {})
        token = self.storage.get("token")
        if token:
            headers["Authorization"] = f"Bearer {token}"

        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method, url, headers=headers, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ApiError(None, "Network error, please try again") from e

        if not response.ok:
            raise ApiError.from_response(response)
        return response.json()

    def login(self, username, password):
        return self._request(
            "POST", LOGIN_PATH, json={"username": username, "password": password}
        )

    def create_enquiry(self, payload):
        return self._request("POST", ENQUIRIES_PATH, json=payload)

    def list_enquiries(self, page=1, limit=10, search=""):
        return self._request(
            "GET",
            ENQUIRIES_PATH,
            params={"page": page, "limit": limit, "search": search},
        )

    def get_enquiry(self, enquiry_id):
        return self._request("GET", f"{ENQUIRIES_PATH}{enquiry_id}/")

    def update_enquiry(self, enquiry_id, fields):
        return self._request("PUT", f"{ENQUIRIES_PATH}{enquiry_id}/", json=fields)

    def delete_enquiry(self, enquiry_id):
        return self._request("DELETE", f"{ENQUIRIES_PATH}{enquiry_id}/")
