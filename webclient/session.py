from .api import ApiError
from .notifications import Notifier


def logout(storage):
    storage.remove("token")
    storage.remove("user")


class LoginPage:
    def __init__(self, api, storage=None, notifier=None):
        self.api = api
        self.storage = storage if storage is not None else api.storage
        self.notifier = notifier if notifier is not None else Notifier()
        self.loading = False

    def already_logged_in(self):
        return bool(self.storage.get("token"))

    def login(self, username, password):
        if not username or not password:
            self.notifier.error("Please enter both username and password")
            return False

        self.loading = True
        try:
            data = self.api.login(username, password)
            self.storage.set("token", data["token"])
            self.storage.set("user", {"username": data["username"]})
            self.notifier.success(f"Welcome back, {data['username']}!")
            return True
        except ApiError as e:
            self.notifier.error(e.message or "Invalid credentials")
            return False
        finally:
            self.loading = False
