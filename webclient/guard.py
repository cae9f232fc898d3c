LOGIN_ROUTE = "/login"
PROTECTED_ROUTES = ("/dashboard",)


class RouteGuard:
    """
    Decides which route to render from the locally stored token alone.

    The token is never checked against the server here: a stale token still
    passes, and the API rejects it on the first request.
    """

    def __init__(self, storage, login_route=LOGIN_ROUTE, protected_routes=PROTECTED_ROUTES):
        self.storage = storage
        self.login_route = login_route
        self.protected_routes = tuple(protected_routes)

    def is_authenticated(self):
        return bool(self.storage.get("token"))

    def is_protected(self, route):
        return any(
            route == protected or route.startswith(protected.rstrip("/") + "/")
            for protected in self.protected_routes
        )

    def resolve(self, route):
        if self.is_protected(route) and not self.is_authenticated():
            return self.login_route
        return route
