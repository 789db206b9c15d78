"""Login guards — redirect based on whether a user is logged in.

Session storage is not minimvc's business. Both guards take a
``current_user(request)`` callable that returns the logged-in user or
``None``; wire it to whatever session service the app uses::

    from minimvc.middleware.auth import GuestOnly, LoginRequired

    def current_user(request):
        return sessions.current(request.cookies.get("SESSION-ID"))

    app.get("/users/profile", (UserController, "profile"), [LoginRequired(current_user)])
    app.get("/users/login", (UserController, "login"), [GuestOnly(current_user)])
"""

import logging
from collections.abc import Callable
from typing import Any

from minimvc.http.request import Request
from minimvc.middleware.protocol import Abort, redirect

logger = logging.getLogger("minimvc.routing")

CurrentUser = Callable[[Request], Any]


class LoginRequired:
    """Redirect anonymous visitors to the login page."""

    __slots__ = ("current_user", "login_url")

    def __init__(self, current_user: CurrentUser, login_url: str = "/users/login") -> None:
        self.current_user = current_user
        self.login_url = login_url

    def before(self, request: Request) -> Abort | None:
        if self.current_user(request) is None:
            logger.debug(
                "No user for %s %s, redirecting to %s",
                request.method,
                request.path,
                self.login_url,
            )
            return redirect(self.login_url)
        return None

    def __repr__(self) -> str:
        return f"LoginRequired(login_url={self.login_url!r})"


class GuestOnly:
    """Redirect logged-in users away from guest pages (login, register)."""

    __slots__ = ("current_user", "home_url")

    def __init__(self, current_user: CurrentUser, home_url: str = "/") -> None:
        self.current_user = current_user
        self.home_url = home_url

    def before(self, request: Request) -> Abort | None:
        if self.current_user(request) is not None:
            return redirect(self.home_url)
        return None

    def __repr__(self) -> str:
        return f"GuestOnly(home_url={self.home_url!r})"
