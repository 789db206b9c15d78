"""Middleware — Protocol-based, no inheritance required.

A middleware is any object with a pre-dispatch hook::

    def before(self, request: Request) -> Abort | None

Built-in middleware:
    LoginRequired -- Redirect to the login page when nobody is logged in
    GuestOnly -- Redirect logged-in users away from guest-only pages
"""

from minimvc.middleware.auth import GuestOnly, LoginRequired
from minimvc.middleware.protocol import Abort, AnyResponse, Middleware, MiddlewareRef, redirect

__all__ = [
    "Abort",
    "AnyResponse",
    "GuestOnly",
    "LoginRequired",
    "Middleware",
    "MiddlewareRef",
    "redirect",
]
