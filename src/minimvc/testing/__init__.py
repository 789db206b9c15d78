"""Test utilities for minimvc applications.

Provides an in-process ASGI test client and response assertions::

    from minimvc.testing import TestClient, assert_redirect

    async with TestClient(app) as client:
        response = await client.get("/hello")
        assert_redirect(response, "/users/login")
"""

from minimvc.testing.assertions import assert_not_found, assert_redirect
from minimvc.testing.client import TestClient

__all__ = ["TestClient", "assert_not_found", "assert_redirect"]
