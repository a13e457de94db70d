"""
Outcomes the business rules report to the HTTP layer.

Handlers in `main.py` map them to status codes:
- ValidationRejected -> 400
- AuthFailed         -> 401

"Not found" is not an error here; rules return None and the routers answer
with an empty 200 body.
"""

from __future__ import annotations


class ValidationRejected(ValueError):
    """Bad input shape, length, uniqueness or a dangling reference."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class AuthFailed(RuntimeError):
    """No account matches the supplied credentials."""

    def __init__(self, detail: str = "Invalid username or password."):
        super().__init__(detail)
        self.detail = detail
