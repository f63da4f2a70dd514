"""
RBM helper error types.
"""

from typing import Any, Optional


class RbmError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class NotInitializedError(RbmError):
    def __init__(self, message: str = "You must first initialize the client by calling initialize()."):
        super().__init__("not_initialized", message)


class AuthError(RbmError):
    def __init__(self, message: str, code: str = "auth_error"):
        super().__init__(code, message)


class RemoteCallError(RbmError):
    """The RBM API rejected a request, or the request never reached it."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__("remote_call_failed", message, details)
        self.status_code = status_code
