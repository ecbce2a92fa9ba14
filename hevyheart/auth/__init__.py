"""OAuth redirect capture."""

from .callback_server import (
    AuthorizationCancelled,
    AuthorizationFailed,
    RedirectCaptureServer,
    extract_authorization_code,
)

__all__ = [
    "AuthorizationCancelled",
    "AuthorizationFailed",
    "RedirectCaptureServer",
    "extract_authorization_code",
]
