"""Services utilisés par l'écran de connexion."""

from cursorhelp.services.authenticator import (
    INVALID_CREDENTIALS_MESSAGE,
    AuthenticationError,
    AuthenticationRejected,
    MockAuthenticator,
    ProgressCallback,
)

__all__ = [
    "INVALID_CREDENTIALS_MESSAGE",
    "AuthenticationError",
    "AuthenticationRejected",
    "MockAuthenticator",
    "ProgressCallback",
]
