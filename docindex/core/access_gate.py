"""
Shared-secret access gate.

Checks the caller credential before any document operation runs, and the
separate confirmation token required for deletes.

Dependencies: secrets (stdlib), docindex.core.exceptions
System role: Authorization for the document API
"""

import logging
import secrets

from docindex.core.exceptions import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)


def _matches(supplied: str | None, secret: str) -> bool:
    # An unconfigured secret never matches, even an empty credential.
    if not supplied or not secret:
        return False
    return secrets.compare_digest(supplied.encode("utf-8"), secret.encode("utf-8"))


class AccessGate:
    """
    Single shared-secret gate.

    The API secret authorizes calling the API; the confirmation secret
    authorizes destructive mutation. Both may hold the same value.
    """

    def __init__(self, api_token: str, confirm_token: str | None = None) -> None:
        """
        Initialize gate with configured secrets.

        Args:
            api_token: Secret expected in the Authorization header
            confirm_token: Secret expected as delete confirmation (defaults to api_token)
        """
        self._api_token = api_token
        self._confirm_token = confirm_token or api_token

    def authorize(self, credential: str | None) -> None:
        """
        Validate the caller credential.

        Raises:
            UnauthorizedError: If the credential is missing or does not match
        """
        if not _matches(credential, self._api_token):
            logger.warning(
                "Rejected request with invalid credential",
                extra={"credential_present": bool(credential)},
            )
            raise UnauthorizedError("Unauthorized")

    def confirm(self, confirm_token: str | None) -> None:
        """
        Validate the confirmation token of a destructive operation.

        Raises:
            ForbiddenError: If the token is missing or does not match
        """
        if not _matches(confirm_token, self._confirm_token):
            logger.warning(
                "Rejected destructive operation with invalid confirmation token",
                extra={"token_present": bool(confirm_token)},
            )
            raise ForbiddenError("Invalid confirmation token")
