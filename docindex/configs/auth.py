"""
Access gate configuration settings.

Holds the shared API secret checked against the Authorization header and the
confirmation secret required by destructive operations.

Dependencies: pydantic, pydantic_settings
System role: Credential configuration for the access gate
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Shared-secret configuration (AUTH_TOKEN, AUTH_DELETE_CONFIRM_TOKEN)."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    token: str = Field(
        default="",
        description="API secret compared against the Authorization header",
    )
    delete_confirm_token: str | None = Field(
        default=None,
        description="Secret required as confirmToken on delete (defaults to token)",
    )

    @property
    def confirm_token(self) -> str:
        """Effective delete confirmation secret."""
        return self.delete_confirm_token or self.token
