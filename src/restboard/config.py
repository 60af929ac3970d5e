"""Application configuration via environment variables.

Uses pydantic-settings to load config from env vars with RESTBOARD_ prefix.
No config files — just env vars (12-factor app style).

Learn: the signing secret defaults to the fixed literal the API has always
shipped with, so tokens minted by older deployments keep verifying. Outside
development the default is refused and a real secret must be supplied.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "mysecret"

# Write operations whose auth requirement can be toggled
KNOWN_OPERATIONS = ("create_message", "update_message", "delete_message")


class Settings(BaseSettings):
    """All app configuration. Set via RESTBOARD_* env vars."""

    # Auth
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_expire_seconds: int = 30
    session_user_id: str = "1"  # user signed by GET /session
    protected_operations: list[str] = ["create_message"]

    # Server
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS
    cors_origins: list[str] = ["*"]

    # Store
    seed_data: bool = True

    model_config = {"env_prefix": "RESTBOARD_"}

    @model_validator(mode="after")
    def validate_settings(self):
        """Reject the default secret outside development and unknown operations."""
        if (
            self.environment != "development"
            and self.jwt_secret == DEFAULT_JWT_SECRET
        ):
            raise ValueError(
                "RESTBOARD_JWT_SECRET must be set to a secure value in "
                "non-development environments. Generate one with: "
                'python -c "import secrets; print(secrets.token_urlsafe(32))"'
            )
        unknown = set(self.protected_operations) - set(KNOWN_OPERATIONS)
        if unknown:
            raise ValueError(
                f"Unknown protected operations: {', '.join(sorted(unknown))}"
            )
        return self


# Singleton — import this everywhere
settings = Settings()
