"""Environment-based configuration for the restarter."""

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_FALLBACK_DIRS = ["/usr/bin", "/bin", "/usr/sbin", "/sbin"]


class Settings(BaseSettings):
    """Restarter configuration.

    All settings can be overridden via environment variables with
    RESTARTER_ prefix. For example:
        RESTARTER_USE_SUDO=true
        RESTARTER_GRACE_PERIOD_MS=50
    """

    # Elevation
    use_sudo: bool = False
    elevation_command: str = "sudo"

    # Delay between child exit and reporting success
    grace_period_ms: int = Field(default=5, ge=0)

    # Advanced mode service namespace
    vendor_prefix: str = "com.apple"

    # Probed in order when `which` cannot resolve an executable
    fallback_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_FALLBACK_DIRS))

    model_config = {"env_prefix": "RESTARTER_"}

    @property
    def grace_period_s(self) -> float:
        return self.grace_period_ms / 1000


def get_settings(**overrides) -> Settings:
    """Build settings from the environment, applying non-None overrides."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
