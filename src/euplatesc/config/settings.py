"""Configuration and settings management using pydantic-settings."""
import binascii

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EuPlatescSettings(BaseSettings):
    """EuPlatesc client settings with environment variable loading."""

    model_config = SettingsConfigDict(
        env_prefix="EUPLATESC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Merchant credentials
    merchant_id: str = Field(..., description="Merchant id assigned by EuPlatesc")
    secret_key: SecretStr = Field(..., description="Merchant secret key (hex)")
    test_mode: bool = Field(default=False, description="Route payments to the test environment")

    # Web service credentials
    user_key: str | None = Field(default=None, description="Web service user key")
    uapi_key: SecretStr | None = Field(default=None, description="Web service secret key (hex)")

    # Transport
    timeout: float = Field(default=10.0, description="HTTP timeout in seconds")
    slow_request_threshold: float = Field(
        default=3.0,
        description="Requests slower than this many seconds are logged as warnings",
    )

    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("secret_key", "uapi_key")
    @classmethod
    def validate_hex(cls, v: SecretStr | None) -> SecretStr | None:
        """Validate that keys are hex encoded."""
        if v is None:
            return v
        try:
            binascii.unhexlify(v.get_secret_value())
        except (binascii.Error, ValueError):
            raise ValueError("key must be a hex string") from None
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate that timeout is positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @model_validator(mode="after")
    def validate_web_service_pair(self):
        if (self.user_key is None) != (self.uapi_key is None):
            raise ValueError("user_key and uapi_key must be set together")
        return self


# Global settings instance
_settings: EuPlatescSettings | None = None


def get_settings() -> EuPlatescSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = EuPlatescSettings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
