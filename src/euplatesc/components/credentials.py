import binascii
from dataclasses import dataclass
from enum import Enum


class KeyClass(str, Enum):
    """Which of the two merchant keys signs an operation."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class SecretKey:
    """
    Opaque HMAC key material decoded from its hex form.

    The raw bytes are only reachable through `reveal()`; `repr` and `str` are
    redacted and the object refuses to be pickled.
    """

    __slots__ = ("_value",)

    def __init__(self, hex_value: str):
        if not isinstance(hex_value, str) or not hex_value:
            raise ValueError("Secret key must be a non-empty hex string")
        try:
            self._value = binascii.unhexlify(hex_value.strip())
        except (binascii.Error, ValueError):
            raise ValueError("Secret key must be a valid hex string") from None

    def reveal(self) -> bytes:
        return self._value

    def __repr__(self) -> str:
        return "SecretKey('**********')"

    __str__ = __repr__

    def __reduce__(self):
        raise TypeError("SecretKey cannot be serialized")


@dataclass(frozen=True)
class WebServiceCredentials:
    """User key and secondary ("uapi") key gating the server-to-server operations."""

    user_key: str
    uapi_key: SecretKey

    def __post_init__(self):
        if not isinstance(self.user_key, str) or not self.user_key:
            raise ValueError("`user_key` must be a non-empty string")


@dataclass(frozen=True)
class Credentials:
    """Merchant id and primary key, plus the optional web service credentials."""

    merchant_id: str
    secret_key: SecretKey
    web_service: WebServiceCredentials | None = None

    def key_for(self, key_class: KeyClass) -> bytes | None:
        """Return raw key bytes for the given class, or None if not configured."""
        if key_class is KeyClass.PRIMARY:
            return self.secret_key.reveal()
        if self.web_service is None:
            return None
        return self.web_service.uapi_key.reveal()
