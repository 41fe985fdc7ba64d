class EuPlatescError(Exception):
    """Base error raised by the EuPlatesc client."""

    def __init__(self, message: str | None = None):
        self.message = message or "EuPlatesc error"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidSignatureError(EuPlatescError):
    """
    Raised when an inbound callback carries a signature that does not match
    the one recomputed with the merchant secret key.

    A callback that fails this check must not be processed.
    """

    def __init__(self, message: str = "Invalid response signature"):
        super().__init__(message)
