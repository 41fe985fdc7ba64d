from .components.signer import FieldSet, sign
from .errors import EuPlatescError, InvalidSignatureError
from .gateway import EuPlatesc
from .models import TransactionStatus, WebServiceResponse


__all__ = [
    "EuPlatesc",
    "EuPlatescError",
    "FieldSet",
    "InvalidSignatureError",
    "TransactionStatus",
    "WebServiceResponse",
    "sign",
]
