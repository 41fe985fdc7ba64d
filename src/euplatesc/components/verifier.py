from typing import Mapping

from euplatesc.errors import InvalidSignatureError
from euplatesc.models import TransactionStatus
from euplatesc.observability import get_logger

from .operations import CALLBACK_FIELDS, SIGNATURE_FIELD
from .signer import FieldSet, sign, signatures_match

logger = get_logger(__name__)


def callback_fields(callback: Mapping[str, str]) -> FieldSet:
    """Extract the signed subset of a callback, in signing order; absent keys are omitted."""
    return FieldSet((name, callback.get(name)) for name in CALLBACK_FIELDS)


def verify_callback(callback: Mapping[str, str], key: bytes) -> TransactionStatus:
    """
    Authenticate a callback payload.

    Raises:
        InvalidSignatureError: If `fp_hash` is missing or does not match.
    """
    expected = sign(callback_fields(callback), key)
    if not signatures_match(expected, callback.get(SIGNATURE_FIELD)):
        logger.warning(
            "Rejected EuPlatesc callback with an invalid signature",
            extra={"invoice_id": callback.get("invoice_id"), "ep_id": callback.get("ep_id")},
        )
        raise InvalidSignatureError()

    return TransactionStatus(
        ep_id=callback.get("ep_id"),
        invoice_id=callback.get("invoice_id"),
        amount=callback.get("amount"),
        currency=callback.get("curr"),
        status=callback.get("action"),
        message=callback.get("message"),
        approval=callback.get("approval"),
        timestamp=callback.get("timestamp"),
        nonce=callback.get("nonce"),
        fp_hash=callback[SIGNATURE_FIELD],
    )
