"""
Declarative catalogue of EuPlatesc operations.

Each `Operation` fixes the ordered wire fields that are signed, the key that signs
them and the shape of a successful reply. Field order is part of the protocol.
"""
from dataclasses import dataclass, field
from typing import Any

from euplatesc.models import (
    CardArtResponse,
    Invoice,
    InvoiceTransaction,
    MerchantInfo,
    PaymentResponse,
    SavedCardsResponse,
)

from .credentials import KeyClass

# Fields filled by the client rather than by the caller
METHOD = "method"
TIMESTAMP = "timestamp"
NONCE = "nonce"
MERCHANT_ID = "mid"
PAYMENT_MERCHANT_ID = "merch_id"
USER_KEY = "ukey"

SIGNATURE_FIELD = "fp_hash"


@dataclass(frozen=True)
class Operation:
    name: str
    method: str | None
    fields: tuple[str, ...]
    key: KeyClass
    response: Any = Any
    optional: frozenset[str] = field(default_factory=frozenset)
    boolean: bool = False
    requires_web_service: bool = True

    def __post_init__(self):
        unknown = self.optional - set(self.fields)
        if unknown:
            raise ValueError(f"{self.name}: optional fields not in field list: {sorted(unknown)}")
        if (self.method is None) == (METHOD in self.fields):
            raise ValueError(f"{self.name}: `method` field and method name must go together")

    @property
    def caller_fields(self) -> tuple[str, ...]:
        """Fields the caller has to provide (everything not filled by the client)."""
        filled = {METHOD, TIMESTAMP, NONCE, MERCHANT_ID, PAYMENT_MERCHANT_ID, USER_KEY}
        return tuple(name for name in self.fields if name not in filled)


PAYMENT = Operation(
    name="payment",
    method=None,
    fields=(
        "amount", "curr", "invoice_id", "order_desc", PAYMENT_MERCHANT_ID, TIMESTAMP, NONCE,
        "generate_epid", "valability", "c2p_id", "c2p_cid", "lang",
    ),
    optional=frozenset({"generate_epid", "valability", "c2p_id", "c2p_cid", "lang"}),
    key=KeyClass.PRIMARY,
    response=PaymentResponse,
    requires_web_service=False,
)

CHECK_STATUS = Operation(
    name="check_status",
    method="check_status",
    fields=(METHOD, MERCHANT_ID, TIMESTAMP, NONCE, "epid", "invoice_id"),
    optional=frozenset({"epid", "invoice_id"}),
    key=KeyClass.PRIMARY,
    response=list[dict[str, Any]],
)

MERCHANT_INFO = Operation(
    name="merchant_info",
    method="check_mid",
    fields=(METHOD, MERCHANT_ID, TIMESTAMP, NONCE),
    key=KeyClass.PRIMARY,
    response=MerchantInfo,
)

SAVED_CARDS = Operation(
    name="saved_cards",
    method="c2p_cards",
    fields=(METHOD, MERCHANT_ID, "c2p_id", TIMESTAMP, NONCE),
    key=KeyClass.PRIMARY,
    response=SavedCardsResponse,
)

REFUND = Operation(
    name="refund",
    method="refund",
    fields=(METHOD, USER_KEY, "epid", "amount", "reason", TIMESTAMP, NONCE),
    key=KeyClass.SECONDARY,
    boolean=True,
)

CAPTURE = Operation(
    name="capture",
    method="capture",
    fields=(METHOD, USER_KEY, "epid", TIMESTAMP, NONCE),
    key=KeyClass.SECONDARY,
    boolean=True,
)

PARTIAL_CAPTURE = Operation(
    name="partial_capture",
    method="partial_capture",
    fields=(METHOD, USER_KEY, "epid", "amount", TIMESTAMP, NONCE),
    key=KeyClass.SECONDARY,
    boolean=True,
)

CANCEL_RECURRING = Operation(
    name="cancel_recurring",
    method="cancel_recurring",
    fields=(METHOD, USER_KEY, "epid", "reason", TIMESTAMP, NONCE),
    key=KeyClass.SECONDARY,
    response=str,
)

CARD_ART = Operation(
    name="card_art",
    method="cardart",
    fields=(METHOD, USER_KEY, "ep_id", TIMESTAMP, NONCE),
    key=KeyClass.SECONDARY,
    response=CardArtResponse,
)

CAPTURED_TOTALS = Operation(
    name="captured_totals",
    method="captured_total",
    fields=(METHOD, USER_KEY, "mids", "from", "to", TIMESTAMP, NONCE),
    key=KeyClass.SECONDARY,
    response=dict[str, str],
)

INVOICES = Operation(
    name="invoices",
    method="invoices",
    fields=(METHOD, USER_KEY, MERCHANT_ID, "from", "to", TIMESTAMP, NONCE),
    key=KeyClass.SECONDARY,
    response=list[Invoice],
)

INVOICE_TRANSACTIONS = Operation(
    name="invoice_transactions",
    method="invoice",
    fields=(METHOD, USER_KEY, "invoice", TIMESTAMP, NONCE),
    key=KeyClass.SECONDARY,
    response=list[InvoiceTransaction],
)

OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        PAYMENT,
        CHECK_STATUS,
        MERCHANT_INFO,
        SAVED_CARDS,
        REFUND,
        CAPTURE,
        PARTIAL_CAPTURE,
        CANCEL_RECURRING,
        CARD_ART,
        CAPTURED_TOTALS,
        INVOICES,
        INVOICE_TRANSACTIONS,
    )
}

# Callback fields covered by the signature, in signing order
CALLBACK_FIELDS: tuple[str, ...] = (
    "amount", "curr", "invoice_id", "ep_id", "merch_id",
    "action", "message", "approval", "timestamp", "nonce",
)
