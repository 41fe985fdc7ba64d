from .enums import BackToSiteMethod, EpMethod, EpTarget, Language, TransactionAction
from .payment_request import (
    AddressDetails,
    BillingDetails,
    ExtraData,
    PaymentRequest,
    ShippingDetails,
)
from .payment_response import PaymentResponse
from .requests import (
    CaptureRequest,
    CapturedTotalsRequest,
    CardArtRequest,
    CheckStatusRequest,
    InvoiceTransactionsRequest,
    InvoicesRequest,
    RecurringCancellationRequest,
    RefundRequest,
    SavedCardsRequest,
)
from .responses import (
    CardArtResponse,
    Invoice,
    InvoiceTransaction,
    MerchantInfo,
    SavedCard,
    SavedCardsResponse,
)
from .transaction_status import TransactionStatus
from .web_service import WebServiceResponse

__all__ = [
    "AddressDetails",
    "BackToSiteMethod",
    "BillingDetails",
    "CaptureRequest",
    "CapturedTotalsRequest",
    "CardArtRequest",
    "CardArtResponse",
    "CheckStatusRequest",
    "EpMethod",
    "EpTarget",
    "ExtraData",
    "Invoice",
    "InvoiceTransaction",
    "InvoiceTransactionsRequest",
    "InvoicesRequest",
    "Language",
    "MerchantInfo",
    "PaymentRequest",
    "PaymentResponse",
    "RecurringCancellationRequest",
    "RefundRequest",
    "SavedCard",
    "SavedCardsRequest",
    "SavedCardsResponse",
    "ShippingDetails",
    "TransactionAction",
    "TransactionStatus",
    "WebServiceResponse",
]
