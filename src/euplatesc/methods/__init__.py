from .cancel_recurring import CancelRecurring
from .capture import Capture
from .captured_totals import CapturedTotals
from .card_art import CardArt
from .check_status import CheckStatus
from .invoices import Invoices
from .merchant_info import MerchantInfoMethod
from .payment import Payment
from .refund import Refund
from .saved_cards import SavedCards
from .verify import Verify


class Methods(
    Payment,
    Verify,
    CheckStatus,
    Refund,
    Capture,
    CancelRecurring,
    MerchantInfoMethod,
    CardArt,
    SavedCards,
    CapturedTotals,
    Invoices,
):
    pass
