from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(extra="allow")


class MerchantInfo(_Payload):
    name: str
    url: str
    cui: str
    j: str
    status: str = Field(..., description="'test' or 'live'")
    recuring: str = Field(..., description="'N', 'Y' or 'YA'")
    tpl: str
    rate_mode: str = Field(..., description="'C' or 'EP'")
    rate_apb: Optional[str] = None
    rate_btrl: Optional[str] = None
    rate_brdf: Optional[str] = None
    rate_fbr: Optional[str] = None
    rate_gbr: Optional[str] = None
    rate_rzb: Optional[str] = None


class CardArtResponse(_Payload):
    bin: str
    last4: str
    exp: str
    cardart: str = Field(..., description="Base64 encoded card image")


class SavedCard(_Payload):
    id: str
    bin: str
    last4: str
    mask: str
    exp: str
    cardart: str


class SavedCardsResponse(_Payload):
    cards: list[SavedCard]


class Invoice(_Payload):
    invoice_number: str
    invoice_date: str
    invoice_amount_novat: str
    invoice_amount_vat: str
    invoice_currency: str
    transactions_number: str
    transactions_amount: str
    transferred_amount: str


class InvoiceTransaction(_Payload):
    mid: str
    invoice_id: str
    epid: str
    rrn: str
    amount: str
    currency: str
    commission: str
    installments: str
    type: str = Field(..., description="'capture' or 'chargeback'")
