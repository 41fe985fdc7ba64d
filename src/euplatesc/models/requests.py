from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _positive(v):
    if v is not None and v <= 0:
        raise ValueError("amount must be greater than zero")
    return v


class CheckStatusRequest(BaseModel):
    epid: Optional[str] = None
    invoice_id: Optional[str] = None


class RefundRequest(BaseModel):
    epid: str
    amount: Union[float, Decimal]
    reason: str

    @field_validator("amount")
    def check_amount(cls, v):
        return _positive(v)


class CaptureRequest(BaseModel):
    epid: str
    amount: Optional[Union[float, Decimal]] = Field(
        None, description="Omit for a full capture, set for a partial capture"
    )

    @field_validator("amount")
    def check_amount(cls, v):
        return _positive(v)


class RecurringCancellationRequest(BaseModel):
    epid: str = Field(..., description="EPID of the base transaction of the series")
    reason: Optional[str] = None


class CardArtRequest(BaseModel):
    epid: str


class SavedCardsRequest(BaseModel):
    c2p_id: str = Field(..., description="Customer id in the Click2Pay system")


class DateRange(BaseModel):
    date_from: Optional[str] = Field(None, alias="from")
    date_to: Optional[str] = Field(None, alias="to")

    model_config = ConfigDict(populate_by_name=True)


class CapturedTotalsRequest(DateRange):
    mids: list[str] = Field(..., min_length=1)


class InvoicesRequest(DateRange):
    pass


class InvoiceTransactionsRequest(BaseModel):
    invoice_number: str = Field(..., description="Invoice number, e.g. FPS00000001")
