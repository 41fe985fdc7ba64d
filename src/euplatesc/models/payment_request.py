from decimal import Decimal
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from .enums import BackToSiteMethod, EpMethod, EpTarget, Language


class AddressDetails(BaseModel):
    first_name: str
    last_name: str
    company: Optional[str] = None
    address: str
    city: str
    state: str
    zip_code: str
    country: str
    phone: str
    email: str

    model_config = ConfigDict(str_strip_whitespace=True)


class BillingDetails(AddressDetails):
    pass


class ShippingDetails(AddressDetails):
    pass


class ExtraData(BaseModel):
    """Optional callback URLs and page behaviour sent as ``ExtraData[...]`` parameters."""

    silent_url: Optional[str] = None
    silent_url_sec: Optional[str] = None
    success_url: Optional[str] = None
    failed_url: Optional[str] = None
    ep_target: Optional[EpTarget] = None
    ep_method: Optional[EpMethod] = None
    back_to_site: Optional[str] = None
    back_to_site_method: Optional[BackToSiteMethod] = None
    expire_url: Optional[str] = None
    rate: Optional[str] = None
    filtru_rate: Optional[str] = None
    ep_channel: Optional[list[str]] = None

    model_config = ConfigDict(use_enum_values=True)


class PaymentRequest(BaseModel):
    amount: Union[float, Decimal]
    currency: Annotated[str, StringConstraints(min_length=3, max_length=3, to_upper=True)]
    invoice_id: str
    order_description: str
    billing_details: Optional[BillingDetails] = None
    shipping_details: Optional[ShippingDetails] = None
    extra_data: Optional[ExtraData] = None
    generate_epid: bool = False
    valability: Optional[Annotated[str, StringConstraints(pattern=r"^\d{14}$")]] = Field(
        None, description="Payment link expiry, YYYYMMDDHHmmss"
    )
    c2p_id: Optional[str] = None
    c2p_cid: Optional[str] = None
    lang: Optional[Language] = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("amount")
    def check_amount_positive(cls, v: Union[float, Decimal]):
        if v <= 0:
            raise ValueError("amount must be greater than zero")
        return v
