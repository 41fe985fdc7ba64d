from typing import Iterable, Mapping
from urllib.parse import urlencode

from euplatesc.components.operations import PAYMENT
from euplatesc.models import (
    AddressDetails,
    ExtraData,
    PaymentRequest,
    PaymentResponse,
)
from euplatesc.utils import format_amount, parse_input

BILLING_FIELDS = {
    "first_name": "fname",  # payment page reads fname, not name
    "last_name": "lname",
    "company": "company",
    "address": "add",
    "city": "city",
    "state": "state",
    "zip_code": "zip",
    "country": "country",
    "phone": "phone",
    "email": "email",
}
SHIPPING_FIELDS = {attr: f"s{name}" for attr, name in BILLING_FIELDS.items()}
SHIPPING_FIELDS["first_name"] = "sfname"

EXTRA_DATA_FIELDS = {
    "silent_url": "silenturl",
    "silent_url_sec": "silenturlsec",
    "success_url": "successurl",
    "failed_url": "failedurl",
    "ep_target": "ep_target",
    "ep_method": "ep_method",
    "back_to_site": "backtosite",
    "back_to_site_method": "backtosite_method",
    "expire_url": "expireurl",
    "rate": "rate",
    "filtru_rate": "filtru_rate",
    "ep_channel": "ep_channel",
}


class Payment:
    async def payment(
        self: "EuPlatesc", params: PaymentRequest | dict | None = None, **kwargs
    ) -> PaymentResponse:
        """
        Build a signed payment request and the URL of the EuPlatesc payment page.

        No request is sent: the customer's browser is redirected to `redirect_url`,
        which carries every signed field, `fp_hash`, and the unsigned billing,
        shipping and `ExtraData[...]` parameters.

        Args:
            params (PaymentRequest | dict | None): The payment request details. You can either:
                - Provide a `PaymentRequest` Pydantic model instance.
                - Provide a plain `dict`.
                - Or pass keyword arguments (`**kwargs`).

        Returns:
            PaymentResponse: Contains the redirect URL.

        Example:
            >>> from euplatesc import EuPlatesc
            >>> pay = EuPlatesc(merchant_id="...", secret_key="...")
            >>> res = await pay.payment(
            ...     amount=100.5,
            ...     currency="RON",
            ...     invoice_id="INV1",
            ...     order_description="Order #1",
            ... )
            >>> print("Redirect the user to:", res.redirect_url)
        """
        parsed = parse_input(params, PaymentRequest, **kwargs)
        signed = self.client.signed_fields(
            PAYMENT,
            {
                "amount": format_amount(parsed.amount),
                "curr": parsed.currency,
                "invoice_id": parsed.invoice_id,
                "order_desc": parsed.order_description,
                "generate_epid": "1" if parsed.generate_epid else None,
                "valability": parsed.valability or None,
                "c2p_id": parsed.c2p_id or None,
                "c2p_cid": parsed.c2p_cid or None,
                "lang": parsed.lang or None,
            },
        )
        query = [
            *signed,
            *self.format_address(parsed.billing_details, BILLING_FIELDS),
            *self.format_address(parsed.shipping_details, SHIPPING_FIELDS),
            *self.format_extra_data(parsed.extra_data),
        ]
        return PaymentResponse(redirect_url=self.get_payment_redirect_url(query))

    def get_payment_redirect_url(
        self: "EuPlatesc", fields: Mapping[str, str] | Iterable[tuple[str, str]]
    ) -> str:
        """
        Append `fields` as a query string to the payment endpoint.

        Args:
            fields: Ordered payment fields, `fp_hash` included.

        Returns:
            str: A fully qualified URL to redirect the user for payment.
        """
        items = fields.items() if isinstance(fields, Mapping) else fields
        return f"{self.payment_url}?{urlencode([(k, v) for k, v in items if v is not None])}"

    @staticmethod
    def format_address(
        details: AddressDetails | None, names: Mapping[str, str]
    ) -> list[tuple[str, str]]:
        """
        Rename billing or shipping details to their query parameter names.

        Example:
            >>> Payment.format_address(billing, BILLING_FIELDS)[:2]
            [('fname', 'Ion'), ('lname', 'Popescu')]
        """
        if details is None:
            return []
        items = []
        for attr, param in names.items():
            value = getattr(details, attr)
            if value is not None:
                items.append((param, value))
        return items

    @staticmethod
    def format_extra_data(extra_data: ExtraData | None) -> list[tuple[str, str]]:
        """
        Convert `ExtraData` to ``ExtraData[<name>]`` parameters, skipping empty values.

        `ep_channel` is sent comma separated.
        """
        if extra_data is None:
            return []
        items = []
        for attr, name in EXTRA_DATA_FIELDS.items():
            value = getattr(extra_data, attr)
            if not value:
                continue
            if isinstance(value, list):
                value = ",".join(value)
            items.append((f"ExtraData[{name}]", value))
        return items
