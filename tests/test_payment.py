"""End-to-end tests for payment initiation and callback verification."""
import asyncio
import re
from urllib.parse import parse_qsl, urlsplit

import pytest
from pydantic import ValidationError

from euplatesc import InvalidSignatureError
from euplatesc.models import PaymentRequest
from support import MERCHANT_ID, SECRET_KEY, reference_hash

SIGNED = ["amount", "curr", "invoice_id", "order_desc", "merch_id", "timestamp", "nonce"]


def query_of(response):
    return parse_qsl(urlsplit(response.redirect_url).query, keep_blank_values=True)


@pytest.fixture
def gateway(make_gateway):
    return make_gateway(web_service=False)


def test_redirect_url_contents(gateway):
    response = asyncio.run(
        gateway.payment(amount=100.5, currency="RON", invoice_id="INV1", order_description="x")
    )

    assert response.redirect_url.startswith("https://secure.euplatesc.ro/tdsprocess/tranzactd.php?")
    query = query_of(response)
    assert [name for name, _ in query] == SIGNED + ["fp_hash"]

    params = dict(query)
    assert params["amount"] == "100.50"
    assert params["curr"] == "RON"
    assert params["invoice_id"] == "INV1"
    assert params["order_desc"] == "x"
    assert params["merch_id"] == MERCHANT_ID
    assert re.fullmatch(r"\d{14}", params["timestamp"])
    assert re.fullmatch(r"[0-9a-f]{64}", params["nonce"])
    assert re.fullmatch(r"[0-9A-F]{32}", params["fp_hash"])
    assert params["fp_hash"] == reference_hash([value for _, value in query[:-1]], SECRET_KEY)
    assert response.params == params


def test_payment_accepts_model_and_dict(gateway):
    request = PaymentRequest(amount=10, currency="eur", invoice_id="A", order_description="d")
    from_model = dict(query_of(asyncio.run(gateway.payment(request))))
    from_dict = dict(query_of(asyncio.run(gateway.payment(request.model_dump()))))

    assert from_model["curr"] == "EUR"
    assert from_model["amount"] == from_dict["amount"] == "10.00"


def test_each_payment_gets_fresh_nonce(gateway):
    kwargs = dict(amount=1, currency="RON", invoice_id="A", order_description="d")
    first = dict(query_of(asyncio.run(gateway.payment(**kwargs))))
    second = dict(query_of(asyncio.run(gateway.payment(**kwargs))))
    assert first["nonce"] != second["nonce"]
    assert first["fp_hash"] != second["fp_hash"]


def test_optional_signed_fields(gateway):
    response = asyncio.run(
        gateway.payment(
            amount=5,
            currency="RON",
            invoice_id="INV2",
            order_description="Order 2",
            generate_epid=True,
            valability="20301231235959",
            c2p_id="customer-1",
            lang="en",
        )
    )
    query = query_of(response)

    assert [name for name, _ in query] == SIGNED + [
        "generate_epid", "valability", "c2p_id", "lang", "fp_hash",
    ]
    params = dict(query)
    assert params["generate_epid"] == "1"
    assert params["order_desc"] == "Order 2"
    assert "Order+2" in response.redirect_url
    assert params["fp_hash"] == reference_hash([value for _, value in query[:-1]], SECRET_KEY)


def test_billing_shipping_and_extra_data_are_not_signed(gateway):
    address = {
        "first_name": "Ion",
        "last_name": "Popescu",
        "address": "Str. Lunga 1",
        "city": "Brasov",
        "state": "BV",
        "zip_code": "500001",
        "country": "RO",
        "phone": "0700000000",
        "email": "ion@example.com",
    }
    response = asyncio.run(
        gateway.payment(
            amount=20,
            currency="RON",
            invoice_id="INV3",
            order_description="d",
            billing_details={**address, "company": "ACME"},
            shipping_details=address,
            extra_data={
                "silent_url": "https://shop.example/ipn",
                "success_url": "https://shop.example/ok",
                "ep_method": "post",
                "ep_channel": ["CC", "C2P"],
            },
        )
    )
    query = query_of(response)
    names = [name for name, _ in query]

    signature_position = names.index("fp_hash")
    assert names[:signature_position] == SIGNED
    assert names[signature_position + 1:] == [
        "fname", "lname", "company", "add", "city", "state", "zip", "country", "phone", "email",
        "sfname", "slname", "sadd", "scity", "sstate", "szip", "scountry", "sphone", "semail",
        "ExtraData[silenturl]", "ExtraData[successurl]", "ExtraData[ep_method]",
        "ExtraData[ep_channel]",
    ]
    params = dict(query)
    assert params["company"] == "ACME"
    assert params["ExtraData[ep_channel]"] == "CC,C2P"
    assert params["ExtraData[ep_method]"] == "post"
    assert params["fp_hash"] == reference_hash(
        [value for _, value in query[:signature_position]], SECRET_KEY
    )


def test_invalid_payment_input_raises(gateway):
    with pytest.raises(ValidationError):
        asyncio.run(gateway.payment(amount=-1, currency="RON", invoice_id="A", order_description="d"))
    with pytest.raises(ValidationError):
        asyncio.run(gateway.payment(amount=1, currency="RON", invoice_id="A"))


def test_callback_round_trip(gateway):
    response = asyncio.run(
        gateway.payment(amount=100.5, currency="RON", invoice_id="INV1", order_description="x")
    )
    sent = response.params
    callback = {
        "amount": sent["amount"],
        "curr": sent["curr"],
        "invoice_id": sent["invoice_id"],
        "ep_id": "E1D2C3",
        "merch_id": sent["merch_id"],
        "action": "0",
        "message": "Approved",
        "approval": "123456",
        "timestamp": sent["timestamp"],
        "nonce": sent["nonce"],
    }
    callback["fp_hash"] = reference_hash(list(callback.values()), SECRET_KEY)

    status = gateway.verify_response(callback)
    assert status.is_success
    assert status.ep_id == "E1D2C3"
    assert status.invoice_id == "INV1"

    callback["amount"] = "1000.50"
    with pytest.raises(InvalidSignatureError):
        gateway.verify_response(callback)
