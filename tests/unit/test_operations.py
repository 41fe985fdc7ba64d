"""Tests for the operation catalogue and field set assembly."""
import re

import pytest

from euplatesc.components.client import Client
from euplatesc.components.credentials import (
    Credentials,
    KeyClass,
    SecretKey,
    WebServiceCredentials,
)
from euplatesc.components.operations import OPERATIONS, Operation
from euplatesc.http import API
from support import MERCHANT_ID, SECRET_KEY, UAPI_KEY, USER_KEY, reference_hash

EXPECTED = {
    "payment": (
        None,
        KeyClass.PRIMARY,
        ["amount", "curr", "invoice_id", "order_desc", "merch_id", "timestamp", "nonce",
         "generate_epid", "valability", "c2p_id", "c2p_cid", "lang"],
    ),
    "check_status": ("check_status", KeyClass.PRIMARY,
                     ["method", "mid", "timestamp", "nonce", "epid", "invoice_id"]),
    "merchant_info": ("check_mid", KeyClass.PRIMARY, ["method", "mid", "timestamp", "nonce"]),
    "saved_cards": ("c2p_cards", KeyClass.PRIMARY, ["method", "mid", "c2p_id", "timestamp", "nonce"]),
    "refund": ("refund", KeyClass.SECONDARY,
               ["method", "ukey", "epid", "amount", "reason", "timestamp", "nonce"]),
    "capture": ("capture", KeyClass.SECONDARY, ["method", "ukey", "epid", "timestamp", "nonce"]),
    "partial_capture": ("partial_capture", KeyClass.SECONDARY,
                        ["method", "ukey", "epid", "amount", "timestamp", "nonce"]),
    "cancel_recurring": ("cancel_recurring", KeyClass.SECONDARY,
                         ["method", "ukey", "epid", "reason", "timestamp", "nonce"]),
    "card_art": ("cardart", KeyClass.SECONDARY, ["method", "ukey", "ep_id", "timestamp", "nonce"]),
    "captured_totals": ("captured_total", KeyClass.SECONDARY,
                        ["method", "ukey", "mids", "from", "to", "timestamp", "nonce"]),
    "invoices": ("invoices", KeyClass.SECONDARY,
                 ["method", "ukey", "mid", "from", "to", "timestamp", "nonce"]),
    "invoice_transactions": ("invoice", KeyClass.SECONDARY,
                             ["method", "ukey", "invoice", "timestamp", "nonce"]),
}


@pytest.fixture
def client():
    credentials = Credentials(
        merchant_id=MERCHANT_ID,
        secret_key=SecretKey(SECRET_KEY),
        web_service=WebServiceCredentials(user_key=USER_KEY, uapi_key=SecretKey(UAPI_KEY)),
    )
    return Client(credentials=credentials, api=API(base_url="https://example.invalid/ws"))


def caller_values(operation):
    return {name: f"v-{name}" for name in operation.caller_fields}


def test_catalogue_is_complete():
    assert set(OPERATIONS) == set(EXPECTED)


@pytest.mark.parametrize("name", sorted(EXPECTED))
def test_descriptor_contract(name):
    method, key, fields = EXPECTED[name]
    operation = OPERATIONS[name]
    assert operation.method == method
    assert operation.key is key
    assert list(operation.fields) == fields


@pytest.mark.parametrize("name", sorted(EXPECTED))
def test_built_fields_follow_descriptor_order(client, name):
    operation = OPERATIONS[name]
    fields = client.build_fields(operation, caller_values(operation))

    assert fields.names() == list(operation.fields)
    values = fields.as_dict()
    assert re.fullmatch(r"\d{14}", values["timestamp"])
    assert re.fullmatch(r"[0-9a-f]{64}", values["nonce"])
    if operation.method:
        assert values["method"] == operation.method
    if "ukey" in values:
        assert values["ukey"] == USER_KEY
    for merchant_field in ("mid", "merch_id"):
        if merchant_field in values:
            assert values[merchant_field] == MERCHANT_ID


@pytest.mark.parametrize("name", sorted(EXPECTED))
def test_signed_with_operation_key(client, name):
    operation = OPERATIONS[name]
    signed = client.signed_fields(operation, caller_values(operation))
    key_hex = SECRET_KEY if operation.key is KeyClass.PRIMARY else UAPI_KEY

    names = signed.names()
    assert names[-1] == "fp_hash"
    assert signed.as_dict()["fp_hash"] == reference_hash(signed.values()[:-1], key_hex)


def test_optional_fields_omitted_when_absent(client):
    fields = client.build_fields(OPERATIONS["check_status"], {"epid": None, "invoice_id": "INV1"})
    assert fields.names() == ["method", "mid", "timestamp", "nonce", "invoice_id"]


def test_missing_required_field_rejected(client):
    with pytest.raises(ValueError, match="reason"):
        client.build_fields(OPERATIONS["refund"], {"epid": "1", "amount": "1.00"})


def test_unexpected_field_rejected(client):
    with pytest.raises(ValueError, match="unexpected"):
        client.build_fields(OPERATIONS["merchant_info"], {"epid": "1"})


def test_nonce_and_timestamp_fresh_per_call(client):
    operation = OPERATIONS["merchant_info"]
    first = client.build_fields(operation, {}).as_dict()
    second = client.build_fields(operation, {}).as_dict()
    assert first["nonce"] != second["nonce"]


def test_descriptor_validation():
    with pytest.raises(ValueError):
        Operation(name="x", method="x", fields=("method", "a"), key=KeyClass.PRIMARY,
                  optional=frozenset({"b"}))
    with pytest.raises(ValueError):
        Operation(name="x", method=None, fields=("method",), key=KeyClass.PRIMARY)
