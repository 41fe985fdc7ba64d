"""Shared constants and helpers for the test suite."""
import hashlib
import hmac
import json
from urllib.parse import parse_qsl

import httpx

MERCHANT_ID = "44840981287"
SECRET_KEY = "00112233445566778899AABBCCDDEEFF"
USER_KEY = "user-key-1"
UAPI_KEY = "A1B2C3D4E5F60718293A4B5C6D7E8F90"

PRECONDITION_MESSAGE = "WebService configuration required for this operation"


def reference_hash(values, key_hex):
    """Independent implementation of the EuPlatesc signature for assertions."""
    message = "".join(f"{len(v)}{v}" if len(v) > 0 else "-" for v in values)
    return hmac.new(bytes.fromhex(key_hex), message.encode("utf-8"), hashlib.md5).hexdigest().upper()


class RecordingTransport:
    """httpx mock transport that records requests and replies with a fixed answer."""

    def __init__(self, reply=None, status_code=200, raw_body=None, error=None):
        self.reply = reply
        self.status_code = status_code
        self.raw_body = raw_body
        self.error = error
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, content=json.dumps(self.reply).encode())

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def forms(self) -> list[list[tuple[str, str]]]:
        """Posted form bodies as ordered (name, value) pairs."""
        return [
            parse_qsl(request.content.decode(), keep_blank_values=True)
            for request in self.requests
        ]

    @property
    def last_form(self) -> list[tuple[str, str]]:
        return self.forms[-1]


def assert_signed(form, key_hex):
    """Check that the trailing fp_hash of `form` signs the preceding fields."""
    names = [name for name, _ in form]
    assert names[-1] == "fp_hash"
    values = [value for _, value in form[:-1]]
    assert form[-1][1] == reference_hash(values, key_hex)
