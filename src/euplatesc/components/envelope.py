"""
Normalization of web service replies into `WebServiceResponse`.

EuPlatesc answers with one of a closed set of JSON shapes. `classify_reply` names
the shape and `normalize` turns it into a uniform result; the order of the checks
decides between shapes that overlap.
"""
from enum import Enum
from typing import Any

from euplatesc.models import WebServiceResponse

ERROR_FIELD = "error"
WRAPPER_FIELD = "success"
MARKER_FIELDS = ("cards",)

UNKNOWN_ERROR = "Unknown error occurred"


class ReplyShape(str, Enum):
    ERROR = "error"
    MARKED = "marked"
    BARE = "bare"
    WRAPPED = "wrapped"
    UNRECOGNISED = "unrecognised"


def classify_reply(raw: Any) -> ReplyShape:
    if isinstance(raw, list):
        return ReplyShape.BARE
    if not isinstance(raw, dict):
        return ReplyShape.UNRECOGNISED
    if ERROR_FIELD in raw:
        return ReplyShape.ERROR
    if any(marker in raw for marker in MARKER_FIELDS):
        return ReplyShape.MARKED
    if WRAPPER_FIELD not in raw:
        return ReplyShape.BARE
    return ReplyShape.WRAPPED


def describe_error(error: BaseException) -> str:
    return str(error) or UNKNOWN_ERROR


def normalize(
    http_status: int | None,
    raw: Any,
    network_error: BaseException | None = None,
) -> WebServiceResponse[Any]:
    """
    Convert one HTTP exchange into a uniform result.

    Args:
        http_status: Status code, or None if no response was received.
        raw: Parsed JSON body, or None.
        network_error: Transport exception, if the exchange failed.
    """
    if network_error is not None:
        return WebServiceResponse.fail(describe_error(network_error))
    if http_status is None or not 200 <= http_status < 300:
        return WebServiceResponse.fail(f"HTTP error! status: {http_status}")

    shape = classify_reply(raw)
    if shape is ReplyShape.ERROR:
        return WebServiceResponse.fail(str(raw[ERROR_FIELD] or UNKNOWN_ERROR))
    if shape in (ReplyShape.MARKED, ReplyShape.BARE):
        return WebServiceResponse.ok(raw)
    if shape is ReplyShape.WRAPPED:
        return WebServiceResponse.ok(raw[WRAPPER_FIELD])
    return WebServiceResponse.fail(f"Unexpected response: {type(raw).__name__}")


def success_flag(response: WebServiceResponse[Any]) -> WebServiceResponse[bool]:
    """
    Collapse a refund/capture reply into a boolean payload.

    The payload is True only if the call succeeded and the nested indicator is
    the literal string "1".
    """
    if not response.success:
        return WebServiceResponse[bool].fail(response.message)
    data = response.data
    return WebServiceResponse[bool].ok(isinstance(data, dict) and data.get(WRAPPER_FIELD) == "1")
