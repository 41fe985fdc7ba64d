from functools import lru_cache
from typing import Any, Mapping

from pydantic import TypeAdapter, ValidationError

from euplatesc.http import API
from euplatesc.models import WebServiceResponse
from euplatesc.observability import get_logger, with_operation_context
from euplatesc.utils import generate_nonce, generate_timestamp

from .credentials import Credentials
from .envelope import normalize, success_flag
from .operations import (
    MERCHANT_ID,
    METHOD,
    NONCE,
    PAYMENT_MERCHANT_ID,
    SIGNATURE_FIELD,
    TIMESTAMP,
    USER_KEY,
    Operation,
)
from .signer import FieldSet, sign

logger = get_logger(__name__)

PRECONDITION_MESSAGE = "WebService configuration required for this operation"


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class Client:
    """
    Builds, signs and sends EuPlatesc operations described by `Operation` descriptors.
    """

    def __init__(self, credentials: Credentials, api: API) -> None:
        """
        Args:
            credentials (Credentials): Merchant id and keys.
            api (API): HTTP layer that posts web service requests.
        """
        self.credentials = credentials
        self.api = api

    @property
    def has_web_service(self) -> bool:
        return self.credentials.web_service is not None

    def build_fields(self, operation: Operation, values: Mapping[str, Any]) -> FieldSet:
        """
        Assemble the ordered field set of `operation`.

        Client-owned fields (method, merchant id, user key, timestamp, nonce) are
        filled here; `values` supplies the rest. `None` means absent.

        Raises:
            ValueError: If `values` does not match the operation's field list.
        """
        unexpected = set(values) - set(operation.caller_fields)
        if unexpected:
            raise ValueError(f"{operation.name}: unexpected fields {sorted(unexpected)}")

        web_service = self.credentials.web_service
        filled = {
            METHOD: operation.method,
            MERCHANT_ID: self.credentials.merchant_id,
            PAYMENT_MERCHANT_ID: self.credentials.merchant_id,
            USER_KEY: web_service.user_key if web_service else None,
            TIMESTAMP: generate_timestamp(),
            NONCE: generate_nonce(),
        }

        fields = FieldSet()
        for name in operation.fields:
            value = filled[name] if name in filled else values.get(name)
            if value is None:
                if name in operation.optional:
                    continue
                raise ValueError(f"{operation.name}: missing value for field {name!r}")
            fields.add(name, value)
        return fields

    def sign(self, operation: Operation, fields: FieldSet) -> str:
        key = self.credentials.key_for(operation.key)
        if key is None:
            raise ValueError(PRECONDITION_MESSAGE)
        return sign(fields, key)

    def signed_fields(self, operation: Operation, values: Mapping[str, Any]) -> FieldSet:
        """Field set of `operation` with `fp_hash` appended."""
        fields = self.build_fields(operation, values)
        return fields.add(SIGNATURE_FIELD, self.sign(operation, fields))

    async def call(self, operation: Operation, values: Mapping[str, Any]) -> WebServiceResponse:
        """
        Run one web service operation and return its uniform result.

        Transport, HTTP and upstream errors are reported in the result, never raised.
        """
        response_type = WebServiceResponse[bool] if operation.boolean else WebServiceResponse[operation.response]
        extra = with_operation_context(operation=operation.name, method=operation.method)

        if operation.requires_web_service and not self.has_web_service:
            logger.info("Web service credentials missing, %s not sent", operation.name, extra=extra)
            return response_type.fail(PRECONDITION_MESSAGE)

        payload = self.signed_fields(operation, values)
        result = await self.api.post_form(payload.as_dict(), extra=extra)
        response = normalize(result.status_code, result.body, result.error)

        if not response.success:
            logger.info("EuPlatesc %s failed: %s", operation.name, response.message, extra=extra)
            return response_type.fail(response.message)
        if operation.boolean:
            return success_flag(response)

        try:
            data = _adapter(operation.response).validate_python(response.data)
        except ValidationError as exc:
            logger.warning(
                "Unexpected %s payload (%d validation errors)",
                operation.name,
                exc.error_count(),
                extra=extra,
            )
            # Still a success upstream, so keep the raw payload
            return response_type.model_construct(success=True, data=response.data, message=None)
        return response_type.ok(data)
