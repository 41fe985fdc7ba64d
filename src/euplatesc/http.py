import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from euplatesc.observability import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TransportResult:
    """Outcome of one HTTP exchange; exactly one of `body` / `error` is meaningful."""

    status_code: int | None = None
    body: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status_code is not None and 200 <= self.status_code < 300


class API:
    """
    Thin async HTTP layer used by the gateway client.

    Each call opens its own `httpx.AsyncClient`, so an `API` instance carries no
    connection state and can be shared between tasks and event loops. Calls are
    attempted once; transport problems are returned, not raised.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        slow_request_threshold: float = 3.0,
        log_level: int | str = logging.INFO,
        log_response_body: bool = False,
        max_log_body_length: int = 500,
        default_headers: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            base_url (str): URL the web service requests are posted to.
            timeout (float): Request timeout in seconds.
            slow_request_threshold (float): Log a warning if a request exceeds this many seconds.
            log_level (int | str): Level used for per-request log lines.
            log_response_body (bool): Log the (truncated) response body.
            max_log_body_length (int): Max size of the logged response body.
            default_headers (Mapping[str, str] | None): Extra headers to send with each request.
            transport (httpx.AsyncBaseTransport | None): Custom transport, e.g. `httpx.MockTransport`.
        """
        self.base_url = base_url
        self.timeout = timeout
        self.slow_request_threshold = slow_request_threshold
        self.log_level = logging.getLevelName(log_level) if isinstance(log_level, str) else log_level
        self.log_response_body = log_response_body
        self.max_log_body_length = max_log_body_length
        self.default_headers = dict(default_headers or {})
        self.transport = transport

    def __repr__(self):
        return f"<API base_url={self.base_url!r} timeout={self.timeout}>"

    async def post_form(
        self, data: Mapping[str, str], extra: dict[str, Any] | None = None
    ) -> TransportResult:
        """
        POST `data` form-url-encoded to `base_url` and parse the JSON reply.

        Args:
            data: Ordered form fields.
            extra: Logging context.

        Returns:
            TransportResult: status code and parsed body, or the error that occurred.
        """
        extra = extra or {}
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
            **self.default_headers,
        }
        started = time.perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.base_url, data=dict(data), headers=headers)
        except httpx.HTTPError as exc:
            logger.warning(
                "EuPlatesc request failed: %s", exc.__class__.__name__, extra=extra
            )
            return TransportResult(error=exc)

        elapsed = time.perf_counter() - started
        self._log_response(response, elapsed, extra)

        if not response.is_success:
            return TransportResult(status_code=response.status_code)

        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("EuPlatesc returned a non-JSON body", extra=extra)
            return TransportResult(
                status_code=response.status_code,
                error=ValueError(f"Invalid JSON response: {exc}"),
            )
        return TransportResult(status_code=response.status_code, body=body)

    def _log_response(self, response: httpx.Response, elapsed: float, extra: dict[str, Any]) -> None:
        logger.log(
            self.log_level,
            "EuPlatesc responded %s in %.3fs",
            response.status_code,
            elapsed,
            extra=extra,
        )
        if elapsed > self.slow_request_threshold:
            logger.warning("Slow EuPlatesc request: %.3fs", elapsed, extra=extra)
        if self.log_response_body:
            logger.debug(
                "EuPlatesc response body: %s",
                response.text[: self.max_log_body_length],
                extra=extra,
            )
