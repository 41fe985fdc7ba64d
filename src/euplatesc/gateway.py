from typing import ClassVar

from euplatesc.config import EuPlatescSettings, get_settings
from euplatesc.http import API
from euplatesc.interface import GatewayInterface
from euplatesc.unified import AsyncSyncMixin

from .components.client import Client
from .components.credentials import Credentials, SecretKey, WebServiceCredentials
from .components.endpoints import WEB_SERVICE_URL, payment_url
from .methods import Methods
from .models import PaymentRequest, PaymentResponse, TransactionStatus


class EuPlatesc(
    # High-level interface (business logic interface)
    Methods,
    # Core behavior and contract
    GatewayInterface[PaymentRequest, PaymentResponse, TransactionStatus],
    # Runtime utility behavior (sync/async support)
    AsyncSyncMixin,
):
    """
    EuPlatesc payment gateway client.

    Builds signed payment redirects, authenticates callbacks and wraps the
    server-to-server web service operations. Web service operations return a
    `WebServiceResponse` and never raise for transport or gateway errors.

    API Reference: https://www.euplatesc.ro/documentatie/
    """

    WEB_SERVICE_URL: ClassVar[str] = WEB_SERVICE_URL

    def __init__(
        self,
        merchant_id: str,
        secret_key: str,
        test_mode: bool = False,
        user_key: str | None = None,
        uapi_key: str | None = None,
        **client_options,
    ):
        """
        Initialize the EuPlatesc client.

        Args:
            merchant_id (str): Merchant id provided by EuPlatesc.
            secret_key (str): Merchant secret key, hex encoded.
            test_mode (bool): Whether to use the test environment. Default is False.
            user_key (str | None): Web service user key.
            uapi_key (str | None): Web service secret key, hex encoded.
            client_options: Additional options passed to the internal HTTP client.
                Supported options include:
                    - timeout (float): Request timeout in seconds. Default is 10.
                    - slow_request_threshold (float): Log if request exceeds this threshold. Default is 3.0.
                    - log_level (int): Logging level (e.g., logging.INFO). Default is INFO.
                    - log_response_body (bool): Log response body. Default is False.
                    - max_log_body_length (int): Max size of the logged response. Default is 500.
                    - default_headers (dict): Extra headers to send with each request.
                    - transport (httpx.AsyncBaseTransport): Custom httpx transport.

        Raises:
            ValueError: If `merchant_id` is empty, a key is not hex, or only one of
                `user_key` / `uapi_key` is given.
        """
        if not isinstance(merchant_id, str) or not merchant_id:
            raise ValueError("`merchant_id` must be a non-empty string")
        if (user_key is None) != (uapi_key is None):
            raise ValueError("`user_key` and `uapi_key` must be provided together")

        web_service = None
        if user_key is not None:
            web_service = WebServiceCredentials(user_key=user_key, uapi_key=SecretKey(uapi_key))

        self.merchant_id = merchant_id
        self.test_mode = test_mode
        self.credentials = Credentials(
            merchant_id=merchant_id,
            secret_key=SecretKey(secret_key),
            web_service=web_service,
        )
        self.payment_url = payment_url(test_mode)
        self.client = Client(
            credentials=self.credentials,
            api=API(base_url=self.WEB_SERVICE_URL, **client_options),
        )

    @classmethod
    def from_settings(cls, settings: EuPlatescSettings | None = None, **client_options) -> "EuPlatesc":
        """
        Build a client from `EuPlatescSettings` (environment / `.env` by default).

        Explicit `client_options` override the transport values of the settings.
        """
        settings = settings or get_settings()
        options = {
            "timeout": settings.timeout,
            "slow_request_threshold": settings.slow_request_threshold,
            "log_level": settings.log_level,
            **client_options,
        }
        return cls(
            merchant_id=settings.merchant_id,
            secret_key=settings.secret_key.get_secret_value(),
            test_mode=settings.test_mode,
            user_key=settings.user_key,
            uapi_key=settings.uapi_key.get_secret_value() if settings.uapi_key else None,
            **options,
        )

    def __repr__(self):
        return (
            f"<EuPlatesc merchant_id={self.merchant_id!r} test_mode={self.test_mode} "
            f"web_service={self.client.has_web_service}>"
        )
