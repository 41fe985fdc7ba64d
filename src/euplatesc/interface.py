from abc import ABC, abstractmethod
from typing import Generic, Mapping, TypeVar

from pydantic import BaseModel

Request = TypeVar("Request", bound=BaseModel)
Response = TypeVar("Response", bound=BaseModel)
Callback = TypeVar("Callback", bound=BaseModel)


class GatewayInterface(ABC, Generic[Request, Response, Callback]):
    """
    Contract of a redirect-style payment gateway client.

    - `Request`: input model for initiating a payment.
    - `Response`: output model of payment initiation.
    - `Callback`: authenticated model produced from the gateway's callback.
    """

    @abstractmethod
    async def payment(self, request: Request | dict | None = None, **kwargs) -> Response:
        """
        Build a signed payment request.

        Args:
            request (Request | dict): Payment input parameters.
                Can be passed as a Pydantic model, dictionary, or directly via keyword arguments.

        Returns:
            Response: Response including the URL the customer is redirected to.
        """
        raise NotImplementedError

    @abstractmethod
    def verify_response(self, callback: Mapping[str, str]) -> Callback:
        """
        Authenticate a callback sent by the gateway.

        Raises:
            InvalidSignatureError: If the callback signature does not match.
        """
        raise NotImplementedError

    @abstractmethod
    def get_payment_redirect_url(self, fields: Mapping[str, str]) -> str:
        """
        Construct the redirect URL to the payment gateway page.

        Args:
            fields: Signed payment fields, in order.

        Returns:
            str: Full redirect URL.
        """
        raise NotImplementedError


class CallbackBase(ABC):
    @property
    @abstractmethod
    def is_success(self) -> bool:
        """
        Indicates whether the callback represents a successful payment.
        """
        pass
