from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, model_validator

from euplatesc.errors import EuPlatescError

T = TypeVar("T")


class WebServiceResponse(BaseModel, Generic[T]):
    """
    Uniform result of every web service operation.

    Exactly one of `data` / `message` is meaningful: a failure carries a message
    and no data, a success carries no message.
    """

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def check_consistency(self):
        if self.success and self.message is not None:
            raise ValueError("a successful response cannot carry a message")
        if not self.success:
            if self.data is not None:
                raise ValueError("a failed response cannot carry data")
            if not self.message:
                raise ValueError("a failed response must carry a message")
        return self

    @classmethod
    def ok(cls, data: Any) -> "WebServiceResponse":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> "WebServiceResponse":
        return cls(success=False, message=message)

    def unwrap(self) -> T:
        """Return the payload, raising `EuPlatescError` for a failed response."""
        if not self.success:
            raise EuPlatescError(self.message)
        return self.data
