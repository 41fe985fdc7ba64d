from typing import Optional

from pydantic import BaseModel, ConfigDict

from euplatesc.interface import CallbackBase

from .enums import TransactionAction


class TransactionStatus(BaseModel, CallbackBase):
    """Authenticated view of a gateway callback."""

    ep_id: Optional[str] = None
    invoice_id: Optional[str] = None
    amount: Optional[str] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None
    approval: Optional[str] = None
    timestamp: Optional[str] = None
    nonce: Optional[str] = None
    fp_hash: str

    model_config = ConfigDict(frozen=True)

    @property
    def is_success(self) -> bool:
        return self.status == TransactionAction.APPROVED.value
