import secrets
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Type, Union

from pydantic import BaseModel

TWO_PLACES = Decimal("0.01")


def parse_input(data: Union[BaseModel, dict, None], model: Type[BaseModel], **kwargs) -> BaseModel:
    """
    Convert input data to a Pydantic model instance.

    Args:
        data: Could be
            - instance of `model` (BaseModel subclass),
            - dict of fields,
            - or None (then kwargs is used).
        model: Pydantic model class to convert to.
        kwargs: Additional fields if data is None.

    Returns:
        instance of `model`
    """
    if isinstance(data, model):
        return data
    elif isinstance(data, dict):
        merged = {**data, **kwargs}
        return model.model_validate(merged)
    else:
        return model.model_validate(kwargs)


def format_amount(amount: Union[Decimal, float, int]) -> str:
    """
    Render an amount with exactly two decimals.

    Floats are converted through their exact binary value and rounded half-up,
    which reproduces JavaScript's ``Number.prototype.toFixed(2)``.

    >>> format_amount(100.5)
    '100.50'
    >>> format_amount(1.005)
    '1.00'
    """
    if isinstance(amount, bool):
        raise TypeError("amount must be a number")
    value = amount if isinstance(amount, Decimal) else Decimal(amount)
    if not value.is_finite():
        raise ValueError("amount must be finite")
    with localcontext() as ctx:
        # Room for every integer digit plus the two decimals
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return str(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def generate_timestamp() -> str:
    """Current UTC time as 14 digits, ``YYYYMMDDHHmmss``."""
    return datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")


def generate_nonce() -> str:
    """32 random bytes as 64 lower-case hex characters."""
    return secrets.token_hex(32)
