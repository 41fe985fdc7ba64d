from euplatesc.components.operations import REFUND
from euplatesc.models import RefundRequest, WebServiceResponse
from euplatesc.utils import format_amount, parse_input


class Refund:
    async def refund(
        self: "EuPlatesc", params: RefundRequest | dict | None = None, **kwargs
    ) -> WebServiceResponse[bool]:
        """
        Refund (fully or partially) a captured transaction.

        Args:
            params (RefundRequest | dict | None): `epid`, `amount` and `reason`.
                You can provide:
                - A `RefundRequest` Pydantic model
                - A plain dictionary with equivalent fields
                - Or keyword arguments (`**kwargs`) matching the model fields

        Returns:
            WebServiceResponse[bool]: `data` is True when EuPlatesc accepted the refund.

        Example:
            >>> res = await pay.refund(epid="ABC123", amount=25, reason="Damaged item")
            >>> if res.success and res.data:
            ...     print("Refunded")
        """
        parsed = parse_input(params, RefundRequest, **kwargs)
        return await self.client.call(
            REFUND,
            {
                "epid": parsed.epid,
                "amount": format_amount(parsed.amount),
                "reason": parsed.reason,
            },
        )
