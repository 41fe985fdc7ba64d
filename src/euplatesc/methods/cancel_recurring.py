from euplatesc.components.operations import CANCEL_RECURRING
from euplatesc.models import RecurringCancellationRequest, WebServiceResponse
from euplatesc.utils import parse_input


class CancelRecurring:
    async def cancel_recurring(
        self: "EuPlatesc",
        params: RecurringCancellationRequest | dict | None = None,
        **kwargs,
    ) -> WebServiceResponse[str]:
        """
        Cancel a recurring payment series.

        Args:
            params (RecurringCancellationRequest | dict | None): Base `epid` of the
                series and an optional `reason`.

        Returns:
            WebServiceResponse[str]: The base EPID of the cancelled series.

        Example:
            >>> res = await pay.cancel_recurring(epid="BASE123", reason="Customer request")
            >>> print(res.data)
        """
        parsed = parse_input(params, RecurringCancellationRequest, **kwargs)
        return await self.client.call(
            CANCEL_RECURRING,
            {"epid": parsed.epid, "reason": parsed.reason or ""},
        )
