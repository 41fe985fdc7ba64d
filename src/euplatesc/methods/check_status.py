from typing import Any

from euplatesc.components.operations import CHECK_STATUS
from euplatesc.models import CheckStatusRequest, WebServiceResponse
from euplatesc.utils import parse_input


class CheckStatus:
    async def check_status(
        self: "EuPlatesc", params: CheckStatusRequest | dict | None = None, **kwargs
    ) -> WebServiceResponse[list[dict[str, Any]]]:
        """
        Check the status of one or more transactions by EPID or invoice id.

        Args:
            params (CheckStatusRequest | dict, optional): Input containing `epid`
                and/or `invoice_id`. You may provide a Pydantic model, a dictionary,
                or use keyword arguments directly.

        Returns:
            WebServiceResponse[list[dict]]: One entry per matching transaction.

        Example:
            >>> res = await pay.check_status(invoice_id="INV1")
            >>> if res.success:
            ...     for transaction in res.data:
            ...         print(transaction)
        """
        parsed = parse_input(params, CheckStatusRequest, **kwargs)
        return await self.client.call(
            CHECK_STATUS,
            {"epid": parsed.epid or None, "invoice_id": parsed.invoice_id or None},
        )
