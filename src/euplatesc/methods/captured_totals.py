from euplatesc.components.operations import CAPTURED_TOTALS
from euplatesc.models import CapturedTotalsRequest, WebServiceResponse
from euplatesc.utils import parse_input


class CapturedTotals:
    async def get_captured_totals(
        self: "EuPlatesc", params: CapturedTotalsRequest | dict | None = None, **kwargs
    ) -> WebServiceResponse[dict[str, str]]:
        """
        Captured totals per currency for one or more merchant ids.

        Args:
            params (CapturedTotalsRequest | dict | None): `mids` and an optional
                `from` / `to` date range.

        Returns:
            WebServiceResponse[dict[str, str]]: e.g. ``{"RON": "1500.00", "EUR": "20.00"}``.
        """
        parsed = parse_input(params, CapturedTotalsRequest, **kwargs)
        return await self.client.call(
            CAPTURED_TOTALS,
            {
                "mids": ",".join(parsed.mids),
                "from": parsed.date_from or "",
                "to": parsed.date_to or "",
            },
        )
