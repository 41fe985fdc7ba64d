from euplatesc.components.operations import CAPTURE, PARTIAL_CAPTURE
from euplatesc.models import CaptureRequest, WebServiceResponse
from euplatesc.utils import format_amount, parse_input


class Capture:
    async def capture(
        self: "EuPlatesc", params: CaptureRequest | dict | None = None, **kwargs
    ) -> WebServiceResponse[bool]:
        """
        Capture a previously authorized payment.

        Without `amount` the whole authorization is captured (`capture`); with
        `amount` only that much is captured (`partial_capture`).

        Args:
            params (CaptureRequest | dict | None): `epid` and optional `amount`.

        Returns:
            WebServiceResponse[bool]: `data` is True when the capture was accepted.

        Example:
            >>> await pay.capture(epid="ABC123")               # full capture
            >>> await pay.capture(epid="ABC123", amount=50)    # partial capture
        """
        parsed = parse_input(params, CaptureRequest, **kwargs)
        if parsed.amount:
            return await self.client.call(
                PARTIAL_CAPTURE,
                {"epid": parsed.epid, "amount": format_amount(parsed.amount)},
            )
        return await self.client.call(CAPTURE, {"epid": parsed.epid})
