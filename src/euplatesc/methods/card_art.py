from euplatesc.components.operations import CARD_ART
from euplatesc.models import CardArtRequest, CardArtResponse, WebServiceResponse
from euplatesc.utils import parse_input


class CardArt:
    async def get_card_art(
        self: "EuPlatesc", params: CardArtRequest | dict | None = None, **kwargs
    ) -> WebServiceResponse[CardArtResponse]:
        """
        Retrieve the card art (BIN, last 4 digits, expiry and image) of a transaction.

        Example:
            >>> res = await pay.get_card_art(epid="ABC123")
            >>> print(res.data.last4)
        """
        parsed = parse_input(params, CardArtRequest, **kwargs)
        return await self.client.call(CARD_ART, {"ep_id": parsed.epid})
