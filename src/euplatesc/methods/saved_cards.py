from euplatesc.components.operations import SAVED_CARDS
from euplatesc.models import SavedCardsRequest, SavedCardsResponse, WebServiceResponse
from euplatesc.utils import parse_input


class SavedCards:
    async def get_saved_cards(
        self: "EuPlatesc", params: SavedCardsRequest | dict | None = None, **kwargs
    ) -> WebServiceResponse[SavedCardsResponse]:
        """
        List the cards a Click2Pay customer saved with the merchant.

        Example:
            >>> res = await pay.get_saved_cards(c2p_id="customer-42")
            >>> for card in res.data.cards:
            ...     print(card.mask)
        """
        parsed = parse_input(params, SavedCardsRequest, **kwargs)
        return await self.client.call(SAVED_CARDS, {"c2p_id": parsed.c2p_id})
