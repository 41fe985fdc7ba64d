from euplatesc.components.operations import MERCHANT_INFO
from euplatesc.models import MerchantInfo, WebServiceResponse


class MerchantInfoMethod:
    async def check_merchant_info(self: "EuPlatesc") -> WebServiceResponse[MerchantInfo]:
        """
        Retrieve merchant account information and settings.

        Returns:
            WebServiceResponse[MerchantInfo]: Account name, status, template and rates.
        """
        return await self.client.call(MERCHANT_INFO, {})
