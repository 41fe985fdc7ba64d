from typing import Mapping

from euplatesc.components.verifier import verify_callback
from euplatesc.components.credentials import KeyClass
from euplatesc.models import TransactionStatus


class Verify:
    def verify_response(self: "EuPlatesc", callback: Mapping[str, str]) -> TransactionStatus:
        """
        Authenticate a payment callback sent by EuPlatesc.

        The signature is recomputed over amount, curr, invoice_id, ep_id, merch_id,
        action, message, approval, timestamp and nonce with the merchant secret key
        and compared with the `fp_hash` of the callback.

        Args:
            callback (Mapping[str, str]): Flat form payload received from EuPlatesc.

        Returns:
            TransactionStatus: The authenticated transaction result.

        Raises:
            InvalidSignatureError: If the signature is missing or does not match.

        Example:
            >>> status = pay.verify_response(request.form)
            >>> if status.is_success:
            ...     print("Paid:", status.ep_id)
        """
        return verify_callback(callback, self.credentials.key_for(KeyClass.PRIMARY))
