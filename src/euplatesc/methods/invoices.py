from euplatesc.components.operations import INVOICES, INVOICE_TRANSACTIONS
from euplatesc.models import (
    Invoice,
    InvoicesRequest,
    InvoiceTransaction,
    InvoiceTransactionsRequest,
    WebServiceResponse,
)
from euplatesc.utils import parse_input


class Invoices:
    async def get_invoices(
        self: "EuPlatesc", params: InvoicesRequest | dict | None = None, **kwargs
    ) -> WebServiceResponse[list[Invoice]]:
        """
        List the settlement invoices of the merchant, optionally within `from` / `to`.

        Example:
            >>> res = await pay.get_invoices(date_from="2024-01-01", date_to="2024-01-31")
            >>> for invoice in res.data:
            ...     print(invoice.invoice_number, invoice.transferred_amount)
        """
        parsed = parse_input(params, InvoicesRequest, **kwargs)
        return await self.client.call(
            INVOICES,
            {"from": parsed.date_from or "", "to": parsed.date_to or ""},
        )

    async def get_invoice_transactions(
        self: "EuPlatesc",
        params: InvoiceTransactionsRequest | dict | None = None,
        **kwargs,
    ) -> WebServiceResponse[list[InvoiceTransaction]]:
        """
        List the transactions settled by one invoice.

        Example:
            >>> res = await pay.get_invoice_transactions(invoice_number="FPS00000001")
        """
        parsed = parse_input(params, InvoiceTransactionsRequest, **kwargs)
        return await self.client.call(INVOICE_TRANSACTIONS, {"invoice": parsed.invoice_number})
