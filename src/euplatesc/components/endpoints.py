from euplatesc.observability import get_logger

logger = get_logger(__name__)

PAYMENT_URLS = {
    True: "https://secure.euplatesc.ro/tdsprocess/tranzactd.php",
    False: "https://secure.euplatesc.ro/tdsprocess/tranzactd.php",
}
WEB_SERVICE_URL = "https://manager.euplatesc.ro/v3/index.php?action=ws"


def payment_url(test_mode: bool) -> str:
    """
    Resolve the payment page endpoint.

    Both modes currently resolve to the same URL, so asking for test mode is logged
    as a configuration warning.
    """
    url = PAYMENT_URLS[bool(test_mode)]
    if test_mode and url == PAYMENT_URLS[False]:
        logger.warning(
            "test_mode is set but resolves to the live payment endpoint %s",
            url,
        )
    return url
