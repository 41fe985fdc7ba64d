from enum import Enum


class Language(str, Enum):
    RO = "ro"
    EN = "en"
    FR = "fr"
    DE = "de"
    IT = "it"
    ES = "es"
    HU = "hu"


class EpTarget(str, Enum):
    SELF = "self"


class EpMethod(str, Enum):
    POST = "post"
    GET = "get"
    GET_CLEAN = "getclean"


class BackToSiteMethod(str, Enum):
    POST = "post"
    GET = "get"


class TransactionAction(str, Enum):
    """Values of the callback `action` field; anything else is a decline."""

    APPROVED = "0"
