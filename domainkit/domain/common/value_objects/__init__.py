from .country_code import CountryCode
from .ean13 import Ean13
from .ids import AddressId, ArticleId, CustomerId, MemberId

__all__ = [
    "AddressId",
    "ArticleId",
    "CountryCode",
    "CustomerId",
    "Ean13",
    "MemberId",
]
