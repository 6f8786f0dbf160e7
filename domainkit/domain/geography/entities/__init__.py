from .address import Address
from .country import Country

__all__ = ["Address", "Country"]
