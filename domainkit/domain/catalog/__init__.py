"""Catalog domain layer."""

from domainkit.domain.catalog.entities.product import Product
from domainkit.domain.catalog.events import ProductDiscontinued, ProductListed, ProductRepriced
from domainkit.domain.catalog.exceptions import ProductDiscontinuedError

__all__ = [
    "Product",
    "ProductDiscontinued",
    "ProductDiscontinuedError",
    "ProductListed",
    "ProductRepriced",
]
