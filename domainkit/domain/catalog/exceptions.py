"""Catalog domain exceptions."""

from domainkit.domain.common.exceptions import DomainError


class ProductDiscontinuedError(DomainError):
    """Raised when changing a product that has been discontinued."""

    def __init__(self, code: object) -> None:
        super().__init__(f"Product {code} is discontinued", {"code": code})
        self.code = code
