"""
Product aggregate root identified by its client-supplied EAN-13 code.
"""

from dataclasses import dataclass

from domainkit.domain.catalog.events import ProductDiscontinued, ProductListed, ProductRepriced
from domainkit.domain.catalog.exceptions import ProductDiscontinuedError
from domainkit.domain.common.aggregate_root import AggregateRoot
from domainkit.domain.common.clock import Clock, SystemClock
from domainkit.domain.common.guards import require, require_not_blank
from domainkit.domain.common.value_objects import Ean13


@dataclass(eq=False)
class Product(AggregateRoot[Ean13]):
    """
    Product listed in the catalog.

    Business Rules:
    - The EAN-13 code is supplied by the client and checked on construction
    - Name cannot be empty
    - Price is a non-negative amount in cents
    - Discontinued products cannot be repriced
    """

    id: Ean13
    name: str
    price_cents: int
    discontinued: bool = False

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.name = require_not_blank(self.name, "name")
        require(self.price_cents >= 0, "price cannot be negative", "price_cents", self.price_cents)

    def reprice(self, price_cents: int) -> None:
        """
        Change the price.

        Raises:
            ProductDiscontinuedError: If the product is discontinued
            InvalidArgumentError: If the price is negative
        """
        if self.discontinued:
            raise ProductDiscontinuedError(self.id)
        require(price_cents >= 0, "price cannot be negative", "price_cents", price_cents)
        if price_cents == self.price_cents:
            return
        previous = self.price_cents
        self.price_cents = price_cents
        self._record_event(ProductRepriced(price_cents, previous, occurred_at=self.clock.now()))

    def discontinue(self) -> None:
        if self.discontinued:
            return
        self.discontinued = True
        self._record_event(ProductDiscontinued(occurred_at=self.clock.now()))

    @classmethod
    def create(
        cls,
        code: Ean13,
        name: str,
        price_cents: int,
        clock: Clock | None = None,
    ) -> "Product":
        """List a new product under its client-supplied code."""
        product = cls(id=code, name=name, price_cents=price_cents, clock=clock or SystemClock())
        product._record_event(
            ProductListed(product.name, product.price_cents, occurred_at=product.clock.now())
        )
        return product
