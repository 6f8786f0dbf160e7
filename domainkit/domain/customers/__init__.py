"""Customers domain layer."""

from domainkit.domain.customers.entities.customer import Customer
from domainkit.domain.customers.events import (
    CustomerEmailChanged,
    CustomerRegistered,
    CustomerRenamed,
)

__all__ = ["Customer", "CustomerEmailChanged", "CustomerRegistered", "CustomerRenamed"]
