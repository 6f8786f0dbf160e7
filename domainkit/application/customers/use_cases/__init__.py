from .register_customer_use_case import RegisterCustomerUseCase

__all__ = ["RegisterCustomerUseCase"]
