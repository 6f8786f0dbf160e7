from .register_address_use_case import RegisterAddressUseCase

__all__ = ["RegisterAddressUseCase"]
