from .address_verification_service import AddressVerificationService

__all__ = ["AddressVerificationService"]
