from .collaborator import IDENTITY_ACCESS_CONTEXT, Collaborator

__all__ = ["IDENTITY_ACCESS_CONTEXT", "Collaborator"]
