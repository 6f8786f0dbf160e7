from .enroll_collaborator_use_case import EnrollCollaboratorUseCase

__all__ = ["EnrollCollaboratorUseCase"]
