from .member_directory import DirectoryUnavailableError, InMemoryMemberDirectory, MemberProfile

__all__ = ["DirectoryUnavailableError", "InMemoryMemberDirectory", "MemberProfile"]
