from .in_memory_store import InMemoryStore
from .unit_of_work import StoreUnitOfWork

__all__ = ["InMemoryStore", "StoreUnitOfWork"]
