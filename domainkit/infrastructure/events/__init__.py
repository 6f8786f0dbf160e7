from .in_memory_event_sink import InMemoryEventSink

__all__ = ["InMemoryEventSink"]
