"""Entity identity, validation and domain-event lifecycle."""

__version__ = "0.1.0"
