"""Geography application layer."""
