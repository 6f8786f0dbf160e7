"""Collaboration application layer."""
