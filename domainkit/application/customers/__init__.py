"""Customers application layer."""
