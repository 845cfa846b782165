"""Adapters – web framework integrations."""
