"""Persistence adapters implementing the repository ports."""
