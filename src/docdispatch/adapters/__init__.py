"""Adapters implementing docdispatch ports."""
