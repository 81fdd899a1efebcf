"""Decoding of an order's embedded config and statistics."""
