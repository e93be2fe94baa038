"""Utilities: exceptions and the query executor."""
