"""Passport issuance and lifecycle management over a thread-safe in-memory registry."""

__version__ = "0.1.0"
