"""Contracts (Protocol) implemented by the endpoint adapters."""
