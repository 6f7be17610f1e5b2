"""Core application layer: contracts, errors, services and adapters."""
