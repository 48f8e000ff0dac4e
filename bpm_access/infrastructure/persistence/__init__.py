"""Tenant-scoped persistence: storage identifiers, relations, federated repositories."""
