"""MongoDB document store (motor)."""

from bpm_access.infrastructure.mongo.client import MongoConnection
from bpm_access.infrastructure.mongo.document_store import MongoDocumentStore

__all__ = ["MongoConnection", "MongoDocumentStore"]
