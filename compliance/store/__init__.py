"""
Persistence layer: thin query wrappers around a request-scoped Session.
"""
from compliance.store.obligations import ObligationNotFound, ObligationStore
from compliance.store.alerts import AlertStore
from compliance.store.documents import DocumentStore

__all__ = ["AlertStore", "DocumentStore", "ObligationNotFound", "ObligationStore"]
