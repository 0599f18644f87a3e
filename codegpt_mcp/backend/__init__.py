from .service import BackendService, ORG_ID_HEADER

__all__ = ["BackendService", "ORG_ID_HEADER"]
