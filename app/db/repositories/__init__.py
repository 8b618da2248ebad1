from app.db.repositories.storage_repository import StorageRepository

__all__ = [
    "StorageRepository"
]
