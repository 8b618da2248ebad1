from app.db.models.storage import StorageSlot

__all__ = [
    "StorageSlot"
]
