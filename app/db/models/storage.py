from sqlalchemy import Column, String, Text

from app.db.base import BaseModel


class StorageSlot(BaseModel):
    __tablename__ = "storage_slots"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
