from typing import Optional, Callable
from sqlalchemy.orm import Session
from sqlalchemy import select, delete

from app.db.models.storage import StorageSlot


class StorageRepository:
    """Репозиторий слотов ключ-значение

    Реализует KeyValueStorage поверх таблицы storage_slots.
    Каждая операция открывает и закрывает свою сессию.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_item(self, key: str) -> Optional[str]:
        """Чтение значения слота"""
        with self.session_factory() as session:
            result = session.execute(select(StorageSlot.value).where(StorageSlot.key == key))
            return result.scalar_one_or_none()

    def set_item(self, key: str, value: str) -> None:
        """Запись значения слота целиком"""
        with self.session_factory() as session:
            slot = session.get(StorageSlot, key)
            if slot is None:
                session.add(StorageSlot(key=key, value=value))
            else:
                slot.value = value
            session.commit()

    def remove_item(self, key: str) -> None:
        """Удаление слота"""
        with self.session_factory() as session:
            session.execute(delete(StorageSlot).where(StorageSlot.key == key))
            session.commit()
