import itertools
import time
from typing import Dict, Optional, Protocol


class KeyValueStorage(Protocol):
    """Хранилище ключ-значение для сериализованной коллекции"""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class MemoryStorage:
    """Хранилище в памяти процесса"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._items


class IdGenerator(Protocol):
    def __call__(self) -> str:
        ...


class TimestampIdGenerator:
    """Идентификаторы из текущего времени в миллисекундах

    Значения строго возрастают в пределах процесса, даже если
    два сохранения попали в одну миллисекунду.
    """

    def __init__(self, clock=time.time):
        self._clock = clock
        self._last = 0

    def __call__(self) -> str:
        value = int(self._clock() * 1000)
        if value <= self._last:
            value = self._last + 1
        self._last = value
        return str(value)


class CounterIdGenerator:
    """Последовательные идентификаторы, удобно для тестов"""

    def __init__(self, start: int = 1, prefix: str = "doc-"):
        self._counter = itertools.count(start)
        self._prefix = prefix

    def __call__(self) -> str:
        return f"{self._prefix}{next(self._counter)}"
