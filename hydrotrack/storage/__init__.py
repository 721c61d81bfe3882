from flask import current_app

from .base import Storage
from .database import DatabaseStorage
from .memory import MemoryStorage, MemoryState

EXTENSION_KEY = "hydrotrack.storage"

BACKENDS = {
    "database": DatabaseStorage,
    "memory": MemoryStorage,
}


def init_storage(app) -> Storage:
    backend = app.config.get("STORAGE_BACKEND", "database")
    try:
        storage_cls = BACKENDS[backend]
    except KeyError:
        raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}") from None
    storage = storage_cls()
    app.extensions[EXTENSION_KEY] = storage
    app.logger.info("Storage backend: %s", backend)
    return storage


def get_storage() -> Storage:
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    "Storage", "DatabaseStorage", "MemoryStorage", "MemoryState",
    "init_storage", "get_storage",
]
