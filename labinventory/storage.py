from __future__ import annotations

import json
import secrets

from fastapi import Cookie, Depends
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from labinventory.config import CLIENT_ID_COOKIE
from labinventory.database import get_db
from labinventory.models import StorageEntry

TOKEN_KEY = "token"
USER_KEY = "user"
LAB_USER_KEY = "labUser"


class ClientStorage:
    """Persistent key/value storage scoped to one browser, like ``localStorage``."""

    def __init__(self, db: Session, client_id: str) -> None:
        self.db = db
        self.client_id = client_id

    def _entry(self, key: str) -> StorageEntry | None:
        return self.db.scalar(
            select(StorageEntry).where(
                StorageEntry.client_id == self.client_id,
                StorageEntry.key == key,
            )
        )

    def get_item(self, key: str) -> str | None:
        entry = self._entry(key)
        return entry.value if entry else None

    def set_item(self, key: str, value: str) -> None:
        entry = self._entry(key)
        if entry is None:
            entry = StorageEntry(client_id=self.client_id, key=key, value=value)
        else:
            entry.value = value
        self.db.add(entry)
        self.db.commit()

    def remove_item(self, key: str) -> None:
        self.db.execute(
            delete(StorageEntry).where(
                StorageEntry.client_id == self.client_id,
                StorageEntry.key == key,
            )
        )
        self.db.commit()

    def get_json(self, key: str) -> object | None:
        raw = self.get_item(key)
        return json.loads(raw) if raw is not None else None

    def set_json(self, key: str, value: object) -> None:
        self.set_item(key, json.dumps(value))


def new_client_id() -> str:
    return secrets.token_urlsafe(24)


def get_client_id(
    lab_client_id: str | None = Cookie(default=None, alias=CLIENT_ID_COOKIE),
) -> str | None:
    return lab_client_id or None


def get_client_storage(
    client_id: str | None = Depends(get_client_id),
    db: Session = Depends(get_db),
) -> ClientStorage:
    return ClientStorage(db, client_id or new_client_id())
