import copy
import logging
import threading
import uuid
from typing import Any, Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.auth.security import hash_password
from app.config import DATABASE_URL, STORAGE_BACKEND
from app.database import Base, make_session_factory
from app.models import ProfileRecord, UserAccount

logger = logging.getLogger(__name__)


class Storage(Protocol):
    def create_profile(self, profile: dict[str, Any]) -> dict[str, Any]: ...

    def get_profile(self, profile_id: str) -> dict[str, Any] | None: ...

    def create_user(self, username: str, password: str) -> dict[str, Any] | None: ...

    def get_user(self, user_id: str) -> dict[str, Any] | None: ...

    def get_user_by_username(self, username: str) -> dict[str, Any] | None: ...


class MemStorage:
    """Insert-only maps that live for the lifetime of the process."""

    def __init__(self) -> None:
        self._profiles: dict[str, dict[str, Any]] = {}
        self._users: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def create_profile(self, profile: dict[str, Any]) -> dict[str, Any]:
        row = {**copy.deepcopy(profile), "id": str(uuid.uuid4())}
        with self._lock:
            self._profiles[row["id"]] = row
        return copy.deepcopy(row)

    def get_profile(self, profile_id: str) -> dict[str, Any] | None:
        row = self._profiles.get(profile_id)
        return copy.deepcopy(row) if row else None

    def create_user(self, username: str, password: str) -> dict[str, Any] | None:
        with self._lock:
            if any(u["username"] == username for u in self._users.values()):
                return None
            row = {"id": str(uuid.uuid4()), "username": username, "password_hash": hash_password(password)}
            self._users[row["id"]] = row
        return dict(row)

    def get_user(self, user_id: str) -> dict[str, Any] | None:
        row = self._users.get(user_id)
        return dict(row) if row else None

    def get_user_by_username(self, username: str) -> dict[str, Any] | None:
        row = next((u for u in self._users.values() if u["username"] == username), None)
        return dict(row) if row else None


class SqlStorage:
    def __init__(self, url: str = DATABASE_URL) -> None:
        self.engine, self.SessionLocal = make_session_factory(url)

    def create_tables(self) -> None:
        Base.metadata.create_all(self.engine)

    def create_profile(self, profile: dict[str, Any]) -> dict[str, Any]:
        profile_id = str(uuid.uuid4())
        data = {k: v for k, v in profile.items() if k != "id"}
        with self.SessionLocal() as db:
            db.add(ProfileRecord(id=profile_id, data=data))
            db.commit()
        return {**data, "id": profile_id}

    def get_profile(self, profile_id: str) -> dict[str, Any] | None:
        with self.SessionLocal() as db:
            row = db.get(ProfileRecord, profile_id)
            if not row:
                return None
            return {**dict(row.data), "id": row.id}

    def create_user(self, username: str, password: str) -> dict[str, Any] | None:
        user_id = str(uuid.uuid4())
        try:
            with self.SessionLocal() as db:
                db.add(UserAccount(id=user_id, username=username, password_hash=hash_password(password)))
                db.commit()
        except IntegrityError:
            return None
        return self.get_user(user_id)

    def get_user(self, user_id: str) -> dict[str, Any] | None:
        with self.SessionLocal() as db:
            row = db.get(UserAccount, user_id)
            return _user_row(row) if row else None

    def get_user_by_username(self, username: str) -> dict[str, Any] | None:
        with self.SessionLocal() as db:
            row = db.execute(select(UserAccount).where(UserAccount.username == username)).scalars().first()
            return _user_row(row) if row else None


def _user_row(row: UserAccount) -> dict[str, Any]:
    return {"id": row.id, "username": row.username, "password_hash": row.password_hash}


def build_storage(backend: str = STORAGE_BACKEND, url: str = DATABASE_URL) -> Storage:
    if backend == "memory":
        logger.info("[STORAGE] using in-memory backend")
        return MemStorage()
    if backend == "sql":
        storage = SqlStorage(url)
        storage.create_tables()
        logger.info("[STORAGE] using sql backend dialect=%s", storage.engine.dialect.name)
        return storage
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")
