# server/core/store.py

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Protocol
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from core.errors import StoreError
from models.user import User as UserModel


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserRecord:
    username: str
    password: str


# -------------------------------
# Store capability
# -------------------------------

class CredentialStore(Protocol):
    """
    Persistence boundary for user records. Every operation takes a record
    whose username is already normalized.
    """

    def insert(self, user: UserRecord) -> None:
        ...

    def username_exists(self, user: UserRecord) -> bool:
        ...

    def password_matches(self, user: UserRecord) -> bool:
        ...


# -------------------------------
# SQLAlchemy implementation
# -------------------------------

class SqlCredentialStore:
    def __init__(self, db: Session):
        self.db = db

    def insert(self, user: UserRecord) -> None:
        try:
            self.db.add(UserModel(username=user.username, password=user.password))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("insert of user %r failed: %s", user.username, e)
            raise StoreError(f"could not store user '{user.username}'") from e

    def username_exists(self, user: UserRecord) -> bool:
        try:
            row = (
                self.db.query(UserModel.username)
                .filter(UserModel.username == user.username)
                .first()
            )
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("username lookup failed, treating %r as unknown", user.username)
            return False
        return row is not None

    def password_matches(self, user: UserRecord) -> bool:
        try:
            row = (
                self.db.query(UserModel.username)
                .filter(
                    UserModel.username == user.username,
                    UserModel.password == user.password,
                )
                .first()
            )
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("password lookup failed for %r", user.username)
            return False
        return row is not None


# -------------------------------
# In-memory implementation
# -------------------------------

class InMemoryCredentialStore:
    """Dict-backed store; each operation is atomic, sequences of them are not."""

    def __init__(self):
        self._users: dict[str, str] = {}  # username → password
        self._lock = Lock()

    def insert(self, user: UserRecord) -> None:
        with self._lock:
            if user.username in self._users:
                raise StoreError(f"could not store user '{user.username}'")
            self._users[user.username] = user.password

    def username_exists(self, user: UserRecord) -> bool:
        with self._lock:
            return user.username in self._users

    def password_matches(self, user: UserRecord) -> bool:
        with self._lock:
            return self._users.get(user.username) == user.password

    def get_password(self, username: str) -> str | None:
        with self._lock:
            return self._users.get(username)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
