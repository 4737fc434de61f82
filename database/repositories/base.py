import uuid
from typing import Any, Optional

from sqlalchemy.orm import Session


def as_uuid(value: Any) -> Optional[uuid.UUID]:
    """Coerce an id (UUID or its string form) to uuid.UUID for key columns."""
    if value is None or isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value))


class BaseRepository:
    """Thin wrapper around a Session; subclasses add the queries."""

    def __init__(self, db: Session):
        self.db = db

    def flush(self) -> None:
        self.db.flush()

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
