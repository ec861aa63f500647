"""Base repository with dependency injection pattern."""

from typing import Generic, TypeVar

from sqlmodel import Session, SQLModel

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """Base repository with dependency injection pattern.

    Write methods commit by default. Pass ``commit=False`` to only flush, so
    several repository calls can share the caller's transaction.
    """

    def __init__(self, model: type[T], db: Session) -> None:
        self.model = model
        self.db = db

    def _finish(self, commit: bool) -> None:
        if commit:
            self.db.commit()
        else:
            self.db.flush()
