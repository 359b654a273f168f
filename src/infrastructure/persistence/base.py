"""Declarative base shared by the community, post and user tables.

ORM rows stay in the infrastructure layer; the repository converts them to
domain entities before they leave it.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Columns every table carries.

    - id: integer primary key assigned by the store
    - created_at: UTC timestamp, defaulted by the database on INSERT
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
