"""User database model.

Users exist independently of communities and subscribe through the
community_subscribers association table.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.models.community import community_subscribers


class User(BaseModel):
    """User model.

    Fields:
        id: Integer primary key (from BaseModel)
        created_at: Timestamp when created (from BaseModel)
        username: Unique handle
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        comment="Unique handle",
    )

    subscriptions: Mapped[list["Community"]] = relationship(  # noqa: F821
        secondary=community_subscribers,
        back_populates="subscribers",
        passive_deletes=True,
        lazy="raise",
    )
