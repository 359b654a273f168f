"""Community database model.

Architecture:
    - Communities own their posts (CASCADE delete)
    - Subscribers are users linked through community_subscribers;
      deleting a community removes the links, never the users
"""

from sqlalchemy import Column, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel

community_subscribers = Table(
    "community_subscribers",
    BaseModel.metadata,
    Column(
        "community_id",
        ForeignKey("communities.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Community(BaseModel):
    """Community model.

    Fields:
        id: Integer primary key (from BaseModel)
        created_at: Timestamp when created (from BaseModel)
        name: Display name (max 100 chars)
        description: Free-text description
    """

    __tablename__ = "communities"
    # SQLite reuses the highest rowid after a delete without AUTOINCREMENT
    __table_args__ = {"sqlite_autoincrement": True}

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Community display name",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Community description",
    )

    posts: Mapped[list["Post"]] = relationship(  # noqa: F821
        back_populates="community",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )

    subscribers: Mapped[list["User"]] = relationship(  # noqa: F821
        secondary=community_subscribers,
        back_populates="subscriptions",
        passive_deletes=True,
        lazy="raise",
    )
