"""Post database model.

Posts belong to exactly one community and are deleted with it.
"""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel


class Post(BaseModel):
    """Post model.

    Fields:
        id: Integer primary key (from BaseModel)
        created_at: Timestamp when created (from BaseModel)
        title: Post title
        content: Post body
        community_id: FK to communities table (CASCADE delete)
    """

    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(String(200), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    community_id: Mapped[int] = mapped_column(
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to communities table",
    )

    community: Mapped["Community"] = relationship(  # noqa: F821
        back_populates="posts",
        lazy="raise",
    )
