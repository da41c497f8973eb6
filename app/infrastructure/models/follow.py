"""SQLAlchemy model for follow edges."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_utc_naive


class FollowModel(Base):
    """Directed edge from ``follower_id`` to ``following_id``."""

    __tablename__ = "follow"
    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="uq_follow_pair"),
        Index("ix_follow_following_created", "following_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    follower_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    following_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)

    follower = relationship("UserModel", foreign_keys=[follower_id], lazy="joined")
    following = relationship("UserModel", foreign_keys=[following_id], lazy="joined")


__all__ = ["FollowModel"]
