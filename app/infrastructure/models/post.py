"""SQLAlchemy models for posts, likes and comments."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_utc_naive


class PostModel(Base):
    """Database representation of a post."""

    __tablename__ = "post"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text = Column(String(500), nullable=False)
    image = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive, index=True)
    updated_at = Column(
        DateTime, nullable=False, default=now_utc_naive, onupdate=now_utc_naive
    )

    user = relationship("UserModel", back_populates="posts", lazy="joined")
    likes = relationship(
        "LikeModel",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    comments = relationship(
        "CommentModel",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class LikeModel(Base):
    """A user's like on a post; at most one per pair."""

    __tablename__ = "post_like"
    __table_args__ = (
        UniqueConstraint("post_id", "user_id", name="uq_post_like_pair"),
    )

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)

    post = relationship("PostModel", back_populates="likes")


class CommentModel(Base):
    """Database representation of a comment."""

    __tablename__ = "comment"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text = Column(String(500), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive, index=True)
    updated_at = Column(
        DateTime, nullable=False, default=now_utc_naive, onupdate=now_utc_naive
    )

    post = relationship("PostModel", back_populates="comments")
    user = relationship("UserModel", lazy="joined")


__all__ = ["CommentModel", "LikeModel", "PostModel"]
