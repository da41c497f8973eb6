"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_utc_naive


class UserModel(Base):
    """Database representation of a Tingle account."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=True, unique=True, index=True)
    image = Column(Text, nullable=True)
    cover_image = Column(Text, nullable=True)
    bio = Column(String(160), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive, index=True)
    updated_at = Column(
        DateTime, nullable=False, default=now_utc_naive, onupdate=now_utc_naive
    )
    last_login_at = Column(DateTime, nullable=True)

    accounts = relationship(
        "AccountModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    posts = relationship(
        "PostModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["UserModel"]
