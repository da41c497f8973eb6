"""SQLAlchemy model for OAuth account links."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_utc_naive


class AccountModel(Base):
    """Provider identity that signs in as a user."""

    __tablename__ = "account"
    __table_args__ = (
        UniqueConstraint("provider", "provider_account_id", name="uq_account_provider"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    provider = Column(String(50), nullable=False)
    provider_account_id = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)

    user = relationship("UserModel", back_populates="accounts")


__all__ = ["AccountModel"]
