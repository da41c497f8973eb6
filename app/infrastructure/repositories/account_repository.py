"""Persistence helpers for OAuth account links."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Account
from app.infrastructure.models import AccountModel
from app.utils import ensure_utc


class AccountRepository:
    """Look up and create provider account links."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_provider(self, provider: str, provider_account_id: str) -> Account | None:
        model = (
            self.session.query(AccountModel)
            .filter(
                AccountModel.provider == provider,
                AccountModel.provider_account_id == provider_account_id,
            )
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, account: Account) -> Account:
        model = AccountModel(
            user_id=account.user_id,
            provider=account.provider,
            provider_account_id=account.provider_account_id,
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: AccountModel) -> Account:
        return Account(
            id=model.id,
            user_id=model.user_id,
            provider=model.provider,
            provider_account_id=model.provider_account_id,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["AccountRepository"]
