"""Unique constraints settle races that slip past the existence checks."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from app.application.use_cases.follows import follow_user
from app.application.use_cases.posts import create_post, like_post
from app.application.use_cases.users import sign_in_with_oauth
from app.domain.entities import CurrentIdentity
from app.domain.exceptions import ConflictError
from app.infrastructure.repositories import (
    AccountRepository,
    FollowRepository,
    LikeRepository,
    UserRepository,
)


def _user(session, name: str, *, email: str | None = None, account_id: str | None = None):
    return sign_in_with_oauth(
        session,
        provider="test",
        provider_account_id=account_id or name,
        email=email or f"{name}@example.com",
        name=name,
    )


def test_duplicate_follow_edge_is_rejected_by_the_database(db_session):
    alice = _user(db_session, "alice")
    bob = _user(db_session, "bob")
    repository = FollowRepository(db_session)
    repository.create(alice.id, bob.id)

    with pytest.raises(IntegrityError):
        repository.create(alice.id, bob.id)

    assert repository.count_followers(bob.id) == 1


def test_follow_race_maps_to_already_following(db_session, monkeypatch):
    alice = _user(db_session, "alice")
    bob = _user(db_session, "bob")
    FollowRepository(db_session).create(alice.id, bob.id)
    monkeypatch.setattr(FollowRepository, "exists", lambda self, follower_id, following_id: False)

    with pytest.raises(ConflictError, match="You are already following this user"):
        follow_user(db_session, CurrentIdentity(user_id=alice.id), target_id=bob.id)


def test_like_race_maps_to_already_liked(db_session, monkeypatch):
    alice = _user(db_session, "alice")
    bob = _user(db_session, "bob")
    post = create_post(db_session, CurrentIdentity(user_id=alice.id), text="hello")
    LikeRepository(db_session).create(post_id=post.id, user_id=bob.id)
    monkeypatch.setattr(LikeRepository, "exists", lambda self, *, post_id, user_id: False)

    with pytest.raises(ConflictError, match="You have already liked this post"):
        like_post(db_session, CurrentIdentity(user_id=bob.id), post_id=post.id)


def test_taken_handle_at_insert_time_moves_to_next_suffix(db_session, monkeypatch):
    first = _user(db_session, "sam", account_id="sam-1")
    original = UserRepository.username_exists

    def stale_username_exists(self, username, *, exclude_user_id=None):
        if username == "sam":
            return False
        return original(self, username, exclude_user_id=exclude_user_id)

    monkeypatch.setattr(UserRepository, "username_exists", stale_username_exists)

    second = _user(db_session, "sam", email="sam2@example.com", account_id="sam-2")

    assert first.username == "sam"
    assert second.username == "sam1"


def test_losing_the_account_link_race_returns_the_winner(db_session, monkeypatch):
    winner = _user(db_session, "ada", account_id="shared-account")
    original = AccountRepository.get_by_provider
    calls = []

    def missed_first_lookup(self, provider, provider_account_id):
        calls.append(provider_account_id)
        if len(calls) == 1:
            return None
        return original(self, provider, provider_account_id)

    monkeypatch.setattr(AccountRepository, "get_by_provider", missed_first_lookup)

    result = _user(db_session, "ada", email="late@example.com", account_id="shared-account")

    assert result.id == winner.id
    assert UserRepository(db_session).get_by_email("late@example.com") is None
    assert UserRepository(db_session).username_exists("ada1") is False
